"""
Módulo del backend REST de propiedades.
"""

from baja.api.client import PropertyApiClient

__all__ = [
    "PropertyApiClient",
]
