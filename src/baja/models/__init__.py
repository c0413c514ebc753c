"""
Modelos de datos del sistema.

- ListingMediaSet: imágenes de una propiedad (snapshot de lectura)
- DeletionOutcome / DeletionResult: resultados del flujo de baja
"""

from baja.models.listing import (
    DeletionFailure,
    DeletionOutcome,
    DeletionResult,
    ListingMediaSet,
    ListingStatus,
)

__all__ = [
    # Propiedad
    "ListingMediaSet",
    "ListingStatus",
    # Resultados
    "DeletionOutcome",
    "DeletionFailure",
    "DeletionResult",
]
