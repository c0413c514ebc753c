"""
Módulo de base de datos.

Provee acceso a Supabase y a la tabla de propiedades.
"""

from baja.database.supabase_client import get_supabase_client, SupabaseClient
from baja.database.repositories import PropertyRepository

__all__ = [
    "get_supabase_client",
    "SupabaseClient",
    "PropertyRepository",
]
