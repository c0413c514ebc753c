"""
Módulo de storage.

Provee el borrado de imágenes de propiedades en Supabase Storage.
"""

from baja.storage.media_storage import SupabaseMediaEraser, resolve_reference

__all__ = [
    "SupabaseMediaEraser",
    "resolve_reference",
]
