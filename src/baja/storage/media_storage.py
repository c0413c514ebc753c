"""
Borrado de imágenes en Supabase Storage.

Las referencias guardadas en la propiedad pueden ser URLs de objeto
(públicas, firmadas o autenticadas) o paths dentro del bucket por defecto.
"""

import asyncio
from typing import Optional
from urllib.parse import unquote, urlparse

import structlog

from baja.config import get_settings
from baja.database.supabase_client import get_supabase_client, SupabaseClient
from baja.deletion.errors import EraseError
from baja.deletion.ports import ObjectEraser

logger = structlog.get_logger()

# /storage/v1/object/{public|sign|authenticated}/<bucket>/<path>
_OBJECT_PREFIX = "/storage/v1/object/"
_ACCESS_SEGMENTS = ("public", "sign", "authenticated")


def resolve_reference(reference: str, default_bucket: str) -> tuple[str, str]:
    """
    Resuelve una referencia a (bucket, path).

    Raises:
        EraseError: Si la referencia está vacía o no apunta a un objeto
    """
    ref = (reference or "").strip()
    if not ref:
        raise EraseError("Referencia vacía")

    parsed = urlparse(ref)
    if not parsed.scheme:
        path = ref.lstrip("/")
        if not path:
            raise EraseError(f"Referencia inválida: {reference}")
        return default_bucket, path

    if _OBJECT_PREFIX not in parsed.path:
        raise EraseError(f"URL fuera de Supabase Storage: {reference}")

    segments = parsed.path.split(_OBJECT_PREFIX, 1)[1].split("/")
    if segments[0] in _ACCESS_SEGMENTS:
        segments = segments[1:]

    bucket = segments[0] if segments else ""
    path = "/".join(segments[1:])
    if not bucket or not path:
        raise EraseError(f"URL sin bucket o path: {reference}")

    return unquote(bucket), unquote(path)


class SupabaseMediaEraser(ObjectEraser):
    """Borra imágenes de propiedades en Supabase Storage."""

    def __init__(
        self,
        client: Optional[SupabaseClient] = None,
        default_bucket: Optional[str] = None,
    ):
        self._client = client or get_supabase_client()
        self.default_bucket = default_bucket or get_settings().storage_bucket

    def remove(self, bucket: str, path: str) -> list:
        """Borra un objeto. Devuelve la lista de objetos borrados."""
        return self._client.bucket(bucket).remove([path])

    async def erase(self, reference: str) -> None:
        bucket, path = resolve_reference(reference, self.default_bucket)

        try:
            removed = await asyncio.to_thread(self.remove, bucket, path)
        except Exception as e:
            raise EraseError(f"Error borrando {bucket}/{path}: {e}") from e

        # Supabase no falla si el objeto no existe: devuelve lista vacía
        if not removed:
            raise EraseError(f"Objeto no encontrado: {bucket}/{path}")

        logger.debug("Objeto borrado", bucket=bucket, path=path)
