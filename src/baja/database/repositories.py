"""
Repositorios para operaciones en Supabase.

Cada repositorio maneja una tabla/entidad específica.
"""

import asyncio
from typing import Optional

import structlog
from pydantic import ValidationError

from baja.config import get_settings
from baja.database.supabase_client import get_supabase_client, SupabaseClient
from baja.deletion.errors import CommitError, FetchError
from baja.deletion.ports import MetadataReader, StatusCommitter
from baja.models import ListingMediaSet, ListingStatus

logger = structlog.get_logger()


class BaseRepository:
    """Clase base para repositorios."""

    def __init__(self, client: Optional[SupabaseClient] = None):
        self._client = client or get_supabase_client()

    @property
    def client(self) -> SupabaseClient:
        return self._client


class PropertyRepository(BaseRepository, MetadataReader, StatusCommitter):
    """
    Repositorio para la tabla de propiedades.

    Lee las imágenes y actualiza el estado directamente en Supabase.
    El cliente de Supabase es sincrónico: cada query corre en un thread
    para no bloquear el event loop durante el borrado en paralelo.
    """

    TABLE = "properties"

    def __init__(
        self,
        client: Optional[SupabaseClient] = None,
        table: Optional[str] = None,
    ):
        super().__init__(client)
        self.table = table or get_settings().properties_table or self.TABLE

    def get_media(self, listing_id: str) -> Optional[dict]:
        """Obtiene las columnas de imágenes de una propiedad."""
        response = (
            self.client.table(self.table)
            .select("primary_image, other_images")
            .eq("property_id", listing_id)
            .limit(1)
            .execute()
        )
        return response.data[0] if response.data else None

    def update_status(self, listing_id: str, status: str) -> bool:
        """Actualiza el estado de una propiedad."""
        response = (
            self.client.table(self.table)
            .update({"status": status})
            .eq("property_id", listing_id)
            .execute()
        )
        return len(response.data) > 0

    async def fetch(self, listing_id: str) -> ListingMediaSet:
        try:
            row = await asyncio.to_thread(self.get_media, listing_id)
        except Exception as e:
            raise FetchError(f"Error consultando {self.table}: {e}") from e

        if row is None:
            raise FetchError(f"Propiedad no encontrada: {listing_id}")

        try:
            return ListingMediaSet.model_validate(row)
        except ValidationError as e:
            raise FetchError(f"Metadata inválida para {listing_id}: {e}") from e

    async def set_status(self, listing_id: str, status: ListingStatus) -> None:
        try:
            updated = await asyncio.to_thread(
                self.update_status, listing_id, status.value
            )
        except Exception as e:
            raise CommitError(f"Error actualizando {self.table}: {e}") from e

        if not updated:
            raise CommitError(f"Ninguna fila actualizada para {listing_id}")

        logger.info("Estado actualizado", listing_id=listing_id, status=status.value)
