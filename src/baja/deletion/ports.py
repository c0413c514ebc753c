"""
Interfaces de los colaboradores que consume el orquestador.

Permite intercambiar el origen de la metadata (backend REST o tabla
de Supabase) y el storage sin cambiar la lógica de baja.
"""

from abc import ABC, abstractmethod

from baja.models import ListingMediaSet, ListingStatus


class MetadataReader(ABC):
    """Lee las imágenes asociadas a una propiedad."""

    @abstractmethod
    async def fetch(self, listing_id: str) -> ListingMediaSet:
        """
        Obtiene el snapshot de imágenes de la propiedad.

        Args:
            listing_id: ID de la propiedad

        Returns:
            ListingMediaSet con la imagen principal y las secundarias

        Raises:
            FetchError: Error de red, respuesta no exitosa o payload inválido
        """
        pass


class ObjectEraser(ABC):
    """Borra el objeto binario al que apunta una referencia."""

    @abstractmethod
    async def erase(self, reference: str) -> None:
        """
        Raises:
            EraseError: Si el objeto no existe o no se pudo borrar
        """
        pass


class StatusCommitter(ABC):
    """Persiste el estado de una propiedad."""

    @abstractmethod
    async def set_status(self, listing_id: str, status: ListingStatus) -> None:
        """
        Raises:
            CommitError: Error de red o respuesta no exitosa
        """
        pass
