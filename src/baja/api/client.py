"""
Cliente HTTP del backend de propiedades.

Endpoints usados:
- GET  /api/getPropertyDetails?property_id=<id>  -> primaryImage, otherImages
- POST /api/updatePropStatus {property_id, status}
"""

import asyncio
from typing import Optional

import aiohttp
import structlog
from pydantic import ValidationError

from baja.config import get_settings
from baja.deletion.errors import CommitError, FetchError
from baja.deletion.ports import MetadataReader, StatusCommitter
from baja.models import ListingMediaSet, ListingStatus

logger = structlog.get_logger()

DETAILS_PATH = "/api/getPropertyDetails"
STATUS_PATH = "/api/updatePropStatus"


def _is_success(status: int) -> bool:
    return 200 <= status < 300


class PropertyApiClient(MetadataReader, StatusCommitter):
    """
    Lee metadata y actualiza el estado de propiedades vía el backend REST.

    Uso:
        async with PropertyApiClient() as api:
            media = await api.fetch("123")
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        settings = get_settings()
        self.base_url = (base_url or settings.backend_url).rstrip("/")
        self.timeout = timeout or settings.http_timeout_seconds
        self._session = session
        self._owns_session = session is None

    async def __aenter__(self):
        self._get_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def _get_session(self) -> aiohttp.ClientSession:
        """Crea la sesión HTTP si todavía no existe."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout),
                headers={"Content-Type": "application/json"},
            )
            self._owns_session = True
        return self._session

    async def close(self):
        """Cierra la sesión si fue creada por este cliente."""
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()

    async def fetch(self, listing_id: str) -> ListingMediaSet:
        url = f"{self.base_url}{DETAILS_PATH}"
        try:
            async with self._get_session().get(
                url, params={"property_id": listing_id}
            ) as response:
                if not _is_success(response.status):
                    raise FetchError(
                        f"No se pudieron obtener los detalles (HTTP {response.status})"
                    )
                payload = await response.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise FetchError(f"Error de red obteniendo detalles: {e!r}") from e
        except ValueError as e:
            raise FetchError(f"Respuesta no es JSON válido: {e}") from e

        if not isinstance(payload, dict):
            raise FetchError("Payload de detalles inválido: se esperaba un objeto")

        try:
            media = ListingMediaSet.model_validate(payload)
        except ValidationError as e:
            raise FetchError(f"Payload de detalles inválido: {e}") from e

        logger.debug(
            "Detalles de propiedad obtenidos",
            listing_id=listing_id,
            images=len(media.references()),
        )
        return media

    async def set_status(self, listing_id: str, status: ListingStatus) -> None:
        url = f"{self.base_url}{STATUS_PATH}"
        body = {"property_id": listing_id, "status": status.value}
        try:
            async with self._get_session().post(url, json=body) as response:
                if not _is_success(response.status):
                    raise CommitError(
                        f"No se pudo actualizar el estado (HTTP {response.status})"
                    )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise CommitError(f"Error de red actualizando estado: {e!r}") from e

        logger.info("Estado actualizado", listing_id=listing_id, status=status.value)
