"""
Orquestador de la baja definitiva de una propiedad.

Implementa:
- Lectura de metadata: obtiene las imágenes de la propiedad
- Borrado best-effort: elimina todas las imágenes en paralelo
- Commit de estado: marca la propiedad como eliminada
"""

import asyncio
from typing import Optional

import structlog

from baja.deletion.ports import MetadataReader, ObjectEraser, StatusCommitter
from baja.models import (
    DeletionFailure,
    DeletionOutcome,
    DeletionResult,
    ListingStatus,
)

logger = structlog.get_logger()


class DeletionOrchestrator:
    """
    Coordina la baja de una propiedad y sus imágenes.

    Flujo:
    1. Leer la metadata (si falla, se aborta sin tocar nada)
    2. Armar la lista de imágenes: principal + secundarias
    3. Borrar todas las imágenes en paralelo y esperar a que terminen
       todas, fallen o no. Un fallo individual solo se loguea.
    4. Marcar la propiedad como eliminada (si falla, se aborta)

    Las imágenes se borran antes del commit: si el proceso se corta
    entre 3 y 4, la propiedad queda activa con imágenes ya borradas.
    No hay reintentos: cada llamada remota se hace una sola vez.

    Uso:
        async with get_orchestrator() as orchestrator:
            result = await orchestrator.delete_listing("123")
    """

    def __init__(
        self,
        reader: MetadataReader,
        eraser: ObjectEraser,
        committer: StatusCommitter,
        owned: Optional[list] = None,
    ):
        self.reader = reader
        self.eraser = eraser
        self.committer = committer
        # Colaboradores creados para este orquestador, se cierran en close()
        self._owned = owned or []

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self):
        """Cierra los colaboradores propios (ej: la sesión HTTP del backend)."""
        for resource in self._owned:
            await resource.close()
        self._owned = []

    async def delete_listing(self, listing_id: str) -> DeletionResult:
        """
        Da de baja una propiedad.

        Args:
            listing_id: ID de la propiedad

        Returns:
            DeletionResult. `ok` es True si la propiedad quedó marcada como
            eliminada, aunque algunas imágenes no se hayan podido borrar.
        """
        log = logger.bind(listing_id=listing_id)

        # Paso 1: Metadata
        try:
            media = await self.reader.fetch(listing_id)
        except Exception as e:
            log.error("Error obteniendo metadata de la propiedad", error=str(e))
            return DeletionResult(
                listing_id=listing_id,
                error=DeletionFailure.METADATA_FETCH_FAILED,
                cause=str(e),
            )

        # Paso 2: Imágenes
        references = media.references()
        log.info("Iniciando baja de propiedad", images=len(references))

        # Paso 3: Borrado en paralelo
        outcomes = await self._erase_all(references)
        failed = [o for o in outcomes if not o.success]
        if outcomes:
            log.info(
                "Borrado de imágenes completado",
                erased=len(outcomes) - len(failed),
                failed=len(failed),
            )

        # Paso 4: Commit
        try:
            await self.committer.set_status(listing_id, ListingStatus.DELETED)
        except Exception as e:
            log.error(
                "Error actualizando estado de la propiedad",
                error=str(e),
                erased=len(outcomes) - len(failed),
            )
            return DeletionResult(
                listing_id=listing_id,
                error=DeletionFailure.STATUS_COMMIT_FAILED,
                cause=str(e),
                outcomes=outcomes,
            )

        log.info("Propiedad eliminada", failed_images=len(failed))
        return DeletionResult(listing_id=listing_id, outcomes=outcomes)

    async def _erase_all(self, references: list[str]) -> list[DeletionOutcome]:
        """Borra todas las referencias en paralelo. Nunca propaga errores individuales."""
        if not references:
            return []
        return list(
            await asyncio.gather(*(self._erase_one(ref) for ref in references))
        )

    async def _erase_one(self, reference: str) -> DeletionOutcome:
        """Borra una imagen y captura el resultado como DeletionOutcome."""
        try:
            await self.eraser.erase(reference)
        except Exception as e:
            logger.warning("Error borrando imagen", reference=reference, error=str(e))
            return DeletionOutcome(reference=reference, success=False, error=str(e))

        logger.debug("Imagen borrada", reference=reference)
        return DeletionOutcome(reference=reference, success=True)
