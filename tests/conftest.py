"""
Configuración de pytest y fixtures compartidos.

Fakes de los colaboradores del orquestador: registran llamadas y el
orden de los eventos para verificar concurrencia y secuencia.
"""
import asyncio
from types import SimpleNamespace
from typing import Optional

import pytest
import structlog

from baja.config import get_settings
from baja.database.supabase_client import get_supabase_client
from baja.deletion import (
    CommitError,
    DeletionOrchestrator,
    EraseError,
    FetchError,
    MetadataReader,
    ObjectEraser,
    StatusCommitter,
)
from baja.models import ListingMediaSet, ListingStatus


def pytest_configure(config):
    """Registra los markers custom de pytest."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Tests against an in-process HTTP server")


@pytest.fixture(autouse=True)
def _reset_caches():
    """Settings y cliente de Supabase son singletons cacheados."""
    get_settings.cache_clear()
    get_supabase_client.cache_clear()
    yield
    get_settings.cache_clear()
    get_supabase_client.cache_clear()
    structlog.reset_defaults()


class FakeReader(MetadataReader):
    def __init__(self, events: list, media: Optional[ListingMediaSet] = None, error: Optional[Exception] = None):
        self.events = events
        self.media = media or ListingMediaSet()
        self.error = error
        self.calls = []

    async def fetch(self, listing_id: str) -> ListingMediaSet:
        self.calls.append(listing_id)
        self.events.append(("fetch", listing_id))
        if self.error:
            raise self.error
        return self.media


class FakeEraser(ObjectEraser):
    def __init__(self, events: list, failing: Optional[dict] = None, delay: float = 0.01):
        self.events = events
        self.failing = failing or {}
        self.delay = delay
        self.calls = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def erase(self, reference: str) -> None:
        self.calls.append(reference)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delay)
        finally:
            self.in_flight -= 1
            self.events.append(("settled", reference))
        if reference in self.failing:
            raise self.failing[reference]


class FakeCommitter(StatusCommitter):
    def __init__(self, events: list, error: Optional[Exception] = None):
        self.events = events
        self.error = error
        self.calls = []

    async def set_status(self, listing_id: str, status: ListingStatus) -> None:
        self.calls.append((listing_id, status))
        self.events.append(("commit", listing_id))
        if self.error:
            raise self.error


@pytest.fixture
def make_orchestrator():
    """
    Factory de orquestador con fakes.

    Args:
        media: ListingMediaSet devuelto por el reader
        fetch_error: excepción a lanzar en fetch
        failing: dict referencia -> excepción a lanzar en erase
        commit_error: excepción a lanzar en set_status

    Returns:
        SimpleNamespace con orchestrator, reader, eraser, committer y events
    """
    def _make(media=None, fetch_error=None, failing=None, commit_error=None, delay=0.01):
        events = []
        reader = FakeReader(events, media=media, error=fetch_error)
        eraser = FakeEraser(events, failing=failing, delay=delay)
        committer = FakeCommitter(events, error=commit_error)
        return SimpleNamespace(
            orchestrator=DeletionOrchestrator(reader, eraser, committer),
            reader=reader,
            eraser=eraser,
            committer=committer,
            events=events,
        )

    return _make


@pytest.fixture
def errors():
    """Errores de colaboradores listos para usar."""
    return SimpleNamespace(
        fetch=FetchError("No se pudieron obtener los detalles (HTTP 500)"),
        erase=EraseError("Objeto no encontrado"),
        commit=CommitError("No se pudo actualizar el estado (HTTP 503)"),
    )
