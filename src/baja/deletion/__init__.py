"""
Módulo de baja de propiedades.

Provee el orquestador y las interfaces de sus colaboradores.
El armado desde settings vive en baja.deletion.factory.
"""

from baja.deletion.errors import CollaboratorError, CommitError, EraseError, FetchError
from baja.deletion.orchestrator import DeletionOrchestrator
from baja.deletion.ports import MetadataReader, ObjectEraser, StatusCommitter

__all__ = [
    # Orquestador
    "DeletionOrchestrator",
    # Colaboradores
    "MetadataReader",
    "ObjectEraser",
    "StatusCommitter",
    # Errores
    "CollaboratorError",
    "FetchError",
    "EraseError",
    "CommitError",
]
