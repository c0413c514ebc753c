"""
Errores de los colaboradores externos del flujo de baja.
"""


class CollaboratorError(Exception):
    """Error base de un colaborador remoto (backend, tabla o storage)."""


class FetchError(CollaboratorError):
    """No se pudo obtener la metadata de la propiedad."""


class EraseError(CollaboratorError):
    """No se pudo ubicar o borrar un objeto del storage."""


class CommitError(CollaboratorError):
    """No se pudo persistir el cambio de estado de la propiedad."""
