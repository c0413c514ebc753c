"""
Armado del orquestador según la configuración.
"""

from typing import Optional

from baja.api.client import PropertyApiClient
from baja.config import get_settings
from baja.database.repositories import PropertyRepository
from baja.deletion.orchestrator import DeletionOrchestrator
from baja.storage.media_storage import SupabaseMediaEraser


def get_orchestrator(
    backend: Optional[str] = None,
    api_client: Optional[PropertyApiClient] = None,
) -> DeletionOrchestrator:
    """
    Factory para obtener el orquestador configurado.

    Usar con `async with` o llamar a `close()`: el cliente REST que crea
    la factory se cierra junto con el orquestador. Un `api_client` recibido
    queda a cargo de quien lo pasó.

    Args:
        backend: 'api' o 'supabase' (default: settings.listing_backend)
        api_client: Cliente REST ya abierto (solo backend 'api')

    Returns:
        DeletionOrchestrator con las imágenes siempre en Supabase Storage
    """
    settings = get_settings()
    backend = (backend or settings.listing_backend).lower()

    if backend == "api":
        owned = []
        api = api_client
        if api is None:
            api = PropertyApiClient()
            owned.append(api)
        return DeletionOrchestrator(
            reader=api, eraser=SupabaseMediaEraser(), committer=api, owned=owned
        )
    elif backend == "supabase":
        repo = PropertyRepository()
        return DeletionOrchestrator(reader=repo, eraser=SupabaseMediaEraser(), committer=repo)
    else:
        raise ValueError(f"Backend no soportado: {backend}. Usar 'api' o 'supabase'")
