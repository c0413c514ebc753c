"""
Configuración centralizada del sistema.
Carga variables de entorno y define settings globales.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Encontrar la raíz del proyecto (donde está el .env)
# config.py -> baja/ -> src/ -> raíz del proyecto
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Configuración principal de la aplicación."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Backend de propiedades
    backend_url: str = Field(
        "http://localhost:8080", description="URL base del backend de propiedades"
    )
    listing_backend: Literal["api", "supabase"] = Field(
        "api",
        description="Origen de metadata y estado: 'api' (backend REST) o 'supabase' (tabla)",
    )
    http_timeout_seconds: float = Field(
        10.0, gt=0, description="Timeout total por request HTTP (segundos)"
    )

    # Supabase
    supabase_url: Optional[str] = Field(None, description="URL del proyecto Supabase")
    supabase_key: Optional[str] = Field(None, description="Anon key de Supabase")
    supabase_service_key: Optional[str] = Field(
        None, description="Service role key para operaciones admin"
    )

    # Storage
    storage_bucket: str = Field(
        "property-images", description="Bucket por defecto de las imágenes"
    )
    properties_table: str = Field(
        "properties", description="Tabla de propiedades (backend 'supabase')"
    )

    # Logging
    log_level: str = Field("INFO", description="Nivel de logging")


@lru_cache
def get_settings() -> Settings:
    """Obtiene la configuración cacheada."""
    return Settings()
