"""
Script para dar de baja definitivamente una propiedad.

Borra todas las imágenes de la propiedad (best-effort) y la marca
como eliminada.

Uso:
    python -m baja.scripts.run_deletion --property-id 123
    python -m baja.scripts.run_deletion --property-id 123 --backend supabase --json
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import Optional

import structlog

from baja.config import get_settings
from baja.deletion.factory import get_orchestrator
from baja.models import DeletionResult

logger = structlog.get_logger()


def configure_logging(log_level: str):
    """Configura logging stdlib + structlog para consola."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format="%(message)s",
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


async def run_deletion(property_id: str, backend: Optional[str] = None) -> DeletionResult:
    """
    Ejecuta la baja de una propiedad.

    Args:
        property_id: ID de la propiedad
        backend: 'api' o 'supabase' (default: settings.listing_backend)
    """
    async with get_orchestrator(backend) as orchestrator:
        return await orchestrator.delete_listing(property_id)


def main():
    """Entry point del script."""
    parser = argparse.ArgumentParser(
        description="Baja definitiva de una propiedad y sus imágenes"
    )
    parser.add_argument(
        "--property-id",
        type=str,
        required=True,
        help="ID de la propiedad a eliminar",
    )
    parser.add_argument(
        "--backend",
        type=str,
        default=None,
        choices=["api", "supabase"],
        help="Origen de metadata y estado (default: LISTING_BACKEND)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Imprime el resultado como JSON",
    )

    args = parser.parse_args()
    configure_logging(get_settings().log_level)

    try:
        result = asyncio.run(run_deletion(args.property_id, backend=args.backend))
    except KeyboardInterrupt:
        logger.info("Baja interrumpida por usuario")
        sys.exit(130)
    except Exception as e:
        logger.error("Error fatal en baja de propiedad", error=str(e))
        sys.exit(1)

    if args.json:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))

    if result.ok:
        logger.info(
            "Baja completada",
            property_id=result.listing_id,
            erased=result.erased_count,
            failed=len(result.failed_outcomes),
        )
        sys.exit(0)

    logger.error(
        "No se pudo eliminar la propiedad. Intentá de nuevo.",
        property_id=result.listing_id,
        error=result.error.value,
        cause=result.cause,
    )
    sys.exit(1)


if __name__ == "__main__":
    main()
