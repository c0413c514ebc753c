"""
Modelos del flujo de baja de una propiedad.

- ListingMediaSet: snapshot de las imágenes de una propiedad al momento de la consulta
- DeletionOutcome: resultado de cada intento de borrado de imagen
- DeletionResult: resultado final del flujo, con error tipado si abortó
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ListingStatus(str, Enum):
    """Estados que este flujo escribe. Solo existe el terminal."""

    DELETED = "0"


class DeletionFailure(str, Enum):
    """Puntos de falla que abortan el flujo."""

    METADATA_FETCH_FAILED = "metadata_fetch_failed"
    STATUS_COMMIT_FAILED = "status_commit_failed"


class ListingMediaSet(BaseModel):
    """
    Imágenes asociadas a una propiedad.

    Acepta tanto el payload del backend (primaryImage/otherImages)
    como las columnas de la tabla (primary_image/other_images).
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    primary_image: Optional[str] = Field(
        None, alias="primaryImage", description="Imagen principal"
    )
    other_images: list[str] = Field(
        default_factory=list, alias="otherImages", description="Imágenes secundarias"
    )

    @field_validator("other_images", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return [] if value is None else value

    def references(self) -> list[str]:
        """Referencias a borrar: la principal (si hay) seguida de las secundarias."""
        refs = [self.primary_image] if self.primary_image else []
        refs.extend(self.other_images)
        return refs


@dataclass
class DeletionOutcome:
    """Resultado de un intento de borrado de imagen."""

    reference: str
    success: bool
    error: Optional[str] = None


@dataclass
class DeletionResult:
    """
    Resultado de dar de baja una propiedad.

    `ok` significa "propiedad marcada como eliminada", no que todas
    las imágenes se hayan borrado: los fallos individuales quedan en
    `outcomes` solo para diagnóstico.
    """

    listing_id: str
    error: Optional[DeletionFailure] = None
    cause: Optional[str] = None
    outcomes: list[DeletionOutcome] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def failed_outcomes(self) -> list[DeletionOutcome]:
        return [o for o in self.outcomes if not o.success]

    @property
    def erased_count(self) -> int:
        return sum(1 for o in self.outcomes if o.success)

    def to_dict(self) -> dict:
        """Convierte a diccionario para reportar (JSON)."""
        return {
            "listing_id": self.listing_id,
            "ok": self.ok,
            "error": self.error.value if self.error else None,
            "cause": self.cause,
            "erased": self.erased_count,
            "failed": [
                {"reference": o.reference, "error": o.error}
                for o in self.failed_outcomes
            ],
        }
