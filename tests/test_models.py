"""
Tests de los modelos de imágenes y resultado de la baja.
"""
import pytest
from pydantic import ValidationError

from baja.models import ListingMediaSet, ListingStatus


@pytest.mark.unit
class TestListingMediaSet:
    """Parseo de imágenes y orden de las referencias."""

    def test_backend_payload_aliases(self):
        """El payload del backend usa camelCase y se ignoran los campos extra."""
        media = ListingMediaSet.model_validate(
            {
                "property_id": "42",
                "title": "Depto 2 ambientes",
                "primaryImage": "https://cdn/a.jpg",
                "otherImages": ["https://cdn/b.jpg", "https://cdn/c.jpg"],
            }
        )

        assert media.references() == [
            "https://cdn/a.jpg",
            "https://cdn/b.jpg",
            "https://cdn/c.jpg",
        ]

    def test_table_columns(self):
        media = ListingMediaSet.model_validate(
            {"primary_image": "a.jpg", "other_images": ["b.jpg"]}
        )
        assert media.references() == ["a.jpg", "b.jpg"]

    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"primaryImage": None, "otherImages": None},
            {"primaryImage": "", "otherImages": []},
        ],
    )
    def test_missing_images_give_empty_set(self, payload):
        assert ListingMediaSet.model_validate(payload).references() == []

    def test_only_secondary_images(self):
        media = ListingMediaSet.model_validate({"otherImages": ["b", "c"]})
        assert media.references() == ["b", "c"]

    @pytest.mark.parametrize(
        "payload",
        [
            {"otherImages": "b.jpg"},
            {"otherImages": [1, 2]},
            {"primaryImage": ["a.jpg"]},
        ],
    )
    def test_malformed_payload_rejected(self, payload):
        with pytest.raises(ValidationError):
            ListingMediaSet.model_validate(payload)


@pytest.mark.unit
def test_deleted_status_wire_value():
    """El backend guarda las propiedades eliminadas con status "0"."""
    assert ListingStatus.DELETED.value == "0"
