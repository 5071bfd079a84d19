# This project was developed with assistance from AI tools.
"""Property catalogue providers.

The catalogue is owned by the caller and handed to routes as a dependency;
the engine only ever reads it. Raw records from the hosted document store
are normalized here into PropertyRecord objects.
"""

import logging
import uuid
from collections.abc import Iterable
from typing import Any, Protocol

from fastapi import Request

from ..schemas.property import PropertyRecord
from .seed.fixtures import PROPERTY_DOCUMENTS

logger = logging.getLogger(__name__)

# Document-store key -> PropertyRecord field, for plain string fields
_STRING_FIELDS: dict[str, str] = {
    "location": "location",
    "configuration": "configuration",
    "possession": "possession",
    "carpetArea": "carpet_area",
    "imageUrl": "image_url",
    "detailsUrl": "details_url",
}


class PropertyCatalogue(Protocol):
    """Read-only source of listings."""

    def list_properties(self, limit: int | None = None) -> list[PropertyRecord]: ...


class StaticCatalogue:
    """In-memory catalogue, cheapest listing first."""

    def __init__(self, records: Iterable[PropertyRecord]):
        self._records = tuple(sorted(records, key=lambda record: record.price))

    def __len__(self) -> int:
        return len(self._records)

    def list_properties(self, limit: int | None = None) -> list[PropertyRecord]:
        if limit is None:
            return list(self._records)
        return list(self._records[: max(0, limit)])


def _is_number(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def _string_list(value: Any) -> tuple[str, ...]:
    if not isinstance(value, list):
        return ()
    return tuple(item for item in value if isinstance(item, str))


def record_from_document(doc: Any) -> PropertyRecord | None:
    """Normalize one document-store record, or None when it is unusable.

    A usable record has a string name and location and a numeric price.
    The id comes from ``$id``, then ``id``, else a fresh UUID.
    """
    if not isinstance(doc, dict):
        return None
    if not isinstance(doc.get("name"), str) or not isinstance(doc.get("location"), str):
        return None
    if not _is_number(doc.get("price")):
        return None

    if isinstance(doc.get("$id"), str):
        record_id = doc["$id"]
    elif isinstance(doc.get("id"), str):
        record_id = doc["id"]
    else:
        record_id = str(uuid.uuid4())

    fields: dict[str, Any] = {
        target: doc[source]
        for source, target in _STRING_FIELDS.items()
        if isinstance(doc.get(source), str)
    }
    for coordinate in ("latitude", "longitude"):
        if _is_number(doc.get(coordinate)):
            fields[coordinate] = doc[coordinate]

    return PropertyRecord(
        id=record_id,
        name=doc["name"],
        price=doc["price"],
        highlights=_string_list(doc.get("highlights")),
        tags=_string_list(doc.get("tags")),
        **fields,
    )


def catalogue_from_documents(docs: Iterable[Any]) -> StaticCatalogue:
    """Build a catalogue from raw documents, skipping unusable ones."""
    records = []
    for doc in docs:
        record = record_from_document(doc)
        if record is None:
            logger.debug("Skipping catalogue document without name/location/price")
            continue
        records.append(record)
    return StaticCatalogue(records)


def seed_catalogue() -> StaticCatalogue:
    """Catalogue of the bundled demo listings."""
    return catalogue_from_documents(PROPERTY_DOCUMENTS)


def get_catalogue(request: Request) -> PropertyCatalogue:
    """FastAPI dependency returning the catalogue attached at app startup."""
    catalogue = getattr(request.app.state, "catalogue", None)
    if catalogue is None:
        raise RuntimeError("Property catalogue not attached -- set app.state.catalogue at startup")
    return catalogue
