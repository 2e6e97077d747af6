"""Initiative use cases: listing, registration and organizer assignment."""

from __future__ import annotations

import logging
from typing import Any

from api.domain.records import (
    INITIATIVE_REQUIRED,
    Initiative,
    has_non_finite,
    id_matches,
    missing_fields,
    organizer_matches,
    parse_id,
)
from api.repositories.json_storage import JsonStore
from api.services.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


class InitiativeService:
    """Read-modify-write operations over the initiatives file."""

    def __init__(self, store: JsonStore) -> None:
        self.store = store

    def list_all(self) -> list[dict]:
        return self.store.load()

    def register(self, payload: dict) -> Initiative:
        if missing_fields(payload, INITIATIVE_REQUIRED) or has_non_finite(payload):
            raise ValidationError("Invalid initiative data.")
        initiative = Initiative.from_dict(payload)
        with self.store.edit() as records:
            records.append(initiative.to_dict())
        logger.info("Initiative %r registered (id=%r)", initiative.name, initiative.id)
        return initiative

    def assign_organizer(self, raw_id: str, organizer: Any) -> Initiative:
        """Overwrite the organizer of the initiative whose id equals ``raw_id``.

        ``organizer`` is stored as given; None removes the field. The rest of
        the record is left untouched, key order included.
        """
        if has_non_finite(organizer):
            raise ValidationError("Invalid initiative data.")
        wanted = parse_id(raw_id)
        with self.store.edit() as records:
            for record in records:
                if isinstance(record, dict) and id_matches(record.get("id"), wanted):
                    break
            else:
                raise NotFoundError("Initiative not found.")
            if organizer is None:
                record.pop("organizer", None)
            else:
                record["organizer"] = organizer
        logger.info("Initiative id=%r assigned to organizer %r", wanted, organizer)
        return Initiative.from_dict(record)

    def by_organizer(self, name: str) -> list[dict]:
        return [
            record
            for record in self.store.load()
            if isinstance(record, dict) and organizer_matches(record.get("organizer"), name)
        ]
