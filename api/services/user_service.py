"""
User registration and lookups.
"""

from __future__ import annotations

import logging

from api.domain.records import (
    DEFAULT_ROLE,
    ORGANIZER_ROLE,
    USER_REQUIRED,
    User,
    has_non_finite,
    missing_fields,
)
from api.repositories.json_storage import JsonStore
from api.services.errors import ConflictError, ValidationError

logger = logging.getLogger(__name__)


class UserService:
    """Registers volunteers and lists users by role.

    Roles other than ``volunteer`` are never written here; promotion to
    organizer happens outside the HTTP API (see scripts/set_role.py).
    """

    def __init__(self, store: JsonStore) -> None:
        self.store = store

    def list_all(self) -> list[dict]:
        return self.store.load()

    def register(self, payload: dict) -> User:
        if missing_fields(payload, USER_REQUIRED) or has_non_finite(payload):
            raise ValidationError("Invalid user data.")
        user = User.from_dict(payload)
        user.role = DEFAULT_ROLE
        with self.store.edit() as records:
            # exact, case-sensitive comparison
            if any(isinstance(r, dict) and r.get("email") == user.email for r in records):
                raise ConflictError("Email already registered.")
            records.append(user.to_dict())
        logger.info("User %s registered as %s", user.email, user.role)
        return user

    def organizers(self) -> list[dict]:
        return [r for r in self.store.load() if isinstance(r, dict) and r.get("role") == ORGANIZER_ROLE]
