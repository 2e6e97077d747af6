"""Record types stored in the JSON files, plus lookup helpers."""
from __future__ import annotations

from dataclasses import dataclass, field
import math
import re
from typing import Any, Mapping, Optional

INITIATIVE_REQUIRED = ("name", "provider", "start", "end")
USER_REQUIRED = ("name", "email", "password", "birthday")

DEFAULT_ROLE = "volunteer"
ORGANIZER_ROLE = "organizer"

_INT_PREFIX = re.compile(r"\s*([+-]?)(0[xX][0-9a-fA-F]+|\d+)")


def missing_fields(payload: Mapping[str, Any], required: tuple[str, ...]) -> list[str]:
    """Names of required fields that are absent or empty (None, "", 0, False)."""
    return [name for name in required if not payload.get(name)]


def has_non_finite(value: Any) -> bool:
    """True when NaN or +/-Infinity appears anywhere inside ``value``."""
    if isinstance(value, float):
        return not math.isfinite(value)
    if isinstance(value, dict):
        return any(has_non_finite(v) for v in value.values())
    if isinstance(value, list):
        return any(has_non_finite(v) for v in value)
    return False


def parse_id(raw: str | None) -> Optional[int]:
    """Parse the leading integer of a path segment ("12abc" -> 12, "0x1A" -> 26).

    Returns None when no integer prefix exists; None matches no record.
    """
    match = _INT_PREFIX.match(raw or "")
    if not match:
        return None
    sign, digits = match.groups()
    value = int(digits, 16) if digits[:2].lower() == "0x" else int(digits)
    return -value if sign == "-" else value


def id_matches(stored: Any, wanted: Optional[int]) -> bool:
    """Numeric equality only: "1" or True never match 1."""
    if wanted is None or isinstance(stored, bool):
        return False
    return isinstance(stored, (int, float)) and stored == wanted


def organizer_matches(stored: Any, name: str) -> bool:
    if not isinstance(stored, str):
        return False
    return stored.casefold() == (name or "").casefold()


@dataclass
class Initiative:
    name: str
    provider: str
    start: str
    end: str
    id: Any = None
    organizer: Optional[str] = None
    extra: dict = field(default_factory=dict)

    _FIELDS = ("id", "name", "provider", "start", "end", "organizer")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Initiative":
        extra = {k: v for k, v in data.items() if k not in cls._FIELDS}
        return cls(
            name=data.get("name"),
            provider=data.get("provider"),
            start=data.get("start"),
            end=data.get("end"),
            id=data.get("id"),
            organizer=data.get("organizer"),
            extra=extra,
        )

    def to_dict(self) -> dict:
        # absent and None are the same thing on disk
        out = {name: getattr(self, name) for name in self._FIELDS if getattr(self, name) is not None}
        out.update(self.extra)
        return out


@dataclass
class User:
    name: str
    email: str
    password: str
    birthday: str
    role: str = DEFAULT_ROLE
    extra: dict = field(default_factory=dict)

    _FIELDS = ("name", "email", "password", "birthday", "role")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "User":
        extra = {k: v for k, v in data.items() if k not in cls._FIELDS}
        return cls(
            name=data.get("name"),
            email=data.get("email"),
            password=data.get("password"),
            birthday=data.get("birthday"),
            role=data.get("role") or DEFAULT_ROLE,
            extra=extra,
        )

    def to_dict(self) -> dict:
        out = {name: getattr(self, name) for name in self._FIELDS if getattr(self, name) is not None}
        out.update(self.extra)
        return out
