"""
JSON file persistence adapter.

Each collection (initiatives, users) lives in its own file holding a single
JSON array. Every operation reads the whole array, mutates it in memory and
writes the whole array back. There is no locking: two overlapping
``edit()`` blocks on the same file can lose one of the updates (last write
wins).
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Iterator
import json
import logging

logger = logging.getLogger(__name__)


def _reject_constant(name: str):
    # NaN and Infinity are not JSON
    raise ValueError(f"non-standard constant {name}")


class MalformedStoreError(Exception):
    """Raised when a store file has content that is not a JSON array."""

    def __init__(self, path: Path, message: str):
        super().__init__(f"{path}: {message}")
        self.path = path
        self.message = message


class JsonStore:
    """Whole-file load/save over one JSON array file."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def load(self) -> list[dict]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("Store %s missing; treating as empty", self.path)
            return []
        if not raw.strip():
            return []
        try:
            data = json.loads(raw, parse_constant=_reject_constant)
        except ValueError as exc:
            raise MalformedStoreError(self.path, f"invalid JSON ({exc})") from exc
        if not isinstance(data, list):
            raise MalformedStoreError(self.path, f"expected a JSON array, found {type(data).__name__}")
        logger.debug("Loaded %d record(s) from %s", len(data), self.path)
        return data

    def save(self, records: list[dict]) -> None:
        try:
            text = json.dumps(records, ensure_ascii=False, indent=2, allow_nan=False)
        except ValueError as exc:
            raise MalformedStoreError(self.path, f"refusing to write ({exc})") from exc
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(text, encoding="utf-8")
        logger.debug("Wrote %d record(s) to %s", len(records), self.path)

    @contextmanager
    def edit(self) -> Iterator[list[dict]]:
        """Load the collection, yield it for mutation, save it on clean exit.

        Nothing is written when the block raises.
        """
        records = self.load()
        yield records
        self.save(records)


def load(path: Path | str) -> list[dict]:
    return JsonStore(path).load()


def save(path: Path | str, records: list[dict]) -> None:
    JsonStore(path).save(records)
