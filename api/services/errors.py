"""Exceptions raised by the record services and mapped to HTTP statuses by routers."""

from __future__ import annotations


class RecordError(Exception):
    """Base class for request-level record failures."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(RecordError):
    """A required field is missing or empty."""


class ConflictError(RecordError):
    """The record clashes with an existing one (duplicate email)."""


class NotFoundError(RecordError):
    status_code = 404
