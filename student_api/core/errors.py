"""Domain errors raised by the student handler and the data store.

They are translated to HTTP responses by the handlers registered in
``student_api.main``; route code never builds error responses itself.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


class StudentApiError(Exception):
    """Base class for errors surfaced by the API."""


class ValidationError(StudentApiError):
    """Bad input: a missing/too long field or a malformed identifier."""

    def __init__(self, errors: list[FieldError]):
        super().__init__("; ".join(f"{e.field}: {e.message}" for e in errors))
        self.errors = errors


class NotFoundError(StudentApiError):
    def __init__(self, entity: str, entity_id: object):
        super().__init__(f"{entity} {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class StoreError(StudentApiError):
    """Any I/O or constraint failure reported by the data store."""
