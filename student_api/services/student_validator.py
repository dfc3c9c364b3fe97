from __future__ import annotations

import uuid
from dataclasses import dataclass, field

from student_api.core.errors import FieldError, ValidationError
from student_api.models.student import NAME_MAX_LENGTH, PROGRAM_MAX_LENGTH
from student_api.schemas.students import StudentIn


@dataclass(frozen=True)
class StudentFields:
    first_name: str
    last_name: str
    program: str | None


@dataclass(frozen=True)
class ValidationResult:
    value: StudentFields | None = None
    errors: list[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def _required(
    name: str, raw: str | None, max_length: int, errors: list[FieldError]
) -> str:
    value = raw or ""
    if not value.strip():
        errors.append(FieldError(name, f"{name} is required."))
    elif len(value) > max_length:
        errors.append(
            FieldError(name, f"{name} must be at most {max_length} characters.")
        )
    return value


def validate_student_input(payload: StudentIn) -> ValidationResult:
    """
    Checks presence/length of every field before anything touches the store.
    Lengths are measured on the values as sent; nothing is rewritten.
    """
    errors: list[FieldError] = []
    first_name = _required("FirstName", payload.first_name, NAME_MAX_LENGTH, errors)
    last_name = _required("LastName", payload.last_name, NAME_MAX_LENGTH, errors)

    program = payload.program
    if program is not None and len(program) > PROGRAM_MAX_LENGTH:
        errors.append(
            FieldError(
                "Program", f"Program must be at most {PROGRAM_MAX_LENGTH} characters."
            )
        )

    if errors:
        return ValidationResult(errors=errors)
    return ValidationResult(
        value=StudentFields(first_name=first_name, last_name=last_name, program=program)
    )


def parse_student_id(raw: str) -> uuid.UUID:
    try:
        return uuid.UUID(raw)
    except ValueError:
        raise ValidationError([FieldError("id", "Malformed student id.")]) from None
