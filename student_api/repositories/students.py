"""
Data store for Student records.

Routes depend on the ``StudentStore`` protocol and receive an instance per
request through ``get_student_store``; nothing reaches for a global session.
"""
from __future__ import annotations

import uuid
from typing import Protocol

from fastapi import Depends
from sqlalchemy import exists, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from student_api.core.errors import StoreError
from student_api.core.logging import get_logger
from student_api.db import get_db
from student_api.models.student import Student


class StudentStore(Protocol):
    def list(self) -> list[Student]: ...

    def find_by_id(self, student_id: uuid.UUID) -> Student | None: ...

    def exists(self, student_id: uuid.UUID) -> bool: ...

    def insert(self, student: Student) -> None: ...

    def update(self, student: Student) -> None: ...

    def remove(self, student: Student) -> None: ...

    def commit(self) -> None: ...


class SqlAlchemyStudentStore:
    def __init__(self, db: Session):
        self.db = db

    def list(self) -> list[Student]:
        try:
            return list(self.db.scalars(select(Student)))
        except SQLAlchemyError as exc:
            raise StoreError("failed to list students") from exc

    def find_by_id(self, student_id: uuid.UUID) -> Student | None:
        try:
            return self.db.get(Student, student_id)
        except SQLAlchemyError as exc:
            raise StoreError(f"failed to load student {student_id}") from exc

    def exists(self, student_id: uuid.UUID) -> bool:
        try:
            return bool(
                self.db.scalar(select(exists().where(Student.id == student_id)))
            )
        except SQLAlchemyError as exc:
            raise StoreError(f"failed to check student {student_id}") from exc

    def insert(self, student: Student) -> None:
        self.db.add(student)

    def update(self, student: Student) -> None:
        # instances loaded by this session are tracked; merge covers detached ones
        if student not in self.db:
            self.db.merge(student)

    def remove(self, student: Student) -> None:
        self.db.delete(student)

    def commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            get_logger().error("store.commit_failed", error=str(exc))
            raise StoreError("commit failed") from exc


def get_student_store(db: Session = Depends(get_db)) -> StudentStore:  # noqa: B008
    return SqlAlchemyStudentStore(db)
