from __future__ import annotations

import uuid

from sqlalchemy import String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from student_api.db.base_class import Base

NAME_MAX_LENGTH = 50
PROGRAM_MAX_LENGTH = 50


class Student(Base):
    __tablename__ = "students"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    first_name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)
    last_name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)
    program: Mapped[str | None] = mapped_column(
        String(PROGRAM_MAX_LENGTH), nullable=True
    )

    def __repr__(self) -> str:
        return f"<Student id={self.id} {self.first_name} {self.last_name}>"
