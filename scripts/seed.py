# scripts/seed.py
from __future__ import annotations

import os

from sqlalchemy import inspect, select
from sqlalchemy.orm import Session

from student_api.db import get_db
from student_api.models.student import Student
from student_api.repositories.students import SqlAlchemyStudentStore

SEED_PROGRAM = os.getenv("SEED_PROGRAM", "CS")

# (first_name, last_name, program)
STUDENTS_DATA = [
    ("Ada", "Lovelace", SEED_PROGRAM),
    ("Alan", "Turing", SEED_PROGRAM),
    ("Grace", "Hopper", SEED_PROGRAM),
    ("Edsger", "Dijkstra", None),
    ("Barbara", "Liskov", "SE"),
]


def get_session() -> Session:
    gen = get_db()
    session: Session = next(gen)
    return session


def check_tables_exist(db: Session) -> bool:
    return inspect(db.get_bind()).has_table(Student.__tablename__)


def ensure_students(db: Session) -> list[Student]:
    """Insert the sample students that are not there yet (matched by name)."""
    store = SqlAlchemyStudentStore(db)
    students = []
    for first_name, last_name, program in STUDENTS_DATA:
        student = db.execute(
            select(Student).where(
                Student.first_name == first_name, Student.last_name == last_name
            )
        ).scalar_one_or_none()
        if not student:
            student = Student(first_name=first_name, last_name=last_name, program=program)
            store.insert(student)
            store.commit()
            print(f"[Seed] Student criado: {first_name} {last_name}")
        students.append(student)
    return students


def main():
    print("[Seed] Iniciando seed do banco de dados...")
    db = None
    try:
        db = get_session()
        if not check_tables_exist(db):
            print("[Seed] Erro: a tabela 'students' ainda não existe.")
            print("  Execute as migrações primeiro: alembic upgrade head")
            return

        students = ensure_students(db)
        print(f"\n[Seed] Concluído! {len(students)} students no banco.")
    except Exception as e:
        print(f"[Seed] Erro durante o seed: {e}")
        raise
    finally:
        if db:
            db.close()


if __name__ == "__main__":
    main()
