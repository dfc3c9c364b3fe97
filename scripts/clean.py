# scripts/clean.py
from __future__ import annotations

import argparse
import os

from sqlalchemy import delete
from sqlalchemy.orm import Session

from student_api.db import get_db  # usa o provider do projeto (FastAPI) -> Session
from student_api.models.student import Student


def get_session() -> Session:
    gen = get_db()
    return next(gen)  # type: ignore


def clear_students(db: Session) -> int:
    """Deletes every student row; returns how many were removed."""
    result = db.execute(delete(Student))
    db.commit()
    return result.rowcount or 0


def main():
    parser = argparse.ArgumentParser(
        description="Apaga todos os students (DEV/HML). Mantém alembic_version."
    )
    parser.add_argument(
        "--yes",
        action="store_true",
        help="Não perguntar confirmação (útil para CI). Ou defina ALLOW_CLEAN=1.",
    )
    args = parser.parse_args()

    require_confirm = not (args.yes or os.getenv("ALLOW_CLEAN") == "1")
    if require_confirm:
        print("⚠️  ATENÇÃO: isso irá APAGAR TODOS os students.")
        resp = input("Digite 'LIMPAR' para confirmar: ").strip()
        if resp != "LIMPAR":
            print("[clean] Cancelado pelo usuário.")
            return

    db = get_session()
    try:
        removed = clear_students(db)
        print(f"[clean] {removed} students removidos.")
    finally:
        db.close()


if __name__ == "__main__":
    main()
