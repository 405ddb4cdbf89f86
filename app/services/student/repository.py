"""
Persistence store for students.

Plain functions over a SQLAlchemy session. Lookups return None when nothing
matches; deciding whether that is an error is left to the caller.
"""

from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.student import Student


def find_all(db: Session) -> List[Student]:
    """All students in insertion order."""
    return list(db.scalars(select(Student).order_by(Student.id)))


def find_by_id(db: Session, student_id: int, for_update: bool = False) -> Optional[Student]:
    """
    Look up one student.

    With for_update the row is locked until the session's transaction ends
    (ignored by engines without SELECT ... FOR UPDATE, such as SQLite).
    """
    stmt = select(Student).where(Student.id == student_id)
    if for_update:
        stmt = stmt.with_for_update()
    return db.scalars(stmt).first()


def count(db: Session) -> int:
    return db.scalar(select(func.count()).select_from(Student))


def save(db: Session, student: Student) -> Student:
    """
    Insert a new student (id unset) or write back an existing one.

    Returns the persisted row with its id populated.
    """
    try:
        if student.id is None:
            db.add(student)
        else:
            student = db.merge(student)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    db.refresh(student)
    return student


def delete(db: Session, student: Student) -> None:
    try:
        db.delete(student)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
