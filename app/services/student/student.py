import logging
from typing import List

from sqlalchemy.orm import Session

from app.core.exceptions import BadRequestException, StudentNotFound
from app.core.result import Failure, Result, Success
from app.models.student import Student as StudentRow
from app.schemas.student import Student, StudentCreate, StudentUpdate
from app.services.student import repository

logger = logging.getLogger(__name__)


def to_schema(row: StudentRow) -> Student:
    """Stored row -> wire representation."""
    return Student(id=row.id, name=row.name)


def from_create(payload: StudentCreate) -> StudentRow:
    """Wire create payload -> new, not yet persisted row."""
    return StudentRow(name=payload.name)


def list_students(db: Session) -> Success[List[Student]]:
    """List every student"""
    return Success([to_schema(row) for row in repository.find_all(db)])


def get_student(db: Session, student_id: int) -> Result[Student]:
    """Fetch one student by id"""
    row = repository.find_by_id(db, student_id)
    if row is None:
        logger.warning(f"Student {student_id} not found")
        return Failure(StudentNotFound(student_id))
    return Success(to_schema(row))


def create_student(db: Session, payload: StudentCreate) -> Result[Student]:
    """Create a new student; ids are always assigned by the database"""
    if payload.id is not None:
        return Failure(BadRequestException(
            message="Student id is assigned by the server and must not be supplied",
            details={"id": payload.id},
        ))

    row = repository.save(db, from_create(payload))
    logger.info(f"Created student {row.id}")
    return Success(to_schema(row))


def update_student(db: Session, student_id: int, payload: StudentUpdate) -> Result[Student]:
    """Replace the name of an existing student"""
    # Lookup and write share one transaction; the row stays locked until commit
    row = repository.find_by_id(db, student_id, for_update=True)
    if row is None:
        db.rollback()
        logger.warning(f"Student {student_id} not found for update")
        return Failure(StudentNotFound(student_id))

    row.name = payload.name
    row = repository.save(db, row)
    logger.info(f"Updated student {row.id}")
    return Success(to_schema(row))


def delete_student(db: Session, student_id: int) -> Result[None]:
    """Delete a student permanently"""
    row = repository.find_by_id(db, student_id, for_update=True)
    if row is None:
        db.rollback()
        logger.warning(f"Student {student_id} not found for delete")
        return Failure(StudentNotFound(student_id))

    repository.delete(db, row)
    logger.info(f"Deleted student {student_id}")
    return Success(None)
