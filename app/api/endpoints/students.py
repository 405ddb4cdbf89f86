from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session
from typing import List
from app.api.deps import get_db
from app.api.responses import render
from app.services.student import student as student_service
from app.models.student import MAX_STUDENT_ID
from app.schemas.student import Student, StudentCreate, StudentUpdate

router = APIRouter()

StudentIdPath = Path(..., ge=1, le=MAX_STUDENT_ID, description="Student id")

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"description": "Student not found"}}


@router.get("", response_model=List[Student])
def list_students(db: Session = Depends(get_db)):
    """
    List all students
    """
    return render(student_service.list_students(db))


@router.get("/{student_id}", response_model=Student, responses=NOT_FOUND)
def get_student(
    student_id: int = StudentIdPath,
    db: Session = Depends(get_db)
):
    """
    Get one student by ID
    """
    return render(student_service.get_student(db, student_id))


@router.post(
    "",
    response_model=Student,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_400_BAD_REQUEST: {"description": "Id supplied by the client"}},
)
def create_student(
    student: StudentCreate,
    db: Session = Depends(get_db)
):
    """
    Create a new student

    - **name**: student name (required)
    - **id**: must be omitted or null, the server assigns it
    """
    return render(student_service.create_student(db, student), status.HTTP_201_CREATED)


@router.put("/{student_id}", response_model=Student, responses=NOT_FOUND)
def update_student(
    student: StudentUpdate,
    student_id: int = StudentIdPath,
    db: Session = Depends(get_db)
):
    """
    Replace a student's name
    """
    return render(student_service.update_student(db, student_id, student))


@router.delete("/{student_id}", status_code=status.HTTP_204_NO_CONTENT, responses=NOT_FOUND)
def delete_student(
    student_id: int = StudentIdPath,
    db: Session = Depends(get_db)
):
    """
    Delete a student
    """
    return render(student_service.delete_student(db, student_id), status.HTTP_204_NO_CONTENT)
