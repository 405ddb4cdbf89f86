from typing import Optional
from pydantic import BaseModel, ConfigDict


class StudentBase(BaseModel):
    name: str


class StudentCreate(StudentBase):
    # Accepted on the wire so a client-chosen id can be rejected explicitly
    id: Optional[int] = None


class StudentUpdate(StudentBase):
    # Ignored: the id in the path identifies the record
    id: Optional[int] = None


class Student(StudentBase):
    id: int

    model_config = ConfigDict(from_attributes=True)
