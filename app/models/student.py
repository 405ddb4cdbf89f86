from sqlalchemy import BigInteger, Column, Integer, String, Table
from app.core.database import Base

# Largest id a BIGINT column (and SQLite's INTEGER) can hold
MAX_STUDENT_ID = 2 ** 63 - 1

# SQLite only autoincrements a column declared exactly INTEGER PRIMARY KEY
StudentId = BigInteger().with_variant(Integer, "sqlite")

# AUTOINCREMENT keeps SQLite from handing out the id of a deleted last row again
students_table = Table(
    "students",
    Base.metadata,
    Column("id", StudentId, primary_key=True, autoincrement=True, index=True),
    Column("name", String, nullable=False),
    sqlite_autoincrement=True,
)


class Student(Base):
    __table__ = students_table

    def __repr__(self) -> str:
        return f"Student(id={self.id!r}, name={self.name!r})"
