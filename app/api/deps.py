from typing import Generator
from sqlalchemy.orm import Session
from app.core.database import SessionLocal


def get_db() -> Generator[Session, None, None]:
    """
    Request-scoped database session.
    Closed after the response is sent, rolling back anything left uncommitted.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
