import logging
from app.core.database import SessionLocal, create_database_tables
from app.models.student import Student
from app.services.student import repository

# Setup logging to see output
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

SAMPLE_NAMES = ["Ana", "Bea", "Carlos"]


def seed_data():
    """
    Seed a few students into an empty database.
    """
    create_database_tables()
    db = SessionLocal()
    try:
        # Avoid duplicating rows on repeated runs
        if repository.count(db):
            logger.info("Database already contains data. Skipping seed.")
            return

        logger.info("Seeding data...")
        for name in SAMPLE_NAMES:
            student = repository.save(db, Student(name=name))
            logger.info(f"Seeded student {student.id}: {student.name}")

        logger.info("Data seeded successfully")
    finally:
        db.close()


if __name__ == "__main__":
    seed_data()
