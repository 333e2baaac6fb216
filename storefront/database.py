"""Database engine, session factory and request dependency."""
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from .config import settings

# One pool per process, built from the POSTGRES_* settings.
engine = create_engine(
    settings.database_url,
    pool_size=settings.DATABASE_POOL_SIZE,
    max_overflow=settings.DATABASE_MAX_OVERFLOW,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """Yield a session for the duration of one request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
