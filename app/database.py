from collections.abc import Generator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session

from app.config import Settings, get_settings
from app.models.base import Base


def build_engine(settings: Settings) -> Engine:
    """
    Create the SQLAlchemy engine for the configured DATABASE_URL.

    SQLite gets foreign key enforcement switched on per connection so that
    ON DELETE CASCADE behaves the same as on PostgreSQL.
    """
    is_sqlite = settings.DATABASE_URL.startswith("sqlite")

    if is_sqlite:
        engine = create_engine(
            settings.DATABASE_URL,
            echo=settings.DEBUG,
            connect_args={"check_same_thread": False},
        )
        enable_sqlite_foreign_keys(engine)
    else:
        engine = create_engine(
            settings.DATABASE_URL,
            pool_pre_ping=True,  # Verify connections before using
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            echo=settings.DEBUG,  # Log SQL queries in debug mode
        )
    return engine


def enable_sqlite_foreign_keys(engine: Engine) -> None:
    """Turn on PRAGMA foreign_keys for every new SQLite connection."""

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


engine = build_engine(get_settings())

# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency for database sessions.

    Yields a database session and ensures it's closed after use.

    Usage:
        @app.get("/notes")
        def list_notes(db: Session = Depends(get_db)):
            return db.query(Note).all()
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    """Create all tables. Use Alembic migrations in production."""
    # Import all models so Base.metadata knows every table
    from app.models import note, tenant, user  # noqa: F401

    Base.metadata.create_all(bind=engine)
