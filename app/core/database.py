import os

from sqlalchemy import create_engine, event
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker, declarative_base
from app.core.config import DATABASE_URL


def _is_sqlite(url: str) -> bool:
    return make_url(url).get_backend_name() == "sqlite"


def build_engine(url: str, **kwargs):
    """
    Creates an engine for the given URL, applying the SQLite tweaks the
    service relies on (cross-thread sessions and WAL journaling).
    """
    if _is_sqlite(url):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    engine = create_engine(url, **kwargs)

    if _is_sqlite(url):
        @event.listens_for(engine, "connect")
        def _set_sqlite_pragma(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA journal_mode=WAL")
            cursor.close()

    return engine


def ensure_database_dir(url: str = DATABASE_URL) -> None:
    """Creates the parent directory of a file-backed SQLite database."""
    parsed = make_url(url)
    if _is_sqlite(url) and parsed.database and parsed.database != ":memory:":
        directory = os.path.dirname(parsed.database)
        if directory:
            os.makedirs(directory, exist_ok=True)


engine = build_engine(DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()
import app.profiles.models
import app.goals.models
import app.roadmaps.models

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
