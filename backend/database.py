from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, declarative_base
from pathlib import Path

from config.app_config import DATABASE_URL, is_sqlite


def _build_engine(url: str):
    if not is_sqlite(url):
        return create_engine(url, echo=False, pool_pre_ping=True, pool_recycle=3600)

    db_file = url.split(':///', 1)[-1]
    if db_file and db_file != ':memory:':
        Path(db_file).parent.mkdir(parents=True, exist_ok=True)

    sqlite_engine = create_engine(
        url,
        connect_args={'check_same_thread': False},
        echo=False,
        pool_pre_ping=True,
    )

    # Enable WAL mode and foreign keys on every connection
    @event.listens_for(sqlite_engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.execute("PRAGMA synchronous=NORMAL")
        cursor.execute("PRAGMA busy_timeout=5000")
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return sqlite_engine


engine = _build_engine(DATABASE_URL)

SessionLocal = sessionmaker(bind=engine)
Base = declarative_base()

def get_db():
    """Dependency for FastAPI routes"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
