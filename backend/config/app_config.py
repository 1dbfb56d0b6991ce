"""
Runtime Configuration

Reads deployment settings from environment variables. Every value has a
default suitable for a single-machine install backed by SQLite.

Variables:
- POS_DATA_DIR: directory for the SQLite database and logs
- POS_DATABASE_URL: SQLAlchemy URL (overrides the SQLite default)
- POS_LOG_DIR: directory for rotating log files
- POS_LOG_LEVEL: root log level name
- POS_HOST / POS_PORT: bind address for uvicorn
"""
import os
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def _env_int(name: str, default: int) -> int:
    """Read an integer environment variable, falling back on bad input."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring non-integer {name}={raw!r}, using {default}")
        return default


DATA_DIR = Path(os.environ.get('POS_DATA_DIR', Path.cwd() / 'data'))

DATABASE_URL = os.environ.get('POS_DATABASE_URL', f"sqlite:///{DATA_DIR / 'kitchenpos.db'}")

LOG_DIR = Path(os.environ.get('POS_LOG_DIR', DATA_DIR / 'logs'))

LOG_LEVEL = os.environ.get('POS_LOG_LEVEL', 'INFO').upper()

HOST = os.environ.get('POS_HOST', '127.0.0.1')

PORT = _env_int('POS_PORT', 8080)


def is_sqlite(url: str = DATABASE_URL) -> bool:
    """Check whether the configured database is SQLite."""
    return url.startswith('sqlite')
