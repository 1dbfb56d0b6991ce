from database import engine, Base
import logging

# Register every table on Base.metadata
import models  # noqa: F401

logger = logging.getLogger(__name__)


def init_database():
    """Create any missing tables. Existing tables are left untouched."""
    Base.metadata.create_all(bind=engine)
    logger.info(f"Database ready: {engine.url.render_as_string(hide_password=True)}")
