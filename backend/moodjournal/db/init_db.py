"""
Database initialization script.
"""
import logging
from moodjournal.core.config import get_settings
from moodjournal.core.logging_config import setup_logging
from moodjournal.db.session import init_db

logger = logging.getLogger(__name__)


if __name__ == "__main__":
    setup_logging(get_settings().LOG_LEVEL)
    logger.info("Initializing database...")
    init_db()
    logger.info("Database initialized successfully!")
