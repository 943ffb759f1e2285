# restobill/core/logging_config.py

import logging
from typing import Optional

from .config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: Optional[str] = None):
    """Configure root logging from settings"""
    logging.basicConfig(
        level=level or get_settings().log_level,
        format=LOG_FORMAT,
    )
    if get_settings().log_sql_queries:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)
