# restobill/modules/store/services/seed_service.py

"""
Seed-once startup step: populate an empty store with default data.
"""

from datetime import datetime, timezone
import logging

from restobill.modules.settings.schemas.settings_schemas import SETTINGS_DOCUMENT_ID
from ..constants import DEFAULT_MENU, DEFAULT_SETTINGS, DEFAULT_STAFF, DEFAULT_TABLES
from .document_store import Collections, DocumentStore

logger = logging.getLogger(__name__)


async def seed_if_empty(store: DocumentStore) -> bool:
    """
    Write default tables, menu, staff and settings if no tables exist.

    The tables collection is the marker: a populated store is never
    re-seeded. Failures are logged and swallowed so the app can keep
    running with whatever data is already there. Tables are written last,
    so a seed that fails part way is retried on the next start.

    Returns:
        True if the store was seeded
    """
    try:
        if await store.get_all(Collections.TABLES):
            return False

        logger.info("Seeding document store with default data")
        joined_at = datetime.now(timezone.utc).isoformat()

        await store.save_many(
            Collections.MENU, {item["id"]: item for item in DEFAULT_MENU}
        )
        await store.save_many(
            Collections.STAFF,
            {staff["id"]: {**staff, "joinedAt": joined_at} for staff in DEFAULT_STAFF},
        )
        await store.save(Collections.SETTINGS, SETTINGS_DOCUMENT_ID, dict(DEFAULT_SETTINGS))
        # Tables go last: they mark the store as seeded
        await store.save_many(
            Collections.TABLES, {table["id"]: table for table in DEFAULT_TABLES}
        )

        logger.info("Document store seeded")
        return True
    except Exception as e:
        logger.error(f"Seeding failed, continuing with existing data: {e}")
        return False
