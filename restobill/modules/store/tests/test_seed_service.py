"""
Tests for first-start seeding.
"""

from unittest.mock import AsyncMock

import pytest

from restobill.modules.settings.schemas.settings_schemas import SETTINGS_DOCUMENT_ID
from ..constants import DEFAULT_MENU, DEFAULT_TABLES
from ..services.document_store import Collections, InMemoryDocumentStore
from ..services.seed_service import seed_if_empty


class TestSeedIfEmpty:
    @pytest.mark.asyncio
    async def test_seeds_empty_store(self, store):
        assert await seed_if_empty(store) is True

        tables = await store.get_all(Collections.TABLES)
        assert len(tables) == len(DEFAULT_TABLES) == 12
        assert all(t["status"] == "available" for t in tables)
        assert len(await store.get_all(Collections.MENU)) == len(DEFAULT_MENU)
        assert len(await store.get_all(Collections.STAFF)) == 3
        settings = await store.get(Collections.SETTINGS, SETTINGS_DOCUMENT_ID)
        assert settings["gstRate"] == 5
        assert settings["serviceChargeRate"] == 5

    @pytest.mark.asyncio
    async def test_seeds_only_once(self, store):
        await seed_if_empty(store)
        await store.delete(Collections.MENU, "1")

        assert await seed_if_empty(store) is False
        assert await store.get(Collections.MENU, "1") is None

    @pytest.mark.asyncio
    async def test_seeding_failure_is_not_fatal(self):
        store = InMemoryDocumentStore()
        store.save_many = AsyncMock(side_effect=RuntimeError("offline"))

        assert await seed_if_empty(store) is False

    @pytest.mark.asyncio
    async def test_partial_failure_is_retried(self):
        """Test a failed settings write leaves the store unmarked"""
        store = InMemoryDocumentStore()
        real_save = store.save

        async def save_without_settings(collection, doc_id, record):
            if collection == Collections.SETTINGS:
                raise RuntimeError("offline")
            await real_save(collection, doc_id, record)

        store.save = save_without_settings

        assert await seed_if_empty(store) is False
        assert await store.get_all(Collections.TABLES) == []

        store.save = real_save
        assert await seed_if_empty(store) is True
        assert len(await store.get_all(Collections.TABLES)) == 12
