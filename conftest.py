"""
Pytest configuration shared by module tests and cross-cutting tests.
"""

import pytest
import pytest_asyncio

from restobill.modules.menu.schemas.menu_schemas import MenuItem
from restobill.modules.orders.services.order_lifecycle_service import (
    OrderLifecycleService,
)
from restobill.modules.pos.services.pos_service import PosService
from restobill.modules.settings.schemas.settings_schemas import StoreSettings
from restobill.modules.store.constants import DEFAULT_MENU
from restobill.modules.store.services.document_store import InMemoryDocumentStore
from restobill.modules.store.services.seed_service import seed_if_empty


@pytest.fixture
def store_settings():
    return StoreSettings(gst_rate=5, service_charge_rate=5)


@pytest.fixture
def lifecycle(store_settings):
    return OrderLifecycleService(store_settings)


@pytest.fixture
def menu():
    return [MenuItem.model_validate(item) for item in DEFAULT_MENU]


@pytest.fixture
def paneer_tikka(menu):
    return menu[0]


@pytest.fixture
def chicken_tikka(menu):
    return menu[1]


@pytest.fixture
def store():
    return InMemoryDocumentStore()


@pytest_asyncio.fixture
async def seeded_store(store):
    await seed_if_empty(store)
    return store


@pytest_asyncio.fixture
async def pos_service(seeded_store):
    service = PosService(seeded_store)
    await service.start()
    yield service
    service.stop()
