# restobill/modules/menu/services/menu_service.py

from typing import Iterable, List
import logging

from restobill.modules.store.services.document_store import Collections, DocumentStore
from ..schemas.menu_schemas import MenuItem

logger = logging.getLogger(__name__)

ALL_CATEGORIES = "All"


def categories(menu: Iterable[MenuItem]) -> List[str]:
    """``All`` followed by each category once, in first-seen order"""
    seen = []
    for item in menu:
        if item.category not in seen:
            seen.append(item.category)
    return [ALL_CATEGORIES] + seen


def filter_menu(
    menu: Iterable[MenuItem], category: str = ALL_CATEGORIES, search: str = ""
) -> List[MenuItem]:
    """Items in ``category`` whose name contains ``search`` (case-insensitive)"""
    needle = (search or "").strip().lower()
    return [
        item
        for item in menu
        if (category in (None, "", ALL_CATEGORIES) or item.category == category)
        and needle in item.name.lower()
    ]


class MenuService:
    """Menu management; the only writer of the menu collection"""

    def __init__(self, store: DocumentStore):
        self.store = store

    async def save_item(self, item: MenuItem) -> MenuItem:
        await self.store.save(Collections.MENU, item.id, item.to_document())
        logger.info(f"Saved menu item {item.id} ({item.name})")
        return item

    async def delete_item(self, item_id: str) -> None:
        await self.store.delete(Collections.MENU, item_id)
        logger.info(f"Deleted menu item {item_id}")
