# restobill/modules/pos/services/pos_state.py

"""
Local copy of every collection as last seen by this terminal.

Snapshots replace a whole collection at once; nothing is merged field by
field, so the state is always some snapshot plus this terminal's own
optimistic edits made since.
"""

from typing import Dict, Iterable, Optional, Type
import logging

from pydantic import BaseModel, ValidationError as PydanticValidationError

from restobill.modules.menu.schemas.menu_schemas import MenuItem
from restobill.modules.orders.schemas.order_schemas import Order
from restobill.modules.settings.schemas.settings_schemas import StoreSettings
from restobill.modules.staff.schemas.staff_schemas import Staff
from restobill.modules.store.services.document_store import Collections, Snapshot
from restobill.modules.tables.schemas.table_schemas import Table

logger = logging.getLogger(__name__)


class PosState:
    def __init__(self):
        self.tables: Dict[str, Table] = {}
        self.orders: Dict[str, Order] = {}
        self.menu: Dict[str, MenuItem] = {}
        self.staff: Dict[str, Staff] = {}
        self.settings: StoreSettings = StoreSettings()
        self.loaded = set()

    def apply_snapshot(self, collection: str, snapshot: Snapshot) -> None:
        """Replace ``collection`` with the documents in ``snapshot``"""
        if collection == Collections.TABLES:
            self.tables = self._parse(Table, snapshot, collection)
        elif collection == Collections.ORDERS:
            self.orders = self._parse(Order, snapshot, collection)
        elif collection == Collections.MENU:
            self.menu = self._parse(MenuItem, snapshot, collection)
        elif collection == Collections.STAFF:
            self.staff = self._parse(Staff, snapshot, collection)
        elif collection == Collections.SETTINGS:
            parsed = self._parse(StoreSettings, snapshot, collection, keyed=False)
            if parsed:
                self.settings = next(iter(parsed.values()))
        else:
            logger.warning(f"Ignoring snapshot for unknown collection {collection}")
            return
        self.loaded.add(collection)

    def active_order_for_table(self, table_id: str) -> Optional[Order]:
        """The table's active order, found by reference first, then by scan"""
        table = self.tables.get(table_id)
        if table is not None and table.current_order_id:
            order = self.orders.get(table.current_order_id)
            if order is not None and order.is_active:
                return order
        for order in self.orders.values():
            if order.table_id == table_id and order.is_active:
                return order
        return None

    def _parse(
        self,
        model: Type[BaseModel],
        snapshot: Iterable[dict],
        collection: str,
        keyed: bool = True,
    ) -> Dict[str, BaseModel]:
        parsed = {}
        for index, document in enumerate(snapshot):
            try:
                record = model.model_validate(document)
            except PydanticValidationError as e:
                logger.warning(
                    f"Skipping malformed {collection} document "
                    f"{document.get('id', index) if isinstance(document, dict) else index}: {e}"
                )
                continue
            parsed[record.id if keyed else str(index)] = record
        return parsed
