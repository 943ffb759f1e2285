# restobill/modules/pos/services/pos_service.py

"""
POS service: runs staff commands against the local state and the store.

Each command updates the local state first, then persists. A persistence
failure is reported as an error notification and the optimistic state is
left as it is; the next snapshot from the store decides what is true.
"""

from datetime import datetime
from typing import Callable, List, Optional
import logging

from restobill.core.exceptions import NotFoundError, PersistenceError, TableConflictError
from restobill.modules.analytics.enums.analytics_enums import ReportRange
from restobill.modules.analytics.schemas.analytics_schemas import SalesReport
from restobill.modules.analytics.services.sales_analytics_service import (
    SalesAnalyticsService,
)
from restobill.modules.menu.schemas.menu_schemas import MenuItem
from restobill.modules.menu.services.menu_service import MenuService
from restobill.modules.orders.enums.order_enums import (
    DeliveryMethod,
    OrderType,
    PaymentMode,
)
from restobill.modules.orders.schemas.order_schemas import Order
from restobill.modules.orders.services.order_lifecycle_service import (
    OrderLifecycleService,
)
from restobill.modules.settings.schemas.settings_schemas import StoreSettingsUpdate, StoreSettings
from restobill.modules.settings.services.settings_service import SettingsService
from restobill.modules.staff.schemas.staff_schemas import Staff
from restobill.modules.staff.services.staff_service import StaffService
from restobill.modules.store.services.document_store import Collections, DocumentStore
from restobill.modules.tables.schemas.table_schemas import (
    Table,
    TableMutation,
    TableOverview,
)
from restobill.modules.tables.services.table_state_service import (
    TableStateService,
    transition_for_order,
)
from ..schemas.pos_schemas import NotificationType, PosNotification
from .pos_state import PosState

logger = logging.getLogger(__name__)

MAX_NOTIFICATIONS = 50


class PosService:
    """Commands for one staff terminal"""

    def __init__(
        self,
        store: DocumentStore,
        state: Optional[PosState] = None,
        analytics: Optional[SalesAnalyticsService] = None,
        on_notify: Optional[Callable[[PosNotification], None]] = None,
    ):
        self.store = store
        self.state = state or PosState()
        self.tables = TableStateService()
        self.analytics = analytics or SalesAnalyticsService()
        self.menu_service = MenuService(store)
        self.staff_service = StaffService(store)
        self.settings_service = SettingsService(store)
        self.notifications: List[PosNotification] = []
        self.on_notify = on_notify
        self._unsubscribers: List[Callable[[], None]] = []

    # Lifecycle

    async def start(self) -> None:
        """Subscribe to every collection; each snapshot replaces local state"""
        for collection in Collections.ALL:
            unsubscribe = await self.store.subscribe(
                collection, self._snapshot_handler(collection)
            )
            self._unsubscribers.append(unsubscribe)
        logger.info("POS service subscribed to all collections")

    def stop(self) -> None:
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers.clear()

    def _snapshot_handler(self, collection: str):
        def handle(snapshot):
            self.state.apply_snapshot(collection, snapshot)

        return handle

    @property
    def lifecycle(self) -> OrderLifecycleService:
        # Built per use so billing always sees the latest settings
        return OrderLifecycleService(self.state.settings)

    # Notifications

    def notify(self, message: str, type: NotificationType = NotificationType.INFO):
        notification = PosNotification(message=message, type=type)
        self.notifications.append(notification)
        del self.notifications[:-MAX_NOTIFICATIONS]
        if self.on_notify is not None:
            self.on_notify(notification)
        return notification

    # Lookups

    def get_table(self, table_id: str) -> Table:
        table = self.state.tables.get(table_id)
        if table is None:
            raise NotFoundError(f"Table {table_id} not found")
        return table

    def get_order(self, order_id: str) -> Order:
        order = self.state.orders.get(order_id)
        if order is None:
            raise NotFoundError(f"Order {order_id} not found")
        return order

    def get_menu_item(self, menu_item_id: str) -> MenuItem:
        item = self.state.menu.get(menu_item_id)
        if item is None:
            raise NotFoundError(f"Menu item {menu_item_id} not found")
        return item

    def active_order_for_table(self, table_id: str) -> Optional[Order]:
        self.get_table(table_id)
        return self.state.active_order_for_table(table_id)

    def table_overview(self) -> List[TableOverview]:
        return self.tables.table_overview(self.state.tables.values(), self.state.orders)

    # Order commands

    async def add_item(self, table_id: str, menu_item_id: str) -> Order:
        """
        Add one unit of a menu item to the table's order.

        The first item on a free table opens a new order and occupies the
        table.

        Raises:
            NotFoundError: unknown table or menu item
            TableConflictError: table is held by an order this terminal cannot see
        """
        table = self.get_table(table_id)
        menu_item = self.get_menu_item(menu_item_id)
        order = self.state.active_order_for_table(table_id)

        if order is None:
            order = self.lifecycle.new_order(table_id)

        mutation = None
        if table.current_order_id != order.id:
            if not table.is_available:
                raise TableConflictError(
                    f"Table {table.name} is occupied by order {table.current_order_id}"
                )
            mutation = transition_for_order(order)

        if not self.lifecycle.add_item(order, menu_item):
            return order

        self.state.orders[order.id] = order
        if mutation is not None:
            self.tables.apply_mutation(table, mutation)

        if await self._persist_order(order, mutation, "Failed to save order"):
            self.notify(f"Added {menu_item.name}", NotificationType.SUCCESS)
        return order

    async def change_quantity(self, order_id: str, line_item_id: str, delta: int) -> Order:
        order = self.get_order(order_id)
        if self.lifecycle.change_quantity(order, line_item_id, delta):
            await self._persist_order(order, None, "Failed to save order")
        return order

    async def set_item_note(self, order_id: str, line_item_id: str, note: str) -> Order:
        order = self.get_order(order_id)
        if self.lifecycle.set_item_note(order, line_item_id, note):
            await self._persist_order(order, None, "Failed to save note")
        return order

    async def set_order_type(self, order_id: str, order_type: OrderType) -> Order:
        order = self.get_order(order_id)
        if self.lifecycle.set_order_type(order, order_type):
            if await self._persist_order(order, None, "Failed to save order"):
                self.notify(
                    f"Switched to {order.order_type.value.upper()}", NotificationType.INFO
                )
        return order

    async def set_customer(
        self,
        order_id: str,
        customer_name: Optional[str] = None,
        customer_phone: Optional[str] = None,
    ) -> Order:
        order = self.get_order(order_id)
        if self.lifecycle.set_customer(order, customer_name, customer_phone):
            await self._persist_order(order, None, "Failed to save customer details")
        return order

    async def complete_order(
        self,
        order_id: str,
        payment_mode: PaymentMode = PaymentMode.CASH,
        delivery_method: DeliveryMethod = DeliveryMethod.NONE,
        completed_at: Optional[datetime] = None,
    ) -> Order:
        """
        Settle an order and free its table.

        Raises:
            OrderStateError: order is not active
            ValidationError: order has no items
        """
        order = self.get_order(order_id)
        mutation = self.lifecycle.complete(order, payment_mode, delivery_method, completed_at)
        self._apply_table_mutation(mutation)

        if await self._persist_order(order, mutation, "Failed to complete order"):
            table = self.state.tables.get(order.table_id)
            table_name = table.name if table is not None else order.table_id
            self.notify(f"Order for {table_name} completed!", NotificationType.SUCCESS)
        return order

    async def cancel_order(self, order_id: str) -> Order:
        order = self.get_order(order_id)
        mutation = self.lifecycle.cancel(order)
        self._apply_table_mutation(mutation)
        await self._persist_order(order, mutation, "Failed to cancel order")
        return order

    async def update_delivery_method(
        self,
        order_id: str,
        delivery_method: DeliveryMethod,
        customer_phone: Optional[str] = None,
    ) -> Order:
        """Record that the bill was printed or sent over WhatsApp"""
        order = self.get_order(order_id)
        self.lifecycle.set_delivery_method(order, delivery_method, customer_phone)
        await self._persist_order(order, None, "Failed to save delivery method")
        return order

    async def reconcile_tables(self) -> List[TableMutation]:
        """Repair tables whose occupancy disagrees with their orders"""
        mutations = self.tables.reconcile(self.state.tables.values(), self.state.orders)
        for mutation in mutations:
            table = self.state.tables[mutation.table_id]
            table.status = mutation.status
            table.current_order_id = mutation.current_order_id
            try:
                await self.store.update(
                    Collections.TABLES, mutation.table_id, mutation.to_fields()
                )
            except PersistenceError as e:
                logger.error(f"Failed to repair table {mutation.table_id}: {e.detail}")
                self.notify("Failed to update table status", NotificationType.ERROR)
        return mutations

    # Reporting

    def sales_report(
        self,
        report_range: ReportRange = ReportRange.WEEKLY,
        query: str = "",
        now: Optional[datetime] = None,
    ) -> SalesReport:
        return self.analytics.build_report(
            list(self.state.orders.values()), report_range, query, now
        )

    # Menu, staff and settings

    async def save_menu_item(self, item: MenuItem) -> MenuItem:
        self.state.menu[item.id] = item
        return await self._guarded(
            self.menu_service.save_item(item), "Failed to save menu item", item
        )

    async def delete_menu_item(self, item_id: str) -> None:
        self.get_menu_item(item_id)
        self.state.menu.pop(item_id, None)
        await self._guarded(
            self.menu_service.delete_item(item_id), "Failed to delete menu item", None
        )

    async def save_staff(self, staff: Staff) -> Staff:
        self.state.staff[staff.id] = staff
        return await self._guarded(
            self.staff_service.save_staff(staff), "Failed to save staff member", staff
        )

    async def delete_staff(self, staff_id: str) -> None:
        self._get_staff(staff_id)
        self.state.staff.pop(staff_id, None)
        await self._guarded(
            self.staff_service.delete_staff(staff_id), "Failed to delete staff member", None
        )

    async def toggle_attendance(self, staff_id: str) -> Staff:
        staff = self._get_staff(staff_id)
        return await self._guarded(
            self.staff_service.toggle_attendance(staff), "Failed to update attendance", staff
        )

    async def update_settings(self, changes: StoreSettingsUpdate) -> StoreSettings:
        """
        Raises:
            ValidationError: merged settings are invalid
        """
        updated = self.settings_service.merge(self.state.settings, changes)
        self.state.settings = updated
        try:
            await self.settings_service.save_settings(updated)
        except PersistenceError as e:
            logger.error(f"Failed to save settings: {e.detail}")
            self.notify("Failed to save settings", NotificationType.ERROR)
            return updated
        self.notify("Settings saved", NotificationType.SUCCESS)
        return updated

    # Helpers

    def _get_staff(self, staff_id: str) -> Staff:
        staff = self.state.staff.get(staff_id)
        if staff is None:
            raise NotFoundError(f"Staff member {staff_id} not found")
        return staff

    def _apply_table_mutation(self, mutation: TableMutation) -> None:
        table = self.state.tables.get(mutation.table_id)
        if table is None:
            logger.warning(f"Order references unknown table {mutation.table_id}")
            return
        self.tables.apply_mutation(table, mutation)

    async def _persist_order(
        self, order: Order, mutation: Optional[TableMutation], failure_message: str
    ) -> bool:
        """Save the order, then the table change it requires"""
        try:
            await self.store.save(Collections.ORDERS, order.id, order.to_document())
            if mutation is not None and mutation.table_id in self.state.tables:
                await self.store.update(
                    Collections.TABLES, mutation.table_id, mutation.to_fields()
                )
            return True
        except PersistenceError as e:
            logger.error(f"{failure_message} ({order.id}): {e.detail}")
            self.notify(failure_message, NotificationType.ERROR)
            return False

    async def _guarded(self, operation, failure_message: str, result):
        try:
            outcome = await operation
        except PersistenceError as e:
            logger.error(f"{failure_message}: {e.detail}")
            self.notify(failure_message, NotificationType.ERROR)
            return result
        return outcome if outcome is not None else result
