# restobill/modules/tables/services/table_state_service.py

"""
Table lifecycle: binds a table's occupancy to exactly one active order.

``transition_for_order`` is the only place that decides what a table must
look like for a given order status. Callers apply the returned mutation
rather than flipping table status themselves.
"""

from typing import Dict, Iterable, List, Optional
import logging

from restobill.core.exceptions import TableConflictError
from restobill.modules.billing import item_count
from restobill.modules.orders.enums.order_enums import OrderStatus
from restobill.modules.orders.schemas.order_schemas import Order
from ..enums.table_enums import TableStatus
from ..schemas.table_schemas import Table, TableMutation, TableOverview

logger = logging.getLogger(__name__)


def transition_for_order(order: Order) -> TableMutation:
    """Map an order's status to the table state it requires"""
    if order.status == OrderStatus.ACTIVE:
        return TableMutation.occupy(order.table_id, order.id)
    return TableMutation.release(order.table_id)


class TableStateService:
    """Service for managing table occupancy"""

    def apply_mutation(self, table: Table, mutation: TableMutation) -> bool:
        """
        Apply a mutation to a table in place.

        Returns:
            True if the table changed, False for a no-op

        Raises:
            TableConflictError: occupying a table held by a different order
        """
        if mutation.status == TableStatus.OCCUPIED:
            return self.assign_order(table, mutation.current_order_id)
        return self.release(table)

    def assign_order(self, table: Table, order_id: str) -> bool:
        """Mark an available table as occupied by ``order_id``"""
        if table.status == TableStatus.OCCUPIED:
            if table.current_order_id == order_id:
                return False
            raise TableConflictError(
                f"Table {table.name} is already occupied by order {table.current_order_id}"
            )

        table.status = TableStatus.OCCUPIED
        table.current_order_id = order_id
        logger.info(f"Table {table.id} occupied by order {order_id}")
        return True

    def release(self, table: Table) -> bool:
        """Free a table; releasing an available table is a no-op"""
        if table.status == TableStatus.AVAILABLE and table.current_order_id is None:
            return False

        table.status = TableStatus.AVAILABLE
        table.current_order_id = None
        logger.info(f"Table {table.id} released")
        return True

    def reconcile(
        self, tables: Iterable[Table], orders: Dict[str, Order]
    ) -> List[TableMutation]:
        """
        Find tables whose state disagrees with their orders.

        A table pointing at a missing or finished order must be released; an
        available table still holding an order id is cleared as well.
        """
        mutations = []
        for table in tables:
            order = orders.get(table.current_order_id) if table.current_order_id else None

            if order is not None and order.table_id == table.id:
                expected = transition_for_order(order)
            else:
                expected = TableMutation.release(table.id)

            if (
                expected.status != table.status
                or expected.current_order_id != table.current_order_id
            ):
                logger.warning(
                    f"Table {table.id} out of sync: {table.status.value}/"
                    f"{table.current_order_id} -> {expected.status.value}/"
                    f"{expected.current_order_id}"
                )
                mutations.append(expected)
        return mutations

    def table_overview(
        self, tables: Iterable[Table], orders: Dict[str, Order]
    ) -> List[TableOverview]:
        """Per-table status with the running bill of any active order"""
        overview = []
        for table in tables:
            order: Optional[Order] = (
                orders.get(table.current_order_id) if table.current_order_id else None
            )
            entry = TableOverview(
                table_id=table.id,
                name=table.name,
                capacity=table.capacity,
                status=table.status,
            )
            if table.status == TableStatus.OCCUPIED and order is not None and order.is_active:
                entry.order_id = order.id
                entry.opened_at = order.created_at
                entry.running_total = order.total
                entry.item_count = item_count(order.items)
            overview.append(entry)
        return overview


table_state_service = TableStateService()
