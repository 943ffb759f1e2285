# tests/factories/__init__.py

"""
Shared test factories for RestoBill.
"""

from .menu import MenuItemFactory
from .order import OrderLineItemFactory, OrderFactory, CompletedOrderFactory
from .table import TableFactory
from .staff import StaffFactory

__all__ = [
    'MenuItemFactory',
    'OrderLineItemFactory',
    'OrderFactory',
    'CompletedOrderFactory',
    'TableFactory',
    'StaffFactory',
]
