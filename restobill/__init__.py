"""RestoBill: tables, orders, billing and sales reporting for a single restaurant."""

__version__ = "0.1.0"
