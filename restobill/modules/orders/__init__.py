"""Orders: line-item cart, lifecycle transitions and totals upkeep."""
