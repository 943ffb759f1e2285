"""Table lifecycle: occupancy bound to a single active order."""
