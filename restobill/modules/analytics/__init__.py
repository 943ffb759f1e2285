"""Sales analytics over completed orders."""
