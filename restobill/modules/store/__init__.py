"""Document store abstraction, implementations and first-run seeding."""
