"""POS orchestration: commands, optimistic local state and store snapshots."""
