"""Internal helpers for lawful."""
