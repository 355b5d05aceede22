"""Per-mode schema definitions and their reveal tables."""
