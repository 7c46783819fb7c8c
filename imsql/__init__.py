"""Read-only SQLite models, a design graph over their columns, and small helpers."""

__version__ = "0.1.0"