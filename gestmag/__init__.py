"""Shop, order, product, report and fitting-room management backed by SQLite."""

__version__ = "0.1.0"