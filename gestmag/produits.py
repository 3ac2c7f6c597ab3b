"""Products: input checks, statistics, stock alerts, sorting and action history."""

from __future__ import annotations

import os
import sqlite3
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path

from gestmag.magasins import NotFoundError, ValidationError

_SORT_COLUMNS = {
    "Alphabétique": "nom_p",
    "Prix": "prix",
    "Stock": "stock",
}

_SORT_ORDERS = {
    "Ascendant": "ASC",
    "Descendant": "DESC",
}

_PRODUCT_COLUMNS = "nom_p, date_exp, prix, stock, lactose, bio, sugar, gluten, eco"

_FLAG_COLUMNS = ("gluten", "sugar", "lactose", "eco", "bio")


@dataclass(frozen=True)
class ProductStats:
    """How many products carry each dietary or ecological label."""

    total: int
    gluten_free: int = 0
    sugar_free: int = 0
    lactose_free: int = 0
    organic: int = 0
    bio: int = 0

    def _percent(self, count: int) -> float:
        return count * 100.0 / self.total

    @property
    def percentages(self) -> dict[str, float]:
        """Share of products with each label, in display order."""
        return {
            "Gluten-Free": self._percent(self.gluten_free),
            "Sugar-Free": self._percent(self.sugar_free),
            "Lactose-Free": self._percent(self.lactose_free),
            "Organic": self._percent(self.organic),
            "Bio": self._percent(self.bio),
        }


def validate_product(
    expiry: date, price: float, stock: int, today: date | None = None
) -> None:
    """Raise ValidationError unless the product fields are acceptable."""
    today = today or date.today()
    if expiry <= today:
        raise ValidationError(
            "Merci de selectionner une date plus tard qu'aujourd'hui."
        )
    if price <= 0:
        raise ValidationError("Merci de selectionner un prix superieur à 0.")
    if stock < 0:
        raise ValidationError("Merci de selectionner une quantité positive.")


def product_statistics(connection: sqlite3.Connection) -> ProductStats:
    """Count all products and those carrying each label."""
    (total,) = connection.execute("SELECT COUNT(*) FROM PRODUITS").fetchone()
    if total == 0:
        raise NotFoundError("The products table is empty.")
    counts = {}
    for column in _FLAG_COLUMNS:
        (counts[column],) = connection.execute(
            f"SELECT COUNT(*) FROM PRODUITS WHERE {column} = 1"
        ).fetchone()
    return ProductStats(
        total=int(total),
        gluten_free=int(counts["gluten"]),
        sugar_free=int(counts["sugar"]),
        lactose_free=int(counts["lactose"]),
        organic=int(counts["eco"]),
        bio=int(counts["bio"]),
    )


def format_statistics(stats: ProductStats) -> str:
    """The statistics message shown to the user."""
    lines = ["Statistics:"]
    lines.extend(f"{label}: {value:.2f}%" for label, value in stats.percentages.items())
    return "\n".join(lines)


def low_stock(connection: sqlite3.Connection, threshold: int) -> list[tuple[str, int]]:
    """Products whose stock is below *threshold*, as (name, stock)."""
    if threshold <= 0:
        raise ValidationError("Merci de choisir une quantité positive.")
    rows = connection.execute(
        "SELECT nom_p, stock FROM PRODUITS WHERE stock < :qte", {"qte": threshold}
    )
    return [(name, int(stock)) for name, stock in rows]


def sorted_products(
    connection: sqlite3.Connection, criterion: str, order: str
) -> list[tuple]:
    """All products ordered by name, price or stock, ascending or descending."""
    column = _SORT_COLUMNS.get(criterion)
    if column is None:
        raise ValidationError("Invalid criterion selected.")
    direction = _SORT_ORDERS.get(order)
    if direction is None:
        raise ValidationError("Invalid order selected.")
    rows = connection.execute(
        f"SELECT {_PRODUCT_COLUMNS} FROM PRODUITS ORDER BY {column} {direction}"
    )
    return [tuple(row) for row in rows]


class HistoryLog:
    """A plain-text journal of actions performed on products."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)

    def record(self, action: str, product_name: str = "") -> None:
        """Append a timestamped line describing *action*."""
        line = f"{datetime.now():%Y-%m-%d %H:%M:%S} | {action}"
        if product_name:
            line += f" | Product: {product_name}"
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(line + "\n")

    def read(self) -> str:
        """The whole journal."""
        return self.path.read_text(encoding="utf-8")

    def clear(self) -> None:
        """Empty the journal."""
        self.path.write_text("", encoding="utf-8")