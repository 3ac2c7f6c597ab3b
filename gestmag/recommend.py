"""Product recommendations from store and product embeddings."""

from __future__ import annotations

import json
import math
import sqlite3
from dataclasses import dataclass
from typing import Any, Iterable, Sequence

DEFAULT_PRODUCTS = ("Lait", "Pain", "Vêtements", "Électronique", "Fruits")
MAX_CANDIDATES = 5
DEFAULT_LIMIT = 3


class RecommendationError(ValueError):
    """The embedding data could not be turned into recommendations."""


@dataclass(frozen=True)
class Recommendation:
    """A recommended product and its similarity score."""

    name: str
    score: float

    @property
    def score_text(self) -> str:
        """The score with two decimals, as shown to the user."""
        return f"{self.score:.2f}"


def describe_store(store_type: str, location: str, surface: float) -> str:
    """A one-line textual description of a store."""
    return f"Magasin de type {store_type} à {location}, surface {surface:g} m²"


def build_inputs(
    store_type: str, location: str, surface: float, products: Iterable[str]
) -> str:
    """Compact JSON array of the store description followed by product names."""
    inputs = [describe_store(store_type, location, surface), *products]
    return json.dumps(inputs, ensure_ascii=False, separators=(",", ":"))


def candidate_products(connection: sqlite3.Connection) -> list[str]:
    """Up to five distinct ordered products, or a fixed list if the query fails."""
    try:
        rows = connection.execute(
            "SELECT DISTINCT produit FROM COMMANDES LIMIT :limit",
            {"limit": MAX_CANDIDATES},
        ).fetchall()
    except sqlite3.Error:
        return list(DEFAULT_PRODUCTS)
    return ["" if produit is None else str(produit) for (produit,) in rows]


def _as_vector(value: Any) -> list[float]:
    if not isinstance(value, list):
        return []
    return [
        float(item)
        if isinstance(item, (int, float)) and not isinstance(item, bool)
        else 0.0
        for item in value
    ]


def _similarity(first: Sequence[float], second: Sequence[float]) -> float:
    distance = math.sqrt(sum((a - b) ** 2 for a, b in zip(first, second)))
    return 1.0 / (1.0 + distance)


def score_products(
    embeddings: Sequence[Any], products: Sequence[str]
) -> list[Recommendation]:
    """Score each product against the store embedding, best first.

    The first embedding belongs to the store; the following ones belong to
    *products* in order. Products with an empty embedding are skipped.
    """
    if not embeddings:
        raise RecommendationError("Aucun résultat du script Python.")
    store = _as_vector(embeddings[0])
    if not store:
        raise RecommendationError("Erreur dans les données du script Python.")
    scores = []
    for name, raw in zip(products, embeddings[1:]):
        vector = _as_vector(raw)
        if not vector:
            continue
        scores.append(Recommendation(name, _similarity(store, vector)))
    return sorted(scores, key=lambda item: item.score, reverse=True)


def recommend(
    response: str | bytes, products: Sequence[str], limit: int = DEFAULT_LIMIT
) -> list[Recommendation]:
    """Parse a JSON embeddings array and return the best *limit* products."""
    try:
        embeddings = json.loads(response)
    except (ValueError, TypeError) as exc:
        raise RecommendationError("Réponse invalide du script Python.") from exc
    if not isinstance(embeddings, list):
        raise RecommendationError("Réponse invalide du script Python.")
    scores = score_products(embeddings, products)
    if not scores:
        raise RecommendationError("Aucune recommandation calculée.")
    return scores[:limit]