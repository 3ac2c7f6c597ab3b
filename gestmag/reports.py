"""Revenue and shop-type summaries."""

from __future__ import annotations

import sqlite3


def revenue_by_store(connection: sqlite3.Connection) -> list[tuple[int, str, float]]:
    """Total sales per shop as (id, name, revenue), ordered by shop id."""
    rows = connection.execute(
        "SELECT m.ID_MAGASIN, m.NOM_MAGASIN, "
        "COALESCE(SUM(p.QUANTITE_VENDUE * p.PRIX_VENTE_UNITAIRE), 0) "
        "FROM MAGASINS m "
        "LEFT JOIN PRODUITS p ON m.ID_MAGASIN = p.ID_MAGASIN "
        "GROUP BY m.ID_MAGASIN, m.NOM_MAGASIN "
        "ORDER BY m.ID_MAGASIN"
    )
    return [(int(ident), name, float(total)) for ident, name, total in rows]


def revenue_by_region(connection: sqlite3.Connection) -> list[tuple[str, float]]:
    """Total sales per shop location as (region, revenue), ordered by region."""
    rows = connection.execute(
        "SELECT m.EMPLACEMENT, "
        "COALESCE(SUM(p.QUANTITE_VENDUE * p.PRIX_VENTE_UNITAIRE), 0) "
        "FROM MAGASINS m "
        "LEFT JOIN PRODUITS p ON m.ID_MAGASIN = p.ID_MAGASIN "
        "GROUP BY m.EMPLACEMENT "
        "ORDER BY m.EMPLACEMENT"
    )
    return [(region, float(total)) for region, total in rows]


def store_type_counts(connection: sqlite3.Connection) -> list[tuple[str, int]]:
    """Number of shops of each type as (type, count)."""
    rows = connection.execute(
        "SELECT TYPE_DE_MAGASIN, COUNT(*) FROM MAGASINS GROUP BY TYPE_DE_MAGASIN"
    )
    return [(kind, int(count)) for kind, count in rows]