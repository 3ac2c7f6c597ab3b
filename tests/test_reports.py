from datetime import date, time

import pytest

from gestmag.database import connect
from gestmag.magasins import Magasin, MagasinStore
from gestmag.reports import revenue_by_region, revenue_by_store, store_type_counts


@pytest.fixture
def conn():
    connection = connect(":memory:")
    yield connection
    connection.close()


def _add_shop(conn, ident, nom, kind, place):
    MagasinStore(conn).add(
        Magasin(
            id_magasin=ident,
            nom=nom,
            type_magasin=kind,
            emplacement=place,
            surface=100.0,
            telephone="12345678",
            ouverture=time(8, 0),
            fermeture=time(18, 0),
            date_creation=date(2020, 1, 1),
        )
    )


def _add_product(conn, name, shop, qty, price):
    with conn:
        conn.execute(
            "INSERT INTO PRODUITS (nom_p, ID_MAGASIN, QUANTITE_VENDUE, PRIX_VENTE_UNITAIRE) "
            "VALUES (?, ?, ?, ?)",
            (name, shop, qty, price),
        )


def test_empty_database_gives_empty_reports(conn):
    assert revenue_by_store(conn) == []
    assert revenue_by_region(conn) == []
    assert store_type_counts(conn) == []


def test_shop_without_products_has_zero_revenue(conn):
    _add_shop(conn, 1, "Alpha", "Epicerie", "Tunis")
    assert revenue_by_store(conn) == [(1, "Alpha", 0.0)]
    assert revenue_by_region(conn) == [("Tunis", 0.0)]


def test_single_product_revenue(conn):
    _add_shop(conn, 1, "Alpha", "Epicerie", "Tunis")
    _add_product(conn, "Pain", 1, 1, 7.5)
    assert revenue_by_store(conn) == [(1, "Alpha", 7.5)]


def test_revenue_by_store_ordered_by_id(conn):
    _add_shop(conn, 3, "Gamma", "Mode", "Sousse")
    _add_shop(conn, 1, "Alpha", "Epicerie", "Tunis")
    _add_shop(conn, 2, "Beta", "Mode", "Tunis")
    assert [row[0] for row in revenue_by_store(conn)] == [1, 2, 3]


def test_region_totals_equal_store_totals(conn):
    _add_shop(conn, 1, "Alpha", "Epicerie", "Tunis")
    _add_shop(conn, 2, "Beta", "Mode", "Tunis")
    _add_shop(conn, 3, "Gamma", "Mode", "Sousse")
    _add_product(conn, "Pain", 1, 4, 0.5)
    _add_product(conn, "Robe", 2, 2, 30.0)
    _add_product(conn, "Veste", 3, 1, 80.0)
    by_store = {ident: total for ident, _, total in revenue_by_store(conn)}
    by_region = dict(revenue_by_region(conn))
    assert by_region["Tunis"] == pytest.approx(by_store[1] + by_store[2])
    assert by_region["Sousse"] == pytest.approx(by_store[3])
    assert [region for region, _ in revenue_by_region(conn)] == ["Sousse", "Tunis"]


def test_products_of_other_shops_do_not_count(conn):
    _add_shop(conn, 1, "Alpha", "Epicerie", "Tunis")
    _add_shop(conn, 2, "Beta", "Mode", "Sousse")
    _add_product(conn, "Robe", 2, 1, 30.0)
    assert revenue_by_store(conn)[0] == (1, "Alpha", 0.0)


def test_store_type_counts(conn):
    _add_shop(conn, 1, "Alpha", "Epicerie", "Tunis")
    _add_shop(conn, 2, "Beta", "Mode", "Tunis")
    _add_shop(conn, 3, "Gamma", "Mode", "Sousse")
    counts = dict(store_type_counts(conn))
    assert counts == {"Epicerie": 1, "Mode": 2}
    assert sum(counts.values()) == len(MagasinStore(conn).all())