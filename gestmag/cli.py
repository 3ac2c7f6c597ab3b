"""Command-line entry point: open the shop database and show its contents."""

from __future__ import annotations

import argparse
import sqlite3
import sys
from typing import Callable, Iterable, Sequence

from gestmag.database import DatabaseConnectionError, connect
from gestmag.magasins import MagasinStore
from gestmag.reports import revenue_by_region, revenue_by_store, store_type_counts

DEFAULT_DATABASE = "gestmag.db"

_SHOP_HEADERS = (
    "ID Magasin",
    "Nom Magasin",
    "Type de Magasin",
    "Emplacement",
    "Surface",
    "Heures Ouverture",
    "Heures Fermeture",
    "Date Création",
    "Téléphone",
)


def _print_table(headers: Sequence[str], rows: Iterable[Sequence[object]]) -> None:
    print("\t".join(headers))
    for row in rows:
        print("\t".join(str(cell) for cell in row))


def _show_shops(connection: sqlite3.Connection) -> None:
    shops = MagasinStore(connection).all()
    _print_table(
        _SHOP_HEADERS,
        (
            (
                shop.id_magasin,
                shop.nom,
                shop.type_magasin,
                shop.emplacement,
                f"{shop.surface:g}",
                shop.ouverture.strftime("%H:%M"),
                shop.fermeture.strftime("%H:%M"),
                shop.date_creation.isoformat(),
                shop.telephone,
            )
            for shop in shops
        ),
    )


def _show_revenue_by_store(connection: sqlite3.Connection) -> None:
    _print_table(
        ("ID Magasin", "Nom Magasin", "Chiffre d'Affaires Total"),
        (
            (ident, name, f"{total:.2f}")
            for ident, name, total in revenue_by_store(connection)
        ),
    )


def _show_revenue_by_region(connection: sqlite3.Connection) -> None:
    _print_table(
        ("Région", "Chiffre d'Affaires Total"),
        ((region, f"{total:.2f}") for region, total in revenue_by_region(connection)),
    )


def _show_store_types(connection: sqlite3.Connection) -> None:
    _print_table(("Type de Magasin", "Nombre"), store_type_counts(connection))


_COMMANDS: dict[str, Callable[[sqlite3.Connection], None]] = {
    "magasins": _show_shops,
    "ca-magasin": _show_revenue_by_store,
    "ca-region": _show_revenue_by_region,
    "types": _show_store_types,
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gestmag", description="Gestion des magasins, commandes et produits."
    )
    parser.add_argument(
        "-d",
        "--database",
        default=DEFAULT_DATABASE,
        help=f"fichier de la base de données (défaut : {DEFAULT_DATABASE})",
    )
    parser.add_argument(
        "command",
        nargs="?",
        choices=sorted(_COMMANDS),
        help="données à afficher après la connexion",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Connect to the database, report the outcome and run the chosen command."""
    args = _build_parser().parse_args(argv)
    try:
        connection = connect(args.database)
    except DatabaseConnectionError as exc:
        print("Échec de connexion !", file=sys.stderr)
        print(exc, file=sys.stderr)
        return 1
    try:
        print("Connexion réussie à la base !")
        if args.command:
            _COMMANDS[args.command](connection)
    finally:
        connection.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())