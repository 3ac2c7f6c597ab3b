"""Opening the shop database and creating its tables."""

from __future__ import annotations

import os
import sqlite3

_SCHEMA = """
CREATE TABLE IF NOT EXISTS MAGASINS (
    ID_MAGASIN INTEGER PRIMARY KEY,
    NOM_MAGASIN TEXT NOT NULL,
    TYPE_DE_MAGASIN TEXT NOT NULL,
    EMPLACEMENT TEXT NOT NULL,
    SURFACE REAL NOT NULL,
    HEURES_OUVERTURE TEXT NOT NULL,
    HEURES_FERMETURE TEXT NOT NULL,
    DATE_CREATION TEXT NOT NULL,
    TELEPHONE TEXT NOT NULL
);
CREATE TABLE IF NOT EXISTS COMMANDES (
    id_commande INTEGER PRIMARY KEY,
    nom_client TEXT NOT NULL,
    produit TEXT NOT NULL,
    etat TEXT,
    date_commande TEXT NOT NULL
);
CREATE TABLE IF NOT EXISTS PRODUITS (
    nom_p TEXT PRIMARY KEY,
    date_exp TEXT,
    prix REAL,
    stock INTEGER,
    lactose INTEGER DEFAULT 0,
    bio INTEGER DEFAULT 0,
    sugar INTEGER DEFAULT 0,
    gluten INTEGER DEFAULT 0,
    eco INTEGER DEFAULT 0,
    ID_MAGASIN INTEGER REFERENCES MAGASINS (ID_MAGASIN),
    QUANTITE_VENDUE INTEGER DEFAULT 0,
    PRIX_VENTE_UNITAIRE REAL DEFAULT 0
);
CREATE TABLE IF NOT EXISTS CABINES (
    date_ TEXT NOT NULL,
    cabine1_etat TEXT,
    cabine2_etat TEXT,
    attente_etat TEXT
);
"""


class DatabaseConnectionError(Exception):
    """The database could not be opened or prepared."""


def create_schema(connection: sqlite3.Connection) -> None:
    """Create every table the application uses, if missing."""
    connection.executescript(_SCHEMA)
    connection.commit()


def connect(path: str | os.PathLike[str]) -> sqlite3.Connection:
    """Open the database at *path* and make sure its tables exist."""
    try:
        connection = sqlite3.connect(path)
        create_schema(connection)
    except sqlite3.Error as exc:
        raise DatabaseConnectionError(f"Erreur de connexion : {exc}") from exc
    return connection