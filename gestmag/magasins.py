"""Shops: validation and storage of shop records."""

from __future__ import annotations

import re
import sqlite3
from dataclasses import dataclass, field
from datetime import date, time

_PHONE = re.compile(r"\d{8}")

_COLUMNS = (
    "ID_MAGASIN, NOM_MAGASIN, TYPE_DE_MAGASIN, EMPLACEMENT, SURFACE, "
    "HEURES_OUVERTURE, HEURES_FERMETURE, DATE_CREATION, TELEPHONE"
)

_SORTABLE = (
    "ID_MAGASIN",
    "NOM_MAGASIN",
    "TYPE_DE_MAGASIN",
    "EMPLACEMENT",
    "SURFACE",
    "TELEPHONE",
    "HEURES_OUVERTURE",
    "HEURES_FERMETURE",
    "DATE_CREATION",
)

_SEARCHABLE = {
    "nom": "NOM_MAGASIN",
    "type": "TYPE_DE_MAGASIN",
    "emplacement": "EMPLACEMENT",
    "telephone": "TELEPHONE",
    "id": "ID_MAGASIN",
}


class ValidationError(ValueError):
    """A shop record or request holds an invalid value."""


class NotFoundError(LookupError):
    """The requested shop does not exist or nothing matched."""


@dataclass
class Magasin:
    """A shop record."""

    id_magasin: int = 0
    nom: str = ""
    type_magasin: str = ""
    emplacement: str = ""
    surface: float = 0.0
    telephone: str = ""
    ouverture: time = time(0, 0)
    fermeture: time = time(0, 0)
    date_creation: date = field(default_factory=date.today)

    def validate(self, today: date | None = None) -> None:
        """Raise ValidationError if any field is invalid."""
        _check_id(self.id_magasin)
        self._validate_fields(today)

    def _validate_fields(self, today: date | None = None) -> None:
        today = today or date.today()
        if not self.nom.strip():
            raise ValidationError("Le nom du magasin est obligatoire.")
        if not self.type_magasin.strip():
            raise ValidationError("Le type de magasin est obligatoire.")
        if not self.emplacement.strip():
            raise ValidationError("L'emplacement est obligatoire.")
        if self.surface <= 0:
            raise ValidationError("La surface doit être un nombre positif.")
        if self.ouverture >= self.fermeture:
            raise ValidationError(
                "L'heure d'ouverture doit être valide et avant l'heure de fermeture."
            )
        if self.date_creation > today:
            raise ValidationError(
                "La date de création doit être valide et non dans le futur."
            )
        if not _PHONE.fullmatch(self.telephone):
            raise ValidationError(
                "Le numéro de téléphone doit contenir exactement 8 chiffres."
            )


def _check_id(id_magasin: int) -> None:
    if id_magasin <= 0:
        raise ValidationError("L'ID du magasin doit être un nombre positif.")


def _from_row(row: tuple) -> Magasin:
    id_magasin, nom, type_magasin, emplacement, surface, ouverture, fermeture, creation, tel = row
    return Magasin(
        id_magasin=int(id_magasin),
        nom=nom,
        type_magasin=type_magasin,
        emplacement=emplacement,
        surface=float(surface),
        telephone=str(tel),
        ouverture=time.fromisoformat(ouverture),
        fermeture=time.fromisoformat(fermeture),
        date_creation=date.fromisoformat(creation),
    )


def _params(magasin: Magasin) -> dict:
    return {
        "nom": magasin.nom,
        "type": magasin.type_magasin,
        "emplacement": magasin.emplacement,
        "surface": magasin.surface,
        "ouverture": magasin.ouverture.strftime("%H:%M"),
        "fermeture": magasin.fermeture.strftime("%H:%M"),
        "date_creation": magasin.date_creation.isoformat(),
        "telephone": magasin.telephone,
    }


class MagasinStore:
    """Shop records kept in the MAGASINS table."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._conn = connection

    def _exists(self, id_magasin: int) -> bool:
        (count,) = self._conn.execute(
            "SELECT COUNT(*) FROM MAGASINS WHERE ID_MAGASIN = :id", {"id": id_magasin}
        ).fetchone()
        return count > 0

    def _require(self, id_magasin: int) -> None:
        if not self._exists(id_magasin):
            raise NotFoundError("L'ID du magasin n'existe pas.")

    def add(self, magasin: Magasin) -> None:
        """Validate and insert a new shop."""
        magasin.validate()
        with self._conn:
            self._conn.execute(
                f"INSERT INTO MAGASINS ({_COLUMNS}) VALUES (:id, :nom, :type, :emplacement, "
                ":surface, :ouverture, :fermeture, :date_creation, :telephone)",
                {"id": magasin.id_magasin, **_params(magasin)},
            )

    def delete(self, id_magasin: int) -> None:
        """Remove the shop with this identifier."""
        _check_id(id_magasin)
        self._require(id_magasin)
        with self._conn:
            self._conn.execute(
                "DELETE FROM MAGASINS WHERE ID_MAGASIN = :id", {"id": id_magasin}
            )

    def all(self) -> list[Magasin]:
        """Every shop in storage order."""
        rows = self._conn.execute(f"SELECT {_COLUMNS} FROM MAGASINS")
        return [_from_row(row) for row in rows]

    def update(self, id_magasin: int, magasin: Magasin) -> None:
        """Replace the fields of shop *id_magasin* with those of *magasin*."""
        _check_id(id_magasin)
        magasin._validate_fields()
        self._require(id_magasin)
        with self._conn:
            self._conn.execute(
                "UPDATE MAGASINS SET NOM_MAGASIN = :nom, TYPE_DE_MAGASIN = :type, "
                "EMPLACEMENT = :emplacement, SURFACE = :surface, TELEPHONE = :telephone, "
                "HEURES_OUVERTURE = :ouverture, HEURES_FERMETURE = :fermeture, "
                "DATE_CREATION = :date_creation WHERE ID_MAGASIN = :id",
                {"id": id_magasin, **_params(magasin)},
            )

    def sort(self, criterion: str) -> list[Magasin]:
        """All shops ordered by the named column."""
        column = criterion.upper()
        if column not in _SORTABLE:
            raise ValidationError("Critère de tri invalide.")
        rows = self._conn.execute(f"SELECT {_COLUMNS} FROM MAGASINS ORDER BY {column}")
        return [_from_row(row) for row in rows]

    def search(self, criterion: str, value: str) -> list[Magasin]:
        """Shops whose field named by *criterion* contains *value*."""
        column = _SEARCHABLE.get(criterion.strip().lower())
        if column is None:
            raise ValidationError("Critère de recherche invalide.")
        if not value.strip():
            raise ValidationError("Veuillez entrer une valeur à rechercher.")
        rows = self._conn.execute(
            f"SELECT {_COLUMNS} FROM MAGASINS WHERE {column} LIKE :valeur",
            {"valeur": f"%{value}%"},
        ).fetchall()
        if not rows:
            raise NotFoundError("Aucun résultat trouvé pour la recherche.")
        return [_from_row(row) for row in rows]

    def orders_on(self, day: date) -> list[tuple[int, str, str, str, date]]:
        """Orders placed on *day*, as (id, client, product, state, date)."""
        rows = self._conn.execute(
            "SELECT id_commande, nom_client, produit, etat, date_commande "
            "FROM commandes WHERE date_commande = :date",
            {"date": day.isoformat()},
        )
        return [
            (int(ident), client, produit, etat, date.fromisoformat(when))
            for ident, client, produit, etat, when in rows
        ]