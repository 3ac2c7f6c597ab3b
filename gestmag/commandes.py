"""Customer orders: validation and storage."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass, field
from datetime import date

from gestmag.magasins import ValidationError

_SELECT = (
    "SELECT id_commande, nom_client, produit, etat, date_commande FROM commandes"
)


@dataclass
class Commande:
    """A customer order."""

    id_commande: int = 0
    nom_client: str = ""
    produit: str = ""
    etat: str = ""
    date_commande: date = field(default_factory=date.today)

    def validate(self) -> None:
        """Raise ValidationError if a required field is empty."""
        if not self.nom_client or not self.produit:
            raise ValidationError("Veuillez remplir tous les champs de la commande.")

    def _params(self) -> dict:
        return {
            "id": self.id_commande,
            "nom": self.nom_client,
            "produit": self.produit,
            "etat": self.etat,
            "date": self.date_commande.isoformat(),
        }


def _from_row(row: tuple) -> Commande:
    ident, client, produit, etat, when = row
    return Commande(
        id_commande=int(ident),
        nom_client=client,
        produit=produit,
        etat=etat if etat is not None else "",
        date_commande=date.fromisoformat(when),
    )


class CommandeStore:
    """Orders kept in the COMMANDES table."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._conn = connection

    def add(self, commande: Commande) -> None:
        """Validate and insert a new order."""
        commande.validate()
        with self._conn:
            self._conn.execute(
                "INSERT INTO commandes (id_commande, nom_client, produit, etat, date_commande) "
                "VALUES (:id, :nom, :produit, :etat, :date)",
                commande._params(),
            )

    def update(self, commande: Commande) -> None:
        """Replace the stored fields of the order with the same identifier."""
        commande.validate()
        with self._conn:
            self._conn.execute(
                "UPDATE commandes SET nom_client = :nom, produit = :produit, etat = :etat, "
                "date_commande = :date WHERE id_commande = :id",
                commande._params(),
            )

    def delete(self, id_commande: int) -> None:
        """Remove the order with this identifier, if any."""
        with self._conn:
            self._conn.execute(
                "DELETE FROM commandes WHERE id_commande = :id", {"id": id_commande}
            )

    def on_date(self, day: date) -> list[Commande]:
        """Orders placed on *day*."""
        rows = self._conn.execute(
            f"{_SELECT} WHERE date_commande = :date", {"date": day.isoformat()}
        )
        return [_from_row(row) for row in rows]