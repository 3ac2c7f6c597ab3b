"""Fitting-room occupancy readings sent line by line as JSON."""

from __future__ import annotations

import json
import sqlite3
from dataclasses import dataclass
from datetime import datetime
from typing import Any

_KEYS = ("cabine1", "cabine2", "attente")


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


@dataclass(frozen=True)
class CabinState:
    """States of the two fitting rooms and of the waiting area."""

    cabine1: str = ""
    cabine2: str = ""
    attente: str = ""

    @property
    def labels(self) -> tuple[str, str, str]:
        """The three status texts shown to the user."""
        return (
            f"Cabine 1 : {self.cabine1}",
            f"Cabine 2 : {self.cabine2}",
            f"Zone d'attente : {self.attente}",
        )


def parse_line(line: str | bytes) -> CabinState:
    """Parse one JSON object line; raise ValueError if it is not an object.

    Missing or non-string fields become empty strings.
    """
    try:
        document = json.loads(line)
    except ValueError as exc:
        raise ValueError(f"Données JSON invalides : {line!r}") from exc
    if not isinstance(document, dict):
        raise ValueError(f"Données JSON invalides : {line!r}")
    cabine1, cabine2, attente = (_text(document.get(key)) for key in _KEYS)
    return CabinState(cabine1, cabine2, attente)


class CabinReader:
    """Splits a byte stream into lines and parses each into a CabinState."""

    def __init__(self) -> None:
        self._buffer = b""

    @property
    def pending(self) -> bytes:
        """Bytes received that do not yet form a complete line."""
        return self._buffer

    def feed(self, data: bytes | str) -> list[CabinState]:
        """Add received data and return the states of every complete valid line.

        Lines that are not JSON objects are skipped.
        """
        if isinstance(data, str):
            data = data.encode("utf-8")
        self._buffer += data
        *lines, self._buffer = self._buffer.split(b"\n")
        states = []
        for line in lines:
            try:
                states.append(parse_line(line))
            except ValueError:
                continue
        return states


def record_state(connection: sqlite3.Connection, state: CabinState) -> None:
    """Store *state* in the CABINES table, stamped with the current time."""
    stamp = datetime.now().isoformat(sep=" ", timespec="microseconds")
    with connection:
        connection.execute(
            "INSERT INTO CABINES (date_, cabine1_etat, cabine2_etat, attente_etat) "
            "VALUES (:date, :cabine1, :cabine2, :attente)",
            {
                "date": stamp,
                "cabine1": state.cabine1,
                "cabine2": state.cabine2,
                "attente": state.attente,
            },
        )


def cabin_history(connection: sqlite3.Connection) -> list[tuple[datetime, CabinState]]:
    """Every recorded state, newest first."""
    rows = connection.execute(
        "SELECT date_, cabine1_etat, cabine2_etat, attente_etat "
        "FROM CABINES ORDER BY date_ DESC"
    )
    return [
        (datetime.fromisoformat(when), CabinState(_text(c1), _text(c2), _text(wait)))
        for when, c1, c2, wait in rows
    ]