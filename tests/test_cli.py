import sqlite3

import pytest

from gestmag.cli import main
from gestmag.database import connect


def _seed(path):
    conn = connect(path)
    with conn:
        conn.execute(
            "INSERT INTO MAGASINS VALUES (1, 'Central', 'Epicerie', 'Tunis', 120.0, "
            "'08:00', '20:00', '2020-01-01', '00000000')"
        )
        conn.execute(
            "INSERT INTO MAGASINS VALUES (2, 'Annexe', 'Epicerie', 'Sfax', 80.0, "
            "'09:00', '18:00', '2021-05-01', '00000001')"
        )
        conn.execute(
            "INSERT INTO PRODUITS (nom_p, ID_MAGASIN, QUANTITE_VENDUE, PRIX_VENTE_UNITAIRE) "
            "VALUES ('Lait', 1, 1, 4.0)"
        )
    conn.close()


def test_connect_success_creates_schema(tmp_path, capsys):
    db = tmp_path / "shop.db"
    assert main(["-d", str(db)]) == 0
    out = capsys.readouterr().out
    assert "Connexion réussie à la base !" in out
    conn = sqlite3.connect(db)
    tables = {name for (name,) in conn.execute("SELECT name FROM sqlite_master")}
    conn.close()
    assert {"MAGASINS", "COMMANDES", "PRODUITS", "CABINES"} <= tables


def test_connect_failure_returns_one(tmp_path, capsys):
    assert main(["-d", str(tmp_path)]) == 1
    captured = capsys.readouterr()
    assert "Échec de connexion !" in captured.err
    assert "Connexion réussie" not in captured.out


def test_list_shops(tmp_path, capsys):
    db = tmp_path / "shop.db"
    _seed(db)
    assert main(["-d", str(db), "magasins"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[1].split("\t")[0] == "ID Magasin"
    rows = [line.split("\t") for line in lines[2:]]
    assert [row[1] for row in rows] == ["Central", "Annexe"]
    assert rows[0][5:7] == ["08:00", "20:00"]


def test_revenue_by_store(tmp_path, capsys):
    db = tmp_path / "shop.db"
    _seed(db)
    assert main(["-d", str(db), "ca-magasin"]) == 0
    rows = [line.split("\t") for line in capsys.readouterr().out.splitlines()[2:]]
    assert rows == [["1", "Central", "4.00"], ["2", "Annexe", "0.00"]]


def test_revenue_by_region_sorted(tmp_path, capsys):
    db = tmp_path / "shop.db"
    _seed(db)
    assert main(["-d", str(db), "ca-region"]) == 0
    rows = [line.split("\t") for line in capsys.readouterr().out.splitlines()[2:]]
    regions = [row[0] for row in rows]
    assert regions == sorted(regions)
    assert set(regions) == {"Tunis", "Sfax"}


def test_store_types(tmp_path, capsys):
    db = tmp_path / "shop.db"
    _seed(db)
    assert main(["-d", str(db), "types"]) == 0
    rows = [line.split("\t") for line in capsys.readouterr().out.splitlines()[2:]]
    assert rows == [["Epicerie", "2"]]


def test_unknown_command_rejected(tmp_path):
    with pytest.raises(SystemExit) as info:
        main(["-d", str(tmp_path / "shop.db"), "inconnu"])
    assert info.value.code == 2