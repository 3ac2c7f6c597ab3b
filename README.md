# gestmag

Management tools for a chain of shops (*magasins*), kept in a SQLite
database. Messages shown to users are in French.

- `gestmag.database` — `connect(path)` opens the database file and creates
  the tables (`MAGASINS`, `COMMANDES`, `PRODUITS`, `CABINES`) if they are
  missing; `create_schema(connection)` does the table creation alone.
  Failures raise `DatabaseConnectionError`.
- `gestmag.magasins` — the `Magasin` dataclass and `MagasinStore`: add,
  update, delete, list, sort and search shops, and list the orders of a
  given day.
- `gestmag.commandes` — the `Commande` dataclass and `CommandeStore`: add,
  update, delete orders and list those of a given date.
- `gestmag.reports` — revenue per shop, revenue per region (shop location)
  and the number of shops of each type.
- `gestmag.recommend` — ranks candidate products against a shop from
  embedding vectors.
- `gestmag.cabines` — parses line-delimited JSON fitting-room readings,
  records them and lists their history.
- `gestmag.produits` — product input checks, label statistics, low-stock
  lookup, sorting and a plain-text action history.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
gestmag [-d DATABASE] [magasins | ca-magasin | ca-region | types]
```

The command opens the database (`gestmag.db` by default, created if
needed) and prints `Connexion réussie à la base !`. If the database cannot
be opened it prints `Échec de connexion !` and the error on standard error
and exits with status 1.

An optional command then prints a tab-separated table:

- `magasins` — every shop with all its fields;
- `ca-magasin` — revenue per shop (id, name, total);
- `ca-region` — revenue per location;
- `types` — number of shops of each type.

## Shops

```python
import datetime as dt

from gestmag.database import connect
from gestmag.magasins import Magasin, MagasinStore

connection = connect("shops.db")
stores = MagasinStore(connection)
stores.add(
    Magasin(
        id_magasin=1,
        nom="Centre",
        type_magasin="Alimentation",
        emplacement="Tunis",
        surface=250.0,
        telephone="12345678",
        ouverture=dt.time(8, 0),
        fermeture=dt.time(20, 0),
        date_creation=dt.date(2020, 1, 1),
    )
)
for shop in stores.sort("SURFACE"):
    print(shop.nom, shop.surface)
```

`Magasin.validate(today=None)` raises `ValidationError` unless the id and
surface are positive, the name, type and location are not blank, opening
time is before closing time, the creation date is not after `today`, and
the phone number is exactly 8 digits. `MagasinStore.add` validates before
inserting; `update(id_magasin, magasin)` validates the fields and requires
the shop to exist.

- `all()` returns every shop as `Magasin` objects.
- `sort(criterion)` accepts any column name (`ID_MAGASIN`, `NOM_MAGASIN`,
  `TYPE_DE_MAGASIN`, `EMPLACEMENT`, `SURFACE`, `TELEPHONE`,
  `HEURES_OUVERTURE`, `HEURES_FERMETURE`, `DATE_CREATION`), in any case.
- `search(criterion, value)` takes `nom`, `type`, `emplacement`,
  `telephone` or `id` and matches shops whose field contains `value`.
  It raises `NotFoundError` when nothing matches.
- `delete(id_magasin)` and `update(...)` raise `NotFoundError` for an
  unknown id.
- `orders_on(day)` returns `(id, client, product, state, date)` tuples.

## Orders

`CommandeStore(connection)` stores `Commande(id_commande, nom_client,
produit, etat, date_commande)` records. `add` and `update` raise
`ValidationError` when the client name or product is empty; `delete` of
an unknown id does nothing; `on_date(day)` returns the orders of that day.

## Reports

```python
from gestmag.reports import revenue_by_region, revenue_by_store, store_type_counts

revenue_by_store(connection)   # [(id, name, revenue), ...] by id
revenue_by_region(connection)  # [(location, revenue), ...] by location
store_type_counts(connection)  # [(type, count), ...]
```

Revenue is the sum of `QUANTITE_VENDUE * PRIX_VENTE_UNITAIRE` over the
products linked to each shop, 0 for shops without products.

## Recommendations

- `describe_store(store_type, location, surface)` builds a one-line
  description; `build_inputs(...)` returns it followed by the product
  names as a compact JSON array.
- `candidate_products(connection)` returns up to five distinct ordered
  products, or a fixed default list if the query fails.
- `recommend(response, products, limit=3)` parses a JSON array of
  embeddings — the shop's first, then one per product — and returns the
  best `Recommendation(name, score)` items, score `1 / (1 + distance)`;
  `score_text` shows the score with two decimals. `score_products` does
  the scoring on an already parsed list. Bad or empty data raises
  `RecommendationError`.

## Fitting rooms

`parse_line(line)` turns one JSON object with `cabine1`, `cabine2` and
`attente` keys into a `CabinState`; `CabinReader().feed(data)` splits
incoming bytes into lines, keeps an incomplete tail in `pending`, and
skips lines that are not JSON objects. `record_state(connection, state)`
stores a state with the current time and `cabin_history(connection)`
lists `(timestamp, state)` pairs, newest first. `CabinState.labels` gives
the three status texts.

## Products

- `validate_product(expiry, price, stock, today=None)` requires an expiry
  after today, a positive price and a non-negative stock.
- `product_statistics(connection)` counts products and those flagged
  gluten, sugar, lactose, eco and bio (`NotFoundError` on an empty table);
  `format_statistics(stats)` renders the percentages.
- `low_stock(connection, threshold)` lists `(name, stock)` below a
  positive threshold.
- `sorted_products(connection, criterion, order)` sorts by
  `Alphabétique`, `Prix` or `Stock`, `Ascendant` or `Descendant`.
- `HistoryLog(path)` appends timestamped lines with `record(action,
  product_name="")`, and has `read()` and `clear()`.

## What it does not do

There is no graphical interface, no PDF export and no charts. The package
does not open a serial port: fitting-room data must be fed to
`CabinReader` by the caller. It does not compute embeddings either; the
recommendation functions only score vectors they are given. Product
insertion and update are not provided — `gestmag.produits` checks input
and reads the `PRODUITS` table.