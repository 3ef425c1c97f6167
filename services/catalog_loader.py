"""
Catalog Loader — one-time bulk load of cards and stores into a snapshot.

Runs once at startup. Everything it returns is read-only for the rest of
the session; there is no refresh.
"""
import json
import math
from types import MappingProxyType

from db import get_db, log_info, log_warning, log_error
from repositories.cards_repository import get_all_cards
from repositories.stores_repository import get_all_stores
from models.catalog import Card, StoreRecord, CatalogSnapshot


class CatalogLoadError(Exception):
    """Raised when the catalog cannot be fetched from the database."""


def parse_category_rates(raw, card_id=None) -> dict:
    """
    Turn the stored JSON rate mapping into ``{category: float}``.

    Missing or malformed mappings become ``{}``; individual entries that
    are not finite, non-negative numbers are dropped.
    """
    if raw is None or raw == "":
        return {}

    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except ValueError:
            log_warning(f"Card {card_id}: category_rates is not valid JSON, ignoring")
            return {}

    if not isinstance(raw, dict):
        log_warning(f"Card {card_id}: category_rates is not an object, ignoring")
        return {}

    rates = {}
    for category, value in raw.items():
        if (isinstance(value, bool) or not isinstance(value, (int, float))
                or not math.isfinite(value) or value < 0):
            log_warning(f"Card {card_id}: dropping invalid rate {value!r} for '{category}'")
            continue
        rates[str(category)] = float(value)
    return rates


def build_snapshot(cards, stores) -> CatalogSnapshot:
    """
    Build the category index and store name list from loaded records.

    Pure function. ``stores`` is consumed in the given order: a later name
    that collides case-insensitively with an earlier one overwrites its
    category, and the name list keeps that same order. Records with a
    blank name or category are skipped.
    """
    category_index = {}
    store_names = []

    for store in stores:
        name = (store.store_name or "").strip()
        category = (store.category or "").strip()
        if not name or not category:
            continue
        category_index[name.lower()] = category
        store_names.append(name)

    return CatalogSnapshot(
        cards=tuple(cards),
        category_index=MappingProxyType(category_index),
        store_names=tuple(store_names),
    )


def load_catalog(conn=None) -> CatalogSnapshot:
    """
    Fetch every card and store record and return the session snapshot.

    Raises:
        CatalogLoadError: the database could not be read. No partial
        catalog is returned.
    """
    own_conn = False
    try:
        if conn is None:
            conn = get_db()
            own_conn = True
        card_rows = get_all_cards(conn)
        store_rows = get_all_stores(conn)
    except Exception as e:
        log_error(f"Catalog load failed: {e}")
        raise CatalogLoadError(f"Unable to load catalog: {e}") from e
    finally:
        if own_conn and conn is not None:
            conn.close()

    cards = [
        Card(
            id=str(row["id"]),
            card_name=row["card_name"],
            issuer=row["issuer"],
            category_rates=MappingProxyType(parse_category_rates(row["category_rates"], row["id"])),
            notes=row["notes"],
        )
        for row in card_rows
    ]
    stores = [
        StoreRecord(store_name=row["store_name"], category=row["category"])
        for row in store_rows
    ]

    snapshot = build_snapshot(cards, stores)
    skipped = len(stores) - len(snapshot.store_names)
    if skipped:
        log_warning(f"Skipped {skipped} store record(s) with an empty name or category")

    log_info(f"Catalog loaded: {snapshot.card_count} cards, {snapshot.store_count} stores")
    return snapshot
