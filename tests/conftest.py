"""Shared fixtures: a throwaway DuckDB catalog per test."""

import json

import pytest

import db
from models.catalog import Card


SAMPLE_CARDS = [
    ("card-1", "Everyday Cash", "Chase", {"grocery": 3, "default": 1}, None),
    ("card-2", "Grocery Plus", "Amex", {"grocery": 5, "default": 1}, "Up to $6k/yr"),
    ("card-3", "Road Warrior", "Citi", {"gas": 4, "travel": 3}, None),
]

SAMPLE_STORES = [
    ("Whole Foods", "grocery"),
    ("Starbucks", "dining"),
    ("Shell", "gas"),
]


def insert_card(conn, card_id, name, issuer, rates, notes=None):
    conn.execute(
        "INSERT INTO cards (id, card_name, issuer, category_rates, notes) VALUES (?, ?, ?, ?, ?)",
        (card_id, name, issuer, rates if isinstance(rates, str) or rates is None else json.dumps(rates), notes),
    )


def insert_store(conn, name, category):
    conn.execute(
        "INSERT INTO stores (store_name, category) VALUES (?, ?)",
        (name, category),
    )


@pytest.fixture
def db_path(tmp_path, monkeypatch):
    path = tmp_path / "rewards.duckdb"
    monkeypatch.setattr(db, "DB_FILE", str(path))
    db.init_db()
    return path


@pytest.fixture
def seeded_db(db_path):
    conn = db.get_db()
    try:
        for card in SAMPLE_CARDS:
            insert_card(conn, *card)
        for name, category in SAMPLE_STORES:
            insert_store(conn, name, category)
    finally:
        conn.close()
    return db_path


@pytest.fixture
def two_cards():
    return [
        Card(id="1", card_name="Card A", category_rates={"grocery": 3, "default": 1}),
        Card(id="2", card_name="Card B", category_rates={"grocery": 5, "default": 1}),
    ]
