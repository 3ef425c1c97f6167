"""
Reward Ranker — per-category cash-back ordering.

Pure functions; the input card list is never modified.
"""
from models.catalog import DEFAULT_RATE_KEY, RankedCard


def rate_for_category(card, category: str) -> float:
    """
    Two-level lookup: category rate, then the card's default, then 0.

    Key presence decides the fallback, so an explicit 0 for the category
    is kept rather than replaced by the default.
    """
    rates = card.category_rates or {}
    if category in rates:
        return rates[category]
    if DEFAULT_RATE_KEY in rates:
        return rates[DEFAULT_RATE_KEY]
    return 0


def rank(cards, category: str) -> list:
    """
    Rank every card by the rate it earns in ``category``.

    All cards are returned, highest rate first. Cards with equal rates
    keep their input order.
    """
    entries = [
        RankedCard.from_card(card, rate_for_category(card, category), category)
        for card in cards
    ]
    # sorted() is stable, also with reverse=True
    return sorted(entries, key=lambda entry: entry.rate, reverse=True)
