from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Tuple

DEFAULT_RATE_KEY = "default"


@dataclass(frozen=True)
class Card:
    id: str
    card_name: str
    issuer: Optional[str] = None
    category_rates: Mapping[str, float] = field(default_factory=dict)
    notes: Optional[str] = None


@dataclass(frozen=True)
class StoreRecord:
    store_name: str
    category: Optional[str]


@dataclass(frozen=True)
class RankedCard:
    """A card together with the rate it earns for one category."""
    id: str
    card_name: str
    issuer: Optional[str]
    category_rates: Dict[str, float]
    notes: Optional[str]
    rate: float
    category: str

    @classmethod
    def from_card(cls, card: Card, rate: float, category: str):
        return cls(
            id=card.id,
            card_name=card.card_name,
            issuer=card.issuer,
            category_rates=dict(card.category_rates or {}),
            notes=card.notes,
            rate=rate,
            category=category,
        )


@dataclass(frozen=True)
class CatalogSnapshot:
    """Read-only session state produced once by the catalog loader.

    ``category_index`` maps lower-cased, trimmed store names to categories.
    ``store_names`` keeps the original casing in load order and is only
    used for prefix/substring search.
    """
    cards: Tuple[Card, ...]
    category_index: Mapping[str, str]
    store_names: Tuple[str, ...]

    @property
    def card_count(self) -> int:
        return len(self.cards)

    @property
    def store_count(self) -> int:
        return len(self.category_index)
