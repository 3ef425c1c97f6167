from dataclasses import dataclass, field
from typing import List, Optional

from models.catalog import CatalogSnapshot, RankedCard
from services.store_resolver import resolve
from services.reward_ranker import rank
from services.suggestion_engine import suggest

STATUS_EMPTY = "empty"
STATUS_FOUND = "found"
STATUS_NOT_FOUND = "not_found"


@dataclass
class SearchOutcome:
    query: str
    status: str
    category: Optional[str] = None
    results: List[RankedCard] = field(default_factory=list)
    suggestion: Optional[str] = None


def search_store(query, snapshot: CatalogSnapshot) -> SearchOutcome:
    """Resolve a store query against the snapshot and rank the cards.

    Blank queries are a no-op. A miss is a normal outcome carrying an
    optional suggested store name.
    """
    query = query or ""
    if not query.strip():
        return SearchOutcome(query=query, status=STATUS_EMPTY)

    category = resolve(query, snapshot.category_index, snapshot.store_names)
    if category is None:
        return SearchOutcome(
            query=query,
            status=STATUS_NOT_FOUND,
            suggestion=suggest(query, snapshot.category_index, snapshot.store_names),
        )

    return SearchOutcome(
        query=query,
        status=STATUS_FOUND,
        category=category,
        results=rank(snapshot.cards, category),
    )
