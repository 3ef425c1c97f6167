from dataclasses import dataclass
from typing import Dict, List, Optional


@dataclass
class RankedCardDTO:
    """Single card row in a search response."""
    id: str
    card_name: str
    issuer: Optional[str]
    category_rates: Dict[str, float]
    notes: Optional[str]
    rate: float
    category: str


@dataclass
class SearchResponseDTO:
    """Complete search response."""
    query: str
    status: str  # empty | found | not_found
    category: Optional[str]
    suggestion: Optional[str]
    best_card: Optional[RankedCardDTO]
    results: List[RankedCardDTO]

    @classmethod
    def from_outcome(cls, outcome):
        """Convert SearchOutcome to JSON-serializable DTO."""
        results = [
            RankedCardDTO(
                id=entry.id,
                card_name=entry.card_name,
                issuer=entry.issuer,
                category_rates=dict(entry.category_rates),
                notes=entry.notes,
                rate=entry.rate,
                category=entry.category
            )
            for entry in outcome.results
        ]
        return cls(
            query=outcome.query,
            status=outcome.status,
            category=outcome.category,
            suggestion=outcome.suggestion,
            best_card=results[0] if results else None,
            results=results
        )
