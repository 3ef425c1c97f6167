"""
Store Resolver — Tiered Store Name Matching

Pure functions mapping free-text store queries to a category.
No database access; no side effects.
"""


def normalize_query(query) -> str:
    return (query or "").strip().lower()


def match_store_key(query, category_index: dict, store_names) -> str | None:
    """
    Find the normalized store key a query refers to.

    Tiers, first hit wins:
        1. exact key in ``category_index``
        2. first name in ``store_names`` starting with the query
        3. first name in ``store_names`` containing the query

    Returns:
        Lower-cased store name, or None if nothing matches or the query is blank.
    """
    normalized = normalize_query(query)
    if not normalized:
        return None

    if normalized in category_index:
        return normalized

    for name in store_names:
        if name.lower().startswith(normalized):
            return name.lower()

    for name in store_names:
        if normalized in name.lower():
            return name.lower()

    return None


def resolve(query, category_index: dict, store_names) -> str | None:
    """
    Resolve a store query to its spending category.

    Args:
        query: Raw user text; may be empty, mixed case, padded.
        category_index: Lower-cased store name -> category.
        store_names: Original-cased store names in load order.

    Returns:
        Category (str) or None when no tier matches. Never raises for a miss.
    """
    key = match_store_key(query, category_index, store_names)
    if key is None:
        return None
    return category_index.get(key)
