from services.store_resolver import match_store_key


def suggest(query, category_index: dict, store_names) -> str | None:
    """Return the display name of the store the query would match, or None.

    Uses the same tiers as the resolver, so after a failed resolution of
    the same query this yields None.
    """
    key = match_store_key(query, category_index, store_names)
    if key is None:
        return None

    for name in store_names:
        if name.lower() == key:
            return name
    return None
