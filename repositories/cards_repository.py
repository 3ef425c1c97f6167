from db import get_db


def get_all_cards(conn=None):
    """
    Return all card rows sorted by id.

    Args:
        conn: Optional database connection. If not provided, opens a new one.

    Returns:
        List of card dicts with 'id', 'card_name', 'issuer',
        'category_rates' (raw JSON string) and 'notes' keys.

    Repository-level function: no rate parsing or ranking logic.
    """
    own_conn = False
    if conn is None:
        conn = get_db()
        own_conn = True

    try:
        rows = conn.execute("""
            SELECT id, card_name, issuer, category_rates, notes
            FROM cards
            ORDER BY id
        """).fetchall()

        return [
            {
                "id": r[0],
                "card_name": r[1],
                "issuer": r[2],
                "category_rates": r[3],
                "notes": r[4]
            }
            for r in rows
        ]
    finally:
        if own_conn:
            conn.close()
