from db import get_db

# -----------------------------
# Stores Repository
# -----------------------------

def get_all_stores(conn=None):
    """Return all store rows in insertion order.

    Insertion order is what decides last-write-wins for colliding names
    and which store a prefix/substring search finds first.
    """
    own_conn = False
    if conn is None:
        conn = get_db()
        own_conn = True

    try:
        rows = conn.execute("""
            SELECT id, store_name, category
            FROM stores
            ORDER BY id
        """).fetchall()
        return [{"id": r[0], "store_name": r[1], "category": r[2]} for r in rows]
    finally:
        if own_conn:
            conn.close()
