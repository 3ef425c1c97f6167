import os
import duckdb
import logging

DB_FILE = os.getenv("REWARDS_DB_PATH", "rewards.duckdb")
LOG_FILE = os.getenv("REWARDS_LOG_FILE", "rewards.log")

# -----------------------------
# Logging
# -----------------------------
logging.basicConfig(
    filename=LOG_FILE,
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s"
)

def log_info(msg):
    logging.info(msg)
    print(msg)

def log_warning(msg):
    logging.warning(msg)
    print(msg)

def log_error(msg):
    logging.error(msg)
    print(msg)

# -----------------------------
# Get a DB connection
# -----------------------------
def get_db():
    """
    Returns a new DuckDB connection to the catalog database.
    """
    return duckdb.connect(DB_FILE)

# -----------------------------
# Initialize database schema
# -----------------------------
def init_db():
    conn = get_db()
    try:
        # Cards table; category_rates holds a JSON object of category -> percent
        conn.execute("""
        CREATE TABLE IF NOT EXISTS cards (
            id VARCHAR PRIMARY KEY,
            card_name VARCHAR NOT NULL,
            issuer VARCHAR,
            category_rates VARCHAR,
            notes VARCHAR,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );
        """)
        log_info("Cards table ensured.")

        conn.execute("CREATE SEQUENCE IF NOT EXISTS stores_id_seq START 1;")
        conn.execute("""
        CREATE TABLE IF NOT EXISTS stores (
            id INTEGER PRIMARY KEY DEFAULT nextval('stores_id_seq'),
            store_name VARCHAR,
            category VARCHAR,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );
        """)
        log_info("Stores table ensured.")

    except Exception as e:
        log_error(f"Error initializing DB: {e}")
        raise
    finally:
        conn.close()
        log_info("Database setup complete and connection closed.")
