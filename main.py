from fastapi import FastAPI
from db import init_db, log_error
from routes import catalog, search
from services.catalog_loader import load_catalog, CatalogLoadError

app = FastAPI(title="RewardsFindr")
app.state.catalog = None
app.state.catalog_error = None


@app.on_event("startup")
def startup():
    # Searches are rejected with 503 until this completes successfully
    try:
        init_db()
        app.state.catalog = load_catalog()
        app.state.catalog_error = None
    except CatalogLoadError as e:
        app.state.catalog = None
        app.state.catalog_error = str(e)
    except Exception as e:
        log_error(f"Startup failed: {e}")
        app.state.catalog = None
        app.state.catalog_error = f"Unable to load catalog: {e}"


app.include_router(search.router)
app.include_router(catalog.router)
