import asyncio
import os
from dataclasses import asdict
from fastapi import APIRouter, Query, Request
from fastapi.responses import JSONResponse
from services.search_service import search_store
from services.search_dto import SearchResponseDTO

router = APIRouter()

SEARCH_DELAY_MS = int(os.getenv("SEARCH_DELAY_MS", "0"))


def catalog_unavailable(request: Request):
    """503 response when the startup load has not produced a catalog."""
    error = getattr(request.app.state, "catalog_error", None)
    return JSONResponse(
        status_code=503,
        content={"error": error or "Catalog is not loaded yet"}
    )


@router.get("/search")
async def search(request: Request, q: str = Query("")):
    """
    Find the best cards for a store.

    Query Parameters:
        q: Free-text store name. Blank input returns status "empty".

    Returns:
        SearchResponseDTO as JSON. A store that cannot be resolved is
        status "not_found" with an optional suggestion, not an error.
    """
    snapshot = getattr(request.app.state, "catalog", None)
    if snapshot is None:
        return catalog_unavailable(request)

    if SEARCH_DELAY_MS > 0 and q.strip():
        await asyncio.sleep(SEARCH_DELAY_MS / 1000)

    outcome = search_store(q, snapshot)
    return asdict(SearchResponseDTO.from_outcome(outcome))
