from typing import List
from fastapi import APIRouter, Request
from pydantic import BaseModel

router = APIRouter()


class PopularStore(BaseModel):
    name: str
    category: str


# Quick-search shortcuts offered next to the search box
POPULAR_STORES = [
    PopularStore(name="Whole Foods", category="grocery"),
    PopularStore(name="Target", category="grocery"),
    PopularStore(name="Costco", category="grocery"),
    PopularStore(name="Starbucks", category="dining"),
    PopularStore(name="Chipotle", category="dining"),
    PopularStore(name="Shell", category="gas"),
    PopularStore(name="CVS", category="drugstore"),
    PopularStore(name="United Airlines", category="travel"),
]


@router.get("/stores/popular", response_model=List[PopularStore])
def popular_stores():
    return POPULAR_STORES


@router.get("/catalog/status")
def catalog_status(request: Request):
    snapshot = getattr(request.app.state, "catalog", None)
    error = getattr(request.app.state, "catalog_error", None)

    if snapshot is None:
        return {"loaded": False, "cards": 0, "stores": 0, "error": error}

    return {
        "loaded": True,
        "cards": snapshot.card_count,
        "stores": snapshot.store_count,
        "error": None
    }


@router.get("/health")
def health():
    return {"status": "ok"}
