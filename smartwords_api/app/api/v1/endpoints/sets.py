"""
Set endpoints for API v1.

These routes let clients list, search, create and delete study sets.
The search routes back the "search as you type" box of the web UI:
an empty search term returns every set.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from smartwords_api.app.core.errors import ValidationError
from smartwords_api.app.core.store import SetStore, get_set_store
from smartwords_api.app.schemas.set import SetCreate, SetRead
from smartwords_api.app.services.set_service import SetService

router = APIRouter()


@router.get("/", response_model=List[SetRead])
async def list_sets(store: SetStore = Depends(get_set_store)) -> List[SetRead]:
    """Return all sets in insertion order."""
    sets = await SetService.search_sets(store)
    return [SetRead.from_record(record) for record in sets]


@router.get("/search/", response_model=List[SetRead])
async def search_all_sets(store: SetStore = Depends(get_set_store)) -> List[SetRead]:
    """Search with an empty term: every set, as the UI shows on load."""
    sets = await SetService.search_sets(store)
    return [SetRead.from_record(record) for record in sets]


# ``path`` keeps terms containing "/" in one parameter.
@router.get("/search/{name:path}", response_model=List[SetRead])
async def search_sets(name: str, store: SetStore = Depends(get_set_store)) -> List[SetRead]:
    """Return sets whose name contains ``name``.

    Matching is case‑insensitive for ASCII letters.  No match yields
    an empty list rather than 404.
    """
    sets = await SetService.search_sets(store, name)
    return [SetRead.from_record(record) for record in sets]


@router.post("/", response_model=SetRead, status_code=status.HTTP_201_CREATED)
async def create_set(set_in: SetCreate, store: SetStore = Depends(get_set_store)) -> SetRead:
    """Create a new set.

    Returns HTTP 400 with the violated rule when the name, description
    or word list is invalid.
    """
    try:
        record = await SetService.create_set(store, set_in)
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message)
    return SetRead.from_record(record)


@router.delete("/{set_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_set(set_id: str, store: SetStore = Depends(get_set_store)) -> None:
    """Delete a set.  Returns HTTP 404 if the set does not exist."""
    deleted = await SetService.delete_set(store, set_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Set not found")
    return None
