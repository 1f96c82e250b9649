"""
Fish endpoints.

Routes:

* ``GET /fishes`` lists every fish (an empty catalog is an empty list).
* ``POST /fishes`` creates a fish from a JSON body and echoes it back.
* ``GET /fishes/random`` redirects (302) to a randomly chosen fish.
* ``GET /fishes/{fish_id}`` returns a single fish.

``/fishes/random`` is declared before ``/fishes/{fish_id}`` so the
reserved segment is matched first.  A path parameter never spans a
``/``, so ``/fishes/a/b`` and ``/fishes/`` match no route and yield 404.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import RedirectResponse
from starlette.requests import ClientDisconnect

from fish_catalog_api.app.core.errors import BodyReadFailure
from fish_catalog_api.app.core.store import FishStore
from fish_catalog_api.app.schemas.fish import FishRead
from fish_catalog_api.app.services.fish_service import FishService

logger = logging.getLogger(__name__)

router = APIRouter()


def get_store(request: Request) -> FishStore:
    """Dependency returning the store injected into the application."""
    return request.app.state.store


def get_fish_service(store: FishStore = Depends(get_store)) -> FishService:
    return FishService(store)


@router.get("", response_model=List[FishRead], response_model_exclude_none=True)
def list_fishes(service: FishService = Depends(get_fish_service)) -> List[FishRead]:
    """Return every fish in the catalog, in no particular order."""
    return service.list_fishes()


async def read_fish_body(
    request: Request,
    service: FishService = Depends(get_fish_service),
) -> bytes:
    """Dependency returning the raw POST body.

    The content type is checked before anything is read, so a wrong
    type is always 415 even if the body would have failed to arrive.
    """
    service.check_content_type(request.headers.get("content-type"))
    try:
        return await request.body()
    except (ClientDisconnect, OSError) as exc:
        logger.warning("Failed to read fish body: %s", exc)
        raise BodyReadFailure(str(exc) or "client disconnected") from exc


@router.post("", response_model=FishRead, response_model_exclude_none=True)
def create_fish(
    body: bytes = Depends(read_fish_body),
    service: FishService = Depends(get_fish_service),
) -> FishRead:
    """Create a fish.

    The body is decoded by hand instead of through a pydantic body
    parameter, because the status codes differ from FastAPI's: a wrong
    content type is 415 and an undecodable body is 400.  The handler
    is sync so the store lock is only ever taken from the threadpool.
    """
    return service.create_from_body(body)


@router.get("/random", status_code=status.HTTP_302_FOUND)
def random_fish(service: FishService = Depends(get_fish_service)) -> RedirectResponse:
    """Redirect to a randomly chosen fish, or 404 if the catalog is empty."""
    fish_id = service.random_fish_id()
    return RedirectResponse(url=f"/fishes/{fish_id}", status_code=status.HTTP_302_FOUND)


@router.get("/{fish_id}", response_model=FishRead, response_model_exclude_none=True)
def get_fish(fish_id: str, service: FishService = Depends(get_fish_service)) -> FishRead:
    """Retrieve a single fish by ID.  Returns HTTP 404 if not found."""
    return service.get_fish(fish_id)
