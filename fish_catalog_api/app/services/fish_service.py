"""
Service layer for the fish catalog.

``FishService`` sits between the HTTP routes and the ``FishStore``.  It
owns the request-body pipeline for creating a fish: the content type
is checked first, the body is decoded into a ``FishCreate`` and only
then is the store touched.  Any failure along the way raises a
``CatalogError`` and returns immediately, so a rejected request never
inserts a record.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from pydantic import ValidationError

from fish_catalog_api.app.core.errors import MalformedBody, UnsupportedMediaType
from fish_catalog_api.app.core.store import FishStore
from fish_catalog_api.app.schemas.fish import FishCreate, FishRead

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"


class FishService:
    """Business operations over a single ``FishStore``."""

    def __init__(self, store: FishStore) -> None:
        self.store = store

    def list_fishes(self) -> List[FishRead]:
        return self.store.list_all()

    def get_fish(self, fish_id: str) -> FishRead:
        """Return a fish by ID or raise ``FishNotFound``."""
        return self.store.get(fish_id)

    def random_fish_id(self) -> str:
        """Return a random stored ID or raise ``CatalogEmpty``."""
        return self.store.pick_random()

    def create_fish(self, data: FishCreate) -> FishRead:
        fish = self.store.insert(data)
        logger.info("Created fish %s (%s)", fish.id, fish.name or "unnamed")
        return fish

    def check_content_type(self, content_type: Optional[str]) -> None:
        """Raise ``UnsupportedMediaType`` unless the type is ``application/json``.

        The match is exact; parameters such as ``; charset=utf-8`` are
        not accepted.  Called before the body is read.
        """
        if content_type != JSON_CONTENT_TYPE:
            logger.warning("Rejected fish with content-type %r", content_type)
            raise UnsupportedMediaType(
                f"need content-type '{JSON_CONTENT_TYPE}' but got '{content_type or ''}'"
            )

    def decode(self, body: bytes) -> FishCreate:
        """Decode a raw body into a ``FishCreate`` or raise ``MalformedBody``."""
        try:
            return FishCreate.model_validate_json(body)
        except ValidationError as exc:
            logger.warning("Rejected malformed fish body: %s", exc)
            raise MalformedBody(str(exc)) from exc

    def create_from_body(self, body: bytes) -> FishRead:
        """Decode ``body`` and insert it.  The store is untouched on failure."""
        return self.create_fish(self.decode(body))
