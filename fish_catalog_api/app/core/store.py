"""
In-memory fish store.

This module replaces a database with a plain dictionary keyed by fish
identifier.  The dictionary is the only shared mutable state in the
service, so every operation takes the store's single lock for the
duration of its critical section (snapshotting or mutating the
mapping) and releases it before returning.  Records are append-only:
there is no update or delete, and stored values are frozen models, so
a snapshot taken under the lock stays consistent after it is released.

Data lives for the lifetime of the process only.
"""

import os
import random
import threading
import time
from typing import Callable, Dict, List, Optional

from .errors import CatalogEmpty, FishNotFound
from ..schemas.fish import FishCreate, FishRead


class FishStore:
    """Thread-safe in-memory mapping of identifier to fish.

    Parameters
    ----------
    rng : Optional[random.Random]
        Source of randomness for ``pick_random``.  Defaults to a
        ``random.Random`` seeded from OS entropy, so separate stores
        (and separate processes) do not share a sequence.
    clock : Callable[[], int]
        Nanosecond clock used to derive identifiers.  Defaults to
        ``time.time_ns``; tests may pass a frozen clock.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        clock: Callable[[], int] = time.time_ns,
    ) -> None:
        self._db: Dict[str, FishRead] = {}
        self._lock = threading.Lock()
        self._rng = rng or random.Random(os.urandom(16))
        self._clock = clock
        self._last_stamp = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._db)

    def list_all(self) -> List[FishRead]:
        """Return a snapshot of every stored fish, in no particular order."""
        with self._lock:
            return list(self._db.values())

    def get(self, fish_id: str) -> FishRead:
        """Return the fish stored under ``fish_id``.

        Raises ``FishNotFound`` if no such identifier exists.
        """
        with self._lock:
            fish = self._db.get(fish_id)
        if fish is None:
            raise FishNotFound(f"fish '{fish_id}' not found")
        return fish

    def insert(self, candidate: FishCreate) -> FishRead:
        """Assign a fresh identifier to ``candidate``, store and return it."""
        with self._lock:
            fish_id = self._next_id()
            fish = FishRead(id=fish_id, **candidate.model_dump())
            self._db[fish_id] = fish
        return fish

    def pick_random(self) -> str:
        """Return one stored identifier chosen uniformly at random.

        Raises ``CatalogEmpty`` when the store holds no fishes.
        """
        with self._lock:
            ids = list(self._db)
        if not ids:
            raise CatalogEmpty()
        return self._rng.choice(ids)

    def _next_id(self) -> str:
        # Caller holds the lock.  The stamp never moves backwards and
        # never repeats, even if the clock does not tick between calls.
        stamp = self._clock()
        if stamp <= self._last_stamp:
            stamp = self._last_stamp + 1
        self._last_stamp = stamp
        return str(stamp)
