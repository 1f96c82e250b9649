"""Fish catalog API client.

This module defines a small client wrapper around the Fish Catalog
HTTP API.  The client uses the ``requests`` library internally and
exposes one method per operation:

* :meth:`list_fishes` – return every fish in the catalog.
* :meth:`get_fish` – fetch a single fish by its identifier.
* :meth:`random_fish_id` – ask the server for a random fish identifier.
* :meth:`create_fish` – add a new fish.
* :meth:`admin_portal` – fetch the admin page using Basic credentials.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a dictionary
with keys ``status_code`` and ``message`` describing the issue.  The
client never raises for HTTP or network errors.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]

ADMIN_USERNAME = "admin"


class FishCatalogClient:
    """Client for interacting with the fish catalog API."""

    def __init__(
        self,
        *,
        base_url: str,
        admin_password: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8080``.
            admin_password: Password for :meth:`admin_portal`.  Not sent
                with any other request.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.admin_password = admin_password
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _send(self, method: str, path: str, **kwargs: Any) -> Tuple[Optional[requests.Response], Optional[Error]]:
        """Perform an HTTP request and normalise failures.

        Returns ``(response, None)`` for any status below 400 (redirects
        are not followed) and ``(None, error)`` otherwise.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                timeout=self.timeout,
                allow_redirects=False,
                **kwargs,
            )
            response.raise_for_status()
            return response, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    if isinstance(err_json, dict):
                        message = err_json.get("detail") or str(err_json)
                    else:
                        message = str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Fish operations
    # ------------------------------------------------------------------
    def list_fishes(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all fishes.

        Returns:
            A tuple ``(fishes, error)``. ``fishes`` is empty on failure.
        """
        response, error = self._send("GET", "/fishes")
        if error:
            return [], error
        data = response.json()
        return (data if isinstance(data, list) else []), None

    def get_fish(self, fish_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single fish by ID."""
        response, error = self._send("GET", f"/fishes/{fish_id}")
        if error:
            return None, error
        return response.json(), None

    def random_fish_id(self) -> Tuple[Optional[str], Optional[Error]]:
        """Return the identifier the server redirects ``/fishes/random`` to.

        The redirect is not followed; the identifier is taken from the
        ``Location`` header.
        """
        response, error = self._send("GET", "/fishes/random")
        if error:
            return None, error
        location = response.headers.get("location", "")
        prefix = "/fishes/"
        if response.status_code != 302 or not location.startswith(prefix):
            message = f"unexpected response {response.status_code} with location {location!r}"
            logger.error("Random fish lookup failed: %s", message)
            return None, {"status_code": response.status_code, "message": message}
        return location[len(prefix):], None

    def create_fish(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a fish.

        Args:
            payload: Fish fields (``name``, ``environment``, ``max_length``).
        Returns:
            A tuple ``(fish, error)``; ``fish`` is the stored record with
            its server-assigned ``id`` when the server echoes it.
        """
        response, error = self._send("POST", "/fishes", json=payload)
        if error:
            return None, error
        if response.content:
            return response.json(), None
        return None, None

    # ------------------------------------------------------------------
    # Admin
    # ------------------------------------------------------------------
    def admin_portal(self) -> Tuple[Optional[str], Optional[Error]]:
        """Fetch the admin page using the configured credentials."""
        if not self.admin_password:
            return None, {"status_code": None, "message": "No admin password configured"}
        response, error = self._send(
            "GET", "/admin", auth=(ADMIN_USERNAME, self.admin_password)
        )
        if error:
            return None, error
        return response.text, None
