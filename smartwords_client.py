"""SmartWords API client.

This module defines a small client wrapper around the SmartWords REST
API.  It performs the same calls as the web UI: listing and searching
sets by name, creating a set and deleting one.  The client uses the
``requests`` library internally.

The client exposes high‑level methods:

* :meth:`list_sets` – return every stored set.
* :meth:`search_sets` – return sets whose name contains a search term.
* :meth:`create_set` – create a set from a name, description and words.
* :meth:`delete_set` – delete a set by its identifier.

Every method returns a ``(data, error)`` tuple.  On success ``error``
is ``None``; on failure it is a dictionary with ``status_code`` and
``message`` keys and ``data`` holds an empty default.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)


class SmartWordsClient:
    """Client for interacting with the SmartWords API."""

    def __init__(
        self,
        *,
        base_url: str = "http://localhost:3001",
        prefix: str = "/set",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:3001``.
            prefix: Path under which the set routes are mounted.  Use
                ``/api/v1/set`` to target the versioned routes.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each request.
        """
        self.base_url = base_url.rstrip("/")
        self.prefix = "/" + prefix.strip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Dict[str, Any]]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``DELETE``).
            path: Path relative to the set prefix (e.g. ``/search/Test``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``. ``data`` contains the parsed JSON
            response on success and ``error`` is ``None``. On failure,
            ``data`` is ``None`` and ``error`` describes the issue.
        """
        url = f"{self.base_url}{self.prefix}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
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
    # Set operations
    # ------------------------------------------------------------------
    def list_sets(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve all sets."""
        data, error = self._request("GET", "/")
        if error:
            return [], error
        return data or [], None

    def search_sets(self, name: str = "") -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve sets whose name contains ``name``.

        An empty ``name`` returns every set, like the empty search box
        in the web UI.
        """
        data, error = self._request("GET", f"/search/{quote(name, safe='')}")
        if error:
            return [], error
        return data or [], None

    def create_set(
        self,
        name: str,
        description: str,
        words: Sequence[Dict[str, str]],
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Create a set.

        Args:
            name: Set name, 1 to 100 characters.
            description: Set description, 1 to 1000 characters.
            words: Items with ``word`` and ``meaning`` keys; at least one.
        Returns:
            A tuple ``(set, error)``.  Invalid input comes back as an
            error with status code 400.
        """
        payload = {
            "name": name,
            "description": description,
            "words": [{"word": w["word"], "meaning": w["meaning"]} for w in words],
        }
        return self._request("POST", "/", json_body=payload)

    def delete_set(self, set_id: str) -> Tuple[bool, Optional[Dict[str, Any]]]:
        """Delete a set.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", f"/{quote(set_id, safe='')}")
        if error:
            return False, error
        return True, None
