"""Playlist API client.

This module defines a simple client wrapper around the Playlist REST
API.  It can parse an ``openapi.json`` document (a file saved from the
running service's ``/openapi.json``) to discover endpoint paths.  If
the document is not present or cannot be parsed, the client falls
back to the conventional paths served by ``playlist_api``.

The client exposes high‑level methods for every operation of the
service:

* :meth:`ping` – check that the service answers.
* :meth:`list_songs` – return the whole playlist.
* :meth:`create_song` – add a song.
* :meth:`search_songs` – search by title or artist.
* :meth:`update_song` – change some fields of a song.
* :meth:`delete_song` – remove a song.

Every method returns a ``(result, error)`` tuple.  ``error`` is
``None`` on success and otherwise a dictionary with the keys
``status_code`` and ``message``.  The service reports a missing song
as a plain‑text 404, which ends up as the ``message``.
"""

from __future__ import annotations

import json
import logging
import os
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

_PLACEHOLDER = re.compile(r"\{[^}]+\}")

Error = Dict[str, Any]


@dataclass
class ApiEndpoint:
    """Represents a discovered API endpoint.

    Attributes:
        path: The URI template, e.g. ``/songs`` or ``/songs/{song_id}``.
        method: The HTTP method in upper case (``GET``, ``POST``, etc.).
        operation_id: Optional identifier for the operation.
    """

    path: str
    method: str
    operation_id: Optional[str] = None

    @property
    def has_id(self) -> bool:
        return bool(_PLACEHOLDER.search(self.path))

    @property
    def is_search(self) -> bool:
        return self.path.rstrip("/").endswith("/search")

    def format(self, song_id: Any = None) -> str:
        if song_id is None:
            return self.path
        return _PLACEHOLDER.sub(str(song_id), self.path, count=1)


class PlaylistAPI:
    """Client for interacting with the Playlist API.

    The client attempts to load and parse an OpenAPI specification at
    initialisation.  Operations tagged ``songs`` are stored for later
    use; missing ones are filled in with the default paths.
    """

    _SONGS_TAG = "songs"

    _DEFAULT_ENDPOINTS: List[Tuple[str, str]] = [
        ("GET", "/songs"),
        ("POST", "/songs"),
        ("GET", "/songs/search"),
        ("PUT", "/songs/{id}"),
        ("DELETE", "/songs/{id}"),
    ]

    def __init__(
        self,
        *,
        base_url: str,
        openapi_path: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:3000``.
            openapi_path: Optional path to an OpenAPI JSON file.  If
                provided and readable, endpoints will be inferred from it.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each response.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout
        self.spec: Dict[str, Any] = {}
        self.endpoints: List[ApiEndpoint] = []
        if openapi_path and os.path.exists(openapi_path):
            try:
                with open(openapi_path, "r", encoding="utf-8") as f:
                    self.spec = json.load(f)
                self._discover_endpoints()
            except (OSError, ValueError) as e:
                logger.warning(
                    "Failed to load or parse OpenAPI specification %s: %s. Falling back to defaults.",
                    openapi_path,
                    e,
                )
        self._ensure_default_endpoints()

    # ------------------------------------------------------------------
    # OpenAPI discovery
    # ------------------------------------------------------------------
    def _discover_endpoints(self) -> None:
        """Record every operation tagged ``songs`` in the loaded document."""
        paths = self.spec.get("paths", {})
        for path, methods in paths.items():
            if not isinstance(methods, dict):
                continue
            for method_lower, op in methods.items():
                if not isinstance(op, dict):
                    continue
                tags = [str(t).lower() for t in op.get("tags", [])]
                if self._SONGS_TAG in tags:
                    self.endpoints.append(
                        ApiEndpoint(path=path, method=method_lower.upper(), operation_id=op.get("operationId"))
                    )

    def _ensure_default_endpoints(self) -> None:
        """Add a default endpoint for every operation the document lacks."""
        for method, path in self._DEFAULT_ENDPOINTS:
            default = ApiEndpoint(path=path, method=method)
            if not self._pick_endpoint(method, has_id=default.has_id, search=default.is_search):
                self.endpoints.append(default)

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/songs``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON body,
            the text of a non‑JSON body, or ``None`` for an empty body.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if not response.content:
                return None, None
            if "application/json" in response.headers.get("Content-Type", ""):
                return response.json(), None
            return response.text, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    if isinstance(err_json, dict):
                        message = str(err_json.get("detail") or err_json.get("message") or err_json)
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

    def _call(
        self, method: str, *, song_id: Any = None, search: bool = False,
        params: Dict[str, Any] | None = None, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        ep = self._pick_endpoint(method, has_id=song_id is not None, search=search)
        if not ep:
            logger.warning("No endpoint available for %s songs", method)
            return None, {"status_code": None, "message": f"No endpoint for {method} songs"}
        return self._request(ep.method, ep.format(song_id), params=params, json_body=json_body)

    # ------------------------------------------------------------------
    # Song operations
    # ------------------------------------------------------------------
    def ping(self) -> Tuple[Optional[str], Optional[Error]]:
        """Call the liveness endpoint and return its message."""
        return self._request("GET", "/")

    def list_songs(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve the whole playlist.

        Returns:
            A tuple ``(songs, error)``. ``songs`` is empty on failure.
        """
        data, error = self._call("GET")
        if error:
            return [], error
        return (data if isinstance(data, list) else []), None

    def create_song(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Add a song.

        Args:
            payload: Any of ``title``, ``artist`` and ``duration``.
        Returns:
            A tuple ``(song, error)``; ``song`` carries the assigned id.
        """
        return self._call("POST", json_body=payload)

    def search_songs(self, query: str = "") -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Search songs whose title or artist contains ``query``."""
        data, error = self._call("GET", search=True, params={"q": query})
        if error:
            return [], error
        return (data if isinstance(data, list) else []), None

    def update_song(self, song_id: Any, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Update the supplied fields of a song.

        Args:
            song_id: Identifier of the song.
            payload: Fields to overwrite.
        Returns:
            A tuple ``(song, error)``.
        """
        return self._call("PUT", song_id=song_id, json_body=payload)

    def delete_song(self, song_id: Any) -> Tuple[bool, Optional[Error]]:
        """Delete a song.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._call("DELETE", song_id=song_id)
        if error:
            return False, error
        return True, None

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _pick_endpoint(self, method: str, *, has_id: bool, search: bool = False) -> Optional[ApiEndpoint]:
        """Select an endpoint for an HTTP method.

        Discovered endpoints are searched in the order they appeared in
        the specification.

        Args:
            method: The desired HTTP method (case insensitive).
            has_id: Whether the path should contain an id placeholder.
            search: Whether the path should be the search endpoint.
        Returns:
            An :class:`ApiEndpoint` instance or ``None``.
        """
        method_upper = method.upper()
        for ep in self.endpoints:
            if ep.method != method_upper:
                continue
            if ep.has_id == has_id and ep.is_search == search:
                return ep
        return None
