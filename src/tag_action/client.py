"""Core GitHub REST client with a raw-request escape hatch."""

from __future__ import annotations

import logging
import os
from typing import Any, Optional

import requests

from .resources.refs import Refs
from .resources.tags import Tags
DEFAULT_API_URL = os.environ.get("GITHUB_API_URL", "https://api.github.com")
API_VERSION = "2022-11-28"


class GitHub:
    """Resource-grouped client for the GitHub REST API."""

    tags: Tags
    refs: Refs

    def __init__(
        self,
        token: str,
        *,
        api_url: Optional[str] = None,
        default_timeout: int = 20,
        session: Optional[requests.Session] = None,
        raise_on_error: bool = False,
    ) -> None:
        """Create a GitHub client authenticated with ``token``.

        Parameters
        ----------
        token
            Token sent as a bearer credential on every request.
        api_url
            Base URL of the REST API, for GitHub Enterprise Server.
        default_timeout
            Default request timeout in seconds.
        session
            Optional requests session to reuse connections.
        raise_on_error
            If True, raise HTTP errors instead of returning None.
        """
        self.api_url = (api_url or DEFAULT_API_URL).rstrip("/")
        self.default_timeout = default_timeout
        self.raise_on_error = raise_on_error
        self._logger = logging.getLogger(__name__)
        self._session = session or requests.Session()
        self._headers = {
            "Accept": "application/vnd.github+json",
            "Authorization": f"Bearer {token}",
            "X-GitHub-Api-Version": API_VERSION,
        }

        self.tags: Tags = Tags(self)
        self.refs: Refs = Refs(self)

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[dict[str, Any]] = None,
        json: Optional[dict[str, Any]] = None,
        timeout: Optional[int] = None,
    ) -> Optional[dict[str, Any] | list[Any]]:
        """Send a raw request to the GitHub API.

        Parameters
        ----------
        method
            HTTP method (GET, POST, PATCH, DELETE).
        path
            Endpoint path relative to the API root, e.g. ``/repos/o/r/tags``.
        params
            Query parameters for the request.
        json
            JSON payload for the request.
        timeout
            Timeout in seconds for this request.

        Returns
        -------
        dict | list | None
            Parsed JSON payload, or None if the response is empty or non-JSON.

        Raises
        ------
        requests.HTTPError
            When ``raise_on_error`` is set and the API answers with an error
            status. The server's ``message`` is appended to the error text.
        """
        if not path.startswith("/"):
            path = "/" + path
        url = f"{self.api_url}{path}"

        response = None
        try:
            response = self._session.request(
                method,
                url,
                params=params,
                json=json,
                headers=self._headers,
                timeout=timeout or self.default_timeout,
            )
            response.raise_for_status()
        except requests.HTTPError as exc:
            # Extract error message from response body if available
            error_msg = str(exc)
            try:
                error_body = response.json()
                if isinstance(error_body, dict):
                    if "message" in error_body:
                        error_msg = f"{exc}\nServer message: {error_body['message']}"
                    elif "error" in error_body:
                        error_msg = f"{exc}\nServer error: {error_body['error']}"
            except (ValueError, AttributeError, KeyError):
                pass  # Response wasn't JSON or didn't have expected fields
            if self.raise_on_error:
                raise requests.HTTPError(error_msg, response=getattr(exc, "response", None)) from exc
            self._logger.warning("Request failed for %s %s: %s", method, url, error_msg)
            return None
        except Exception as exc:  # noqa: BLE001 - surface request failures
            if self.raise_on_error:
                raise
            self._logger.warning("Request failed for %s %s: %s", method, url, exc)
            return None

        if not response.content:
            return None
        try:
            payload = response.json()
        except ValueError:  # noqa: PERF203 - only attempt JSON when present
            self._logger.warning("Response from %s %s was not JSON", method, url)
            return None
        if isinstance(payload, (dict, list)):
            return payload
        return None
