"""Repository-scoped resource helpers."""

from __future__ import annotations

from typing import Any, Optional, TYPE_CHECKING
from urllib.parse import quote

if TYPE_CHECKING:  # pragma: no cover
    from ..client import GitHub


def repo_path(owner: str, repo: str, endpoint: str) -> str:
    """Return ``/repos/{owner}/{repo}/{endpoint}`` with owner and repo escaped.

    Raises
    ------
    ValueError
        If ``owner`` or ``repo`` is blank or contains a slash.
    """
    for label, value in (("owner", owner), ("repo", repo)):
        if not isinstance(value, str) or not value.strip() or "/" in value:
            raise ValueError(f"Invalid {label}: {value!r}")
    return f"/repos/{quote(owner, safe='')}/{quote(repo, safe='')}/{endpoint.strip('/')}"


class RepoResource:
    """Base for endpoint groups living under ``/repos/{owner}/{repo}``."""

    def __init__(self, client: "GitHub") -> None:
        self._client = client

    @property
    def _logger(self):
        return self._client._logger

    @property
    def _raises_errors(self) -> bool:
        """Whether failed requests raise instead of coming back as ``None``."""
        return bool(self._client.raise_on_error)

    def _get(
        self,
        owner: str,
        repo: str,
        endpoint: str,
        *,
        params: Optional[dict[str, Any]] = None,
        timeout: Optional[int] = None,
    ) -> Optional[dict[str, Any] | list[Any]]:
        path = repo_path(owner, repo, endpoint)
        return self._client.request("GET", path, params=params, timeout=timeout)

    def _post(
        self,
        owner: str,
        repo: str,
        endpoint: str,
        *,
        json: Optional[dict[str, Any]] = None,
        timeout: Optional[int] = None,
    ) -> Optional[dict[str, Any] | list[Any]]:
        path = repo_path(owner, repo, endpoint)
        return self._client.request("POST", path, json=json, timeout=timeout)
