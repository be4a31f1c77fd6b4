"""Repository tag resource wrapper."""

from __future__ import annotations

from typing import Optional, cast

from .base import RepoResource
from .tags_types import TagResponse
from ._common_types import PAGE_SIZE
from ..errors import TagLookupError


class Tags(RepoResource):
    """Repository tag listing operations."""

    def list(
        self,
        owner: str,
        repo: str,
        *,
        per_page: int = PAGE_SIZE,
        page: int = 1,
        timeout: Optional[int] = None,
    ) -> list[TagResponse] | None:
        """Fetch a single page of tags.

        Parameters
        ----------
        owner
            Repository owner (user or organization).
        repo
            Repository name.
        per_page
            Page size, at most 100 on the REST API.
        page
            1-based page number.
        timeout
            Request timeout in seconds.

        Returns
        -------
        list[TagResponse] or None
            Tags on the requested page, or ``None`` on error.
        """
        response = self._get(
            owner,
            repo,
            "tags",
            params={"per_page": per_page, "page": page},
            timeout=timeout,
        )
        if isinstance(response, list):
            return cast(list[TagResponse], response)
        self._logger.warning("Tags response for %s/%s page %s was not a list.", owner, repo, page)
        return None

    def exists(
        self,
        owner: str,
        repo: str,
        tag_name: str,
        *,
        per_page: int = PAGE_SIZE,
        timeout: Optional[int] = None,
    ) -> bool:
        """Return whether a tag named exactly ``tag_name`` exists.

        Pages are fetched in order starting at 1. The walk stops at the first
        page containing the tag or at the first short page.

        The client must be in ``raise_on_error`` mode so a failed page keeps
        its underlying error.

        Raises
        ------
        ValueError
            If ``per_page`` is below 1 or the client does not raise on errors.
        TagLookupError
            If fetching any page fails or returns something other than a list.
        """
        if not isinstance(per_page, int) or per_page < 1:
            raise ValueError(f"Invalid per_page: {per_page}")
        if not self._raises_errors:
            raise ValueError("Tags.exists requires a client created with raise_on_error=True")

        page = 1
        while True:
            try:
                response = self._get(
                    owner,
                    repo,
                    "tags",
                    params={"per_page": per_page, "page": page},
                    timeout=timeout,
                )
            except Exception as exc:  # noqa: BLE001 - a failed page aborts the whole check
                raise TagLookupError(exc, tag_name=tag_name) from exc

            if not isinstance(response, list):
                raise TagLookupError(f"unexpected response for page {page}", tag_name=tag_name)

            if any(isinstance(tag, dict) and tag.get("name") == tag_name for tag in response):
                self._logger.debug("Found tag %s on page %s", tag_name, page)
                return True
            if len(response) < per_page:
                return False
            page += 1
