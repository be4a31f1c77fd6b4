"""Git reference resource wrapper."""

from __future__ import annotations

from typing import Optional, cast

from .base import RepoResource
from .tags_types import RefResponse
from ..errors import TagCreationError
from ..utils import tag_ref


class Refs(RepoResource):
    """Git reference operations."""

    def create(
        self,
        owner: str,
        repo: str,
        ref: str,
        sha: str,
        *,
        timeout: Optional[int] = None,
    ) -> RefResponse | None:
        """Create a git reference.

        Parameters
        ----------
        owner
            Repository owner.
        repo
            Repository name.
        ref
            Fully qualified reference, e.g. ``refs/tags/v1.0.0``.
        sha
            Commit the reference points at.
        timeout
            Request timeout in seconds.

        Returns
        -------
        RefResponse or None
            Created reference dict, or ``None`` on error.
        """
        response = self._post(
            owner,
            repo,
            "git/refs",
            json={"ref": ref, "sha": sha},
            timeout=timeout,
        )
        if isinstance(response, dict):
            return cast(RefResponse, response)
        return None

    def create_tag(
        self,
        owner: str,
        repo: str,
        tag_name: str,
        commitish: str,
        *,
        timeout: Optional[int] = None,
    ) -> RefResponse:
        """Create ``refs/tags/<tag_name>`` at ``commitish`` with a single request.

        The payload is returned as received; callers check ``ref`` themselves.

        Raises
        ------
        TagCreationError
            If the request fails or returns no JSON object.
        """
        try:
            response = self.create(owner, repo, tag_ref(tag_name), commitish, timeout=timeout)
        except Exception as exc:  # noqa: BLE001 - surface as a creation failure
            raise TagCreationError(tag_name, exc) from exc
        if response is None:
            raise TagCreationError(tag_name, "empty or non-JSON response")
        return response
