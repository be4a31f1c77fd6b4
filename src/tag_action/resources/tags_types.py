"""Types for tag and reference payloads.

Only ``TagResponse["name"]`` and ``RefResponse["ref"]`` are relied on; the
remaining keys mirror what the REST API returns and are kept for callers.
"""

from __future__ import annotations

from typing import TypedDict
from typing_extensions import ReadOnly


class TagCommit(TypedDict, total=False):
    """Commit pointer embedded in a tag listing entry."""
    sha: ReadOnly[str]
    url: ReadOnly[str]


class TagResponse(TypedDict, total=False):
    """Readonly tag dict returned by the tag listing endpoint."""
    name: ReadOnly[str]
    commit: ReadOnly[TagCommit]
    zipball_url: ReadOnly[str]
    tarball_url: ReadOnly[str]
    node_id: ReadOnly[str]


class RefObject(TypedDict, total=False):
    """Git object a reference points at."""
    sha: ReadOnly[str]
    type: ReadOnly[str]
    url: ReadOnly[str]


class RefResponse(TypedDict, total=False):
    """Readonly reference dict returned by the ref endpoints.

    ``ref`` may be missing; check it before use.
    """
    ref: ReadOnly[str]
    node_id: ReadOnly[str]
    url: ReadOnly[str]
    object: ReadOnly[RefObject]

__all__ = ["RefObject", "RefResponse", "TagCommit", "TagResponse"]
