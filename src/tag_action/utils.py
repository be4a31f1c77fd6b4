"""Shared helpers for tag references."""

from __future__ import annotations

TAG_REF_PREFIX = "refs/tags/"


def tag_ref(tag_name: str) -> str:
    """Return the fully qualified reference path for ``tag_name``."""
    return f"{TAG_REF_PREFIX}{tag_name}"


def tag_name_from_ref(ref: str) -> str:
    """Strip the ``refs/tags/`` prefix from a reference path."""
    return ref.replace(TAG_REF_PREFIX, "", 1)
