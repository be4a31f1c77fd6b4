"""Shared constants and validation helpers for resources.

This module contains:
- Tag name pattern and validation
- Listing page size used when walking paginated endpoints
"""

from __future__ import annotations

import re

# --- Tag Name Validation --- #
TAG_NAME_PATTERN = re.compile(r"^(v|Test-)?\d+\.\d+\.\d+(-[a-zA-Z0-9_.]+)?$")

# --- Pagination --- #
PAGE_SIZE = 100


def is_valid_tag_name(tag_name: object) -> bool:
    """Return whether ``tag_name`` is an acceptable version tag.

    Parameters
    ----------
    tag_name
        Candidate tag. Accepted forms are an optional ``v`` or ``Test-``
        prefix, three dot-separated integers, and an optional ``-suffix`` made
        of letters, digits, underscores and dots.

    Returns
    -------
    bool
        ``True`` when the whole string matches; ``False`` otherwise, including
        for non-string input.

    Notes
    -----
    Leading zeros (``v01.2.3``) and arbitrarily large numbers are accepted.
    """
    if not isinstance(tag_name, str):
        return False
    # fullmatch: ``$`` alone would accept a trailing newline
    return TAG_NAME_PATTERN.fullmatch(tag_name) is not None
