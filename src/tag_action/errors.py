"""Exceptions raised while creating a tag."""

from __future__ import annotations

from typing import Optional


class TagActionError(Exception):
    """Base class for failures that end a run with a readable reason."""

    def __init__(self, message: str, *, tag_name: Optional[str] = None) -> None:
        super().__init__(message)
        self.tag_name = tag_name


class ConfigError(TagActionError):
    """A required input or context variable is missing or malformed."""


class InvalidTagNameError(TagActionError, ValueError):
    """The tag name does not match the accepted version format."""

    def __init__(self, tag_name: str) -> None:
        super().__init__(
            f'Invalid tag name: "{tag_name}". Ensure it follows the correct format.',
            tag_name=tag_name,
        )


class DuplicateTagError(TagActionError):
    """The tag is already present in the repository."""

    def __init__(self, tag_name: str) -> None:
        super().__init__(f'Tag "{tag_name}" already exists in the repository.', tag_name=tag_name)


class TagLookupError(TagActionError, LookupError):
    """Listing existing tags failed."""

    def __init__(self, reason: object, *, tag_name: Optional[str] = None) -> None:
        super().__init__(f"Error checking for existing tags: {reason}", tag_name=tag_name)


class TagCreationError(TagActionError):
    """The remote call creating the tag reference failed."""

    def __init__(self, tag_name: str, reason: object) -> None:
        super().__init__(f'Failed to create tag "{tag_name}": {reason}', tag_name=tag_name)


class MalformedResponseError(TagActionError):
    """The creation call succeeded but returned no usable ``ref``."""

    def __init__(self, *, tag_name: Optional[str] = None) -> None:
        super().__init__(
            "The tag creation response did not contain a valid 'ref' property.",
            tag_name=tag_name,
        )


__all__ = [
    "ConfigError",
    "DuplicateTagError",
    "InvalidTagNameError",
    "MalformedResponseError",
    "TagActionError",
    "TagCreationError",
    "TagLookupError",
]
