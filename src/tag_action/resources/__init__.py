"""Resource module exports."""

from .refs import Refs
from .tags import Tags

__all__ = [
    "Refs",
    "Tags",
]
