"""Public package surface for the tag creation action."""

from .action import RunResult, run
from .client import DEFAULT_API_URL, GitHub
from .config import ActionConfig
from .errors import *
from .resources._common_types import is_valid_tag_name



__all__ = ["ActionConfig", "DEFAULT_API_URL", "GitHub", "RunResult", "is_valid_tag_name", "run"]
