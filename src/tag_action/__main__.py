"""Entry point for ``python -m tag_action``."""

from __future__ import annotations

import sys
from typing import Mapping, Optional, TYPE_CHECKING

from . import core
from .action import run
from .config import ActionConfig
from .errors import ConfigError

if TYPE_CHECKING:  # pragma: no cover
    from .client import GitHub


def main(environ: Optional[Mapping[str, str]] = None, *, client: Optional["GitHub"] = None) -> int:
    """Run the action against the current environment.

    Returns
    -------
    int
        ``0`` when the tag was created, ``1`` otherwise.
    """
    core.configure_logging(environ=environ)
    try:
        config = ActionConfig.from_env(environ)
    except ConfigError as exc:
        core.set_failed(str(exc))
        return 1

    result = run(config, client=client)
    if not result.ok:
        core.set_failed(result.error or "Tag creation failed")
        return 1

    try:
        core.set_output("created_tag", result.created_tag, output_path=config.output_path)
    except OSError as exc:
        core.set_failed(f'Tag "{result.created_tag}" was created but the output could not be written: {exc}')
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
