"""Helpers for talking to the Actions runner: inputs, outputs and log lines.

The runner reads workflow commands (``::error::message``) from stdout and
exposes step inputs as ``INPUT_<NAME>`` environment variables.
"""

from __future__ import annotations

import logging
import os
import sys
import uuid
from typing import Mapping, Optional, TextIO

from .errors import ConfigError

_logger = logging.getLogger(__name__)

_COMMAND_PREFIXES = {
    logging.DEBUG: "::debug::",
    logging.WARNING: "::warning::",
    logging.ERROR: "::error::",
    logging.CRITICAL: "::error::",
}


def escape_data(value: object) -> str:
    """Escape a value for use as workflow command data."""
    return str(value).replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def get_input(
    name: str,
    *,
    required: bool = False,
    environ: Optional[Mapping[str, str]] = None,
) -> str:
    """Read an action input from the environment.

    Parameters
    ----------
    name
        Input name as declared in ``action.yml``. Spaces become underscores
        and the name is upper-cased, so ``tag_name`` reads ``INPUT_TAG_NAME``.
    required
        Raise when the input is missing or blank.
    environ
        Mapping to read from; defaults to ``os.environ``.

    Returns
    -------
    str
        The trimmed value, or ``""`` when unset.

    Raises
    ------
    ConfigError
        If ``required`` is set and no value was supplied.
    """
    env = os.environ if environ is None else environ
    value = env.get(f"INPUT_{name.replace(' ', '_').upper()}", "").strip()
    if required and not value:
        raise ConfigError(f"Input required and not supplied: {name}")
    return value


def set_output(
    name: str,
    value: object,
    *,
    output_path: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Expose ``value`` as the step output ``name``.

    Appends to the ``GITHUB_OUTPUT`` file when ``output_path`` is given, using
    a random heredoc delimiter. Otherwise prints the legacy ``set-output``
    command.
    """
    text = str(value)
    if output_path:
        delimiter = f"ghadelimiter_{uuid.uuid4()}"
        if delimiter in name or delimiter in text:  # pragma: no cover - uuid collision
            raise ValueError("Output value contains the generated delimiter")
        with open(output_path, "a", encoding="utf-8") as fh:
            fh.write(f"{name}<<{delimiter}\n{text}\n{delimiter}\n")
        return
    out = stream or sys.stdout
    out.write(f"::set-output name={name}::{escape_data(text)}\n")


def set_failed(message: str, *, stream: Optional[TextIO] = None) -> None:
    """Report the run as failed with ``message`` as the annotation."""
    out = stream or sys.stdout
    out.write(f"::error::{escape_data(message)}\n")
    out.flush()


class WorkflowCommandFormatter(logging.Formatter):
    """Render log records as workflow commands the runner understands."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        prefix = _COMMAND_PREFIXES.get(record.levelno)
        if prefix is None:
            return message
        return f"{prefix}{escape_data(message)}"


def configure_logging(
    *,
    environ: Optional[Mapping[str, str]] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Send log records to stdout as workflow commands.

    ``RUNNER_DEBUG=1`` (set when a workflow is re-run with debug logging)
    lowers the level to DEBUG.
    """
    env = os.environ if environ is None else environ
    level = logging.DEBUG if env.get("RUNNER_DEBUG") == "1" else logging.INFO
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(WorkflowCommandFormatter("%(message)s"))
    logging.basicConfig(level=level, handlers=[handler], force=True)
    _logger.debug("Logging configured at level %s", logging.getLevelName(level))


__all__ = [
    "WorkflowCommandFormatter",
    "configure_logging",
    "escape_data",
    "get_input",
    "set_failed",
    "set_output",
]
