"""Create a version tag unless it is malformed or already present."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Optional

from .client import GitHub
from .config import ActionConfig
from .errors import DuplicateTagError, InvalidTagNameError, MalformedResponseError, TagActionError
from .resources._common_types import is_valid_tag_name
from .utils import tag_name_from_ref

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunResult:
    """Outcome of a single run."""

    commitish: str
    created_tag: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def run(config: ActionConfig, *, client: Optional[GitHub] = None) -> RunResult:
    """Validate, check for a collision, then create the tag.

    Parameters
    ----------
    config
        Resolved run configuration.
    client
        GitHub client to use. Built from ``config`` (in raise mode) when not
        given; it is only created after the tag name passes validation.

    Returns
    -------
    RunResult
        ``created_tag`` on success, or ``error`` holding the failure reason.
        Exceptions are never propagated.
    """
    try:
        created_tag = _create(config, client)
    except TagActionError as exc:
        return RunResult(commitish=config.commitish, error=str(exc))
    except Exception as exc:  # noqa: BLE001 - every failure becomes the run's reason
        _logger.debug("Unexpected failure", exc_info=True)
        return RunResult(commitish=config.commitish, error=str(exc))
    return RunResult(commitish=config.commitish, created_tag=created_tag)


def _create(config: ActionConfig, client: Optional[GitHub]) -> str:
    tag_name = config.tag_name
    commitish = config.commitish

    if not is_valid_tag_name(tag_name):
        raise InvalidTagNameError(tag_name)

    if client is None:
        client = GitHub(
            config.token,
            api_url=config.api_url,
            default_timeout=config.timeout,
            raise_on_error=True,
        )

    _logger.info(
        'Creating tag "%s" for commit "%s" in repository %s',
        tag_name,
        commitish,
        config.repository,
    )

    if client.tags.exists(config.owner, config.repo, tag_name):
        raise DuplicateTagError(tag_name)

    response = client.refs.create_tag(config.owner, config.repo, tag_name, commitish)
    _logger.debug("Created tag response: %s", json.dumps(response, default=str))

    ref = response.get("ref") if isinstance(response, dict) else None
    if not isinstance(ref, str) or not ref:
        raise MalformedResponseError(tag_name=tag_name)

    created_tag = tag_name_from_ref(ref)
    _logger.info('Tag "%s" created successfully at commit "%s".', created_tag, commitish)
    return created_tag


__all__ = ["RunResult", "run"]
