"""Run configuration gathered from the Actions environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from . import core
from .client import DEFAULT_API_URL
from .errors import ConfigError

DEFAULT_TIMEOUT = 20


@dataclass(frozen=True)
class ActionConfig:
    """Everything a run needs, resolved once at startup."""

    tag_name: str
    commitish: str
    token: str
    owner: str
    repo: str
    api_url: str = DEFAULT_API_URL
    output_path: Optional[str] = None
    timeout: int = DEFAULT_TIMEOUT

    @property
    def repository(self) -> str:
        return f"{self.owner}/{self.repo}"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ActionConfig":
        """Build a config from ``INPUT_*`` and ``GITHUB_*`` variables.

        Parameters
        ----------
        environ
            Mapping to read from; defaults to ``os.environ``.

        Raises
        ------
        ConfigError
            If a required input is missing, no commit can be determined,
            ``GITHUB_REPOSITORY`` is not ``owner/repo``, or ``timeout`` is
            not a positive integer.
        """
        env = os.environ if environ is None else environ

        tag_name = core.get_input("tag_name", required=True, environ=env)
        token = core.get_input("GITHUB_TOKEN", required=True, environ=env)
        commitish = core.get_input("commitish", environ=env) or env.get("GITHUB_SHA", "").strip()
        if not commitish:
            raise ConfigError("No commitish supplied and GITHUB_SHA is not set")

        owner, repo = _parse_repository(env.get("GITHUB_REPOSITORY", ""))

        raw_timeout = core.get_input("timeout", environ=env)
        timeout = DEFAULT_TIMEOUT
        if raw_timeout:
            try:
                timeout = int(raw_timeout)
            except ValueError:
                timeout = 0
            if timeout < 1:
                raise ConfigError(f"Invalid timeout: {raw_timeout}")

        return cls(
            tag_name=tag_name,
            commitish=commitish,
            token=token,
            owner=owner,
            repo=repo,
            api_url=env.get("GITHUB_API_URL") or DEFAULT_API_URL,
            output_path=env.get("GITHUB_OUTPUT") or None,
            timeout=timeout,
        )


def _parse_repository(value: str) -> tuple[str, str]:
    owner, sep, repo = value.strip().partition("/")
    if not sep or not owner or not repo or "/" in repo:
        raise ConfigError(f"GITHUB_REPOSITORY must look like owner/repo, got {value!r}")
    return owner, repo
