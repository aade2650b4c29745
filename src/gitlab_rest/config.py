"""
Client configuration.

A ClientConfig is immutable once built and can be shared by any number of
clients and threads.
"""

from __future__ import annotations
import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from .runtime.errors import InvalidRequestError

DEFAULT_BASE_URL = "https://gitlab.com"
DEFAULT_USER_AGENT = "gitlab-rest-python/0.4.0"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class ClientConfig:
    """Configuration for the GitLab REST client."""

    base_url: str = DEFAULT_BASE_URL
    token: Optional[str] = None
    timeout: float = 30.0
    verify_ssl: bool = True
    user_agent: str = DEFAULT_USER_AGENT
    debug: bool = False
    api_version: str = "v4"

    def __post_init__(self) -> None:
        if not self.base_url:
            raise InvalidRequestError("base_url cannot be empty")
        if self.timeout <= 0:
            raise InvalidRequestError(f"timeout must be positive, got {self.timeout}")

    @property
    def api_url(self) -> str:
        """Absolute URL every relative resource path is resolved against."""
        base = self.base_url.rstrip('/')
        suffix = f"/api/{self.api_version}"
        if not base.endswith(suffix):
            base = base + suffix
        return base + '/'

    def with_token(self, token: Optional[str]) -> ClientConfig:
        return replace(self, token=token)

    def __repr__(self) -> str:
        # Never expose the token
        token = "***" if self.token else None
        return (f"ClientConfig(base_url={self.base_url!r}, token={token!r}, "
                f"timeout={self.timeout}, verify_ssl={self.verify_ssl}, "
                f"api_version={self.api_version!r})")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> ClientConfig:
        """
        Build a configuration from environment variables.

        Reads ``GITLAB_URL``, ``GITLAB_TOKEN``, ``GITLAB_TIMEOUT`` and
        ``GITLAB_VERIFY_SSL``. Unset variables keep their defaults.

        Args:
            environ: Mapping to read instead of ``os.environ``

        Returns:
            ClientConfig

        Raises:
            InvalidRequestError: If a variable holds an unparseable value
        """
        env = os.environ if environ is None else environ

        kwargs = {}
        if env.get("GITLAB_URL"):
            kwargs["base_url"] = env["GITLAB_URL"]
        if env.get("GITLAB_TOKEN"):
            kwargs["token"] = env["GITLAB_TOKEN"]
        if env.get("GITLAB_TIMEOUT"):
            try:
                kwargs["timeout"] = float(env["GITLAB_TIMEOUT"])
            except ValueError as e:
                raise InvalidRequestError(
                    f"GITLAB_TIMEOUT is not a number: {env['GITLAB_TIMEOUT']!r}", cause=e
                ) from e
        if env.get("GITLAB_VERIFY_SSL"):
            kwargs["verify_ssl"] = _parse_bool("GITLAB_VERIFY_SSL", env["GITLAB_VERIFY_SSL"])

        return cls(**kwargs)


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise InvalidRequestError(f"{name} is not a boolean: {value!r}")
