"""Credential loading from the environment."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import ConfigError

TOKEN_ENV = "SWITCHBOT_TOKEN"
SECRET_ENV = "SWITCHBOT_API_KEY"
BASE_URL_ENV = "SWITCHBOT_BASE_URL"

DEFAULT_BASE_URL = "https://api.switch-bot.com/v1.1"


@dataclass(frozen=True)
class Credentials:
    """SwitchBot API credentials."""

    token: str
    secret: str

    def __repr__(self) -> str:
        return "Credentials(token=***, secret=***)"


def load_credentials(environ: Optional[Mapping[str, str]] = None) -> Credentials:
    """
    Read token and secret from the environment.

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Raises:
        ConfigError: If either variable is unset or empty
    """
    if environ is None:
        environ = os.environ

    token = environ.get(TOKEN_ENV, "")
    secret = environ.get(SECRET_ENV, "")

    if not token or not secret:
        raise ConfigError(
            f"Error: {TOKEN_ENV} or {SECRET_ENV} environment variable is not set"
        )

    return Credentials(token=token, secret=secret)


def resolve_base_url(override: Optional[str] = None,
                     environ: Optional[Mapping[str, str]] = None) -> str:
    """Pick the API base URL: explicit override, then environment, then default."""
    if environ is None:
        environ = os.environ
    base_url = override or environ.get(BASE_URL_ENV) or DEFAULT_BASE_URL
    return base_url.rstrip("/")
