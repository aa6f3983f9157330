# SPDX-License-Identifier: MIT
# Copyright (c) 2025 microsoft-login contributors

"""Configuration providers and the OAuth configuration value.

Configuration is resolved on every call so that changes to the environment
or to the application config take effect without a restart. Each lookup
goes environment first, then application config, then a hardcoded default.
"""

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Mapping, Optional

DEFAULT_SCOPE = "https://graph.microsoft.com/User.Read"
DEFAULT_CALLBACK_PATH = "/auth/microsoft/callback"

ENV_CLIENT_ID = "MICROSOFT_CLIENT_ID"
ENV_CLIENT_SECRET = "MICROSOFT_CLIENT_SECRET"
ENV_SCOPES = "MICROSOFT_SCOPES_LIST"
ENV_CALLBACK_PATH = "MICROSOFT_CALLBACK_PATH"


class ConfigProvider(ABC):
    """Source of raw configuration values."""

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """Return the value stored under ``key``, or ``default``."""
        raise NotImplementedError


class EnvConfigProvider(ConfigProvider):
    """Reads environment variables at lookup time.

    Defaults to ``os.environ``; tests pass a plain mapping instead.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self._environ = environ if environ is not None else os.environ

    def get(self, key: str, default: Any = None) -> Any:
        return self._environ.get(key, default)


class StaticConfigProvider(ConfigProvider):
    """Application-level settings held in a dictionary.

    ``set`` changes a value in place; the next OAuth call picks it up.
    """

    def __init__(self, config: dict[str, Any] | None = None):
        self._config = config if config is not None else {}

    def get(self, key: str, default: Any = None) -> Any:
        return self._config.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._config[key] = value


@dataclass(frozen=True)
class OAuthConfig:
    """Resolved OAuth settings for a single call.

    Attributes:
        client_id: Application (client) ID from the Azure app registration
        client_secret: Client secret from the Azure app registration
        scopes: Space or plus delimited scope string sent to Microsoft
        callback_path: Path appended to the base URL to form the redirect URI
    """
    client_id: Optional[str]
    client_secret: Optional[str]
    scopes: str = DEFAULT_SCOPE
    callback_path: str = DEFAULT_CALLBACK_PATH

    @property
    def has_credentials(self) -> bool:
        return bool(self.client_id) and bool(self.client_secret)


def _first_set(*values: Any) -> Any:
    """Return the first value that is neither None nor an empty string."""
    for value in values:
        if value is not None and value != "":
            return value
    return None


def load_oauth_config(
    env: ConfigProvider,
    app_config: Optional[ConfigProvider] = None,
) -> OAuthConfig:
    """Resolve OAuth settings from the environment and application config.

    Args:
        env: Provider holding the ``MICROSOFT_*`` environment variables
        app_config: Optional provider holding application config under the
            keys ``client_id``, ``client_secret``, ``scopes`` and
            ``callback_path``

    Returns:
        A fresh OAuthConfig instance
    """
    app = app_config if app_config is not None else StaticConfigProvider()

    return OAuthConfig(
        client_id=_first_set(env.get(ENV_CLIENT_ID), app.get("client_id")),
        client_secret=_first_set(env.get(ENV_CLIENT_SECRET), app.get("client_secret")),
        scopes=_first_set(env.get(ENV_SCOPES), app.get("scopes")) or DEFAULT_SCOPE,
        callback_path=(
            _first_set(env.get(ENV_CALLBACK_PATH), app.get("callback_path"))
            or DEFAULT_CALLBACK_PATH
        ),
    )
