# SPDX-License-Identifier: MIT
# Copyright (c) 2025 microsoft-login contributors

"""Minimal "Login with Microsoft" helper.

Builds the authorization URL, exchanges the authorization code for tokens
and fetches the signed-in user's profile from Microsoft's identity platform.
HTTP goes through an injectable transport so the flow can be tested without
network access.
"""

__version__ = "0.1.0"

from .client import AUTHORIZE_URL, PROFILE_URL, TOKEN_URL, MicrosoftAuthClient
from .config import (
    ConfigProvider,
    EnvConfigProvider,
    OAuthConfig,
    StaticConfigProvider,
    load_oauth_config,
)
from .context import RedirectContext
from .factory import create_auth_client, create_transport
from .log import Logger, SilentLogger, StdlibLogger, StdoutLogger, create_logger
from .models import ProfileResponse, TokenResponse
from .normalizer import NormalizedResponse, normalize
from .result import (
    EmptyResponseError,
    Error,
    ErrorReason,
    MicrosoftLoginError,
    Ok,
    Result,
    ResponseDecodeError,
    TransportFailure,
)
from .stub_transport import RecordedRequest, StubTransport
from .transport import HttpxTransport, Transport, TransportResponse

__all__ = [
    # Version
    "__version__",
    # Client
    "MicrosoftAuthClient",
    "AUTHORIZE_URL",
    "TOKEN_URL",
    "PROFILE_URL",
    "RedirectContext",
    # Configuration
    "ConfigProvider",
    "EnvConfigProvider",
    "StaticConfigProvider",
    "OAuthConfig",
    "load_oauth_config",
    # Results
    "Ok",
    "Error",
    "ErrorReason",
    "Result",
    "NormalizedResponse",
    "normalize",
    "TokenResponse",
    "ProfileResponse",
    # Transports
    "Transport",
    "TransportResponse",
    "HttpxTransport",
    "StubTransport",
    "RecordedRequest",
    # Factory
    "create_auth_client",
    "create_transport",
    # Logging
    "Logger",
    "StdlibLogger",
    "StdoutLogger",
    "SilentLogger",
    "create_logger",
    # Exceptions
    "MicrosoftLoginError",
    "TransportFailure",
    "EmptyResponseError",
    "ResponseDecodeError",
]
