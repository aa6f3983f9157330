# SPDX-License-Identifier: MIT
# Copyright (c) 2025 microsoft-login contributors

"""Factory functions for wiring transports and clients.

The transport is chosen once, when the client is built: either the
networked ``HttpxTransport`` or the deterministic ``StubTransport``.
"""

import os
from typing import Any, Mapping, Optional

from .client import MicrosoftAuthClient
from .config import EnvConfigProvider, StaticConfigProvider
from .log import Logger
from .stub_transport import StubTransport
from .transport import HttpxTransport, Transport

ENV_TRANSPORT = "MICROSOFT_LOGIN_TRANSPORT"


def create_transport(transport_type: Optional[str] = None, **kwargs: Any) -> Transport:
    """Create a transport by type.

    Supported transport types:
    - "httpx": HttpxTransport (default)
    - "stub": StubTransport for tests and offline development

    Args:
        transport_type: Transport to create. Defaults to the
            MICROSOFT_LOGIN_TRANSPORT env var, then "httpx".
        **kwargs: Passed to HttpxTransport (client, timeout, logger)

    Returns:
        Transport instance

    Raises:
        ValueError: If transport_type is unknown
    """
    transport_type = (transport_type or os.getenv(ENV_TRANSPORT) or "httpx").lower()

    if transport_type == "httpx":
        return HttpxTransport(**kwargs)
    elif transport_type == "stub":
        return StubTransport()
    else:
        raise ValueError(
            f"Unknown transport type: {transport_type}. "
            f"Supported types: httpx, stub"
        )


def create_auth_client(
    transport: Optional[Transport] = None,
    transport_type: Optional[str] = None,
    app_config: Optional[Mapping[str, Any]] = None,
    environ: Optional[Mapping[str, str]] = None,
    logger: Optional[Logger] = None,
) -> MicrosoftAuthClient:
    """Create a MicrosoftAuthClient.

    Args:
        transport: Transport to use; built from transport_type when omitted
        transport_type: "httpx" or "stub", used only when transport is omitted
        app_config: Application settings (client_id, client_secret, scopes,
            callback_path) consulted after the environment
        environ: Environment mapping; defaults to os.environ read at call time
        logger: Logger shared by the client

    Returns:
        Configured MicrosoftAuthClient

    Examples:
        >>> client = create_auth_client(app_config={"client_id": "my-app-id"})
        >>> stub_client = create_auth_client(transport_type="stub")
    """
    if transport is None:
        transport = create_transport(transport_type)

    return MicrosoftAuthClient(
        transport=transport,
        env=EnvConfigProvider(environ),
        app_config=StaticConfigProvider(dict(app_config) if app_config is not None else None),
        logger=logger,
    )
