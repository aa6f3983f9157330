# SPDX-License-Identifier: MIT
# Copyright (c) 2025 microsoft-login contributors

"""Shared fixtures for microsoft_login tests."""

import pytest

from microsoft_login import (
    EnvConfigProvider,
    MicrosoftAuthClient,
    RedirectContext,
    SilentLogger,
    StaticConfigProvider,
    StubTransport,
)


@pytest.fixture
def environ():
    """Environment mapping with client credentials set."""
    return {
        "MICROSOFT_CLIENT_ID": "cid",
        "MICROSOFT_CLIENT_SECRET": "csecret",
    }


@pytest.fixture
def transport():
    return StubTransport()


@pytest.fixture
def logger():
    return SilentLogger()


@pytest.fixture
def client(transport, environ, logger):
    """Client wired to a stub transport and an injected environment."""
    return MicrosoftAuthClient(
        transport=transport,
        env=EnvConfigProvider(environ),
        app_config=StaticConfigProvider(),
        logger=logger,
    )


@pytest.fixture
def remote_context():
    return RedirectContext(host="example.com", port=443)


@pytest.fixture
def local_context():
    return RedirectContext(host="localhost", port=4000)
