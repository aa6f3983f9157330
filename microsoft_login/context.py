# SPDX-License-Identifier: MIT
# Copyright (c) 2025 microsoft-login contributors

"""Redirect context derived from the incoming web request."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from starlette.requests import Request

LOCALHOST = "localhost"


@dataclass(frozen=True)
class RedirectContext:
    """Host and port used to build the OAuth redirect URI.

    Plain HTTP is only used for ``localhost`` so local development works
    without certificates; every other host is forced onto HTTPS and its
    port is ignored.

    Attributes:
        host: Host name the application is served from
        port: Port the application listens on (only used for localhost)
    """
    host: str
    port: Optional[int] = None

    @property
    def base_url(self) -> str:
        if self.host == LOCALHOST:
            if self.port is None:
                return f"http://{self.host}"
            return f"http://{self.host}:{self.port}"
        return f"https://{self.host}"

    @classmethod
    def from_request(cls, request: "Request") -> "RedirectContext":
        """Build a context from a Starlette/FastAPI request.

        Args:
            request: Incoming request whose URL carries host and port

        Returns:
            RedirectContext for the request's host

        Raises:
            ValueError: If the request URL has no host name
        """
        host = request.url.hostname
        if not host:
            raise ValueError("Request URL has no host name")
        return cls(host=host, port=request.url.port)
