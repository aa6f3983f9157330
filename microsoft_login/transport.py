# SPDX-License-Identifier: MIT
# Copyright (c) 2025 microsoft-login contributors

"""HTTP transport capability.

The OAuth client never performs I/O itself; it hands requests to a
``Transport``. ``HttpxTransport`` is the networked implementation and
``StubTransport`` (see ``stub_transport``) a deterministic fake for tests.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Mapping, Optional, Sequence

import httpx

from .log import Logger, create_logger
from .result import Error, ErrorReason, Ok, Result

MultipartBody = Sequence[tuple[str, Optional[str]]]


@dataclass(frozen=True)
class TransportResponse:
    """Raw HTTP response handed back by a transport.

    Attributes:
        status: HTTP status code
        headers: Response headers
        body: Response body text, or None when the response was empty
    """
    status: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Optional[str] = None


class Transport(ABC):
    """Abstract HTTP transport."""

    @abstractmethod
    def post(
        self,
        url: str,
        multipart_body: MultipartBody,
        headers: Mapping[str, str],
    ) -> Result[TransportResponse]:
        """POST ``multipart_body`` as multipart form data.

        Args:
            url: Target URL
            multipart_body: Ordered ``(name, value)`` form fields
            headers: Request headers

        Returns:
            ``Ok(TransportResponse)`` for any HTTP response, or
            ``Error(TRANSPORT_ERROR, detail)`` if no response was received
        """
        pass

    @abstractmethod
    def get(self, url: str, headers: Mapping[str, str]) -> Result[TransportResponse]:
        """GET ``url``; same result contract as ``post``."""
        pass


class HttpxTransport(Transport):
    """Transport backed by an ``httpx.Client``.

    Non-2xx responses are returned as ``Ok`` so that Microsoft's JSON error
    documents reach the caller. Only failures to obtain a response at all
    (DNS, TLS, timeouts, connection resets) become errors.
    """

    def __init__(
        self,
        client: Optional[httpx.Client] = None,
        timeout: float = 10.0,
        logger: Optional[Logger] = None,
    ):
        """Initialize the transport.

        Args:
            client: Preconfigured client; one is created when omitted
            timeout: Timeout in seconds for a client created here
            logger: Logger for transport failures
        """
        self._owns_client = client is None
        self._client = client if client is not None else httpx.Client(timeout=timeout)
        self._logger = logger or create_logger(name="microsoft_login.transport")

    def post(
        self,
        url: str,
        multipart_body: MultipartBody,
        headers: Mapping[str, str],
    ) -> Result[TransportResponse]:
        # httpx must generate the Content-Type itself to include the boundary
        request_headers = {
            name: value
            for name, value in headers.items()
            if not (name.lower() == "content-type" and value.startswith("multipart/form-data"))
        }
        files = [(name, (None, "" if value is None else value)) for name, value in multipart_body]
        return self._send("POST", url, headers=request_headers, files=files)

    def get(self, url: str, headers: Mapping[str, str]) -> Result[TransportResponse]:
        return self._send("GET", url, headers=dict(headers))

    def _send(self, method: str, url: str, **kwargs) -> Result[TransportResponse]:
        try:
            response = self._client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            self._logger.warning(
                "HTTP request failed",
                method=method,
                url=url,
                error=str(e),
                error_type=type(e).__name__,
            )
            return Error(ErrorReason.TRANSPORT_ERROR, detail=str(e))

        self._logger.debug("HTTP request completed", method=method, url=url, status=response.status_code)
        return Ok(
            TransportResponse(
                status=response.status_code,
                headers=dict(response.headers),
                body=response.text or None,
            )
        )

    def close(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "HttpxTransport":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
