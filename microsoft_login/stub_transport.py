# SPDX-License-Identifier: MIT
# Copyright (c) 2025 microsoft-login contributors

"""Deterministic in-memory transport for tests and local development."""

import json
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from .result import Error, ErrorReason, Ok, Result
from .transport import MultipartBody, Transport, TransportResponse


@dataclass
class RecordedRequest:
    """A request seen by ``StubTransport``."""
    method: str
    url: str
    headers: dict[str, str]
    multipart_body: Optional[list[tuple[str, Optional[str]]]] = None

    def form(self) -> dict[str, Optional[str]]:
        """Return the multipart fields as a dictionary."""
        return dict(self.multipart_body or [])


@dataclass
class StubTransport(Transport):
    """Transport that returns canned results keyed by method and URL.

    Requests with no registered result get a transport error, so a test
    never reaches the network by accident. A registration may also name
    the multipart ``form`` a POST must carry; any other form gets a
    transport error instead of the canned result.

    Example:
        >>> transport = StubTransport()
        >>> transport.add_json_response("POST", TOKEN_URL, {"access_token": "tok1"})
    """
    responses: dict[tuple[str, str], Result[TransportResponse]] = field(default_factory=dict)
    expected_forms: dict[tuple[str, str], dict[str, Optional[str]]] = field(default_factory=dict)
    requests: list[RecordedRequest] = field(default_factory=list)

    def add_response(
        self,
        method: str,
        url: str,
        body: Optional[str],
        status: int = 200,
        headers: Optional[Mapping[str, str]] = None,
        form: Optional[Mapping[str, Optional[str]]] = None,
    ) -> None:
        """Register a raw response for ``method`` and ``url``.

        When ``form`` is given, a POST only gets this response if its
        multipart fields equal ``form`` exactly.
        """
        self._register(
            method,
            url,
            Ok(TransportResponse(status=status, headers=dict(headers or {}), body=body)),
            form,
        )

    def add_json_response(
        self,
        method: str,
        url: str,
        payload: Any,
        status: int = 200,
        form: Optional[Mapping[str, Optional[str]]] = None,
    ) -> None:
        """Register a JSON response for ``method`` and ``url``."""
        self.add_response(
            method,
            url,
            json.dumps(payload),
            status=status,
            headers={"content-type": "application/json; charset=utf-8"},
            form=form,
        )

    def add_error(
        self,
        method: str,
        url: str,
        detail: Any,
        form: Optional[Mapping[str, Optional[str]]] = None,
    ) -> None:
        """Register a transport failure for ``method`` and ``url``."""
        self._register(method, url, Error(ErrorReason.TRANSPORT_ERROR, detail=detail), form)

    def _register(
        self,
        method: str,
        url: str,
        result: Result[TransportResponse],
        form: Optional[Mapping[str, Optional[str]]],
    ) -> None:
        key = (method.upper(), url)
        self.responses[key] = result
        if form is None:
            self.expected_forms.pop(key, None)
        else:
            self.expected_forms[key] = dict(form)

    def post(
        self,
        url: str,
        multipart_body: MultipartBody,
        headers: Mapping[str, str],
    ) -> Result[TransportResponse]:
        request = RecordedRequest("POST", url, dict(headers), multipart_body=list(multipart_body))
        self.requests.append(request)
        expected = self.expected_forms.get(("POST", url))
        if expected is not None and request.form() != expected:
            sent = request.form()
            fields = sorted(k for k in set(sent) | set(expected) if sent.get(k) != expected.get(k))
            return Error(
                ErrorReason.TRANSPORT_ERROR,
                detail=f"stub form mismatch for POST {url}: {', '.join(fields)}",
            )
        return self._lookup("POST", url)

    def get(self, url: str, headers: Mapping[str, str]) -> Result[TransportResponse]:
        self.requests.append(RecordedRequest("GET", url, dict(headers)))
        return self._lookup("GET", url)

    def _lookup(self, method: str, url: str) -> Result[TransportResponse]:
        result = self.responses.get((method, url))
        if result is None:
            return Error(ErrorReason.TRANSPORT_ERROR, detail=f"no stub registered for {method} {url}")
        return result

    @property
    def last_request(self) -> Optional[RecordedRequest]:
        return self.requests[-1] if self.requests else None

    def clear(self) -> None:
        """Forget registered results and recorded requests."""
        self.responses.clear()
        self.expected_forms.clear()
        self.requests.clear()
