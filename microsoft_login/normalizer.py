# SPDX-License-Identifier: MIT
# Copyright (c) 2025 microsoft-login contributors

"""Turns raw transport results into uniform ``Ok``/``Error`` results."""

import json
from typing import Any

from .result import Error, ErrorReason, Ok, Result
from .transport import TransportResponse


class NormalizedResponse(dict):
    """Decoded JSON object whose top-level keys are also attributes.

    ``payload["access_token"]`` and ``payload.access_token`` are equivalent.
    Nested objects keep their plain decoded form.

    Dict methods take precedence over keys: a field named ``items``,
    ``keys``, ``values``, ``get``, ``pop``, ``update`` or ``copy`` is only
    reachable by item access (``payload["items"]``).
    """

    def __getattr__(self, name: str) -> Any:
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name) from None

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("NormalizedResponse is read-only")


def normalize(transport_result: Result[TransportResponse]) -> Result[NormalizedResponse]:
    """Normalize a transport result.

    Args:
        transport_result: ``Ok(TransportResponse)`` or a transport ``Error``

    Returns:
        The transport ``Error`` unchanged, ``Error(NO_BODY)`` when the
        response body is missing or empty, ``Error(DECODE_ERROR)`` when the body is
        not a JSON object, otherwise ``Ok(NormalizedResponse)``.

    The HTTP status is not inspected: an OAuth error document returned with
    a 400 is still a decoded ``Ok`` payload with an ``error`` key.
    """
    if isinstance(transport_result, Error):
        return transport_result

    body = transport_result.value.body
    if not body:
        return Error(ErrorReason.NO_BODY)

    try:
        decoded = json.loads(body)
    except ValueError as e:
        return Error(ErrorReason.DECODE_ERROR, detail=str(e))

    if not isinstance(decoded, dict):
        return Error(
            ErrorReason.DECODE_ERROR,
            detail=f"expected a JSON object, got {type(decoded).__name__}",
        )

    return Ok(NormalizedResponse(decoded))
