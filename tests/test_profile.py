# SPDX-License-Identifier: MIT
# Copyright (c) 2025 microsoft-login contributors

"""Tests for fetching the Microsoft Graph profile."""

import pytest

from microsoft_login import PROFILE_URL, Error, ErrorReason, ProfileResponse


GRAPH_ME = {
    "@odata.context": "https://graph.microsoft.com/v1.0/$metadata#users/$entity",
    "id": "87d349ed-44d7-43e1-9a83-5f2406dee5bd",
    "displayName": "Adele Vance",
    "givenName": "Adele",
    "surname": "Vance",
    "mail": "AdeleV@contoso.com",
    "userPrincipalName": "AdeleV@contoso.com",
    "businessPhones": ["+1 425 555 0109"],
}


class TestFetchProfile:
    """Tests for MicrosoftAuthClient.fetch_profile."""

    def test_returns_profile_payload(self, client, transport):
        """Test the Graph /me response is normalized."""
        transport.add_json_response("GET", PROFILE_URL, GRAPH_ME)

        result = client.fetch_profile("tok1")

        assert result.is_ok
        assert result.value.displayName == "Adele Vance"
        assert result.value["@odata.context"].startswith("https://graph.microsoft.com")
        assert result.value.businessPhones == ["+1 425 555 0109"]

    def test_sends_bearer_token(self, client, transport):
        """Test the access token goes in the Authorization header."""
        transport.add_json_response("GET", PROFILE_URL, GRAPH_ME)

        client.fetch_profile("tok1")

        request = transport.last_request
        assert request.method == "GET"
        assert request.url == PROFILE_URL
        assert request.headers == {
            "Authorization": "Bearer tok1",
            "Content-Type": "application/json",
        }

    def test_typed_profile_view(self, client, transport):
        """Test the payload validates into a ProfileResponse."""
        transport.add_json_response("GET", PROFILE_URL, GRAPH_ME)

        profile = ProfileResponse.from_payload(client.fetch_profile("tok1").unwrap())

        assert profile.id == "87d349ed-44d7-43e1-9a83-5f2406dee5bd"
        assert profile.display_name == "Adele Vance"
        assert profile.email == "AdeleV@contoso.com"

    def test_invalid_token_error_document(self, client, transport, logger):
        """Test Graph's 401 error document comes back as a payload."""
        transport.add_json_response(
            "GET",
            PROFILE_URL,
            {"error": {"code": "InvalidAuthenticationToken", "message": "Access token is empty."}},
            status=401,
        )

        result = client.fetch_profile("expired")

        assert result.is_ok
        assert result.value.error["code"] == "InvalidAuthenticationToken"
        assert logger.has_log("Profile fetch rejected by Microsoft")

    def test_transport_error(self, client, transport, logger):
        """Test a transport failure is returned unchanged."""
        transport.add_error("GET", PROFILE_URL, "DNS lookup failed")

        result = client.fetch_profile("tok1")

        assert result == Error(ErrorReason.TRANSPORT_ERROR, detail="DNS lookup failed")
        assert logger.has_log("Profile fetch failed", level="WARNING")

    def test_malformed_body(self, client, transport):
        """Test a non-JSON body yields DECODE_ERROR instead of raising."""
        transport.add_response("GET", PROFILE_URL, "<html>Bad Gateway</html>", status=502)

        result = client.fetch_profile("tok1")

        assert isinstance(result, Error)
        assert result.reason is ErrorReason.DECODE_ERROR

    @pytest.mark.parametrize("token", ["", None])
    def test_invalid_token_rejected(self, client, token):
        """Test an empty access token raises ValueError."""
        with pytest.raises(ValueError, match="access_token must be a non-empty string"):
            client.fetch_profile(token)
