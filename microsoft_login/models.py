# SPDX-License-Identifier: MIT
# Copyright (c) 2025 microsoft-login contributors

"""Typed views over normalized token and profile responses.

The client returns plain ``NormalizedResponse`` mappings. These models are
for callers who want validated, named fields instead.
"""

from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field


class TokenResponse(BaseModel):
    """Successful response from the v2.0 token endpoint."""

    model_config = ConfigDict(extra="allow")

    access_token: str
    token_type: str = "Bearer"
    expires_in: Optional[int] = None
    ext_expires_in: Optional[int] = None
    scope: Optional[str] = None
    id_token: Optional[str] = None
    refresh_token: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "TokenResponse":
        """Validate a normalized token response.

        Raises:
            pydantic.ValidationError: If the payload has no access token,
                which is the case for OAuth error documents
        """
        return cls.model_validate(dict(payload))


class ProfileResponse(BaseModel):
    """Subset of the Microsoft Graph ``/me`` user resource."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str
    display_name: Optional[str] = Field(default=None, alias="displayName")
    given_name: Optional[str] = Field(default=None, alias="givenName")
    surname: Optional[str] = None
    mail: Optional[str] = None
    user_principal_name: Optional[str] = Field(default=None, alias="userPrincipalName")
    job_title: Optional[str] = Field(default=None, alias="jobTitle")
    preferred_language: Optional[str] = Field(default=None, alias="preferredLanguage")

    @property
    def email(self) -> Optional[str]:
        # Personal accounts often have no mail; the UPN is the sign-in address
        return self.mail or self.user_principal_name

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "ProfileResponse":
        return cls.model_validate(dict(payload))
