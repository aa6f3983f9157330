# SPDX-License-Identifier: MIT
# Copyright (c) 2025 microsoft-login contributors

"""Microsoft identity platform Authorization Code flow.

This module provides ``MicrosoftAuthClient``, which covers the three calls
of the flow: building the sign-in URL, exchanging the returned code for
tokens, and fetching the signed-in user's Graph profile.
"""

from typing import Optional
from urllib.parse import quote, urlencode

from .config import ConfigProvider, EnvConfigProvider, OAuthConfig, load_oauth_config
from .context import RedirectContext
from .log import Logger, create_logger
from .normalizer import NormalizedResponse, normalize
from .result import Error, Result
from .transport import Transport

AUTHORIZE_URL = "https://login.microsoftonline.com/common/oauth2/v2.0/authorize"
TOKEN_URL = "https://login.microsoftonline.com/common/oauth2/v2.0/token"
PROFILE_URL = "https://graph.microsoft.com/v1.0/me"


def _encode_query(params: list[tuple[str, Optional[str]]]) -> str:
    """Encode query parameters per RFC 3986 (spaces as %20, not +)."""
    return urlencode([(k, "" if v is None else v) for k, v in params], quote_via=quote)


class MicrosoftAuthClient:
    """Client for "Login with Microsoft".

    The client keeps no per-call state: configuration is resolved on every
    call and each operation issues at most one request, so an instance can
    be shared between concurrent callers. Callers own the ``state`` value
    and must verify it on the callback themselves.

    Attributes:
        transport: HTTP transport used for token and profile calls
        env: Provider for the ``MICROSOFT_*`` environment variables
        app_config: Optional provider for application-level settings
    """

    def __init__(
        self,
        transport: Transport,
        env: Optional[ConfigProvider] = None,
        app_config: Optional[ConfigProvider] = None,
        logger: Optional[Logger] = None,
    ):
        self.transport = transport
        self.env = env if env is not None else EnvConfigProvider()
        self.app_config = app_config
        self._logger = logger or create_logger(name="microsoft_login.client")

    def load_config(self) -> OAuthConfig:
        """Resolve the current OAuth settings."""
        config = load_oauth_config(self.env, self.app_config)
        if not config.has_credentials:
            self._logger.warning(
                "Microsoft OAuth credentials are not fully configured",
                client_id_set=bool(config.client_id),
                client_secret_set=bool(config.client_secret),
            )
        return config

    @staticmethod
    def redirect_uri(context: RedirectContext, config: OAuthConfig) -> str:
        return context.base_url + config.callback_path

    def build_authorize_url(self, context: RedirectContext, state: Optional[str] = None) -> str:
        """Build the URL a "Login with Microsoft" link should point to.

        Args:
            context: Host/port of the running application
            state: Optional anti-forgery value; appended as the last query
                parameter and echoed back by Microsoft on the callback

        Returns:
            Authorization URL

        Raises:
            ValueError: If state is given but is not a non-empty string
        """
        if state is not None and (not isinstance(state, str) or not state):
            raise ValueError("state must be a non-empty string")

        config = self.load_config()
        query = _encode_query([
            ("client_id", config.client_id),
            ("response_type", "code"),
            ("redirect_uri", self.redirect_uri(context, config)),
            ("scope", config.scopes),
            ("response_mode", "query"),
        ])
        url = f"{AUTHORIZE_URL}?{query}"

        # Encoded on its own so state always comes last
        if state is not None:
            url += "&" + _encode_query([("state", state)])

        self._logger.debug("Built authorization URL", host=context.host, has_state=state is not None)
        return url

    def exchange_code(self, code: str, context: RedirectContext) -> Result[NormalizedResponse]:
        """Exchange an authorization code for tokens.

        The body is sent as multipart form data; the token endpoint does not
        accept JSON for this grant. A single attempt is made.

        Args:
            code: Authorization code from the callback query string
            context: Host/port of the running application; must produce the
                same redirect URI used to build the authorization URL

        Returns:
            ``Ok(NormalizedResponse)`` with ``access_token`` and friends (or
            Microsoft's ``error``/``error_description``), or ``Error``

        Raises:
            ValueError: If code is not a non-empty string
        """
        if not isinstance(code, str) or not code:
            raise ValueError("code must be a non-empty string")

        config = self.load_config()
        body = [
            ("grant_type", "authorization_code"),
            ("client_id", config.client_id),
            ("redirect_uri", self.redirect_uri(context, config)),
            ("code", code),
            ("scope", config.scopes),
            ("client_secret", config.client_secret),
        ]
        headers = {"Content-Type": "multipart/form-data"}

        self._logger.info("Exchanging authorization code for token", host=context.host)
        result = normalize(self.transport.post(TOKEN_URL, body, headers))
        self._log_outcome("Token exchange", result)
        return result

    def fetch_profile(self, access_token: str) -> Result[NormalizedResponse]:
        """Fetch the signed-in user's Microsoft Graph profile.

        Args:
            access_token: Access token returned by ``exchange_code``

        Returns:
            ``Ok(NormalizedResponse)`` with Graph ``/me`` fields such as
            ``displayName`` and ``userPrincipalName``, or ``Error``

        Raises:
            ValueError: If access_token is not a non-empty string
        """
        if not isinstance(access_token, str) or not access_token:
            raise ValueError("access_token must be a non-empty string")

        headers = {
            "Authorization": f"Bearer {access_token}",
            "Content-Type": "application/json",
        }

        self._logger.info("Fetching Microsoft user profile")
        result = normalize(self.transport.get(PROFILE_URL, headers))
        self._log_outcome("Profile fetch", result)
        return result

    def _log_outcome(self, operation: str, result: Result[NormalizedResponse]) -> None:
        if isinstance(result, Error):
            self._logger.warning(
                f"{operation} failed",
                reason=result.reason.value,
                detail=str(result.detail) if result.detail is not None else None,
            )
        elif "error" in result.value:
            self._logger.warning(
                f"{operation} rejected by Microsoft",
                error=result.value.get("error"),
                error_description=result.value.get("error_description"),
            )
        else:
            self._logger.debug(f"{operation} succeeded")
