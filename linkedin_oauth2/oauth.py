"""
OAuth2 helper preconfigured with LinkedIn's authorization endpoints.

Token exchange and credential handling are Authlib's; this class only pins
the LinkedIn URLs and resolves credentials from configuration.
"""

import logging
from typing import Any

import httpx
from authlib.integrations.base_client import OAuthError
from authlib.integrations.httpx_client import OAuth2Client

from linkedin_oauth2.errors import GeneralError
from linkedin_oauth2.settings import current_settings

logger = logging.getLogger(__name__)

OAUTH_HOST = "https://www.linkedin.com"
AUTHORIZE_PATH = "/uas/oauth2/authorization"
TOKEN_PATH = "/uas/oauth2/accessToken"

MISSING_CREDENTIALS = (
    "Client credentials do not exist. Please either pass your client_id and "
    "client_secret to the LinkedInOAuth constructor or set them via configure()"
)


class LinkedInOAuth(OAuth2Client):
    """Authlib ``OAuth2Client`` bound to LinkedIn's OAuth2 endpoints."""

    site = OAUTH_HOST

    def __init__(
        self,
        client_id: str | None = None,
        client_secret: str | None = None,
        **options: Any,
    ) -> None:
        settings = current_settings()
        client_id = client_id or settings.client_id
        client_secret = client_secret or settings.client_secret

        self.oauth_options: dict[str, Any] = {
            "authorize_url": AUTHORIZE_PATH,
            "token_url": TOKEN_PATH,
            "raise_errors": True,
            **options,
        }
        options.setdefault("redirect_uri", settings.redirect_uri)
        super().__init__(
            client_id=client_id,
            client_secret=client_secret,
            token_endpoint_auth_method="client_secret_post",
            **options,
        )
        # Authlib's __del__ needs the base client initialised first.
        if not client_id or not client_secret:
            self.close()
            raise GeneralError(MISSING_CREDENTIALS)

    @property
    def authorize_uri(self) -> str:
        return f"{self.site}{self.oauth_options['authorize_url']}"

    @property
    def token_uri(self) -> str:
        return f"{self.site}{self.oauth_options['token_url']}"

    def authorization_url(
        self,
        redirect_uri: str | None = None,
        scope: str | None = None,
        state: str | None = None,
    ) -> tuple[str, str]:
        """Return the URL to send the member to, and the state it carries."""
        kwargs: dict[str, Any] = {}
        if redirect_uri:
            kwargs["redirect_uri"] = redirect_uri
        if scope:
            kwargs["scope"] = scope
        return self.create_authorization_url(self.authorize_uri, state=state, **kwargs)

    def get_access_token(self, code: str, redirect_uri: str | None = None) -> dict[str, Any]:
        """
        Exchange an authorization code for an access token.

        With ``raise_errors=False`` a rejected exchange returns the error
        fields (``error``, ``error_description``) instead of raising.
        """
        logger.info("Exchanging authorization code", extra={"token_url": self.token_uri})
        kwargs: dict[str, Any] = {}
        if redirect_uri:
            kwargs["redirect_uri"] = redirect_uri
        try:
            token = self.fetch_token(
                self.token_uri,
                grant_type="authorization_code",
                code=code,
                **kwargs,
            )
        except (OAuthError, httpx.HTTPStatusError) as exc:
            if self.oauth_options["raise_errors"]:
                raise
            logger.warning("Authorization code exchange failed", exc_info=True)
            if isinstance(exc, OAuthError):
                return {"error": exc.error, "error_description": exc.description}
            return {"error": "http_error", "error_description": str(exc)}
        return dict(token)
