"""HTTP client factory for the LinkedIn REST API."""

import httpx
from authlib.integrations.httpx_client import OAuth2Client

from linkedin_oauth2.settings import Settings

DEFAULT_HEADERS = {"x-li-format": "json"}


def create_linkedin_client(settings: Settings, access_token: str, **client_kwargs: object) -> httpx.Client:
    """
    Build an OAuth2-authenticated client for the LinkedIn API.

    The Authlib client attaches the bearer token to every request; extra
    keyword arguments (``transport`` in tests) are handed to httpx.
    """
    return OAuth2Client(
        token={"access_token": access_token, "token_type": "Bearer"},
        base_url=settings.api_base_url,
        timeout=settings.api_timeout,
        headers=DEFAULT_HEADERS,
        **client_kwargs,
    )
