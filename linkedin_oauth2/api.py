"""Entry point bundling the LinkedIn API resources over one connection."""

import logging

from linkedin_oauth2.client import LinkedInApiClient
from linkedin_oauth2.companies import Companies
from linkedin_oauth2.settings import Settings, current_settings

logger = logging.getLogger(__name__)


class LinkedInApi:
    """Authenticated LinkedIn API session.

    Usage::

        with LinkedInApi.from_access_token("access-token") as api:
            api.companies.company(name="linkedin")
    """

    def __init__(self, client: LinkedInApiClient) -> None:
        self._client = client
        self.companies = Companies(client)

    @classmethod
    def from_access_token(
        cls,
        access_token: str | None = None,
        settings: Settings | None = None,
    ) -> "LinkedInApi":
        """Open a session; the token falls back to the configured one."""
        settings = settings or current_settings()
        logger.debug("Opening LinkedIn API session", extra={"base_url": settings.api_base_url})
        return cls(LinkedInApiClient.from_settings(settings, access_token))

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "LinkedInApi":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
