"""Base class shared by LinkedIn API resources."""

from collections.abc import Mapping
from typing import Any

from linkedin_oauth2.client import LinkedInApiClient


class APIResource:
    """Resource bound to a shared :class:`LinkedInApiClient`."""

    def __init__(self, client: LinkedInApiClient) -> None:
        self._client = client

    def get(self, path: str, options: Mapping[str, Any] | None = None) -> dict[str, Any]:
        return self._client.get(path, options)

    def post(
        self,
        path: str,
        body: str | Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> dict[str, Any]:
        return self._client.post(path, body, headers)

    def delete(self, path: str) -> dict[str, Any]:
        return self._client.delete(path)
