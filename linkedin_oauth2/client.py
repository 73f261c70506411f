"""
Shared transport for LinkedIn API resources.

Resources build paths; this module turns them into GET/POST/DELETE requests,
decodes the JSON payloads, and maps failures onto :mod:`linkedin_oauth2.errors`.
"""

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import httpx

from linkedin_oauth2.errors import LinkedInError, error_for_status
from linkedin_oauth2.http_client import DEFAULT_HEADERS, create_linkedin_client
from linkedin_oauth2.settings import Settings

logger = logging.getLogger(__name__)


def field_selector(fields: str | list[str] | tuple[str, ...]) -> str:
    """Render a LinkedIn field selector such as ``:(id,name)``."""
    if isinstance(fields, str):
        fields = [fields]
    return f":({','.join(fields)})"


def _query_params(options: Mapping[str, Any]) -> dict[str, Any]:
    params: dict[str, Any] = {}
    for key, value in options.items():
        if value is None:
            continue
        if isinstance(value, bool):
            value = str(value).lower()
        params[key.replace("_", "-")] = value
    return params


@dataclass(slots=True)
class LinkedInApiClient:
    """Typed wrapper around the shared httpx Client."""

    _client: httpx.Client

    @classmethod
    def from_settings(cls, settings: Settings, access_token: str | None = None) -> "LinkedInApiClient":
        """Factory that builds the client from Settings."""
        token = access_token or settings.require_access_token()
        return cls(create_linkedin_client(settings, token))

    def close(self) -> None:
        """Close the underlying HTTP resources."""
        self._client.close()

    def get(self, path: str, options: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """
        Issue a GET request.

        ``fields`` in ``options`` becomes a field selector, ``headers`` extra
        request headers; everything else is sent as query parameters.
        """
        remaining = dict(options or {})
        fields = remaining.pop("fields", None)
        headers = remaining.pop("headers", None)
        # Selectors such as email-domain arrive in the path's query string.
        resource, _, query = path.partition("?")
        if fields:
            resource = f"{resource}{field_selector(fields)}"
        params = httpx.QueryParams(query).merge(_query_params(remaining))
        return self._request(
            "GET",
            resource,
            params=params or None,
            headers=_merge_headers(headers),
        )

    def post(
        self,
        path: str,
        body: str | Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> dict[str, Any]:
        """Issue a POST request; mapping bodies are sent as JSON."""
        kwargs: dict[str, Any] = {"headers": _merge_headers(headers)}
        if isinstance(body, Mapping):
            kwargs["json"] = dict(body)
        elif body is not None:
            kwargs["content"] = body
        return self._request("POST", path, **kwargs)

    def delete(self, path: str, headers: Mapping[str, str] | None = None) -> dict[str, Any]:
        return self._request("DELETE", path, headers=_merge_headers(headers))

    def _request(self, method: str, path: str, **kwargs: Any) -> dict[str, Any]:
        """Normalized request handler for all outgoing API calls."""

        def _transport_error(message: str, *, exc: Exception | None = None) -> LinkedInError:
            logger.error(
                message,
                extra={"method": method, "path": path},
                exc_info=exc,
            )
            return LinkedInError(message)

        logger.debug("LinkedIn API request", extra={"method": method, "path": path})
        try:
            response = self._client.request(method, path, **kwargs)
        except httpx.TimeoutException as exc:
            raise _transport_error(
                f"LinkedIn API request timed out ({method} {path}).",
                exc=exc,
            ) from exc
        except httpx.RequestError as exc:
            raise _transport_error(
                f"LinkedIn API request failed ({method} {path}): {exc!s}",
                exc=exc,
            ) from exc

        if response.is_error:
            snippet = response.text.strip()
            if len(snippet) > 512:
                snippet = f"{snippet[:512]}..."
            logger.warning(
                "LinkedIn API responded with error",
                extra={
                    "method": method,
                    "path": path,
                    "status_code": response.status_code,
                    "content": snippet,
                },
            )
            error_class = error_for_status(response.status_code)
            raise error_class(
                f"LinkedIn API error ({response.status_code}) during {method} {path}: {snippet or 'no body provided.'}",
                status_code=response.status_code,
                body=response.text,
            )

        if not response.content.strip():
            return {}

        try:
            data: dict[str, Any] = response.json()
        except json.JSONDecodeError as exc:
            logger.error(
                "LinkedIn API returned invalid JSON",
                extra={"method": method, "path": path},
            )
            raise LinkedInError(
                f"LinkedIn API returned invalid JSON during {method} {path}.",
                status_code=response.status_code,
                body=response.text,
            ) from exc

        return data


def _merge_headers(headers: Mapping[str, str] | None) -> dict[str, str]:
    merged = dict(DEFAULT_HEADERS)
    if headers:
        merged.update(headers)
    return merged
