"""
Companies API.

Covers company profiles, company updates and their statistics, sharing as a
company, and following companies. Methods that address "a company" accept one
of the selector keywords ``domain``, ``id``, ``url``, ``name`` or
``is_admin``; without one the request targets the companies the
authenticated member administers (``/companies/~``). Any other keyword is
sent as a query parameter, with ``fields`` turned into a field selector.
"""

import json
import logging
from collections.abc import Callable, MutableMapping
from typing import Any
from urllib.parse import quote_plus

from linkedin_oauth2.api_resource import APIResource

logger = logging.getLogger(__name__)


def _flag(value: Any) -> str:
    return str(value).lower() if isinstance(value, bool) else str(value)


# Checked in order; the first present key wins.
COMPANY_SELECTORS: tuple[tuple[str, Callable[[Any], str]], ...] = (
    ("domain", lambda domain: f"?email-domain={quote_plus(str(domain))}"),
    ("id", lambda company_id: f"/{company_id}"),
    ("url", lambda url: f"/url={quote_plus(str(url))}"),
    ("name", lambda name: f"/universal-name={quote_plus(str(name))}"),
    ("is_admin", lambda is_admin: f"?is-company-admin={_flag(is_admin)}"),
)


def company_path(options: MutableMapping[str, Any]) -> str:
    """
    Build the ``/companies`` path for the selector found in ``options``.

    Selector keys are popped from ``options`` as they are checked, so keys
    ranked below the one that matched are left for the query string. A
    selector set to ``None`` or ``False`` is treated as absent.
    """
    for key, render in COMPANY_SELECTORS:
        value = options.pop(key, None)
        if value is None or value is False:
            continue
        return f"/companies{render(value)}"
    return "/companies/~"


def company_resource(options: MutableMapping[str, Any], suffix: str = "") -> str:
    """Append ``suffix`` to the company path, ahead of any selector query string."""
    resource, sep, query = company_path(options).partition("?")
    return f"{resource}{suffix}{sep}{query}"


class Companies(APIResource):
    """Company pages, company shares and company following."""

    def company(self, **options: Any) -> dict[str, Any]:
        """Retrieve a company profile."""
        path = company_path(options)
        return self.get(path, options)

    def company_updates(self, **options: Any) -> dict[str, Any]:
        """Retrieve the feed of updates for a company (``event_type``, ``count``, ``start``)."""
        path = company_resource(options, "/updates")
        return self.get(path, options)

    def company_statistics(self, **options: Any) -> dict[str, Any]:
        """Retrieve statistics for a company page. Requires ``rw_company_admin``."""
        path = company_resource(options, "/company-statistics")
        return self.get(path, options)

    def company_historical_follow_statistics(self, **options: Any) -> dict[str, Any]:
        """
        Retrieve historical follower statistics for a company page.

        Accepts ``start_timestamp``, ``end_timestamp`` and ``time_granularity``.
        Requires ``rw_company_admin``.
        """
        path = company_resource(options, "/historical-follow-statistics")
        return self.get(path, options)

    def company_historical_status_update_statistics(self, **options: Any) -> dict[str, Any]:
        """
        Retrieve historical statistics about status updates for a company page.

        Accepts ``start_timestamp``, ``end_timestamp``, ``time_granularity``
        and ``update_key``. Requires ``rw_company_admin``.
        """
        path = company_resource(options, "/historical-status-update-statistics")
        return self.get(path, options)

    def company_updates_comments(self, update_key: str, **options: Any) -> dict[str, Any]:
        """Retrieve comments on a company update."""
        path = company_resource(options, f"/updates/key={update_key}/update-comments")
        return self.get(path, options)

    def company_updates_likes(self, update_key: str, **options: Any) -> dict[str, Any]:
        """Retrieve likes on a company update."""
        path = company_resource(options, f"/updates/key={update_key}/likes")
        return self.get(path, options)

    def company_products(self, company_id: str, **options: Any) -> dict[str, Any]:
        return self.get(f"/companies/{company_id}/products", options)

    def is_company_share_enabled(self, company_id: str) -> dict[str, Any]:
        """Check whether the company page accepts shares at all."""
        return self.get(f"/companies/{company_id}/is-company-share-enabled")

    def can_share_as_company(self, company_id: str) -> dict[str, Any]:
        """Check whether the authenticated member may share as the company."""
        return self.get(f"/companies/{company_id}/relation-to-viewer/is-company-share-enabled")

    def add_company_share(self, company_id: str, share: dict[str, Any]) -> dict[str, Any]:
        """
        Create a share for a company the authenticated member administers.

        Visibility defaults to ``{"code": "anyone"}`` unless ``share`` sets it.
        Requires ``rw_company_admin``.
        """
        path = f"/companies/{company_id}/shares"
        defaults: dict[str, Any] = {"visibility": {"code": "anyone"}}
        body = json.dumps({**defaults, **share})
        logger.debug("Adding company share", extra={"company_id": company_id})
        return self.post(path, body, {"Content-Type": "application/json"})

    def followed_companies(self, **options: Any) -> dict[str, Any]:
        return self.get("/people/~/following/companies", options)

    def suggested_companies_to_follow(self, **options: Any) -> dict[str, Any]:
        return self.get("/people/~/suggestions/to-follow/companies", options)

    def follow_company(self, company_id: str) -> dict[str, Any]:
        """Start following a company as the authenticated member."""
        logger.debug("Following company", extra={"company_id": company_id})
        return self.post("/people/~/following/companies", {"id": company_id})

    def unfollow_company(self, company_id: str) -> dict[str, Any]:
        """Stop following a company as the authenticated member."""
        logger.debug("Unfollowing company", extra={"company_id": company_id})
        return self.delete(f"/people/~/following/companies/id={company_id}")
