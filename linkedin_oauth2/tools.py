"""MCP tool registrations exposing the LinkedIn Companies API."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Annotated, Any

from fastmcp import FastMCP
from pydantic import Field

from linkedin_oauth2.api import LinkedInApi
from linkedin_oauth2.errors import LinkedInError

logger = logging.getLogger(__name__)

CompanyId = Annotated[str, Field(description="Numeric LinkedIn company ID (e.g., '1337').")]


@dataclass
class CompanyToolDependencies:
    """Runtime dependencies required by the MCP tools."""

    api: LinkedInApi | None = None

    def attach_api(self, api: LinkedInApi) -> None:
        self.api = api

    def detach_api(self) -> None:
        self.api = None

    def require_api(self) -> LinkedInApi:
        if self.api is None:
            raise RuntimeError("LinkedIn API session is not initialized.")
        return self.api


def _validate_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValueError(f"{field_name} must be a non-empty string.")
    return value.strip()


def _log_tool_event(tool_name: str, event: str, **fields: object) -> None:
    logger.info(
        "company_tool_event",
        extra={"tool": tool_name, "event": event, **fields},
    )


def _with_error_handling(
    tool_name: str,
    action: Callable[[], dict[str, Any]],
) -> dict[str, Any]:
    try:
        result = action()
    except LinkedInError as exc:
        logger.warning("%s failed due to API error", tool_name, exc_info=True)
        _log_tool_event(tool_name, "api_error", error=str(exc), status_code=exc.status_code)
        return {"error": str(exc)}
    except Exception as exc:  # noqa: BLE001
        logger.exception("%s failed unexpectedly", tool_name)
        _log_tool_event(tool_name, "unexpected_error", error=str(exc))
        return {"error": f"Unexpected error: {exc}"}
    _log_tool_event(tool_name, "success")
    return result


def _selector(company_id: str | None, universal_name: str | None, email_domain: str | None) -> dict[str, str]:
    """Translate tool arguments into company selector keywords."""
    if company_id and company_id.strip():
        return {"id": company_id.strip()}
    if universal_name and universal_name.strip():
        return {"name": universal_name.strip()}
    if email_domain and email_domain.strip():
        return {"domain": email_domain.strip()}
    return {}


def register_company_tools(
    mcp: FastMCP,
    dependencies: CompanyToolDependencies,
) -> None:
    """Register MCP tools that proxy to the LinkedIn Companies API."""

    @mcp.tool(
        name="get_company",
        description="Looks up a LinkedIn company profile by ID, universal name, or email domain. With no identifier, returns the companies the authenticated member administers.",
    )
    def get_company(
        company_id: Annotated[str | None, Field(description="Numeric LinkedIn company ID.")] = None,
        universal_name: Annotated[str | None, Field(description="Company universal name as used in its page URL (e.g., 'linkedin').")] = None,
        email_domain: Annotated[str | None, Field(description="An email domain owned by the company (e.g., 'example.com').")] = None,
        fields: Annotated[list[str] | None, Field(description="Profile fields to return (e.g., ['id', 'name', 'description']).")] = None,
    ) -> dict[str, Any]:
        """Return the company profile payload."""
        api = dependencies.require_api()
        options: dict[str, Any] = _selector(company_id, universal_name, email_domain)
        if fields:
            options["fields"] = fields
        return _with_error_handling("get_company", lambda: api.companies.company(**options))

    @mcp.tool(
        name="get_company_updates",
        description="Retrieves the feed of recent updates posted by a company page.",
    )
    def get_company_updates(
        company_id: CompanyId,
        event_type: Annotated[str | None, Field(description="Restrict to one event type (e.g., 'status-update', 'job-posting').")] = None,
        count: Annotated[int, Field(description="Number of updates to return.", ge=1, le=250)] = 20,
        start: Annotated[int, Field(description="Offset of the first update to return.", ge=0)] = 0,
    ) -> dict[str, Any]:
        """Return a page of company updates."""
        company_id_value = _validate_non_empty(company_id, "company_id")
        api = dependencies.require_api()
        return _with_error_handling(
            "get_company_updates",
            lambda: api.companies.company_updates(
                id=company_id_value,
                event_type=event_type,
                count=count,
                start=start,
            ),
        )

    @mcp.tool(
        name="get_company_statistics",
        description="Retrieves follower and engagement statistics for a company page the authenticated member administers.",
    )
    def get_company_statistics(company_id: CompanyId) -> dict[str, Any]:
        """Return the statistics payload for the company page."""
        company_id_value = _validate_non_empty(company_id, "company_id")
        api = dependencies.require_api()
        return _with_error_handling(
            "get_company_statistics",
            lambda: api.companies.company_statistics(id=company_id_value),
        )

    @mcp.tool(
        name="share_as_company",
        description="Posts a share on behalf of a company page the authenticated member administers. Visible to anyone unless a visibility code is given.",
    )
    def share_as_company(
        company_id: CompanyId,
        comment: Annotated[str, Field(description="Text of the share.")],
        visibility: Annotated[str | None, Field(description="Visibility code, 'anyone' or 'connections-only'.")] = None,
    ) -> dict[str, Any]:
        """Create the share and return whatever LinkedIn acknowledges."""
        company_id_value = _validate_non_empty(company_id, "company_id")
        comment_value = _validate_non_empty(comment, "comment")
        share: dict[str, Any] = {"comment": comment_value}
        if visibility:
            share["visibility"] = {"code": visibility}
        api = dependencies.require_api()
        return _with_error_handling(
            "share_as_company",
            lambda: api.companies.add_company_share(company_id_value, share),
        )

    @mcp.tool(
        name="follow_company",
        description="Makes the authenticated member follow a company.",
    )
    def follow_company(company_id: CompanyId) -> dict[str, Any]:
        company_id_value = _validate_non_empty(company_id, "company_id")
        api = dependencies.require_api()

        def _call() -> dict[str, Any]:
            api.companies.follow_company(company_id_value)
            return {"company_id": company_id_value, "following": True}

        return _with_error_handling("follow_company", _call)

    @mcp.tool(
        name="unfollow_company",
        description="Makes the authenticated member stop following a company.",
    )
    def unfollow_company(company_id: CompanyId) -> dict[str, Any]:
        company_id_value = _validate_non_empty(company_id, "company_id")
        api = dependencies.require_api()

        def _call() -> dict[str, Any]:
            api.companies.unfollow_company(company_id_value)
            return {"company_id": company_id_value, "following": False}

        return _with_error_handling("unfollow_company", _call)

    logger.info("LinkedIn company tools registered.")
