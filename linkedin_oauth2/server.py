"""Server bootstrap exposing the LinkedIn Companies API as MCP tools."""

import logging

from fastmcp import FastMCP  # type: ignore[import-not-found]

from linkedin_oauth2.api import LinkedInApi
from linkedin_oauth2.settings import Settings
from linkedin_oauth2.tools import CompanyToolDependencies, register_company_tools


class ServerApp:
    """Owns the FastMCP instance and the LinkedIn session behind its tools."""

    def __init__(self, settings: Settings) -> None:
        self._logger = logging.getLogger(__name__)
        self._settings = settings
        self._api: LinkedInApi | None = None
        self._tool_dependencies = CompanyToolDependencies()
        self._mcp_app = FastMCP(
            name="LinkedIn Companies MCP Server",
            instructions=(
                "Look up LinkedIn company pages, read their updates and statistics, "
                "share as a company, and follow or unfollow companies."
            ),
        )
        register_company_tools(self._mcp_app, self._tool_dependencies)

    def startup(self) -> None:
        """Open the LinkedIn session used by the tools."""
        self._logger.info("Starting server bootstrap")
        self._api = LinkedInApi.from_access_token(settings=self._settings)
        self._tool_dependencies.attach_api(self._api)

    def shutdown(self) -> None:
        """Release acquired resources."""
        self._logger.info("Shutting down server bootstrap")
        if self._api is not None:
            self._api.close()
            self._api = None
        self._tool_dependencies.detach_api()

    def serve_forever(self) -> None:
        """Run the FastMCP SSE server until interrupted."""
        host = "0.0.0.0"
        port = self._settings.mcp_sse_port
        self._logger.info("Starting SSE transport", extra={"host": host, "port": port})
        self._mcp_app.run(transport="sse", host=host, port=port)

    async def serve_sse_async(self, host: str = "0.0.0.0") -> None:
        """Async helper for running the SSE transport (used by smoke tests)."""
        await self._mcp_app.run_http_async(
            transport="sse",
            host=host,
            port=self._settings.mcp_sse_port,
        )

    @property
    def mcp(self) -> FastMCP:
        """Expose the configured FastMCP instance."""
        return self._mcp_app


def build_server(settings: Settings) -> ServerApp:
    """Factory used by main.py to create the configured server instance."""
    return ServerApp(settings)
