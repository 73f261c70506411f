"""Entry point for the LinkedIn Companies MCP server."""

import logging
import os

from linkedin_oauth2.server import build_server
from linkedin_oauth2.settings import Settings

MISSING_TOKEN_MESSAGE = (
    "LINKEDIN_ACCESS_TOKEN is not set. Exchange an authorization code with "
    "LinkedInOAuth.get_access_token() and export the token before starting the server."
)


def _configure_logging() -> None:
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )


def main() -> None:
    """Bootstrap and run the SSE server."""
    _configure_logging()
    logger = logging.getLogger("linkedin-mcp-server")
    settings = Settings.load()
    if not settings.access_token:
        logger.error("No LinkedIn access token configured; refusing to start.")
        raise SystemExit(MISSING_TOKEN_MESSAGE)
    server = build_server(settings)

    try:
        server.startup()
        logger.info(
            "MCP SSE server ready at http://localhost:%s/sse",
            settings.mcp_sse_port,
        )
        server.serve_forever()
    except KeyboardInterrupt:
        logger.info("Shutdown requested (Ctrl+C).")
    except Exception:
        logger.exception("Server stopped due to an unexpected error.")
        raise
    finally:
        server.shutdown()
        logger.info("Server shutdown complete.")


if __name__ == "__main__":
    main()
