#!/usr/bin/env python3
"""Start the StackIt API, reporting startup failures to Logfire."""

import sys

import logfire
import uvicorn

from stackit.config import Settings
from stackit.util.logging import setup_logging
from stackit.util.observability import configure_logfire


def main() -> int:
    """Configure logging and observability, then serve the API."""
    settings = Settings()

    # Both must be configured before the app module is imported by uvicorn
    setup_logging(settings)
    configure_logfire(settings)

    try:
        logfire.info(
            "Starting StackIt API",
            host=settings.host,
            port=settings.port,
            git_sha=settings.git_sha,
        )

        uvicorn.run(
            "stackit.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )

        return 0

    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the process exits non-zero
        raise


if __name__ == "__main__":
    sys.exit(main())
