#!/usr/bin/env python3
"""Upgrade the database schema to the latest revision."""

import sys

import logfire
from alembic import command
from alembic.config import Config

from stackit.config import Settings
from stackit.util.logging import setup_logging
from stackit.util.observability import configure_logfire


def main(revision: str = "head") -> int:
    """Run migrations up to ``revision`` and log any failure to Logfire."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    with logfire.span("run_migrations", revision=revision):
        try:
            # migrations/env.py reads the database URL from Settings
            command.upgrade(Config("alembic.ini"), revision)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                revision=revision,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Re-raise so a deploy never starts against a broken schema
            raise

        logfire.info("Database migrations completed", revision=revision)
        return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
