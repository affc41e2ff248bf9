#!/usr/bin/env python3
"""Apply Alembic migrations up to head, reporting failures to Logfire."""

import sys

import logfire
from alembic import command
from alembic.config import Config

from pact.config import Settings
from pact.util.observability import configure_logfire


def main(revision: str = "head") -> int:
    """Upgrade the database schema to ``revision``."""
    settings = Settings()
    configure_logfire(settings)

    try:
        with logfire.span("migrations.upgrade", revision=revision):
            alembic_cfg = Config("alembic.ini")
            command.upgrade(alembic_cfg, revision)

        logfire.info("Database migrations completed", revision=revision)
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Don't let the API start against a half-migrated schema
        raise


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
