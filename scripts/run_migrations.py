#!/usr/bin/env python3
"""Bring the Askboard schema and tag catalogue up to date.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py 3f2a9c1d   # upgrade to a revision
"""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from askboard.config import Settings
from askboard.util.observability import configure_logfire

# alembic.ini sits at the repository root, next to scripts/
ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def build_alembic_config() -> Config:
    """Alembic config that works from any working directory."""
    alembic_cfg = Config(str(ALEMBIC_INI))
    alembic_cfg.set_main_option(
        "script_location", str(ALEMBIC_INI.parent / "migrations")
    )
    return alembic_cfg


def main(argv: list[str]) -> int:
    """Upgrade to the requested revision, logging failures to Logfire."""
    settings = Settings()
    configure_logfire(settings)

    revision = argv[0] if argv else "head"
    with logfire.span("migrations.upgrade", revision=revision):
        try:
            command.upgrade(build_alembic_config(), revision)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                revision=revision,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # The app must not start against a half-migrated schema
            raise

    logfire.info("Database migrated", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
