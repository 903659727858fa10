"""Run Alembic migrations programmatically against the configured database."""

import io
import logging
from pathlib import Path

from alembic.config import Config

from alembic import command
from tripbook.config import get_config

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parents[3]


def run_migrations(database_url: str | None = None) -> dict[str, str]:
    """Upgrade a tripbook database to the latest revision.

    Migrates `database_url`, or the configured TRIPBOOK_DATABASE_URL when not
    given. Returns {"status": "success", "output": ...} where output is the
    INFO log alembic wrote during the upgrade, one "Running upgrade" line per
    applied revision. Failures are logged and re-raised.
    """
    cfg = Config(str(PROJECT_ROOT / "alembic.ini"))
    cfg.set_main_option("script_location", str(PROJECT_ROOT / "alembic"))
    url = database_url or get_config().database_url
    cfg.attributes["database_url"] = url
    cfg.attributes["configure_logger"] = False

    output_buf = io.StringIO()
    stream_handler = logging.StreamHandler(output_buf)
    alembic_logger = logging.getLogger("alembic")
    previous_level = alembic_logger.level
    alembic_logger.setLevel(logging.INFO)
    alembic_logger.addHandler(stream_handler)

    try:
        command.upgrade(cfg, "head")
        output = output_buf.getvalue()
        logger.info("Migrated %s: %s", url, output.strip())
        return {"status": "success", "output": output}
    except Exception as e:
        logger.error("Migration failed: %s", e)
        raise
    finally:
        alembic_logger.removeHandler(stream_handler)
        alembic_logger.setLevel(previous_level)
