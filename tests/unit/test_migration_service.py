import logging
from unittest.mock import patch

import pytest

from tripbook.services.migration import run_migrations


@patch("tripbook.services.migration.command")
def test_run_migrations_success(mock_command):
    with patch("tripbook.services.migration.Config") as mock_config:
        result = run_migrations("sqlite:///trips.db")
        assert result["status"] == "success"
        cfg = mock_config.return_value
        mock_command.upgrade.assert_called_once_with(cfg, "head")


@patch("tripbook.services.migration.command")
def test_run_migrations_raises_on_failure(mock_command):
    mock_command.upgrade.side_effect = Exception("database is locked")
    with patch("tripbook.services.migration.Config"):
        with pytest.raises(Exception, match="database is locked"):
            run_migrations("sqlite:///trips.db")


@patch("tripbook.services.migration.command")
def test_run_migrations_restores_alembic_log_level(mock_command):
    alembic_logger = logging.getLogger("alembic")
    alembic_logger.setLevel(logging.WARNING)
    handlers_before = list(alembic_logger.handlers)
    try:
        with patch("tripbook.services.migration.Config"):
            run_migrations("sqlite:///trips.db")
        assert alembic_logger.level == logging.WARNING
        assert alembic_logger.handlers == handlers_before
    finally:
        alembic_logger.setLevel(logging.NOTSET)
