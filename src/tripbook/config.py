from os import environ

from pydantic import BaseModel, ConfigDict, Field

_TRUTHY = {"1", "true", "yes", "on"}


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    database_url: str
    default_currency: str = Field(..., pattern="^[A-Z]{3}$")
    default_color: str
    first_weekday: int = Field(..., ge=1, le=7)
    sql_echo: bool = False
    environment: str


_cached_config: Config | None = None


def _reset_config() -> None:
    """Reset cached config. For testing only."""
    global _cached_config
    _cached_config = None


def get_config() -> Config:
    global _cached_config
    if _cached_config is not None:
        return _cached_config

    _cached_config = Config(
        database_url=environ.get("TRIPBOOK_DATABASE_URL", "sqlite:///tripbook.db"),
        default_currency=environ.get("TRIPBOOK_DEFAULT_CURRENCY", "USD"),
        default_color=environ.get("TRIPBOOK_DEFAULT_COLOR", "#4A90E2"),
        first_weekday=int(environ.get("TRIPBOOK_FIRST_WEEKDAY", "1")),
        sql_echo=environ.get("TRIPBOOK_SQL_ECHO", "false").lower() in _TRUTHY,
        environment=environ.get("ENVIRONMENT", "local"),
    )
    return _cached_config
