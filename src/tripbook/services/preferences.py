"""User preferences persisted as key-value settings."""

import logging

from tripbook.config import get_config
from tripbook.db.store import TripStore
from tripbook.errors import ErrorCode, ValidationError
from tripbook.models.summaries import Preferences
from tripbook.services.expenses import SUPPORTED_CURRENCIES

logger = logging.getLogger(__name__)

PREFERRED_CURRENCY_KEY = "preferred_currency"
DARK_MODE_KEY = "use_dark_mode"


def load_preferences(store: TripStore) -> Preferences:
    currency = store.get_setting(PREFERRED_CURRENCY_KEY) or get_config().default_currency
    dark_mode = store.get_setting(DARK_MODE_KEY, "false") == "true"
    return Preferences(preferred_currency=currency, dark_mode=dark_mode)


def set_preferred_currency(store: TripStore, currency_code: str) -> Preferences:
    code = currency_code.strip().upper()
    if code not in SUPPORTED_CURRENCIES:
        raise ValidationError(f"Unsupported currency {currency_code!r}", code=ErrorCode.UNSUPPORTED_CURRENCY)
    store.set_setting(PREFERRED_CURRENCY_KEY, code)
    logger.info("Preferred currency set to %s", code)
    return load_preferences(store)


def toggle_dark_mode(store: TripStore) -> Preferences:
    dark_mode = not load_preferences(store).dark_mode
    store.set_setting(DARK_MODE_KEY, "true" if dark_mode else "false")
    return load_preferences(store)
