"""SDK configuration: environment variables and derived constants.

Loads ``BOT_TOKEN``, ``TELEGRAM_API_URL``, ``TELEGRAM_TIMEOUT``,
``LOG_LEVEL`` and ``LOG_DIR`` from the environment via ``python-dotenv``.
All values are resolved at import time so other modules can
``from botcore.config import …`` without repeated lookups.
"""

# ── stdlib ───────────────────────────────────────────────────────────────────
import logging
import os

# ── third-party ──────────────────────────────────────────────────────────────
from dotenv import load_dotenv

# ── core ─────────────────────────────────────────────────────────────────────
from botcore.logger import SDKLogger

# ── Environment bootstrap ────────────────────────────────────────────────────
load_dotenv()


# ── Helper functions (private) ───────────────────────────────────────────────


def _parse_log_level(raw: str | None) -> int:
    """Map a level name such as ``"debug"`` to its :mod:`logging` constant.

    Unknown names fall back to ``INFO``.
    """
    if not raw:
        return logging.INFO
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def _parse_timeout(raw: str | None) -> float | None:
    """Parse ``TELEGRAM_TIMEOUT`` as a positive number of seconds.

    Returns ``None`` (no explicit timeout) when unset or invalid.
    """
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if value > 0 else None


# ── Public constants ─────────────────────────────────────────────────────────

BOT_TOKEN: str | None = os.environ.get("BOT_TOKEN")
API_BASE_URL: str = os.environ.get("TELEGRAM_API_URL", "https://api.telegram.org").rstrip("/")
REQUEST_TIMEOUT: float | None = _parse_timeout(os.environ.get("TELEGRAM_TIMEOUT"))
LOG_LEVEL: int = _parse_log_level(os.environ.get("LOG_LEVEL"))
LOG_DIR: str | None = os.environ.get("LOG_DIR") or None

# ── Logger (used for startup diagnostics at the bottom of this module) ───────
logger = SDKLogger.get_logger(LOG_LEVEL, LOG_DIR)


# ── Startup diagnostics ─────────────────────────────────────────────────────

if BOT_TOKEN:
    logger.info("Config loaded, BOT_TOKEN is set", extra={"api_base_url": API_BASE_URL})
else:
    logger.warning("Config loaded, BOT_TOKEN is NOT set")

if os.environ.get("TELEGRAM_TIMEOUT") and REQUEST_TIMEOUT is None:
    logger.warning("Ignoring invalid TELEGRAM_TIMEOUT", extra={"raw_value": os.environ.get("TELEGRAM_TIMEOUT")})
