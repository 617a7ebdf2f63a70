"""Runtime configuration: environment variables and derived constants.

Loads ``BOT_TOKEN``, ``API_BASE_URL``, ``REQUEST_TIMEOUT``, ``LOG_LEVEL`` and
``LOG_FILE`` from the environment via ``python-dotenv``.  Values are resolved
once at import time; the codec modules never import this one, only
:meth:`TelegramClient.from_config <telegram_dataclass.client.TelegramClient.from_config>` does.
"""

# ── stdlib ───────────────────────────────────────────────────────────────────
import logging
import os

# ── third-party ──────────────────────────────────────────────────────────────
from dotenv import load_dotenv

# ── package ──────────────────────────────────────────────────────────────────
from telegram_dataclass.logger import TelegramLogger

# ── Environment bootstrap ────────────────────────────────────────────────────
load_dotenv()

DEFAULT_API_BASE_URL = "https://api.telegram.org"
DEFAULT_REQUEST_TIMEOUT = 10.0


# ── Helper functions (private) ───────────────────────────────────────────────


def _parse_timeout(raw: str | None, default: float = DEFAULT_REQUEST_TIMEOUT) -> float:
    """Parse a positive number of seconds; anything else falls back to *default*."""
    if not raw:
        return default
    try:
        value = float(raw.strip())
    except ValueError:
        return default
    return value if value > 0 else default


def _parse_level(raw: str | None, default: int = logging.INFO) -> int:
    """Map a level name such as ``"debug"`` to its numeric value."""
    if not raw:
        return default
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else default


def _strip_base_url(raw: str | None) -> str:
    return (raw or DEFAULT_API_BASE_URL).strip().rstrip("/")


# ── Public constants ─────────────────────────────────────────────────────────

BOT_TOKEN: str | None = os.environ.get("BOT_TOKEN")
API_BASE_URL: str = _strip_base_url(os.environ.get("API_BASE_URL"))
REQUEST_TIMEOUT: float = _parse_timeout(os.environ.get("REQUEST_TIMEOUT"))
LOG_LEVEL: int = _parse_level(os.environ.get("LOG_LEVEL"))
LOG_FILE: str | None = os.environ.get("LOG_FILE") or None

BASE_URL: str = f"{API_BASE_URL}/bot{BOT_TOKEN or ''}"
FILE_BASE_URL: str = f"{API_BASE_URL}/file/bot{BOT_TOKEN or ''}"

# ── Logger (used for startup diagnostics below) ──────────────────────────────
logger = TelegramLogger.get_logger(LOG_LEVEL, LOG_FILE)


# ── Startup diagnostics ─────────────────────────────────────────────────────

if BOT_TOKEN:
    logger.info("Config loaded: BOT_TOKEN is set, BASE_URL ready", extra={"api_base_url": API_BASE_URL})
else:
    logger.warning("Config loaded: BOT_TOKEN is NOT set", extra={"api_base_url": API_BASE_URL})

logger.debug(
    "Client settings resolved",
    extra={"request_timeout": REQUEST_TIMEOUT, "log_file": LOG_FILE},
)
