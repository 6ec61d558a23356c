"""
Environment driven settings.
"""
import os

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_LEVEL = "WARNING"


def resolve_log_level(value: str) -> str:
    """Upper-cased level name, or the default when the name is unknown."""
    level = (value or "").strip().upper()
    return level if level in LOG_LEVELS else DEFAULT_LOG_LEVEL


LOG_LEVEL = resolve_log_level(os.getenv("ANONCREDS_LOG_LEVEL", DEFAULT_LOG_LEVEL))
# empty means no log file
LOG_FILE = os.getenv("ANONCREDS_LOG_FILE", "")
