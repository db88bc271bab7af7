"""Configuration constants for richtext-find."""

import os

from loguru import logger

# Delay between the last term change and the scan it triggers.
DEBOUNCE_SECONDS: float = 0.3

# Overrides DEBOUNCE_SECONDS, in whole milliseconds.
DEBOUNCE_ENV_VAR: str = "RICHTEXT_FIND_DEBOUNCE_MS"

# Characters of leaf text shown on each side of a match in CLI/MCP output.
SNIPPET_CONTEXT_CHARS: int = 20

# Paging for MCP find results.
DEFAULT_RESULT_LIMIT: int = 50
MAX_RESULT_LIMIT: int = 500


def resolve_debounce_seconds() -> float:
    """Return the debounce window, honouring the environment override."""
    raw = os.environ.get(DEBOUNCE_ENV_VAR)
    if raw is None or not raw.strip():
        return DEBOUNCE_SECONDS
    try:
        millis = int(raw)
    except ValueError:
        logger.warning("Ignoring {}={!r}: not an integer", DEBOUNCE_ENV_VAR, raw)
        return DEBOUNCE_SECONDS
    if millis < 0:
        logger.warning("Ignoring {}={!r}: negative delay", DEBOUNCE_ENV_VAR, raw)
        return DEBOUNCE_SECONDS
    return millis / 1000
