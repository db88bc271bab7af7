"""Logging configuration for richtext-find."""

import sys

from loguru import logger

# Verbose output names the pipeline stage (walker, matcher, controller, ...).
_VERBOSE_FORMAT = "{level.icon} {name}: {message}"
_DEFAULT_FORMAT = "{level.icon} {message}"


def configure_logging(*, verbose: bool = False, quiet: bool = False) -> None:
    """Send loguru output to stderr.

    stdout stays clean for JSON output and for the MCP stdio transport.

    Args:
        verbose: Log pipeline steps at DEBUG, tagged with the emitting module.
        quiet: Only log dropped actions and failures (WARNING and up).
            Ignored when verbose is set.
    """
    logger.remove()
    if verbose:
        logger.add(sys.stderr, level="DEBUG", format=_VERBOSE_FORMAT)
    else:
        logger.add(sys.stderr, level="WARNING" if quiet else "INFO", format=_DEFAULT_FORMAT)
