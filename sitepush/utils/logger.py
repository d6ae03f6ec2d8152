"""Centralized logging configuration for sitepush.

Provides coloured console output via *colorama* and supports ``--verbose``
/ ``--quiet`` flags through log-level selection.

Usage::

    from sitepush.utils.logger import get_logger

    log = get_logger(__name__)
    log.info("Listing bucket %s", bucket)
    log.debug("Local manifest: %d file(s)", count)  # only shown with --verbose
"""
import logging
import sys

from colorama import Fore, Style

__all__ = ["get_logger", "setup_logging"]

# ---------------------------------------------------------------------------
# Custom formatter that injects colorama colours per level
# ---------------------------------------------------------------------------

_LEVEL_COLOURS = {
    logging.DEBUG: Fore.WHITE,
    logging.INFO: Fore.CYAN,
    logging.WARNING: Fore.YELLOW,
    logging.ERROR: Fore.RED,
    logging.CRITICAL: Fore.RED + Style.BRIGHT,
}

# AWS SDK loggers are noisy at INFO/DEBUG
_THIRD_PARTY_LOGGERS = ("boto3", "botocore", "s3transfer", "urllib3")


class ColouredFormatter(logging.Formatter):
    """Formatter that prepends coloured level tags to log messages.

    Records logged with ``extra={"key": ...}`` name the object key they
    concern, appended as a dimmed ``(key: ...)`` suffix.
    """

    def format(self, record: logging.LogRecord) -> str:
        colour = _LEVEL_COLOURS.get(record.levelno, "")
        reset = Style.RESET_ALL
        msg = super().format(record)
        key = getattr(record, "key", None)
        if key:
            msg = f"{msg} {Style.DIM}(key: {key}){reset}"
        return f"{colour}[{record.levelname}]{reset} {msg}"


# ---------------------------------------------------------------------------
# Module-level setup
# ---------------------------------------------------------------------------

_ROOT_LOGGER_NAME = "sitepush"
_configured = False


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure the root *sitepush* logger.

    Call once during CLI bootstrap (typically in ``main()``).

    Args:
        verbose: If *True*, set level to ``DEBUG`` and let AWS SDK
            debug output through.
        quiet: If *True*, set level to ``WARNING`` (overrides *verbose*).
    """
    global _configured  # noqa: PLW0603

    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    root = logging.getLogger(_ROOT_LOGGER_NAME)
    root.setLevel(level)

    # Avoid adding duplicate handlers on repeated calls
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(ColouredFormatter("%(message)s"))
        root.addHandler(handler)
    else:
        for handler in root.handlers:
            handler.setLevel(level)

    sdk_level = logging.DEBUG if verbose and not quiet else logging.WARNING
    for name in _THIRD_PARTY_LOGGERS:
        logging.getLogger(name).setLevel(sdk_level)

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a child logger under the *sitepush* namespace.

    If :func:`setup_logging` has not been called yet, a default
    ``INFO``-level configuration is applied automatically.

    Args:
        name: Typically ``__name__`` of the calling module.

    Returns:
        A :class:`logging.Logger` instance.
    """
    if not _configured:
        setup_logging()

    if not name.startswith(_ROOT_LOGGER_NAME):
        name = f"{_ROOT_LOGGER_NAME}.{name}"

    return logging.getLogger(name)
