import contextvars
import logging
import os
import sys
from typing import Optional

# Context variable carrying the uid of the action whose inputs are being processed
_ACTION_UID: contextvars.ContextVar[str] = contextvars.ContextVar("action_uid", default="-")

_PACKAGE_LOGGER = "actioninputs"


class _ActionContextFilter(logging.Filter):
    """Logging filter that injects the current action uid from contextvars into the record."""

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        record.action_uid = _ACTION_UID.get()
        return True


def _build_formatter() -> logging.Formatter:
    return logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | action=%(action_uid)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _resolve_level(level: Optional[str]) -> int:
    level = level or os.getenv("ACTIONINPUTS_LOG_LEVEL") or "INFO"
    return getattr(logging, level.upper(), logging.INFO)


def configure_root_logger(level: Optional[str] = None) -> None:
    """
    Attach the actioninputs stdout handler to the root logger.

    Only the ``actioninputs`` namespace is set to the requested level; the
    root logger keeps whatever level the host application chose.

    Args:
        level: Log level for actioninputs logs (DEBUG, INFO, WARNING, ERROR).
               Falls back to ``ACTIONINPUTS_LOG_LEVEL`` and then INFO.

    Safe to call multiple times; it will not duplicate handlers (idempotent).
    """
    root = logging.getLogger()
    package_logger = logging.getLogger(_PACKAGE_LOGGER)
    package_logger.setLevel(_resolve_level(level))

    for h in root.handlers:
        if isinstance(h, logging.StreamHandler) and any(isinstance(f, _ActionContextFilter) for f in h.filters):
            return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_build_formatter())
    handler.addFilter(_ActionContextFilter())
    root.addHandler(handler)


def get_logger(name: str = _PACKAGE_LOGGER, level: Optional[str] = None) -> logging.Logger:
    """
    Get a module-specific logger that reports the current action uid.
    """
    configure_root_logger(level)
    return logging.getLogger(name)


def current_action_uid() -> str:
    return _ACTION_UID.get()


def push_action_uid(action_uid: Optional[str]) -> Optional[contextvars.Token]:
    """Set the current action uid in context and return a token for later reset."""
    if not action_uid:
        return None
    return _ACTION_UID.set(action_uid)


def reset_action_uid(token: Optional[contextvars.Token]) -> None:
    """Reset the action uid context using the provided token (if any)."""
    if token is None:
        return
    try:
        _ACTION_UID.reset(token)
    except ValueError:
        # Token created in a different context; nothing to restore here
        pass
