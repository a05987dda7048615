"""Loggers for the Comet Python SDK.

Every SDK logger lives under the ``comet`` namespace, e.g.
``comet.serialization`` for parse diagnostics and ``comet.api`` for error
envelopes. The SDK installs no handlers on import; call
:func:`configure_logging` to route its output somewhere.

Example:
    >>> from comet import ClientConfig, configure_logging
    >>> configure_logging(ClientConfig(log_level="DEBUG"))
"""

import logging
from typing import Optional

from comet.config import ClientConfig


COMET_ROOT_LOGGER = "comet"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# handler installed by configure_logging, replaced on reconfiguration
_handler: Optional[logging.Handler] = None


def get_logger(name: str = "") -> logging.Logger:
    """Get the logger for an SDK component.

    Args:
        name: Component name, e.g. ``"serialization"``. Empty for the
            ``comet`` root logger.
    """
    if name:
        return logging.getLogger(f"{COMET_ROOT_LOGGER}.{name}")
    return logging.getLogger(COMET_ROOT_LOGGER)


def configure_logging(
    config: Optional[ClientConfig] = None,
    handler: Optional[logging.Handler] = None,
    format_string: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Apply a client configuration to the SDK loggers.

    Sets the ``comet`` logger to ``config.logging_level`` and attaches a
    single handler. Calling it again replaces the handler installed by the
    previous call instead of adding another one.

    Args:
        config: Configuration to apply. Defaults to ``ClientConfig()``.
        handler: Handler to attach. Defaults to a ``StreamHandler``.
        format_string: Format used when the handler has no formatter.

    Returns:
        The ``comet`` root logger.
    """
    global _handler
    if config is None:
        config = ClientConfig()

    logger = get_logger()
    logger.setLevel(config.logging_level)

    if handler is None:
        handler = logging.StreamHandler()
    if handler.formatter is None:
        handler.setFormatter(logging.Formatter(format_string))

    if _handler is not None and _handler is not handler:
        logger.removeHandler(_handler)
    if handler not in logger.handlers:
        logger.addHandler(handler)
    _handler = handler
    return logger


def set_level(level: int, component: str = "") -> None:
    """Set the level of one component logger, or of ``comet`` itself."""
    get_logger(component).setLevel(level)
