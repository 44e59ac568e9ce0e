"""Logging setup for applications that embed the configurator.

The library only creates module loggers; it never installs handlers on
import.  Hosts call :func:`setup_logging` once at startup.
"""

import logging
import os
import sys

LOG_LEVEL = os.environ.get("VEHICLE_CONFIGURATOR_LOG_LEVEL", "WARNING")
LOGGER_NAME = "vehicle_configurator"


def setup_logging(level: str | None = None) -> logging.Logger:
    """Attach a stderr handler to the ``vehicle_configurator`` logger.

    ``level`` defaults to ``$VEHICLE_CONFIGURATOR_LOG_LEVEL`` (WARNING).
    Calling again replaces the handler instead of stacking a second one.
    """
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, (level or LOG_LEVEL).upper(), logging.WARNING))
    logger.handlers.clear()
    logger.addHandler(console_handler)
    logger.propagate = False

    logger.debug("vehicle_configurator logging initialized")
    return logger
