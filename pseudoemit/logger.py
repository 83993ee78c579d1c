"""Module in charge of logger initialization and settings."""
import logging.config
from copy import deepcopy
from typing import Optional

from pseudoemit.util.options import Options

PACKAGE_LOGGER = "pseudoemit"
DEFAULT_FORMAT = "[%(filename)s:%(lineno)s %(funcName)s()] %(levelname)s - %(message)s"
LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": True,
    "formatters": {
        "standard": {"format": DEFAULT_FORMAT},
    },
    "handlers": {
        "default": {
            "level": "DEBUG",
            "formatter": "standard",
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stderr",
        },
    },
    "loggers": {
        "": {"handlers": ["default"], "level": "WARNING", "propagate": False},  # root logger
        # fired rewrite rules are logged at DEBUG, records reach the root handler
        PACKAGE_LOGGER: {"level": "WARNING", "propagate": True},
    },
}


def configure_logging(level: Optional[str] = None, options: Optional[Options] = None):
    """Set the level of the pseudoemit logger, taken from level or logging.log_level. Other libraries stay at WARNING."""
    if level is not None:
        log_level = level.upper()
    else:
        log_level = (options if options is not None else Options.load_default_options()).log_level
    config = deepcopy(LOGGING_CONFIG)
    config["loggers"][PACKAGE_LOGGER]["level"] = log_level
    logging.config.dictConfig(config)
