import logging
from logging.config import dictConfig

from formapi.config import GlobalConfig


def configure_logging(config: GlobalConfig) -> None:
    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "console": {
                    "class": "logging.Formatter",
                    "datefmt": "%Y-%m-%dT%H:%M:%S",
                    "format": "%(asctime)s %(levelname)-8s %(name)s:%(lineno)d - %(message)s",
                },
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "level": "DEBUG",
                    "formatter": "console",
                },
            },
            "loggers": {
                "formapi": {
                    "handlers": ["default"],
                    "level": config.LOG_LEVEL.upper(),
                    "propagate": False,
                },
                # the driver is chatty at DEBUG
                "pymongo": {"handlers": ["default"], "level": "WARNING"},
            },
        }
    )
    logging.getLogger(__name__).debug("Logging configured at %s", config.LOG_LEVEL)
