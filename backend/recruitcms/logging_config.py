import logging
import logging.config
import sys


def build_logging_config(level="INFO", json_output=False):
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": "pythonjsonlogger.json.JsonFormatter",
                "format": "%(asctime)s %(levelname)s %(name)s %(message)s",
                "json_ensure_ascii": False,
            },
            "console": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json" if json_output else "console",
                "stream": sys.stdout,
            },
        },
        "loggers": {
            "recruitcms": {
                "handlers": ["console"],
                "level": level,
                "propagate": False,
            },
        },
        "root": {
            "handlers": ["console"],
            "level": level,
        },
    }


def configure_logging(app):
    """
    Configure logging from the app config (LOG_LEVEL, LOG_JSON).
    """
    config = build_logging_config(
        level=app.config.get("LOG_LEVEL", "INFO"),
        json_output=app.config.get("LOG_JSON", False),
    )
    logging.config.dictConfig(config)

    logger = logging.getLogger("recruitcms")
    logger.debug("Logging configured (level=%s)", app.config.get("LOG_LEVEL"))
    return logger
