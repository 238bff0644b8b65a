import logging
import logging.config


def setup_logging(debug: bool = False) -> None:
    level = "DEBUG" if debug else "INFO"
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": "%(asctime)s %(levelname)s %(name)s %(message)s",
                }
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "stream": "ext://sys.stderr",
                }
            },
            "loggers": {
                "": {
                    "handlers": ["console"],
                    "level": level,
                },
                "vobject": {
                    "level": "DEBUG" if debug else "ERROR",
                },
            },
        }
    )
