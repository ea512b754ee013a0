import logging
from logging.config import dictConfig

# per-request chatter from the http stack; our own loggers stay at the app level
NOISY_LOGGERS = ("httpx", "httpcore", "urllib3", "uvicorn.access")

def configure_logging(level: str = "INFO") -> None:
    """
    Console logging for the app and scripts. Only the first call installs
    handlers; later calls just re-apply the level.
    """
    level = level.upper()
    if logging.getLogger().handlers:
        logging.getLogger("worksphere").setLevel(level)
        return

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": "%(asctime)s %(levelname)-7s %(name)s: %(message)s",
                }
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                }
            },
            "loggers": {
                "worksphere": {"level": level},
                **{name: {"level": "WARNING"} for name in NOISY_LOGGERS},
            },
            "root": {"handlers": ["console"], "level": level},
        }
    )
