import logging, sys
from logging.handlers import RotatingFileHandler

from pythonjsonlogger.json import JsonFormatter

from .config import Settings, settings as default_settings

TEXT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
JSON_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def setup_logging(settings: Settings | None = None) -> list[logging.Handler]:
    settings = settings or default_settings
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    if settings.log_file:
        handlers.append(
            RotatingFileHandler(
                settings.log_file,
                maxBytes=settings.log_max_bytes,
                backupCount=settings.log_backup_count,
            )
        )

    # force: calling twice replaces the handlers instead of stacking them
    logging.basicConfig(level=level, handlers=handlers, force=True)

    if settings.log_json:
        formatter: logging.Formatter = JsonFormatter(JSON_FORMAT)
    else:
        formatter = logging.Formatter(TEXT_FORMAT)

    for handler in handlers:
        handler.setFormatter(formatter)

    return handlers
