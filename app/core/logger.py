import logging

from colorlog import ColoredFormatter

from app.core.settings import settings

LOG_FORMAT = (
    "%(log_color)s%(asctime)s %(levelname)-7s%(reset)s "
    "%(purple)s%(name)s%(reset)s %(message)s"
)

LOG_COLORS = {
    "DEBUG": "white",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}


def build_handler() -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setFormatter(ColoredFormatter(LOG_FORMAT, datefmt="%H:%M:%S", log_colors=LOG_COLORS))
    return handler


def configure_logging(name: str, level: str, debug: bool = False) -> logging.Logger:
    """
    Set up the application logger once; repeated calls reuse its handler.

    SQLAlchemy's engine logger shares the handler and only reports statements
    in debug mode.
    """
    handler = build_handler()

    app_logger = logging.getLogger(name)
    app_logger.setLevel(level.upper())
    app_logger.propagate = False
    if not app_logger.handlers:
        app_logger.addHandler(handler)

    sql_logger = logging.getLogger("sqlalchemy.engine")
    sql_logger.setLevel(logging.INFO if debug else logging.WARNING)
    if not sql_logger.handlers:
        sql_logger.addHandler(handler)

    return app_logger


logger = configure_logging("catalog_admin", settings.LOG_LEVEL, settings.DEBUG)
