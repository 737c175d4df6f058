import logging
import sys

from pythonjsonlogger import jsonlogger

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s"

_SERVER_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error")

_handler: logging.Handler | None = None


def _json_handler() -> logging.Handler:
    """Returns the shared stdout handler, creating it on first use."""
    global _handler
    if _handler is None:
        _handler = logging.StreamHandler(sys.stdout)
        _handler.setFormatter(jsonlogger.JsonFormatter(LOG_FORMAT))
    return _handler


def setup_logging(
    name: str = "audio_notes", level: int = logging.INFO
) -> logging.Logger:
    """
    Routes application and uvicorn logs through one JSON stdout handler.

    The root and uvicorn loggers are configured once per process; later calls
    only look up the named logger, so modules can call this at import time.

    Args:
        name: Logger name, usually the calling module's ``__name__``.
        level: Level applied to the root and uvicorn loggers on first setup.

    Returns:
        logging.Logger: The logger for ``name``.
    """
    if _handler is None:
        handler = _json_handler()

        root_logger = logging.getLogger()
        root_logger.setLevel(level)
        root_logger.handlers = [handler]

        for logger_name in _SERVER_LOGGERS:
            server_logger = logging.getLogger(logger_name)
            server_logger.setLevel(level)
            server_logger.handlers = [handler]
            server_logger.propagate = False

    return logging.getLogger(name)
