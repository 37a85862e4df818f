import logging
import sys

from pythonjsonlogger.json import JsonFormatter

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s"
SERVER_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error")


def setup_logging():
    """
    Configures structured JSON logging for the transcription service.

    One stdout handler with a JSON formatter (timestamp, level, logger name,
    message, trace_id, span_id) replaces the handlers of the root logger and
    of the Uvicorn loggers, so request logs and application logs share one
    format.

    Returns:
        logging.Logger: The configured root logger instance.
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter(LOG_FORMAT))

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.INFO)
    root_logger.handlers = [handler]

    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.setLevel(logging.INFO)
        server_logger.handlers = [handler]
        server_logger.propagate = False

    return root_logger
