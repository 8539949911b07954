import logging
import os
from collections import OrderedDict
from logging import Logger
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

import structlog

from confstore.config.settings import ConfStoreSettings
from confstore.utils import ifnone


def default_formatter(fmt: Optional[str] = None) -> logging.Formatter:
    """Returns a logging formatter with a default format if none is specified."""
    default_fmt = "[%(asctime)s] %(levelname)s: %(name)s: %(message)s"
    return logging.Formatter(fmt or default_fmt)


def setup_logger(
    name: str = "confstore",
    *,
    log_dir: Optional[Path] = None,
    logger_level: int = logging.DEBUG,
    stream_level: Optional[int] = None,
    add_stream_handler: bool = True,
    file_level: int = logging.DEBUG,
    file_mode: str = "a",
    add_file_handler: Optional[bool] = None,
    propagate: bool = False,
    max_bytes: int = 10 * 1024 * 1024,  # 10 MB
    backup_count: int = 5,
    use_structlog: Optional[bool] = None,
    structlog_json: Optional[bool] = None,
    structlog_bind: Optional[object] = None,
) -> Logger | structlog.stdlib.BoundLogger:
    """Configure and initialize a confstore logger.

    Sets up a console handler and, optionally, a rotating file handler on the given logger. Unset arguments fall back
    to the ``CONFSTORE_LOGGER`` settings. The log file defaults to ``~/.cache/confstore/logs/{name}.log``.

    Args:
        name: Logger name, defaults to "confstore".
        log_dir: Custom directory for the log file. Passing a directory enables the file handler unless
            `add_file_handler` is explicitly False.
        logger_level: Overall logger level.
        stream_level: StreamHandler level (e.g., ERROR).
        add_stream_handler: Whether to add a stream handler.
        file_level: FileHandler level (e.g., DEBUG).
        file_mode: Mode for file handler, default is 'a' (append).
        add_file_handler: Whether to add a file handler.
        propagate: Whether the logger should propagate messages to ancestor loggers.
        max_bytes: Maximum size in bytes before rotating log file.
        backup_count: Number of backup files to retain.
        use_structlog: If True, configure and return a structlog BoundLogger.
        structlog_json: If True, render JSON; otherwise use the console renderer.
        structlog_bind: Optional dict or callable(name)->dict of fields to bind to the structlog logger.

    Returns:
        Logger | structlog.stdlib.BoundLogger: Configured logger instance.
    """
    settings = ConfStoreSettings()
    use_structlog = ifnone(use_structlog, settings.CONFSTORE_LOGGER.USE_STRUCTLOG)
    structlog_json = ifnone(structlog_json, settings.CONFSTORE_LOGGER.STRUCTLOG_JSON)
    stream_level = ifnone(stream_level, logging.getLevelName(settings.CONFSTORE_LOGGER.STREAM_LEVEL.upper()))
    add_file_handler = ifnone(add_file_handler, log_dir is not None or settings.CONFSTORE_LOGGER.ADD_FILE_HANDLER)

    stdlib_logger = logging.getLogger(name)
    stdlib_logger.handlers.clear()
    stdlib_logger.setLevel(logger_level)
    stdlib_logger.propagate = propagate

    # Structlog renders the full line itself, stdlib records get the bracketed layout
    formatter = logging.Formatter("%(message)s") if use_structlog else default_formatter()

    if add_stream_handler:
        stream_handler = logging.StreamHandler()
        stream_handler.setLevel(stream_level)
        stream_handler.setFormatter(formatter)
        stdlib_logger.addHandler(stream_handler)

    if add_file_handler:
        if name == "confstore":
            child_log_path = f"{name}.log"
        else:
            child_log_path = os.path.join("modules", f"{name}.log")
        if log_dir is None:
            log_dir = (
                settings.CONFSTORE_DIR_PATHS.STRUCT_LOGGER_DIR
                if use_structlog
                else settings.CONFSTORE_DIR_PATHS.LOGGER_DIR
            )
        log_file_path = os.path.join(log_dir, child_log_path)
        os.makedirs(Path(log_file_path).parent, exist_ok=True)

        file_handler = RotatingFileHandler(
            filename=str(log_file_path), maxBytes=max_bytes, backupCount=backup_count, mode=file_mode
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(formatter)
        stdlib_logger.addHandler(file_handler)

    if not use_structlog:
        return stdlib_logger

    renderer = structlog.processors.JSONRenderer() if structlog_json else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="ISO"),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            _enforce_key_order_processor(["timestamp", "event", "level", "logger"]),
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    bound_logger = structlog.get_logger(name)
    if structlog_bind is not None:
        bind_dict = structlog_bind(name) if callable(structlog_bind) else dict(structlog_bind)
        if bind_dict:
            bound_logger = bound_logger.bind(**bind_dict)
    return bound_logger


def _enforce_key_order_processor(key_order: list[str]):
    def _processor(_logger, _method_name, event_dict):
        ordered = OrderedDict()
        for key in key_order:
            if key in event_dict:
                ordered[key] = event_dict.pop(key)
        for k in sorted(event_dict.keys()):
            ordered[k] = event_dict[k]
        return ordered

    return _processor


def get_logger(name: str | None = "confstore", **kwargs) -> Logger | structlog.stdlib.BoundLogger:
    """Create or retrieve a named logger rooted at the ``confstore`` logger.

    Child loggers propagate to ``confstore`` by default and therefore skip their own stream handler, so a record is
    printed once by the root handler.

    Args:
        name: The name of the logger. Names not already under "confstore" are prefixed with "confstore.".
        **kwargs: Additional keyword arguments passed to `setup_logger`.

    Returns:
        Logger | structlog.stdlib.BoundLogger: A configured logger instance.

    Example:
        .. code-block:: python

            from confstore.logging import get_logger

            logger = get_logger("loader")
            logger.info("Logger configured with custom settings.")
    """
    if not name:
        name = "confstore"

    full_name = name if name.startswith("confstore") else f"confstore.{name}"
    if full_name != "confstore":
        kwargs.setdefault("propagate", True)
        kwargs.setdefault("add_stream_handler", not kwargs["propagate"])
    return setup_logger(full_name, **kwargs)
