import logging
from typing import Any

import structlog
from structlog.types import Processor


def _shared_processors(json_logs: bool) -> list[Processor]:
    """Processors applied to structlog events and to foreign stdlib records alike."""
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.stdlib.ExtraAdder(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if json_logs:
        # ConsoleRenderer pretty-prints exceptions itself
        processors.append(structlog.processors.format_exc_info)
    return processors


def _has_structlog_handler(root_logger: logging.Logger) -> bool:
    return any(
        isinstance(handler, logging.StreamHandler)
        and isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter)
        for handler in root_logger.handlers
    )


def setup_logging(json_logs: bool = False, log_level: str = "INFO"):
    """Route structlog through the stdlib root logger, unless the application already did."""
    root_logger = logging.getLogger()
    if structlog.is_configured() or _has_structlog_handler(root_logger):
        return

    shared = _shared_processors(json_logs)
    structlog.configure(
        processors=shared + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    renderer: Processor = (
        structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer()
    )
    handler = logging.StreamHandler()
    handler.setFormatter(structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    ))

    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level.upper())


class ConfregStructLogger:
    """
    Structured logger for the confreg package.

    Thin wrapper over a structlog stdlib logger; `bind` returns a new
    logger carrying the extra key/value pairs on every event.
    """

    def __init__(self, log_name: str = "confreg", logger=None):
        self.log_name = log_name
        self.logger = logger if logger is not None else structlog.stdlib.get_logger(log_name)

    def bind(self, **new_values: Any) -> "ConfregStructLogger":
        return ConfregStructLogger(self.log_name, self.logger.bind(**new_values))

    def debug(self, event: str, **kw: Any):
        self.logger.debug(event, **kw)

    def info(self, event: str, **kw: Any):
        self.logger.info(event, **kw)

    def warning(self, event: str, **kw: Any):
        self.logger.warning(event, **kw)

    def error(self, event: str, **kw: Any):
        self.logger.error(event, **kw)


def get_confreg_logger(log_name: str = "confreg") -> ConfregStructLogger:
    """Return the package logger without touching the logging configuration."""
    return ConfregStructLogger(log_name)


def init_logger(settings) -> ConfregStructLogger:
    """
    Configure logging from RegistrySettings and return the package logger.
    """
    setup_logging(json_logs=settings.json_logs, log_level=settings.log_level)
    return ConfregStructLogger("confreg")
