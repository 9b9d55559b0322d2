"""Structured logging setup.

The TUI owns the terminal, so records go to a file under the data
directory instead of stderr.
"""

import logging

import structlog

from gamerie_cli.config import Settings


def configure_logging(settings: Settings) -> None:
    """Route structlog through stdlib logging into ``settings.log_file``."""
    settings.logs_dir.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    log_file = str(settings.log_file.resolve())
    if not any(
        isinstance(h, logging.FileHandler) and h.baseFilename == log_file
        for h in root.handlers
    ):
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter("%(message)s"))
        root.addHandler(handler)
    root.setLevel(settings.log_level)

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
