"""
structlog setup for the SwapSkillz API.

``configure_logging`` is called once from ``app.main``. Locally (``APP_ENV=dev``)
events are rendered for the console; everywhere else each event is one JSON
object carrying the ``request_id`` bound by the HTTP middleware.

Services log events with key/value context:

    logger = structlog.get_logger(__name__)
    logger.info("swap_request_declined", swap_request_id=str(swap.id), caller_id=str(caller_id))

Repositories keep stdlib ``logging.getLogger(__name__)``; their records go
through the same renderer via ``foreign_pre_chain``.
"""

import logging
import sys

import structlog

# Chatty outside local development
_QUIET_LOGGERS = ("uvicorn.access", "sqlalchemy.engine")


def configure_logging(app_env: str = "dev") -> None:
    """
    Route structlog and stdlib logging through one stdout handler.

    Args:
        app_env: "dev" renders for the console, any other value renders JSON.
    """
    shared_processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    renderer = (
        structlog.dev.ConsoleRenderer()
        if app_env == "dev"
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=renderer,
            foreign_pre_chain=shared_processors,
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(logging.INFO)

    if app_env != "dev":
        for name in _QUIET_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
