"""structlog wiring for dexview.

The pipeline itself never configures logging. It emits event names with
key/value context (``zero_base_amount``, ``order_unclassifiable``,
``order_state_conflict``, ``candle_orders_skipped`` and the DEBUG
``view_recomputed``) through loggers from :func:`get_logger`. A host
application that wants those events rendered calls :func:`setup_logging`
once, directly or through ``ViewComposer.from_settings``.
"""

import logging
import os

import structlog

#: Processors applied to structlog events and to plain stdlib records alike.
_SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
]


def _select_renderer(log_format: str | None) -> structlog.types.Processor:
    """JSON for ``"json"``, console lines for anything else.

    When ``log_format`` is None the LOG_FORMAT environment variable decides.
    """
    if log_format is None:
        log_format = os.environ.get("LOG_FORMAT", "console")
    if log_format.lower() == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def setup_logging(log_level: str = "INFO", log_format: str | None = None) -> None:
    """Render dexview events through a single handler on the root logger.

    Args:
        log_level: Root level name. Unknown names fall back to INFO.
        log_format: ``"json"`` or ``"console"``. Read from LOG_FORMAT when
            omitted.
    """
    structlog.configure(
        processors=[
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_SHARED_PROCESSORS,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _select_renderer(log_format),
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Logger for a dexview module, usually ``get_logger(__name__)``."""
    return structlog.get_logger(name)
