from __future__ import annotations
import logging, sys
import structlog
import structlog.stdlib

def configure_logging(level: int = logging.INFO):
    timestamper = structlog.processors.TimeStamper(fmt="iso")
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            timestamper,
            structlog.processors.add_log_level,
            structlog.processors.format_exc_info,
            structlog.processors.EventRenamer("message"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )
    # stdlib loggers (uvicorn, sqlalchemy) go through the same JSON renderer
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(structlog.stdlib.ProcessorFormatter(
        processor=structlog.processors.JSONRenderer(),
        foreign_pre_chain=[timestamper, structlog.stdlib.add_log_level],
    ))
    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level)
