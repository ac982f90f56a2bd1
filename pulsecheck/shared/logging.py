"""
Logging Configuration - Shared Layer

structlog on top of the standard logging module. ``configure_logging`` runs
before settings are loaded so configuration errors are still reported, and
``update_logging_from_settings`` reapplies it once ``AppSettings`` exist.
"""

import logging
import os
import sys
from typing import Any, Dict, List, Optional

import structlog
from structlog.types import Processor

from pulsecheck.shared.consts import EnumEnvironment

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _get_log_config_from_env() -> Dict[str, Optional[str]]:
    """Read bootstrap logging options straight from the environment."""
    return {
        "level": os.environ.get("LOG_LEVEL", "INFO"),
        "file_path": os.environ.get("LOG_FILE_PATH"),
        "environment": os.environ.get("ENVIRONMENT"),
    }


def _shared_processors() -> List[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def configure_logging(
    level: Optional[str] = None,
    format_string: Optional[str] = None,
    file_path: Optional[str] = None,
    environment: Optional[str] = None,
) -> None:
    """
    Configure stdlib logging and structlog for the process.

    Args:
        level: Log level name; falls back to ``LOG_LEVEL`` then INFO.
        format_string: Accepted for settings compatibility. Rendering is
            done by structlog, so the value is not applied.
        file_path: Optional log file in addition to stdout.
        environment: Application environment; ``production`` selects the
            JSON renderer, anything else the console renderer.
    """
    env_config = _get_log_config_from_env()

    log_level = level or env_config["level"] or "INFO"
    log_file = file_path or env_config["file_path"]
    env_value = (environment or env_config["environment"] or "development").lower()

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    renderer: Processor
    if env_value == EnumEnvironment.PRODUCTION.value:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=_shared_processors(),
    )
    for handler in handlers:
        handler.setFormatter(formatter)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root_logger.handlers = handlers
    root_logger.setLevel(numeric_level)

    get_logger(__name__).debug(
        "logging.configured", level=log_level, file_path=log_file, environment=env_value
    )


def update_logging_from_settings(settings: Any) -> None:
    """
    Reconfigure logging from the loaded application settings.

    Args:
        settings: ``AppSettings`` or any object exposing ``logging.level``,
            ``logging.format``, ``logging.file_path`` and ``environment``.
    """
    try:
        log_level = getattr(settings.logging.level, "value", settings.logging.level)
        environment = getattr(settings.environment, "value", settings.environment)

        configure_logging(
            level=log_level,
            format_string=settings.logging.format,
            file_path=settings.logging.file_path,
            environment=environment,
        )
    except (AttributeError, OSError) as exc:
        logging.error("Failed to update logging from settings: %s", exc)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger configured for the project."""
    return structlog.get_logger(name)
