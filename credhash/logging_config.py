# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Logging configuration for credhash using structlog.

This module configures structured logging with JSON output for production
and pretty-printed output for development.

Assumptions:
- structlog outputs JSON by default
- Log level is configurable via CREDHASH_LOG_LEVEL
- Secrets and key material are never passed to a logger
"""
import logging
import sys
from typing import Optional

import structlog
from structlog.types import EventDict, Processor

from credhash.config import settings


def add_log_level(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Add upper-case log level to event dict."""
    event_dict["level"] = method_name.upper()
    return event_dict


def configure_logging(
    log_level: Optional[str] = None,
    json_output: Optional[bool] = None
) -> None:
    """Configure structlog for the package.
    
    Args:
        log_level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_output: If True, output JSON; if False, pretty print
        
    Assumptions:
    - Defaults come from settings (INFO, JSON)
    - Uses console renderer when json_output is False
    """
    level = log_level or settings.log_level
    use_json = json_output if json_output is not None else settings.log_json
    
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level.upper()),
    )
    logging.getLogger("credhash").setLevel(getattr(logging, level.upper()))
    
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    
    if use_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a logger instance.
    
    Args:
        name: Logger name (typically module name)
        
    Returns:
        BoundLogger: Configured structlog logger
    """
    return structlog.get_logger(name)


# Configure logging on module import
configure_logging()
