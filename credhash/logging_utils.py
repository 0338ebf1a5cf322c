# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Logging utilities for credhash.

Provides specialized logging functions for:
- Application logs (operational: hashes created, parameters used)
- Security logs (forensics: failed verifications, malformed records)

Assumptions:
- All logs use structlog for structured output
- Secrets, salts and derived keys are never logged
"""
from typing import Any, Dict, Optional

from credhash.logging_config import get_logger

app_logger = get_logger("credhash.application")
security_logger = get_logger("credhash.security")

SENSITIVE_FIELDS = {
    "password",
    "secret",
    "salt",
    "derived_key",
    "hash",
    "encoded",
}


def log_application_event(
    event: str,
    **kwargs: Any
) -> None:
    """Log an application operational event.
    
    Args:
        event: Event name (e.g., "credential_hash_created")
        **kwargs: Additional context (iterations, lengths, etc.)
    """
    app_logger.debug(event, **_sanitize_data(kwargs))


def log_security_event(
    event: str,
    reason: Optional[str] = None,
    **kwargs: Any
) -> None:
    """Log a security event for forensics.
    
    Args:
        event: Security event type (credential_verification_failed, etc.)
        reason: Reason for security event
        **kwargs: Additional context
        
    Assumptions:
    - Used for failed verifications, malformed records and
      unavailable primitives
    - Sensitive values in kwargs are redacted
    """
    security_logger.warning(
        event,
        reason=reason,
        **_sanitize_data(kwargs)
    )


def _sanitize_data(data: Dict[str, Any]) -> Dict[str, Any]:
    """Sanitize sensitive data from log entries.
    
    Args:
        data: Dictionary potentially containing sensitive data
        
    Returns:
        Dict: Sanitized dictionary with sensitive fields redacted
    """
    if not data:
        return data
    
    sanitized = {}
    for key, value in data.items():
        if key.lower() in SENSITIVE_FIELDS:
            sanitized[key] = "[REDACTED]"
        elif isinstance(value, dict):
            sanitized[key] = _sanitize_data(value)
        elif isinstance(value, list):
            sanitized[key] = [
                _sanitize_data(item) if isinstance(item, dict) else item
                for item in value
            ]
        else:
            sanitized[key] = value
    
    return sanitized
