"""Error Labels — severity and category values carried in error envelopes.

Invariants:
    - Handlers never raise domain errors; these labels only classify the
      framework-level failures turned into JSON by api/error_handlers.py
    - Values are stable strings (part of the response contract)
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories."""
    VALIDATION = "validation"
    INTERNAL = "internal"
