"""
Error types for tag matchers.
Configuration problems are raised; match failures are reported through messages.
"""

from enum import Enum
from typing import Optional, Dict, Any


class MatcherErrorCode(str, Enum):
    """Standardized error codes for matcher misuse"""
    # Configuration errors
    EMPTY_NAMING_CONTEXT = "EMPTY_NAMING_CONTEXT"
    INVALID_COMPONENT_KEY = "INVALID_COMPONENT_KEY"
    INVALID_CONSTRAINT = "INVALID_CONSTRAINT"

    # Lifecycle errors
    MESSAGE_BEFORE_MATCH = "MESSAGE_BEFORE_MATCH"


class AssertionErrorCode(str, Enum):
    """Error codes reported by failed assertions"""
    NO_MATCH = "NO_MATCH"
    UNEXPECTED_MATCH = "UNEXPECTED_MATCH"


class MatcherError(Exception):
    """Base class for errors raised by tag matchers"""

    def __init__(self, message: str, error_code: MatcherErrorCode, metadata: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.error_code = error_code
        self.metadata = metadata or {}


class MatcherConfigurationError(MatcherError, ValueError):
    """A matcher was configured with values it cannot work with."""


class MatcherStateError(MatcherError, RuntimeError):
    """A matcher was used out of order, e.g. asked for a message before matching."""
