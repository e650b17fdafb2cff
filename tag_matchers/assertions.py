"""
Assertion helpers for tag matchers.
Runs a matcher against a document and turns the outcome into a result or an AssertionError.
"""

from dataclasses import dataclass
from typing import Optional, Dict, Any
import logging

from .errors import AssertionErrorCode
from .matchers.base import Matcher

logger = logging.getLogger("tag_matchers.assertions")


@dataclass
class AssertionResult:
    """Result of an assertion check"""
    success: bool
    error_code: Optional[str] = None
    message: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None


def check(document: Any, matcher: Matcher, negate: bool = False) -> AssertionResult:
    """Evaluate ``matcher`` against ``document``.

    Args:
        document: The rendered HTML
        matcher: Any configured matcher
        negate: Whether the document is expected *not* to match

    Returns:
        AssertionResult: Success flag plus the matcher's message on failure
    """
    matched = matcher.matches(document)
    success = matched != negate
    metadata = {
        "matcher": type(matcher).__name__,
        "description": matcher.description(),
        "negated": negate,
        "matched": matched
    }

    if success:
        logger.debug(f"Assertion passed: {metadata['description']}")
        return AssertionResult(success=True, metadata=metadata)

    if negate:
        message = matcher.negative_failure_message()
        error_code = AssertionErrorCode.UNEXPECTED_MATCH
    else:
        message = matcher.failure_message()
        error_code = AssertionErrorCode.NO_MATCH

    logger.info(f"Assertion failed ({error_code.value}): {metadata['description']}")
    return AssertionResult(success=False, error_code=error_code, message=message, metadata=metadata)


def assert_matches(document: Any, matcher: Matcher) -> None:
    """Raise AssertionError with the failure message unless ``document`` matches."""
    result = check(document, matcher)
    if not result.success:
        raise AssertionError(result.message)


def assert_not_matches(document: Any, matcher: Matcher) -> None:
    """Raise AssertionError with the negative failure message if ``document`` matches."""
    result = check(document, matcher, negate=True)
    if not result.success:
        raise AssertionError(result.message)
