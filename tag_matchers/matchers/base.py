"""
Base module for tag matchers.
Defines the capability set every matcher provides and the state shared by all of them.
"""

from abc import ABC, abstractmethod
from typing import Optional, Dict, Any
import logging

from ..config import get_settings
from ..errors import MatcherStateError, MatcherErrorCode

logger = logging.getLogger("tag_matchers.matchers")


class Matcher(ABC):
    """Capability set shared by leaf and composite matchers.

    A matcher is configured first (``with_attribute``, ``for_``), then
    evaluated once with ``matches``. The message methods describe the last
    evaluation and may only be called after it.

    Instances hold per-evaluation state and are not safe to evaluate from
    several threads at once. Use one instance per assertion.
    """

    def __init__(self):
        self._rendered: Any = None
        self._evaluated = False

    @abstractmethod
    def with_attribute(self, constraints: Optional[Dict[str, Any]] = None, **kwargs) -> 'Matcher':
        """Add attribute constraints and return the matcher."""

    @abstractmethod
    def for_(self, *args: Any) -> 'Matcher':
        """Configure the expected input name from a naming hierarchy and return the matcher."""

    @abstractmethod
    def matches(self, document: Any) -> bool:
        """Test the matcher against a rendered document."""

    @abstractmethod
    def failure_message(self) -> str:
        """Explain why ``matches`` returned False."""

    @abstractmethod
    def negative_failure_message(self) -> str:
        """Explain why ``matches`` returned True when a miss was expected."""

    @abstractmethod
    def description(self) -> str:
        """Describe what the matcher looks for."""

    @property
    def rendered(self) -> Any:
        """The document passed to the last ``matches`` call."""
        return self._rendered

    def _record_evaluation(self, document: Any) -> None:
        self._rendered = document
        self._evaluated = True

    def _require_evaluated(self, accessor: str) -> None:
        if not self._evaluated:
            raise MatcherStateError(
                f"{type(self).__name__}.{accessor}() called before matches()",
                MatcherErrorCode.MESSAGE_BEFORE_MATCH,
                metadata={"matcher": type(self).__name__, "accessor": accessor}
            )

    def _rendered_for_message(self) -> str:
        """Return the last document as text, truncated according to settings."""
        text = str(self._rendered)
        limit = get_settings().max_rendered_length
        if limit and len(text) > limit:
            logger.debug(f"Truncating rendered document from {len(text)} to {limit} characters")
            return text[:limit] + "..."
        return text

    def __repr__(self) -> str:
        return f"<{type(self).__name__}: {self.description()}>"
