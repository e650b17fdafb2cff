"""
Composite matcher for inputs made of several elements.

Rails renders some form values as a group of inputs whose names differ only by
a multi-parameter key, e.g. ``time_select`` renders ``event[start_time(4i)]``
for the hour and ``event[start_time(5i)]`` for the minute. A
``MultipleInputMatcher`` holds one sub-matcher per key and matches only if all
of them match.
"""

import logging
import re
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

from ..errors import MatcherConfigurationError, MatcherErrorCode
from ..utils.hierarchy import flatten_hierarchy
from .base import Matcher

logger = logging.getLogger("tag_matchers.matchers.multiple_input")

MESSAGE_SEPARATOR = " and "


class MultipleInputMatcher(Matcher):
    """Matches several input elements at once.

    Intended as a base class for matchers of specific multi-element inputs.
    Each sub-matcher is constrained at construction to a ``name`` containing
    its parenthesised key, so without ``for_`` the matcher finds inputs named
    like ``anything(4i)``.

    Example:
        >>> matcher = MultipleInputMatcher({
        ...     "1i": HasSelect(),
        ...     "2i": HasSelect(),
        ...     "3i": HasSelect(),
        ... })
        >>> matcher.for_({"user": "birthday"})  # expects user[birthday(1i)] etc.

    The matcher keeps the last document, failures and naming context on the
    instance. Evaluate one instance from one thread, and read its messages
    before calling ``matches`` again.

    Args:
        components: Mapping of multi-parameter key (``"1i"``, ``"5i"``...) to
            the matcher that must be satisfied for that key
    """

    def __init__(self, components: Mapping[str, Matcher]):
        super().__init__()
        self._components: Dict[str, Matcher] = dict(components)
        self._failures: List[Matcher] = []
        self._for: Optional[List[str]] = None

        for key, matcher in self._components.items():
            if not isinstance(key, str) or not key:
                raise MatcherConfigurationError(
                    f"Component keys must be non-empty strings, got {key!r}",
                    MatcherErrorCode.INVALID_COMPONENT_KEY,
                    metadata={"key": key}
                )
            matcher.with_attribute(name=re.compile(r"\(" + re.escape(key) + r"\)"))

        logger.debug(f"Initialized {type(self).__name__} with keys: {list(self._components)}")

    @property
    def components(self) -> Mapping[str, Matcher]:
        """Read-only view of the key to sub-matcher mapping."""
        return MappingProxyType(self._components)

    @property
    def failures(self) -> List[Matcher]:
        """Sub-matchers that did not match during the last evaluation."""
        return list(self._failures)

    @property
    def naming_context(self) -> Optional[List[str]]:
        """Flattened segments from the last ``for_`` call, or None."""
        return list(self._for) if self._for is not None else None

    def matches(self, document: Any) -> bool:
        """Test every sub-matcher against ``document``.

        All sub-matchers are evaluated, even after one has failed, so the
        failure message can list every miss. Exceptions raised by a
        sub-matcher are not caught.

        Args:
            document: HTML text or an object whose ``str()`` is HTML

        Returns:
            bool: True if every sub-matcher matched
        """
        self._record_evaluation(document)
        self._failures = [matcher for matcher in self._matchers() if not matcher.matches(document)]

        if self._failures:
            logger.info(f"{type(self).__name__}: {len(self._failures)}/{len(self._components)} component(s) did not match")
        else:
            logger.debug(f"{type(self).__name__}: all {len(self._components)} component(s) matched")
        return not self._failures

    def for_(self, *args: Any) -> 'MultipleInputMatcher':
        """Name the inputs more precisely than the default key patterns.

        The hierarchy is flattened and each sub-matcher's ``for_`` receives
        the segments with its key appended to the last one:

        >>> time_matcher = MultipleInputMatcher({"4i": hour, "5i": minute})
        >>> time_matcher.for_({"event": "start_time"})
        # hour.for_("event", "start_time(4i)")
        # minute.for_("event", "start_time(5i)")

        Args:
            *args: A hierarchy of names: strings, lists, tuples or mappings

        Returns:
            MultipleInputMatcher: self

        Raises:
            MatcherConfigurationError: If the hierarchy has no segments
        """
        segments = flatten_hierarchy(list(args))
        if not segments:
            raise MatcherConfigurationError(
                "Naming hierarchy is empty; there is no field name to suffix",
                MatcherErrorCode.EMPTY_NAMING_CONTEXT,
                metadata={"args": args}
            )

        for key, matcher in self._components.items():
            self._delegated_for(key, matcher, segments)
        self._for = segments
        return self

    def with_attribute(self, constraints: Optional[Dict[str, Any]] = None, **kwargs) -> 'MultipleInputMatcher':
        """Apply attribute constraints to every sub-matcher.

        ``name`` is reserved: it is derived from each component key and from ``for_``.
        """
        merged = dict(constraints or {})
        merged.update({key.rstrip("_"): value for key, value in kwargs.items()})
        if "name" in merged:
            raise MatcherConfigurationError(
                "The name attribute of a multiple input is set per component; use for_() instead",
                MatcherErrorCode.INVALID_CONSTRAINT,
                metadata={"constraints": merged}
            )

        for matcher in self._matchers():
            matcher.with_attribute(dict(merged))
        return self

    def failure_message(self) -> str:
        """Return the failure messages of the sub-matchers that failed."""
        self._require_evaluated("failure_message")
        return MESSAGE_SEPARATOR.join(matcher.failure_message() for matcher in self._failures)

    def negative_failure_message(self) -> str:
        """Return the negative failure messages of every sub-matcher."""
        self._require_evaluated("negative_failure_message")
        return MESSAGE_SEPARATOR.join(matcher.negative_failure_message() for matcher in self._matchers())

    def description(self) -> str:
        return MESSAGE_SEPARATOR.join(matcher.description() for matcher in self._matchers())

    def _matchers(self) -> List[Matcher]:
        return list(self._components.values())

    @staticmethod
    def _delegated_for(key: str, matcher: Matcher, segments: List[str]) -> None:
        """Call ``matcher.for_`` with ``key`` appended to the last segment."""
        args = list(segments)
        args[-1] = f"{args[-1]}({key})"
        logger.debug(f"Delegating for_{tuple(args)} to component {key}")
        matcher.for_(*args)
