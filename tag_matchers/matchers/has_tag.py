"""
Leaf matcher for a single HTML element.
Looks up elements by tag name with BeautifulSoup and checks their attributes.
"""

import logging
import re
from typing import Optional, Dict, Any, List

from bs4 import BeautifulSoup, Tag

from ..config import get_settings
from ..errors import MatcherConfigurationError, MatcherErrorCode
from ..utils.hierarchy import flatten_hierarchy, build_input_name
from .base import Matcher

logger = logging.getLogger("tag_matchers.matchers.has_tag")


class HasTag(Matcher):
    """Matches documents containing at least one ``name`` element whose
    attributes satisfy every configured constraint.

    Constraint values:
        str: attribute must equal the string
        compiled pattern: ``pattern.search`` must succeed on the attribute
        True: attribute must be present
        False or None: attribute must be absent
    """

    def __init__(self, name: str):
        super().__init__()
        if not name:
            raise MatcherConfigurationError(
                "Tag name must not be empty",
                MatcherErrorCode.INVALID_CONSTRAINT
            )
        self._name = name
        self._attributes: Dict[str, Any] = {}
        self._for: Optional[List[str]] = None
        self._match_count = 0

    @property
    def tag_name(self) -> str:
        return self._name

    @property
    def attributes(self) -> Dict[str, Any]:
        """Copy of the configured attribute constraints."""
        return dict(self._attributes)

    @property
    def naming_context(self) -> Optional[List[str]]:
        """Segments passed to the last ``for_`` call, flattened."""
        return list(self._for) if self._for is not None else None

    @property
    def match_count(self) -> int:
        """Number of matching elements found by the last evaluation."""
        return self._match_count

    def with_attribute(self, constraints: Optional[Dict[str, Any]] = None, **kwargs) -> 'HasTag':
        """Add attribute constraints. Later constraints replace earlier ones.

        Args:
            constraints: Mapping of attribute name to constraint
            **kwargs: More constraints; a trailing underscore is stripped so
                ``class_="x"`` constrains ``class``

        Returns:
            HasTag: self
        """
        merged = dict(constraints or {})
        merged.update({key.rstrip("_"): value for key, value in kwargs.items()})

        for attribute, constraint in merged.items():
            if not isinstance(constraint, (str, bool, re.Pattern)) and constraint is not None:
                raise MatcherConfigurationError(
                    f"Unsupported constraint for attribute '{attribute}': {constraint!r}",
                    MatcherErrorCode.INVALID_CONSTRAINT,
                    metadata={"attribute": attribute, "constraint": constraint}
                )
            self._attributes[str(attribute)] = constraint

        logger.debug(f"Constraints for <{self._name}>: {self._attributes}")
        return self

    def for_(self, *args: Any) -> 'HasTag':
        """Require the element's ``name`` to be built from ``args``.

        ``for_("user", "birthday")`` and ``for_({"user": "birthday"})`` both
        expect ``name="user[birthday]"``.
        """
        segments = flatten_hierarchy(list(args))
        if not segments:
            raise MatcherConfigurationError(
                "Naming hierarchy is empty",
                MatcherErrorCode.EMPTY_NAMING_CONTEXT,
                metadata={"args": args}
            )
        self._for = segments
        return self.with_attribute(name=build_input_name(segments))

    def matches(self, document: Any) -> bool:
        """Test whether ``document`` contains a matching element.

        Args:
            document: HTML text, bytes, a BeautifulSoup object, or anything
                whose ``str()`` is HTML

        Returns:
            bool: True if at least one element matches

        Raises:
            TypeError: If ``document`` is None
        """
        self._record_evaluation(document)
        soup = self._parse(document)

        found = [element for element in self._candidates(soup) if self._element_matches(element)]
        self._match_count = len(found)

        logger.debug(f"Found {self._match_count} element(s) for: {self.description()}")
        return self._match_count > 0

    def failure_message(self) -> str:
        self._require_evaluated("failure_message")
        return f"expected document to {self.description()}; got: {self._rendered_for_message()}"

    def negative_failure_message(self) -> str:
        self._require_evaluated("negative_failure_message")
        return f"expected document to not {self.description()}; got: {self._rendered_for_message()}"

    def description(self) -> str:
        parts = [self._name]
        parts.extend(self._describe_constraint(attribute, constraint)
                     for attribute, constraint in self._attributes.items())
        return f"have <{' '.join(parts)}> tag"

    @staticmethod
    def _parse(document: Any) -> Tag:
        if document is None:
            raise TypeError("Cannot match against None; expected a rendered HTML document")
        if isinstance(document, Tag):
            return document
        if isinstance(document, bytes):
            # bs4 detects the encoding from the bytes and any meta charset
            return BeautifulSoup(document, get_settings().html_parser)
        return BeautifulSoup(str(document), get_settings().html_parser)

    def _candidates(self, root: Tag) -> List[Tag]:
        """Elements named like the matcher, including ``root`` itself."""
        candidates = root.find_all(self._name)
        if root.name == self._name:
            candidates.insert(0, root)
        return candidates

    def _element_matches(self, element: Tag) -> bool:
        for attribute, constraint in self._attributes.items():
            value = element.get(attribute)
            if isinstance(value, list):
                # multi-valued attributes such as class
                value = " ".join(value)

            if constraint is True:
                if value is None:
                    return False
            elif constraint is False or constraint is None:
                if value is not None:
                    return False
            elif isinstance(constraint, re.Pattern):
                if value is None or not constraint.search(value):
                    return False
            elif value != constraint:
                return False
        return True

    @staticmethod
    def _describe_constraint(attribute: str, constraint: Any) -> str:
        if constraint is True:
            return attribute
        if constraint is False or constraint is None:
            return f"!{attribute}"
        if isinstance(constraint, re.Pattern):
            return f"{attribute}=/{constraint.pattern}/"
        return f'{attribute}="{constraint}"'

