"""
PyHamcrest integration.

    from hamcrest import assert_that, is_not
    assert_that(html, matches_html(have_time_select().for_({"event": "start_time"})))
"""

from typing import Any

from hamcrest.core.base_matcher import BaseMatcher
from hamcrest.core.description import Description

from .matchers.base import Matcher


class TagMatcherAdapter(BaseMatcher):
    """Wraps a tag matcher so PyHamcrest can use it."""

    def __init__(self, matcher: Matcher):
        self.matcher = matcher

    def _matches(self, item: Any) -> bool:
        return self.matcher.matches(item)

    def describe_to(self, description: Description) -> None:
        description.append_text(f"document to {self.matcher.description()}")

    def describe_mismatch(self, item: Any, mismatch_description: Description) -> None:
        # hamcrest calls this after a failed _matches on the same item
        if self.matcher.rendered is not item:
            self.matcher.matches(item)
        mismatch_description.append_text(self.matcher.failure_message())


def matches_html(matcher: Matcher) -> TagMatcherAdapter:
    return TagMatcherAdapter(matcher)
