"""
tag_matchers: assertions about form inputs in rendered HTML.

Factory functions return a new, unconfigured matcher:

    assert_matches(html, have_select().for_("user", "country"))
    assert_matches(html, have_date_select().for_({"user": "birthday"}))
"""

from .errors import MatcherError, MatcherConfigurationError, MatcherStateError, MatcherErrorCode, AssertionErrorCode
from .config import MatcherSettings, load_settings, get_settings, reset_settings
from .logging_config import configure_logging
from .matchers import (
    Matcher,
    HasTag,
    HasInput,
    HasSelect,
    HasTextField,
    HasCheckbox,
    MultipleInputMatcher,
    HasTimeSelect,
    HasDateSelect,
    HasDatetimeSelect
)
from .assertions import AssertionResult, check, assert_matches, assert_not_matches
from .utils import flatten_hierarchy, build_input_name


def have_tag(name: str) -> HasTag:
    return HasTag(name)


def have_input() -> HasInput:
    return HasInput()


def have_select() -> HasSelect:
    return HasSelect()


def have_text_field() -> HasTextField:
    return HasTextField()


def have_checkbox() -> HasCheckbox:
    return HasCheckbox()


def have_time_select() -> HasTimeSelect:
    """Matches inputs generated by Rails' ``time_select`` helper.

    Example:
        have_time_select().for_({"event": "start_time"})
    """
    return HasTimeSelect()


def have_date_select() -> HasDateSelect:
    """Matches inputs generated by Rails' ``date_select`` helper."""
    return HasDateSelect()


def have_datetime_select() -> HasDatetimeSelect:
    """Matches inputs generated by Rails' ``datetime_select`` helper."""
    return HasDatetimeSelect()


__all__ = [
    'MatcherError',
    'MatcherConfigurationError',
    'MatcherStateError',
    'MatcherErrorCode',
    'AssertionErrorCode',
    'MatcherSettings',
    'load_settings',
    'get_settings',
    'reset_settings',
    'configure_logging',
    'Matcher',
    'HasTag',
    'HasInput',
    'HasSelect',
    'HasTextField',
    'HasCheckbox',
    'MultipleInputMatcher',
    'HasTimeSelect',
    'HasDateSelect',
    'HasDatetimeSelect',
    'AssertionResult',
    'check',
    'assert_matches',
    'assert_not_matches',
    'flatten_hierarchy',
    'build_input_name',
    'have_tag',
    'have_input',
    'have_select',
    'have_text_field',
    'have_checkbox',
    'have_time_select',
    'have_date_select',
    'have_datetime_select'
]
