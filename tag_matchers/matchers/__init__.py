"""
Tag matchers package.
Provides leaf matchers for single elements and composites for multi-element inputs.
"""

from .base import Matcher
from .has_tag import HasTag
from .has_input import HasInput, HasSelect, HasTextField, HasCheckbox
from .multiple_input import MultipleInputMatcher, MESSAGE_SEPARATOR
from .date_time import (
    SelectGroupMatcher,
    HasTimeSelect,
    HasDateSelect,
    HasDatetimeSelect,
    DATE_KEYS,
    TIME_KEYS,
    DATETIME_KEYS
)

__all__ = [
    'Matcher',
    'HasTag',
    'HasInput',
    'HasSelect',
    'HasTextField',
    'HasCheckbox',
    'MultipleInputMatcher',
    'MESSAGE_SEPARATOR',
    'SelectGroupMatcher',
    'HasTimeSelect',
    'HasDateSelect',
    'HasDatetimeSelect',
    'DATE_KEYS',
    'TIME_KEYS',
    'DATETIME_KEYS'
]
