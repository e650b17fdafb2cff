"""
Matchers for the drop-downs rendered by Rails' date and time helpers.
"""

from typing import Optional, Sequence

from .has_input import HasSelect
from .multiple_input import MultipleInputMatcher

DATE_KEYS = ("1i", "2i", "3i")
TIME_KEYS = ("4i", "5i")
DATETIME_KEYS = DATE_KEYS + TIME_KEYS


class SelectGroupMatcher(MultipleInputMatcher):
    """A ``MultipleInputMatcher`` with one ``<select>`` per key.

    Subclasses set ``KEYS`` and ``BASIC_DESCRIPTION``. Messages describe the
    group as a whole instead of listing each drop-down.
    """

    KEYS: Sequence[str] = ()
    BASIC_DESCRIPTION = "have select group"

    def __init__(self):
        super().__init__({key: HasSelect() for key in self.KEYS})

    def description(self) -> str:
        return " ".join(part for part in (self.BASIC_DESCRIPTION, self._extra_description()) if part)

    def failure_message(self) -> str:
        self._require_evaluated("failure_message")
        return f"expected document to {self.description()}; got: {self._rendered_for_message()}"

    def negative_failure_message(self) -> str:
        self._require_evaluated("negative_failure_message")
        return f"expected document to not {self.description()}; got: {self._rendered_for_message()}"

    def _extra_description(self) -> Optional[str]:
        naming_context = self.naming_context
        if naming_context:
            return f"for {'.'.join(naming_context)}"
        return None


class HasTimeSelect(SelectGroupMatcher):
    """Matches the hour and minute drop-downs of ``time_select``."""

    KEYS = TIME_KEYS
    BASIC_DESCRIPTION = "have time select"


class HasDateSelect(SelectGroupMatcher):
    """Matches the year, month and day drop-downs of ``date_select``."""

    KEYS = DATE_KEYS
    BASIC_DESCRIPTION = "have date select"


class HasDatetimeSelect(SelectGroupMatcher):
    """Matches the five drop-downs of ``datetime_select``."""

    KEYS = DATETIME_KEYS
    BASIC_DESCRIPTION = "have datetime select"
