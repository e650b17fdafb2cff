"""
Leaf matchers for form inputs.
"""

from typing import Any, Optional

from .has_tag import HasTag


class HasInput(HasTag):
    """Matches a form input element.

    Args:
        tag: Element name, ``input`` unless a subclass needs another
        input_type: Value required for the ``type`` attribute, if any
    """

    def __init__(self, tag: str = "input", input_type: Optional[str] = None):
        super().__init__(tag)
        if input_type is not None:
            self.with_attribute(type=input_type)

    def with_value(self, value: Any) -> 'HasInput':
        """Require the ``value`` attribute to equal ``value``."""
        return self.with_attribute(value=str(value))


class HasSelect(HasInput):
    """Matches a ``<select>`` drop-down."""

    def __init__(self):
        super().__init__("select")


class HasTextField(HasInput):
    """Matches an ``<input type="text">`` field."""

    def __init__(self):
        super().__init__(input_type="text")


class HasCheckbox(HasInput):
    """Matches an ``<input type="checkbox">``."""

    def __init__(self):
        super().__init__(input_type="checkbox")

    def checked(self) -> 'HasCheckbox':
        return self.with_attribute(checked=True)

    def not_checked(self) -> 'HasCheckbox':
        return self.with_attribute(checked=False)
