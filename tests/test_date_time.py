import pytest

from tag_matchers import have_time_select, have_date_select, have_datetime_select
from tag_matchers.errors import MatcherStateError
from tag_matchers.matchers.date_time import HasTimeSelect, HasDateSelect, HasDatetimeSelect
from tag_matchers.matchers.has_input import HasSelect


@pytest.mark.parametrize("matcher_class, keys", [
    (HasTimeSelect, ["4i", "5i"]),
    (HasDateSelect, ["1i", "2i", "3i"]),
    (HasDatetimeSelect, ["1i", "2i", "3i", "4i", "5i"]),
])
def test_components(matcher_class, keys):
    matcher = matcher_class()

    assert list(matcher.components) == keys
    assert all(isinstance(component, HasSelect) for component in matcher.components.values())


def test_time_select_matches_rails_markup(time_select_html):
    assert have_time_select().matches(time_select_html) is True
    assert have_time_select().for_({"event": "start_time"}).matches(time_select_html) is True
    assert have_time_select().for_("event", "end_time").matches(time_select_html) is False


def test_date_select_ignores_hidden_inputs(time_select_html):
    """time_select renders the date parts as hidden inputs, not drop-downs."""
    assert have_date_select().for_({"event": "start_time"}).matches(time_select_html) is False


def test_date_select_matches_rails_markup(date_select_html):
    assert have_date_select().for_({"user": "birthday"}).matches(date_select_html) is True
    assert have_datetime_select().for_({"user": "birthday"}).matches(date_select_html) is False


def test_description():
    matcher = have_time_select()
    assert matcher.description() == "have time select"

    matcher.for_({"event": "start_time"})
    assert matcher.description() == "have time select for event.start_time"


def test_failure_message(time_select_html):
    matcher = have_time_select().for_({"event": "end_time"})

    assert matcher.matches(time_select_html) is False
    assert matcher.failure_message() == (
        f"expected document to have time select for event.end_time; got: {time_select_html}"
    )


def test_negative_failure_message(date_select_html):
    matcher = have_date_select().for_({"user": "birthday"})

    assert matcher.matches(date_select_html) is True
    assert matcher.negative_failure_message() == (
        f"expected document to not have date select for user.birthday; got: {date_select_html}"
    )


def test_messages_truncate_long_documents(monkeypatch, date_select_html):
    monkeypatch.setenv("TAG_MATCHERS_MAX_RENDERED_LENGTH", "10")
    matcher = have_datetime_select()

    matcher.matches(date_select_html)

    assert matcher.failure_message() == (
        f"expected document to have datetime select; got: {date_select_html[:10]}..."
    )


def test_messages_before_matches_raise():
    with pytest.raises(MatcherStateError):
        have_time_select().failure_message()
