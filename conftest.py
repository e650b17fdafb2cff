import pytest

from tag_matchers.config import reset_settings
from tag_matchers.matchers.base import Matcher

TIME_SELECT_HTML = """
<form action="/events" method="post">
  <input type="hidden" id="event_start_time_1i" name="event[start_time(1i)]" value="2024" />
  <input type="hidden" id="event_start_time_2i" name="event[start_time(2i)]" value="5" />
  <input type="hidden" id="event_start_time_3i" name="event[start_time(3i)]" value="17" />
  <select id="event_start_time_4i" name="event[start_time(4i)]">
    <option value="00">00</option>
    <option value="01" selected="selected">01</option>
  </select>
  : <select id="event_start_time_5i" name="event[start_time(5i)]">
    <option value="00">00</option>
    <option value="30">30</option>
  </select>
</form>
"""

DATE_SELECT_HTML = """
<form action="/users" method="post">
  <select id="user_birthday_1i" name="user[birthday(1i)]">
    <option value="1999">1999</option>
  </select>
  <select id="user_birthday_2i" name="user[birthday(2i)]">
    <option value="1">January</option>
  </select>
  <select id="user_birthday_3i" name="user[birthday(3i)]">
    <option value="1">1</option>
  </select>
</form>
"""


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Drop cached settings and matcher env vars around each test."""
    for name in ("TAG_MATCHERS_HTML_PARSER", "TAG_MATCHERS_LOG_LEVEL", "TAG_MATCHERS_MAX_RENDERED_LENGTH"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def time_select_html():
    return TIME_SELECT_HTML


@pytest.fixture
def date_select_html():
    return DATE_SELECT_HTML


@pytest.fixture
def make_sub_matcher(mocker):
    """Create a mock sub-matcher with a fixed outcome and messages."""
    def _make(label: str, matches: bool = True):
        matcher = mocker.Mock(spec=Matcher)
        matcher.matches.return_value = matches
        matcher.failure_message.return_value = f"{label} failed"
        matcher.negative_failure_message.return_value = f"{label} matched"
        matcher.description.return_value = f"have {label}"
        return matcher
    return _make
