import pytest
from hamcrest import assert_that, is_not

from tag_matchers import have_select, have_time_select
from tag_matchers.errors import AssertionErrorCode
from tag_matchers.assertions import AssertionResult, check, assert_matches, assert_not_matches
from tag_matchers.hamcrest_matchers import TagMatcherAdapter, matches_html


def test_check_success(time_select_html):
    result = check(time_select_html, have_time_select().for_({"event": "start_time"}))

    assert isinstance(result, AssertionResult)
    assert result.success is True
    assert result.error_code is None
    assert result.message is None
    assert result.metadata["matched"] is True
    assert result.metadata["description"] == "have time select for event.start_time"


def test_check_failure(time_select_html):
    matcher = have_time_select().for_({"event": "end_time"})
    result = check(time_select_html, matcher)

    assert result.success is False
    assert result.error_code is AssertionErrorCode.NO_MATCH
    assert result.message == matcher.failure_message()


def test_check_negated(time_select_html):
    matcher = have_time_select()
    result = check(time_select_html, matcher, negate=True)

    assert result.success is False
    assert result.error_code is AssertionErrorCode.UNEXPECTED_MATCH
    assert result.error_code == "UNEXPECTED_MATCH"
    assert result.message == matcher.negative_failure_message()
    assert result.metadata["negated"] is True


def test_check_propagates_matcher_errors():
    with pytest.raises(TypeError):
        check(None, have_select())


def test_assert_matches(time_select_html):
    assert_matches(time_select_html, have_time_select())

    with pytest.raises(AssertionError, match="expected document to have time select for event.end_time"):
        assert_matches(time_select_html, have_time_select().for_({"event": "end_time"}))


def test_assert_not_matches(time_select_html):
    assert_not_matches(time_select_html, have_select().for_("event", "end_time"))

    with pytest.raises(AssertionError, match="expected document to not have time select"):
        assert_not_matches(time_select_html, have_time_select())


def test_hamcrest_adapter(time_select_html):
    assert_that(time_select_html, matches_html(have_time_select().for_({"event": "start_time"})))
    assert_that(time_select_html, is_not(matches_html(have_time_select().for_({"event": "end_time"}))))


def test_hamcrest_mismatch_description(time_select_html):
    adapter = TagMatcherAdapter(have_time_select().for_({"event": "end_time"}))

    with pytest.raises(AssertionError) as exc_info:
        assert_that(time_select_html, adapter)

    message = str(exc_info.value)
    assert "document to have time select for event.end_time" in message
    assert "expected document to have time select for event.end_time; got:" in message


def test_check_logs_failures(mocker, time_select_html):
    mock_logger = mocker.patch("tag_matchers.assertions.logger")

    check(time_select_html, have_time_select().for_({"event": "end_time"}))

    assert mock_logger.info.called
