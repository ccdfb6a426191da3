import datetime

import pytest

from notimebuddy.errors import ValidationError
from notimebuddy.mission import (
    MSG_PAST_DEADLINE,
    MSG_REQUIRED,
    format_days_left,
    validate_mission,
)

TODAY = datetime.date(2025, 1, 7)


@pytest.mark.parametrize("title", ["", "   ", None])
def test_empty_title_rejected(title) -> None:
    with pytest.raises(ValidationError, match=MSG_REQUIRED):
        validate_mission(title, TODAY, today=TODAY)


def test_missing_deadline_rejected() -> None:
    with pytest.raises(ValidationError, match=MSG_REQUIRED):
        validate_mission("Ship report", None, today=TODAY)


def test_past_deadline_rejected() -> None:
    with pytest.raises(ValidationError, match=MSG_PAST_DEADLINE):
        validate_mission("Ship report", TODAY - datetime.timedelta(days=1), today=TODAY)


def test_valid_input_is_cleaned() -> None:
    title, deadline = validate_mission("  Ship report ", datetime.datetime(2025, 1, 7, 9, 0), today=TODAY)
    assert title == "Ship report"
    assert deadline == TODAY


def test_days_left_text() -> None:
    assert format_days_left(TODAY + datetime.timedelta(days=3), today=TODAY) == "3 days"
    assert format_days_left(TODAY, today=TODAY) == "0 days"
    assert format_days_left(TODAY - datetime.timedelta(days=2), today=TODAY) == "-2 days"
