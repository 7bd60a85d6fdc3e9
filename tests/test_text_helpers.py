from __future__ import annotations

from datetime import timedelta

import pytest

from helpers.text_helpers import split_at_upper_case, to_short_form
from markup_engine.errors import NullArgument


@pytest.mark.parametrize(
    "source, expected",
    [
        ("MaxHealth", "Max Health"),
        ("maxHealth", "max Health"),
        ("Level2Boss", "Level 2 Boss"),
        ("Item10", "Item 10"),
        ("Zone0", "Zone0"),
        ("ABC", "A B C"),
        ("lower", "lower"),
        ("", ""),
    ],
)
def test_split_at_upper_case(source, expected):
    assert split_at_upper_case(source) == expected


def test_split_at_upper_case_skips_only_first_character():
    assert split_at_upper_case("1Up") == "1 Up"


def test_split_at_upper_case_none():
    with pytest.raises(NullArgument):
        split_at_upper_case(None)


@pytest.mark.parametrize(
    "duration, expected",
    [
        (timedelta(seconds=5), "0:05"),
        (timedelta(minutes=9, seconds=59), "9:59"),
        (timedelta(minutes=12, seconds=30), "12:30"),
        (timedelta(hours=1, minutes=2, seconds=3), "1:02:03"),
        (timedelta(days=1, minutes=1), "24:01:00"),
        (timedelta(seconds=-65), "1:05"),
    ],
)
def test_to_short_form(duration, expected):
    assert to_short_form(duration) == expected
