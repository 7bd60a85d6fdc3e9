from __future__ import annotations

import pytest

from markup_engine import (
    OPAQUE_WHITE,
    ColorSegmentExtractor,
    InvalidColorPayload,
    InvalidColorValue,
    Segment,
    extract_color_segments,
)
from tag_patterns import get_tag_patterns

WHITE = OPAQUE_WHITE
BLACK = 0xFF000000


@pytest.mark.parametrize("text", ["plain text", "a < b > c", "<b>bold</b>", "x"])
def test_untagged_text_is_one_default_segment(text):
    assert extract_color_segments(text, BLACK) == [(BLACK, text)]


@pytest.mark.parametrize("text", ["", None])
def test_empty_input_passes_through(text):
    assert extract_color_segments(text) == [Segment(WHITE, text)]


def test_rgb_tag():
    assert extract_color_segments("<c=#FF0000>hi</c>", WHITE) == [(0xFFFF0000, "hi")]


def test_argb_tag_between_text():
    assert extract_color_segments("a<c=AABBCCDD>b</c>c", WHITE) == [
        (WHITE, "a"),
        (0xAABBCCDD, "b"),
        (WHITE, "c"),
    ]


def test_color_alias_and_missing_payload():
    assert extract_color_segments("<color=00FF00>g</color><c=>d</c>", BLACK) == [
        (0xFF00FF00, "g"),
        (BLACK, "d"),
    ]


def test_default_color_is_white():
    assert extract_color_segments("x<c=>y</c>") == [(WHITE, "x"), (WHITE, "y")]


def test_adjacent_tags_have_no_gap_segment():
    segments = extract_color_segments("<c=FF0000>r</c><c=0000FF>b</c>")
    assert segments == [(0xFFFF0000, "r"), (0xFF0000FF, "b")]


def test_whitespace_in_close_tag():
    assert extract_color_segments("<c=FF0000>r< /  c >") == [(0xFFFF0000, "r")]


def test_mismatched_alias_is_literal():
    text = "<c=FF0000>r</color>"
    assert extract_color_segments(text) == [(WHITE, text)]


def test_nested_same_alias_stops_at_first_close():
    segments = extract_color_segments("<c=FF0000>a<c=00FF00>b</c>c</c>")
    assert segments == [(0xFFFF0000, "a<c=00FF00>b"), (WHITE, "c</c>")]


def test_empty_body():
    assert extract_color_segments("a<c=FF0000></c>b") == [
        (WHITE, "a"),
        (0xFFFF0000, ""),
        (WHITE, "b"),
    ]


def test_body_does_not_cross_lines():
    text = "<c=FF0000>a\nb</c>"
    assert extract_color_segments(text) == [(WHITE, text)]


@pytest.mark.parametrize(
    "text",
    [
        "",
        "no tags at all",
        "a<c=AABBCCDD>b</c>c",
        "<c=FF0000>x</c> mid <color=#11223344>y</color> end",
        "<c=FF0000>a<c=00FF00>b</c>c</c>",
        "broken <c=FF0000>tag",
        "line one\n<c=FF0000>two</c>\nthree",
    ],
)
def test_segments_reconstruct_text_without_tags(text):
    segments = extract_color_segments(text)
    joined = "".join(segment.text for segment in segments)
    # Each matched pair contributes only its body
    expected = get_tag_patterns().color_pair.sub(lambda m: m.group("text"), text)
    assert joined == expected


def test_untagged_segments_cover_input_exactly():
    text = "start <c=FF0000>red</c> middle <c=00FF00>green</c> end"
    segments = extract_color_segments(text)
    assert [s.text for s in segments] == ["start ", "red", " middle ", "green", " end"]
    assert [s.color for s in segments] == [WHITE, 0xFFFF0000, WHITE, 0xFF00FF00, WHITE]


def test_deterministic():
    text = "a<c=AABBCCDD>b</c>c"
    assert extract_color_segments(text) == extract_color_segments(text)


def test_segment_is_immutable():
    segment = extract_color_segments("x")[0]
    with pytest.raises(AttributeError):
        segment.text = "y"


def test_invalid_default_color():
    with pytest.raises(InvalidColorValue):
        extract_color_segments("x", default_color=-5)


def test_invalid_payload_propagates(monkeypatch):
    from markup_engine import color_segments

    def broken(rgb=None, argb=None):
        raise InvalidColorPayload(rgb or argb)

    monkeypatch.setattr(color_segments, "color_from_payload", broken)
    with pytest.raises(InvalidColorPayload):
        ColorSegmentExtractor().extract("<c=FF0000>x</c>")
