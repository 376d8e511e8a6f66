"""Tests for parsing complete srcset values."""

from __future__ import annotations

import logging

import pytest

from srcset import ImageCandidate, parse
from tests.conftest import DENSITY_SRCSET, HEIGHT_SRCSET, WIDTH_SRCSET


def test_empty_input():
    assert parse("") == []


def test_url_only():
    assert parse("logo-printer-friendly.svg") == [
        ImageCandidate(url="logo-printer-friendly.svg")
    ]


def test_densities_keep_input_order():
    assert parse(DENSITY_SRCSET) == [
        ImageCandidate(url="image-1x.png", density=1.0),
        ImageCandidate(url="image-2x.png", density=2.0),
        ImageCandidate(url="image-3x.png", density=3.0),
        ImageCandidate(url="image-4x.png", density=4.0),
    ]


def test_widths_across_line_breaks():
    assert parse(WIDTH_SRCSET) == [
        ImageCandidate(url="elva-fairy-320w.jpg", width=320),
        ImageCandidate(url="elva-fairy-480w.jpg", width=480),
        ImageCandidate(url="elva-fairy-800w.jpg", width=800),
    ]


def test_heights_across_line_breaks():
    assert parse(HEIGHT_SRCSET) == [
        ImageCandidate(url="elva-fairy-320h.jpg", height=320),
        ImageCandidate(url="elva-fairy-480h.jpg", height=480),
        ImageCandidate(url="elva-fairy-800h.jpg", height=800),
    ]


def test_whitespace_between_candidates_does_not_matter():
    compact = "a.jpg 320w, b.jpg 480w, c.jpg 800w"
    padded = "\n\t a.jpg \t320w,\r\n\f b.jpg\n480w,\n\n   c.jpg    800w \n"
    assert parse(padded) == parse(compact)


@pytest.mark.parametrize(
    "value",
    [
        "test.png 1x 2x",
        "test.png 1x 200w",
        "test.png 124h 234h",
        "test.png 0w",
        "test.png 0h",
        "test.png -100w",
        "test.png -100h",
        "test.png f55w",
        "test.png -1.3x",
    ],
)
def test_invalid_candidates_are_dropped(value):
    assert parse(value) == []


def test_parenthesised_content_is_opaque():
    assert parse("data:,a ( , data:,b 1x, ), data:,c") == [
        ImageCandidate(url="data:,c")
    ]


def test_invalid_candidate_does_not_affect_neighbours():
    assert parse("a.png 1x, b.png 0x 2x, c.png 3x") == [
        ImageCandidate(url="a.png", density=1.0),
        ImageCandidate(url="c.png", density=3.0),
    ]


def test_trailing_commas_on_url():
    assert parse("a.png,,, b.png 2x,") == [
        ImageCandidate(url="a.png"),
        ImageCandidate(url="b.png", density=2.0),
    ]


@pytest.mark.parametrize(
    "value", ["a.png 1x , b.png 2x", "a.png 1x\t, b.png 2x", "a.png 1x\n, b.png 2x"]
)
def test_comma_after_whitespace_joins_next_candidate(value):
    # The descriptors become ["1x", "b.png", "2x"], which is invalid.
    assert parse(value) == []


def test_comma_before_descriptors_is_skipped():
    assert parse("a.png ,2x") == [ImageCandidate(url="a.png", density=2.0)]


def test_width_and_height_on_one_candidate():
    assert parse("img.jpg 320w 200h") == [
        ImageCandidate(url="img.jpg", width=320, height=200)
    ]


def test_duplicate_urls_are_kept():
    assert [c.url for c in parse("a.png 1x, a.png 2x")] == ["a.png", "a.png"]


def test_comma_inside_url_is_kept():
    assert parse("data:image/png;base64,AAAA 2x") == [
        ImageCandidate(url="data:image/png;base64,AAAA", density=2.0)
    ]


def test_non_ascii_space_is_part_of_url():
    assert parse("a.png\u00a01x") == [ImageCandidate(url="a.png\u00a01x")]


@pytest.mark.parametrize(
    "value",
    [
        ",,,",
        "   ",
        "(",
        ")",
        "a (",
        "a ()",
        "a 1x,,,",
        "\f\r",
        "a.png ,",
        "a.png 1x\t,",
        pytest.param("a.png " + "7" * 5000 + "w", id="long-width"),
        pytest.param("a.png " + "7" * 5000 + "h", id="long-height"),
        pytest.param("a.png 1e" + "9" * 5000 + "x", id="long-exponent"),
        pytest.param("(" * 20000, id="many-parens"),
        pytest.param("a.png " + "1x " * 20000, id="many-descriptors"),
    ],
)
def test_parse_never_raises(value):
    assert isinstance(parse(value), list)


def test_repeated_parses_are_identical():
    value = "a.png 1x, b.png 2x, bad.png 0w, c.png"
    assert parse(value) == parse(value)


def test_dropped_candidates_are_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="srcset")
    assert parse("test.png 0w") == []
    assert "Dropping srcset candidate test.png" in caplog.text


@pytest.mark.parametrize("kind", ["w", "h"])
def test_oversized_dimension_is_dropped(kind):
    value = "a.png " + "1" * 5000 + kind + ", b.png 2x"
    assert parse(value) == [ImageCandidate(url="b.png", density=2.0)]


def test_leading_zeros_on_dimension():
    assert parse("a.png " + "0" * 5000 + "1w") == [ImageCandidate(url="a.png", width=1)]


def test_oversized_density_is_dropped():
    assert parse("a.png " + "9" * 5000 + "x, b.png") == [ImageCandidate(url="b.png")]


def test_large_input():
    value = ",\n".join(f"img-{i}.png {i + 1}w" for i in range(10000))
    candidates = parse(value)
    assert len(candidates) == 10000
    assert candidates[-1] == ImageCandidate(url="img-9999.png", width=10000)
