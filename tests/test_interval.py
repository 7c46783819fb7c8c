import pytest

from imsql.interval import (
    BoundType,
    Interval,
    make_ending_interval,
    make_interval,
    make_starting_interval,
)


@pytest.fixture
def span():
    return make_interval((3, 8))


def test_make_interval_keeps_bounds(span):
    assert span.lower == 3
    assert span.upper == 8


def test_closed_contains_endpoints(span):
    assert span.contains(3)
    assert span.contains(8)
    assert not span.contains(9)
    assert not span.contains(2)


@pytest.mark.parametrize(
    "lower_bound, upper_bound, at_lower, at_upper",
    [
        (BoundType.OPEN, BoundType.OPEN, False, False),
        (BoundType.OPEN, BoundType.CLOSED, False, True),
        (BoundType.CLOSED, BoundType.OPEN, True, False),
        (BoundType.CLOSED, BoundType.CLOSED, True, True),
    ],
)
def test_bound_types(span, lower_bound, upper_bound, at_lower, at_upper):
    assert span.contains(span.lower, lower_bound, upper_bound) is at_lower
    assert span.contains(span.upper, lower_bound, upper_bound) is at_upper
    assert span.contains(5, lower_bound, upper_bound)


def test_below_is_adjacent(span):
    below = span.below(2)
    assert below.upper == span.lower
    assert below.length() == 2


def test_above_is_adjacent(span):
    above = span.above(4)
    assert above.lower == span.upper
    assert above.length() == 4


def test_length_and_emptiness(span):
    assert span.length() == span.upper - span.lower
    assert not span.is_empty()
    assert Interval(4, 4).is_empty()
    assert Interval(5, 1).is_empty()


def test_ending_interval():
    iv = make_ending_interval(10, 3)
    assert iv.upper == 10
    assert iv.length() == 3


def test_starting_interval():
    iv = make_starting_interval(1.5, 2.0)
    assert iv.lower == 1.5
    assert iv.length() == pytest.approx(2.0)


def test_below_and_above_preserve_widths():
    iv = make_starting_interval(0, 10)
    assert iv.below(5) == make_ending_interval(iv.lower, 5)
    assert iv.above(5) == make_starting_interval(iv.upper, 5)