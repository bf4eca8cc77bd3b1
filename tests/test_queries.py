"""Tests for membership, clamping, wrap-around, fractions and slicing."""

import math

import pytest

from steprange import Range, docs


def test_has_is_inclusive():
    """Test that has() includes both bounds and values between steps."""
    r = Range(9)
    assert r.has(0)
    assert r.has(9)
    assert r.has(4.5)
    assert not r.has(-0.1)
    assert not r.has(9.01)


def test_has_on_descending_range():
    """Test that has() works when start > end."""
    assert Range(3, -7).has(-5)
    assert not Range(3, -7).has(4)


def test_has_coerces_input():
    """Test that has() parses strings and rejects non-numbers."""
    r = Range(9)
    assert r.has("5")
    assert not r.has("x")
    assert not r.has(None)
    assert not Range().has(0)


def test_clamp():
    """Test that clamp() pulls values into [min, max]."""
    r = Range(100)
    assert r.clamp(120) == 100
    assert r.clamp(-math.inf) == 0
    assert r.clamp(50) == 50
    assert r.clamp("42") == 42.0
    assert Range(10, 0).clamp(11) == 10


def test_clamp_never_leaves_range():
    """Test that clamped numbers always lie within the range."""
    r = Range(-2.5, 7)
    for value in [-100, -2.5, 0, 3.3, 7, 1e9]:
        assert r.min <= r.clamp(value) <= r.max


def test_clamp_propagates_nan():
    """Test that non-numeric input clamps to NaN."""
    assert math.isnan(Range(100).clamp("abc"))
    assert math.isnan(Range(100).clamp(math.nan))


def test_clamp_on_empty_range_returns_value():
    """Test that the empty range leaves values unclamped."""
    assert Range().clamp(5) == 5


def test_mod_wraps_around():
    """Test that mod() wraps numbers around [0, 9]."""
    r = Range(0, 9)
    assert r.mod(0) == 0
    assert r.mod(9) == 9
    assert r.mod(10) == 0
    assert r.mod(-2) == 8
    assert r.mod(23) == 3


def test_mod_with_offset_range():
    """Test that mod() is relative to min for ranges not starting at 0."""
    r = Range(5, 10)
    assert r.mod(11) == 10
    assert r.mod(4) == 9


def test_mod_stays_within_bounds():
    """Test that mod() never leaves [min, max] for negative input."""
    r = Range(0, 9)
    for n in range(-50, 50):
        assert r.min <= r.mod(n) <= r.max


def test_mod_of_invalid_input_is_nan():
    """Test that mod() of non-numbers or on the empty range is NaN."""
    assert math.isnan(Range(0, 9).mod("x"))
    assert math.isnan(Range().mod(3))


def test_get_fraction():
    """Test that get_fraction() maps min to 0, max to 1 and extrapolates."""
    r = Range(-100, 100)
    assert r.get_fraction(0) == 0.5
    assert r.get_fraction(-100) == 0
    assert r.get_fraction(100) == 1
    assert r.get_fraction(-150) == -0.25
    assert r.get_fraction(400) == 2.5


def test_get_fraction_precision():
    """Test that the result is rounded to the requested digits, capped at 100."""
    r = Range(0, 3)
    assert r.get_fraction(1) == 0.333333333333
    assert r.get_fraction(1, 2) == 0.33
    assert r.get_fraction(1, 500) == 1 / 3


def test_get_fraction_invalid_precision_is_nan():
    """Test that NaN or negative precision gives NaN."""
    r = Range(0, 3)
    assert math.isnan(r.get_fraction(1, math.nan))
    assert math.isnan(r.get_fraction(1, -1))


def test_get_fraction_of_zero_width_range():
    """Test that a zero-width range divides like IEEE floats."""
    r = Range(5, 5)
    assert math.isnan(r.get_fraction(5))
    assert r.get_fraction(6) == math.inf
    assert r.get_fraction(4) == -math.inf


def test_get_fraction_nan_cases():
    """Test that non-numbers and the empty range give NaN."""
    assert math.isnan(Range(0, 3).get_fraction("abc"))
    assert math.isnan(Range().get_fraction(1))


def test_from_fraction():
    """Test that from_fraction() maps 0 to min and 1 to max."""
    r = Range(-100, 100)
    assert r.from_fraction(0) == -100
    assert r.from_fraction(0.5) == 0
    assert r.from_fraction(1) == 100
    assert r.from_fraction(1.5) == 200
    assert math.isnan(Range().from_fraction(0.5))


def test_fraction_round_trip():
    """Test that from_fraction(get_fraction(x)) gives back x."""
    r = Range(-7.5, 12.25)
    for x in [-7.5, -3.1, 0, 4.2, 12.25]:
        assert r.from_fraction(r.get_fraction(x)) == pytest.approx(x, abs=1e-9)


def test_slice_circle_into_six_parts():
    """Test that a 0..359 circle slices into six 60-degree parts."""
    assert Range(359).slice(6) == [0, 60, 120, 180, 240, 300]


def test_slice_examples():
    """Test slicing with integer and fractional effective steps."""
    assert Range(99).slice(4) == [0, 25, 50, 75]
    assert Range(0, 1, 0.5).slice(3) == [0, 0.5, 1.0]


def test_slice_starts_at_min():
    """Test that descending ranges are sliced from min upwards."""
    assert Range(10, 0).slice(2) == [0, 5.5]


def test_slice_with_no_parts():
    """Test that zero, missing parts or the empty range give no slices."""
    assert Range(9).slice(0) == []
    assert Range(9).slice(None) == []
    assert Range().slice(3) == []


def test_slice_rejects_negative_parts():
    """Test that negative parts raise ValueError."""
    with pytest.raises(ValueError, match="Cannot slice a range"):
        Range(9).slice(-1)


def test_docs_are_bundled():
    """Test that README and API docs ship with the package."""
    assert "Range" in docs["readme"]
    assert "from_iterable" in docs["api"]
