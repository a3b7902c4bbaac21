"""Tests for numeric field parsing."""

import math

import pytest

from appraisal.validation import InputError, coerce_number, correction_hint, parse_number


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("42", 42.0),
        ("  -3.5 ", -3.5),
        ("1_000", 1000.0),
        ("1 500,5", 1500.5),
        ("1,000.25", 1000.25),
        ("1.000,25", 1000.25),
        ("1.000.000", 1_000_000.0),
        ("1e3", 1000.0),
        (7, 7.0),
    ],
)
def test_valid_numbers(raw, expected):
    result = parse_number(raw)
    assert result.ok
    assert result.hint is None
    assert math.isclose(result.value, expected)


@pytest.mark.parametrize(
    "raw, error",
    [
        ("", InputError.EMPTY),
        ("   ", InputError.EMPTY),
        (None, InputError.EMPTY),
        ("abc", InputError.NOT_A_NUMBER),
        ("12abc", InputError.NOT_A_NUMBER),
        (True, InputError.NOT_A_NUMBER),
        ("1e400", InputError.NOT_FINITE),
        ("nan", InputError.NOT_FINITE),
        (float("inf"), InputError.NOT_FINITE),
    ],
)
def test_invalid_numbers_coerce_to_zero(raw, error):
    result = parse_number(raw)
    assert result.error is error
    assert result.value == 0.0
    assert not result.ok
    assert result.hint == correction_hint(error)


def test_negative_rejected_when_disallowed():
    result = parse_number("-10", allow_negative=False)
    assert result.error is InputError.NEGATIVE
    assert result.value == 0.0
    assert parse_number("-10").value == -10.0


def test_coerce_number():
    assert coerce_number("oops") == 0.0
    assert coerce_number("12.5") == 12.5
