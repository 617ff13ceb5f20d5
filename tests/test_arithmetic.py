import random

import pytest

from app.core.arithmetic import safe_add
from app.core.constants import INT32_MAX, INT32_MIN
from app.core.exceptions import ArithmeticRangeError, RangeDirection


def _expected(a, b):
    total = a + b
    if total > INT32_MAX:
        return RangeDirection.OVERFLOW
    if total < INT32_MIN:
        return RangeDirection.UNDERFLOW
    return total


def _outcome(a, b):
    try:
        return safe_add(a, b)
    except ArithmeticRangeError as exc:
        return exc.direction


def test_small_numbers():
    assert safe_add(1, 2) == 3
    assert safe_add(-5, 3) == -2
    assert safe_add(0, 0) == 0


def test_max_plus_one_overflows():
    with pytest.raises(ArithmeticRangeError) as exc_info:
        safe_add(INT32_MAX, 1)
    assert exc_info.value.direction is RangeDirection.OVERFLOW
    assert "overflow" in str(exc_info.value).lower()


def test_max_plus_max_overflows():
    with pytest.raises(ArithmeticRangeError) as exc_info:
        safe_add(INT32_MAX, INT32_MAX)
    assert exc_info.value.direction is RangeDirection.OVERFLOW


def test_min_minus_one_underflows():
    with pytest.raises(ArithmeticRangeError) as exc_info:
        safe_add(INT32_MIN, -1)
    assert exc_info.value.direction is RangeDirection.UNDERFLOW
    assert "underflow" in str(exc_info.value).lower()


def test_min_plus_min_underflows():
    with pytest.raises(ArithmeticRangeError) as exc_info:
        safe_add(INT32_MIN, INT32_MIN)
    assert exc_info.value.direction is RangeDirection.UNDERFLOW


def test_range_error_is_an_overflow_error():
    with pytest.raises(OverflowError):
        safe_add(INT32_MAX - 100, 200)


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (INT32_MAX, INT32_MIN, -1),
        (INT32_MAX, 0, INT32_MAX),
        (INT32_MIN, 0, INT32_MIN),
        (INT32_MAX - 1, 1, INT32_MAX),
        (INT32_MIN + 1, -1, INT32_MIN),
        (INT32_MAX, -1, INT32_MAX - 1),
        (INT32_MIN, 1, INT32_MIN + 1),
    ],
)
def test_boundaries_that_fit(a, b, expected):
    assert safe_add(a, b) == expected


def test_matches_wide_arithmetic_and_is_commutative():
    rng = random.Random(20240101)
    edges = [INT32_MIN, INT32_MIN + 1, -1, 0, 1, INT32_MAX - 1, INT32_MAX]
    pairs = [(a, b) for a in edges for b in edges]
    pairs += [
        (rng.randint(INT32_MIN, INT32_MAX), rng.randint(INT32_MIN, INT32_MAX))
        for _ in range(2000)
    ]

    for a, b in pairs:
        result = _outcome(a, b)
        assert result == _expected(a, b), (a, b)
        assert _outcome(b, a) == result, (a, b)


@pytest.mark.parametrize("value", [INT32_MAX + 1, INT32_MIN - 1])
def test_operands_outside_int32_rejected(value):
    with pytest.raises(ValueError):
        safe_add(value, 0)
    with pytest.raises(ValueError):
        safe_add(0, value)


@pytest.mark.parametrize("value", [1.5, "1", None, True])
def test_non_int_operands_rejected(value):
    with pytest.raises(TypeError):
        safe_add(value, 1)
