from app.core.constants import INT32_MAX, INT32_MIN
from app.core.exceptions import ArithmeticRangeError, RangeDirection


def _check_operand(name: str, value: int) -> None:
    # bool is an int subclass but never a valid operand
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not INT32_MIN <= value <= INT32_MAX:
        raise ValueError(f"{name}={value} is outside the 32-bit signed range")


def safe_add(a: int, b: int) -> int:
    """
    Add two 32-bit signed integers.

    Raises ArithmeticRangeError tagged OVERFLOW when the sum would exceed
    INT32_MAX and UNDERFLOW when it would drop below INT32_MIN. The checks
    run before the addition so the sum is only computed when it fits.
    """
    _check_operand("a", a)
    _check_operand("b", b)

    if b > 0 and a > INT32_MAX - b:
        raise ArithmeticRangeError(RangeDirection.OVERFLOW)

    if b < 0 and a < INT32_MIN - b:
        raise ArithmeticRangeError(RangeDirection.UNDERFLOW)

    return a + b
