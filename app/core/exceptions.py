"""Errors raised by the department directory and the arithmetic helpers.

Validation, duplicate and not-found errors describe caller mistakes.
``StoreError`` wraps anything the persistence layer raised and is never
reinterpreted as one of the others.
"""

from __future__ import annotations

from enum import Enum


class DepartmentError(Exception):
    """Base class for department directory errors."""


class NullArgumentError(DepartmentError, ValueError):
    """Raised when a required argument is ``None``."""

    def __init__(self, argument: str):
        self.argument = argument
        super().__init__(f"Value cannot be null. (Parameter '{argument}')")


class ValidationError(DepartmentError, ValueError):
    """Raised with the first rule a department violates."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{message} (Parameter '{field}')")


class DuplicateNameError(DepartmentError):
    """Raised when another department already uses the name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"A department with the name '{name}' already exists.")


class NotFoundError(DepartmentError):
    """Raised when an update or delete targets an id that is not stored."""

    def __init__(self, department_id: int | None):
        self.department_id = department_id
        super().__init__(f"Department with id {department_id} was not found.")


class StoreError(DepartmentError):
    """Raised when the record store fails."""


class RangeDirection(str, Enum):
    OVERFLOW = "overflow"
    UNDERFLOW = "underflow"


class ArithmeticRangeError(OverflowError):
    """Raised when a checked sum falls outside the 32-bit signed range."""

    def __init__(self, direction: RangeDirection):
        self.direction = direction
        super().__init__(f"Addition results in an {direction.value}.")


__all__ = [
    "DepartmentError",
    "NullArgumentError",
    "ValidationError",
    "DuplicateNameError",
    "NotFoundError",
    "StoreError",
    "RangeDirection",
    "ArithmeticRangeError",
]
