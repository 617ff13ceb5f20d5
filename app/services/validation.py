"""
Ordered validation rules for departments.

Rules run in declaration order (name before description) and only the
first violation is reported.
"""
from typing import Callable, NamedTuple

from app.core.constants import (
    DEPARTMENT_DESCRIPTION_MAX_LENGTH,
    DEPARTMENT_DESCRIPTION_TOO_LONG_MSG,
    DEPARTMENT_NAME_MAX_LENGTH,
    DEPARTMENT_NAME_REQUIRED_MSG,
    DEPARTMENT_NAME_TOO_LONG_MSG,
)
from app.core.exceptions import ValidationError
from app.db.models.department import Department


class Rule(NamedTuple):
    field: str
    is_valid: Callable[[Department], bool]
    message: str


def _name_present(department: Department) -> bool:
    name = department.name
    return isinstance(name, str) and name.strip() != ""


def _name_within_limit(department: Department) -> bool:
    return len(department.name) <= DEPARTMENT_NAME_MAX_LENGTH


def _description_within_limit(department: Department) -> bool:
    description = department.description
    return description is None or len(description) <= DEPARTMENT_DESCRIPTION_MAX_LENGTH


DEPARTMENT_RULES: tuple[Rule, ...] = (
    Rule("name", _name_present, DEPARTMENT_NAME_REQUIRED_MSG),
    Rule("name", _name_within_limit, DEPARTMENT_NAME_TOO_LONG_MSG),
    Rule("description", _description_within_limit, DEPARTMENT_DESCRIPTION_TOO_LONG_MSG),
)


def first_violation(department: Department) -> Rule | None:
    for rule in DEPARTMENT_RULES:
        if not rule.is_valid(department):
            return rule
    return None


def validate_department(department: Department) -> None:
    rule = first_violation(department)
    if rule is not None:
        raise ValidationError(rule.field, rule.message)
