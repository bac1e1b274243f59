"""Field validation helpers shared by the map model classes."""

from __future__ import annotations

from typing import Any, Sequence

from keroedit.errors import ArityMismatch, FieldConstraintViolated


def check_range(field: str, value: Any, lower: int, upper: int) -> int:
    """Return value if it is an int within [lower, upper]."""
    # bool is an int subclass but never a valid field value
    if not isinstance(value, int) or isinstance(value, bool):
        raise FieldConstraintViolated(field, value, 'not an integer')
    if value < lower or value > upper:
        raise FieldConstraintViolated(field, value, f'outside range {lower} - {upper}')
    return value


def check_index(field: str, index: Any, count: int) -> int:
    """Return index if it addresses one of count fixed slots."""
    if not isinstance(index, int) or isinstance(index, bool) or index < 0 or index >= count:
        raise FieldConstraintViolated(field, index, f'index outside range 0 - {count - 1}')
    return index


def check_arity(field: str, values: Sequence[Any], expected: int) -> None:
    if len(values) != expected:
        raise ArityMismatch(field, expected, len(values))
