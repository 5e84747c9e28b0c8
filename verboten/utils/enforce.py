import decimal
import numbers
from typing import Any, Callable, TypeVar

T = TypeVar("T")


def is_number(value: Any) -> bool:
    # bool is an Integral subclass but never a coordinate
    if isinstance(value, bool):
        return False
    return isinstance(value, (numbers.Real, decimal.Decimal))


def enforce(predicate: Callable[[T], bool], value: T) -> T:
    """
    Return value unchanged when it satisfies predicate.
    :param predicate: Check applied to value
    :param value: Value to check
    :return: value
    """
    if not predicate(value):
        raise ValueError(f"{value!r} does not satisfy {predicate.__name__}")
    return value


def to_float(value: Any) -> float:
    """
    Float form of a number, ValueError for anything a float cannot hold.
    """
    try:
        return float(enforce(is_number, value))
    except OverflowError as e:
        raise ValueError(f"{value!r} is too large for a float") from e
