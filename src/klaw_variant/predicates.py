"""Predicate builders for ``match`` arms: ``_``, ``range_`` and ``any_``.

Each predicate accepts being called with no argument, which is how a
``Nothing`` receiver invokes predicate patterns.
"""

from collections.abc import Callable, Iterable
from typing import Any

__all__ = ["_", "any_", "range_"]

_MISSING: Any = object()


def _(*_args: object) -> bool:
    """Wildcard pattern: matches anything, including absence."""
    return True


def range_(
    lower: Any,
    upper: Any,
    inclusive: tuple[bool, bool] = (True, True),
) -> Callable[..., bool]:
    """Build a predicate testing that a value lies between two bounds.

    Args:
        lower: Lower bound.
        upper: Upper bound.
        inclusive: Whether the (lower, upper) bounds are closed.

    Returns:
        A predicate that is False when called with no value.

    Examples:
        >>> range_(0, 10)(10)
        True
        >>> range_(0, 10, (True, False))(10)
        False
    """
    lower_closed, upper_closed = inclusive

    def in_range(value: Any = _MISSING) -> bool:
        if value is _MISSING:
            return False
        above = lower <= value if lower_closed else lower < value
        below = value <= upper if upper_closed else value < upper
        return above and below

    return in_range


def any_(values: Iterable[Any]) -> Callable[..., bool]:
    """Build a predicate testing membership (by equality) in ``values``.

    Examples:
        >>> any_(["a", "b"])("c")
        False
    """
    candidates = tuple(values)

    def is_any(value: Any = _MISSING) -> bool:
        if value is _MISSING:
            return False
        return value in candidates

    return is_any
