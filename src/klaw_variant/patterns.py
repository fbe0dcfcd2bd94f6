"""Match patterns: Predicate | Literal, and first-match arm selection.

A pattern is either a ``Predicate`` wrapping a callable or a ``Literal``
wrapping a container of the receiver's own family. Plain callables and
plain containers passed as arm patterns are tagged here once, so the
variants never have to guess what a pattern is.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

import msgspec

from klaw_variant._logging import get_logger
from klaw_variant.errors import MatchError

__all__ = ["Arm", "Literal", "Pattern", "Predicate", "as_pattern", "select"]

logger = get_logger(__name__)

NO_ARMS = "No match arms provided"
NON_EXHAUSTIVE = "Non-exhaustive patterns"


class Predicate(msgspec.Struct, frozen=True, gc=False):
    """Pattern that matches when ``fn`` returns a truthy value.

    ``fn`` receives the payload of ``Some``/``Ok``/``Err``, and no argument
    at all for ``Nothing``.

    Examples:
        >>> Some(3).match([(Predicate(lambda v: v > 2), "big"), (_, "small")])
        'big'
    """

    fn: Callable[..., bool]

    def test(self, *payload: Any) -> bool:
        """Call the wrapped function with the given payload (zero or one value)."""
        return bool(self.fn(*payload))


class Literal[C](msgspec.Struct, frozen=True, gc=False):
    """Pattern that matches a receiver of the same variant and equal payload.

    Examples:
        >>> Ok(42).match([(Literal(Ok(1)), "one"), (Literal(Ok(42)), "answer")])
        'answer'
    """

    value: C


type Pattern = Predicate | Literal[Any]

type Arm[U] = tuple[Any, U]
"""A ``(pattern, outcome)`` pair."""


def as_pattern(pattern: Any, family: tuple[type, ...]) -> Pattern:
    """Tag a raw arm pattern for a receiver whose variants are ``family``.

    Args:
        pattern: A ``Predicate``, a ``Literal``, a container of ``family``
            or any other callable.
        family: The variant classes of the receiver's container type.

    Returns:
        The tagged pattern.

    Raises:
        TypeError: If the pattern is none of the above, or is a container of
            a different family.
    """
    if isinstance(pattern, Predicate):
        return pattern
    if isinstance(pattern, Literal):
        if not isinstance(pattern.value, family):
            msg = f"Literal pattern {pattern.value!r} cannot match a {_family_name(family)}"
            raise TypeError(msg)
        return pattern
    if isinstance(pattern, family):
        return Literal(pattern)
    if callable(pattern):
        return Predicate(pattern)
    msg = f"Match pattern must be a callable or a {_family_name(family)}, got {pattern!r}"
    raise TypeError(msg)


def select[U](
    arms: Iterable[Arm[U]],
    test: Callable[[Pattern], bool],
    *,
    family: tuple[type, ...],
    variant: str,
) -> U:
    """Return the outcome of the first arm whose pattern passes ``test``.

    Arms are evaluated strictly in the given order.

    Args:
        arms: The ``(pattern, outcome)`` pairs.
        test: Resolves a tagged pattern against the receiver.
        family: The receiver's variant classes, used to tag literals.
        variant: Receiver variant name, for logging.

    Raises:
        MatchError: If ``arms`` is empty or no arm matched.
        TypeError: If a pattern cannot be tagged.
    """
    arm_list = list(arms)
    if not arm_list:
        logger.debug("match.no_arms", variant=variant)
        raise MatchError(NO_ARMS)

    tagged = [(as_pattern(pattern, family), outcome) for pattern, outcome in arm_list]
    for pattern, outcome in tagged:
        if test(pattern):
            return outcome

    logger.debug("match.non_exhaustive", variant=variant, arms=len(tagged))
    raise MatchError(NON_EXHAUSTIVE)


def _family_name(family: tuple[type, ...]) -> str:
    return "/".join(cls.__name__ for cls in family)
