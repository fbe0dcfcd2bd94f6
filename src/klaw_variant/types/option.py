"""Option type: Some[T] | Nothing for optional values."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from klaw_variant._logging import get_logger
from klaw_variant.errors import UnwrapError
from klaw_variant.patterns import Arm, Pattern, Predicate, select

if TYPE_CHECKING:
    from klaw_variant.types.result import Err, Ok

__all__ = ["Nothing", "NothingType", "Option", "Some"]

logger = get_logger(__name__)

UNWRAP_NOTHING = "called unwrap on a Nothing value"


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """Some variant of Option containing a value of type T.

    Some represents the presence of a value. It wraps a value that can be
    extracted, transformed, or threaded through a chain of Option-returning
    operations.

    Examples:
        >>> some = Some(42)
        >>> some.unwrap()
        42
        >>> some.map(lambda x: x * 2)
        Some(value=84)
        >>> some.match([(Some(1), "one"), (_, "other")])
        'other'
    """

    value: T

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True if the option is Some.

        This method provides type narrowing - after checking is_some(),
        the type checker knows the option is Some[T].
        """
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def is_some_and(self, predicate: Callable[[T], bool]) -> bool:
        """Return the result of the predicate applied to the contained value."""
        return bool(predicate(self.value))

    def contains(self, item: object) -> bool:
        """Return True if the contained value equals ``item``."""
        return self.value == item

    def unwrap(self) -> T:
        """Return the contained Some value.

        Since this is Some, this always succeeds.
        """
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained Some value, ignoring the message."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained Some value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained Some value, ignoring the fallback function."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Some value.

        Returns:
            Some containing the result of applying f to the value.
        """
        return Some(f(self.value))

    def map_or[U](self, default: U, f: Callable[[T], U]) -> U:  # noqa: ARG002
        """Return f applied to the contained value, ignoring the default."""
        return f(self.value)

    def map_or_else[U](self, default_f: Callable[[], U], f: Callable[[T], U]) -> U:  # noqa: ARG002
        """Return f applied to the contained value, ignoring the fallback."""
        return f(self.value)

    def inspect(self, f: Callable[[T], Any]) -> Some[T]:
        """Call f with the contained value and return self unchanged."""
        f(self.value)
        return self

    def filter(self, predicate: Callable[[T], bool]) -> Some[T] | NothingType:
        """Return Some if the predicate is satisfied, else Nothing.

        Args:
            predicate: Function that returns True to keep the value.

        Returns:
            Some(value) if predicate(value) is True, else Nothing.
        """
        if predicate(self.value):
            return self
        return Nothing

    def and_[U](self, other: Some[U] | NothingType) -> Some[U] | NothingType:
        """Return other if self is Some, else return Nothing.

        Since this is Some, returns other.
        """
        return other

    def and_then[U](
        self, f: Callable[[T], Some[U] | NothingType]
    ) -> Some[U] | NothingType:
        """Apply a function that returns an Option to the contained value.

        Also known as flatmap or bind.

        Args:
            f: Function that takes T and returns Option[U].

        Returns:
            The Option returned by f.
        """
        return f(self.value)

    def or_(self, _other: Some[T] | NothingType) -> Some[T]:
        """Return self if Some, else return other.

        Since this is Some, returns self.
        """
        return self

    def or_else(self, _f: Callable[[], Some[T] | NothingType]) -> Some[T]:
        """Return self unchanged since this is Some."""
        return self

    def xor(self, other: Some[T] | NothingType) -> Some[T] | NothingType:
        """Return self if other is Nothing, else Nothing."""
        if isinstance(other, NothingType):
            return self
        return Nothing

    def zip[U](self, other: Some[U] | NothingType) -> Some[tuple[T, U]] | NothingType:
        """Combine two Some values into a tuple.

        If other is Some, returns Some((self.value, other.value)).
        If other is Nothing, returns Nothing.
        """
        return other.map(lambda other_value: (self.value, other_value))

    def zip_with[U, R](
        self, other: Some[U] | NothingType, f: Callable[[T, U], R]
    ) -> Some[R] | NothingType:
        """Combine two Some values with f.

        Args:
            other: The Option to combine with.
            f: Function receiving both contained values.

        Returns:
            Some(f(self.value, other.value)), or Nothing if other is Nothing.
        """
        return self.zip(other).map(lambda pair: f(*pair))

    def flatten[U](self: Some[Some[U] | NothingType]) -> Some[U] | NothingType:
        """Flatten a nested Option.

        Converts Option[Option[T]] into Option[T].
        """
        return self.value  # type: ignore[return-value]

    def ok_or[E](self, _err: E) -> Ok[T]:
        """Convert to Result, returning Ok(value)."""
        from klaw_variant.types.result import Ok

        return Ok(self.value)

    def ok_or_else[E](self, _f: Callable[[], E]) -> Ok[T]:
        """Convert to Result, returning Ok(value)."""
        from klaw_variant.types.result import Ok

        return Ok(self.value)

    def match[U](self, arms: Iterable[Arm[U]]) -> U:
        """Return the outcome of the first arm whose pattern matches.

        A predicate pattern is called with the contained value. An Option
        pattern matches when it is a Some holding an equal value.

        Args:
            arms: Ordered ``(pattern, outcome)`` pairs.

        Returns:
            The outcome of the first matching arm.

        Raises:
            MatchError: If arms is empty or no arm matches.
        """
        return select(arms, self._test, family=_OPTION_VARIANTS, variant="Some")

    def _test(self, pattern: Pattern) -> bool:
        if isinstance(pattern, Predicate):
            return pattern.test(self.value)
        return pattern.value.contains(self.value)


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Nothing variant of Option representing absence of a value.

    Operations on Nothing return Nothing or a default value, and never call
    the mapping or predicate functions they are given.

    This is a singleton in practice - use the `Nothing` constant instead of
    instantiating directly.

    Examples:
        >>> Nothing.is_none()
        True
        >>> Nothing.unwrap_or(0)
        0
    """

    def is_some(self) -> TypeIs[Some[object]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True if the option is Nothing.

        This method provides type narrowing - after checking is_none(),
        the type checker knows the option is Nothing.
        """
        return True

    def is_some_and[T](self, _predicate: Callable[[T], bool]) -> bool:
        """Return False without calling the predicate."""
        return False

    def contains(self, _item: object) -> bool:
        """Return False since Nothing contains no value."""
        return False

    def unwrap(self) -> NoReturn:
        """Raise an exception since this is Nothing.

        Raises:
            UnwrapError: Always, since Nothing has no value to unwrap.
        """
        logger.debug("unwrap.failed", variant="Nothing", method="unwrap")
        raise UnwrapError(UNWRAP_NOTHING)

    def expect(self, msg: str) -> NoReturn:
        """Raise an exception with a custom message.

        Args:
            msg: Custom error message.

        Raises:
            UnwrapError: Always, with exactly ``msg`` as its message.
        """
        logger.debug("unwrap.failed", variant="Nothing", method="expect")
        raise UnwrapError(msg)

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Nothing."""
        return default

    def unwrap_or_else[T](self, f: Callable[[], T]) -> T:
        """Compute and return a default value since this is Nothing."""
        return f()

    def map[T, U](self, _f: Callable[[T], U]) -> NothingType:
        """Return Nothing since there's no value to map."""
        return self

    def map_or[T, U](self, default: U, _f: Callable[[T], U]) -> U:
        """Return the default since there's no value to map."""
        return default

    def map_or_else[T, U](self, default_f: Callable[[], U], _f: Callable[[T], U]) -> U:
        """Return the result of the fallback since there's no value to map."""
        return default_f()

    def inspect[T](self, _f: Callable[[T], Any]) -> NothingType:
        """Return Nothing without calling f."""
        return self

    def filter[T](self, _predicate: Callable[[T], bool]) -> NothingType:
        """Return Nothing since there's no value to filter."""
        return self

    def and_[U](self, _other: Some[U] | NothingType) -> NothingType:
        """Return Nothing since self is Nothing."""
        return self

    def and_then[T, U](self, _f: Callable[[T], Some[U] | NothingType]) -> NothingType:
        """Return Nothing since there's no value to bind."""
        return self

    def or_[T](self, other: Some[T] | NothingType) -> Some[T] | NothingType:
        """Return other since self is Nothing."""
        return other

    def or_else[T](
        self, f: Callable[[], Some[T] | NothingType]
    ) -> Some[T] | NothingType:
        """Apply a recovery function since this is Nothing.

        Args:
            f: Function that returns a new Option.

        Returns:
            The Option returned by f.
        """
        return f()

    def xor[T](self, other: Some[T] | NothingType) -> Some[T] | NothingType:
        """Return other, which is Some exactly when it holds a value."""
        return other

    def zip[U](self, _other: Some[U] | NothingType) -> NothingType:
        """Return Nothing since self is Nothing."""
        return self

    def zip_with[T, U, R](
        self, _other: Some[U] | NothingType, _f: Callable[[T, U], R]
    ) -> NothingType:
        """Return Nothing since self is Nothing."""
        return self

    def flatten(self) -> NothingType:
        """Return Nothing since there's nothing to flatten."""
        return self

    def ok_or[E](self, err: E) -> Err[E]:
        """Convert to Result, returning Err(err).

        Args:
            err: The error value to wrap.

        Returns:
            Err containing the error.
        """
        from klaw_variant.types.result import Err

        return Err(err)

    def ok_or_else[E](self, f: Callable[[], E]) -> Err[E]:
        """Convert to Result, computing the error.

        Args:
            f: Function that produces the error value.

        Returns:
            Err containing the computed error.
        """
        from klaw_variant.types.result import Err

        return Err(f())

    def match[U](self, arms: Iterable[Arm[U]]) -> U:
        """Return the outcome of the first arm whose pattern matches.

        A predicate pattern is called with no arguments, so it must accept
        being called that way (``_``, ``range_`` and ``any_`` do). An Option
        pattern matches when it is Nothing.

        Raises:
            MatchError: If arms is empty or no arm matches.
        """
        return select(arms, self._test, family=_OPTION_VARIANTS, variant="Nothing")

    def _test(self, pattern: Pattern) -> bool:
        if isinstance(pattern, Predicate):
            return pattern.test()
        return pattern.value.is_none()


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""

_OPTION_VARIANTS: tuple[type, ...] = (Some, NothingType)

type Option[T] = Some[T] | NothingType
