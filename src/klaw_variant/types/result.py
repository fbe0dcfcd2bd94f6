"""Result type: Ok[T] | Err[E] for explicit error handling."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from klaw_variant._logging import get_logger
from klaw_variant.errors import UnwrapError
from klaw_variant.patterns import Arm, Pattern, Predicate, select

if TYPE_CHECKING:
    from klaw_variant.types.option import Option

__all__ = ["Err", "Ok", "Result", "collect"]

logger = get_logger(__name__)

UNWRAP_ERR = "called unwrap on an Err value"
UNWRAP_ERR_ON_OK = "called unwrap_err on an Ok value"


class Ok[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Result containing a value of type T.

    Ok represents the successful outcome of an operation. It wraps a value
    that can be extracted, transformed, or threaded through a chain of
    Result-returning operations.

    Examples:
        >>> ok = Ok(42)
        >>> ok.unwrap()
        42
        >>> ok.map(lambda x: x * 2)
        Ok(value=84)
        >>> ok.match([(Ok(42), "answer"), (_, "other")])
        'answer'
    """

    value: T

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True if the result is Ok.

        This method provides type narrowing - after checking is_ok(),
        the type checker knows the result is Ok[T].
        """
        return True

    def is_err(self) -> TypeIs[Err[object]]:
        """Return False since this is Ok."""
        return False

    def is_ok_and(self, predicate: Callable[[T], bool]) -> bool:
        """Return the result of the predicate applied to the Ok value."""
        return bool(predicate(self.value))

    def is_err_and(self, _predicate: Callable[[object], bool]) -> bool:
        """Return False without calling the predicate."""
        return False

    def contains(self, x: object) -> bool:
        """Return True if the Ok value equals ``x``."""
        return self.value == x

    def contains_err(self, _e: object) -> bool:
        """Return False since this is Ok."""
        return False

    def unwrap(self) -> T:
        """Return the contained Ok value.

        Since this is Ok, this always succeeds.
        """
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained Ok value, ignoring the message."""
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raise an exception since this is Ok.

        Raises:
            UnwrapError: Always, since Ok holds no error.
        """
        logger.debug("unwrap.failed", variant="Ok", method="unwrap_err")
        raise UnwrapError(UNWRAP_ERR_ON_OK)

    def expect_err(self, msg: str) -> NoReturn:
        """Raise an exception with a custom message since this is Ok.

        Raises:
            UnwrapError: Always, with exactly ``msg`` as its message.
        """
        logger.debug("unwrap.failed", variant="Ok", method="expect_err")
        raise UnwrapError(msg)

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[object], T]) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the fallback function."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Ok value.

        Returns:
            Ok containing the result of applying f to the value.
        """
        return Ok(f(self.value))

    def map_err[F](self, _f: Callable[[object], F]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def map_or[U](self, default: U, f: Callable[[T], U]) -> U:  # noqa: ARG002
        """Return f applied to the Ok value, ignoring the default."""
        return f(self.value)

    def map_or_else[U](
        self, default_f: Callable[[object], U], f: Callable[[T], U]  # noqa: ARG002
    ) -> U:
        """Return f applied to the Ok value, ignoring the fallback."""
        return f(self.value)

    def inspect(self, f: Callable[[T], Any]) -> Ok[T]:
        """Call f with the Ok value and return self unchanged."""
        f(self.value)
        return self

    def inspect_err(self, _f: Callable[[object], Any]) -> Ok[T]:
        """Return self without calling f."""
        return self

    def and_[U, E](self, other: Ok[U] | Err[E]) -> Ok[U] | Err[E]:
        """Return other if self is Ok, else return self (Err).

        Since this is Ok, returns other.
        """
        return other

    def and_then[U, E](self, f: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Apply a function that returns a Result to the contained value.

        Also known as flatmap or bind.

        Args:
            f: Function that takes T and returns Result[U, E].

        Returns:
            The Result returned by f.
        """
        return f(self.value)

    def or_[F](self, _other: Ok[T] | Err[F]) -> Ok[T]:
        """Return self if Ok, else return other.

        Since this is Ok, returns self.
        """
        return self

    def or_else[F](self, _f: Callable[[object], Ok[T] | Err[F]]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def zip[U, E](self, other: Ok[U] | Err[E]) -> Ok[tuple[T, U]] | Err[E]:
        """Combine two Ok values into a tuple.

        If both are Ok, returns Ok((self.value, other.value)).
        If other is Err, returns it.
        """
        if isinstance(other, Ok):
            return Ok((self.value, other.value))
        return other

    def flatten[U, E](self: Ok[Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Flatten a nested Result.

        Converts Result[Result[T, E], E] into Result[T, E].
        """
        return self.value  # type: ignore[return-value]

    def ok(self) -> Option[T]:
        """Convert to Option, returning Some(value)."""
        from klaw_variant.types.option import Some

        return Some(self.value)

    def err(self) -> Option[object]:
        """Convert to Option, returning Nothing since this is Ok."""
        from klaw_variant.types.option import Nothing

        return Nothing

    def match[U](self, arms: Iterable[Arm[U]]) -> U:
        """Return the outcome of the first arm whose pattern matches.

        A predicate pattern is called with the Ok value. A Result pattern
        matches when it is an Ok holding an equal value; an Err pattern
        never matches, whatever its payload.

        Args:
            arms: Ordered ``(pattern, outcome)`` pairs.

        Returns:
            The outcome of the first matching arm.

        Raises:
            MatchError: If arms is empty or no arm matches.
        """
        return select(arms, self._test, family=_RESULT_VARIANTS, variant="Ok")

    def _test(self, pattern: Pattern) -> bool:
        if isinstance(pattern, Predicate):
            return pattern.test(self.value)
        return pattern.value.contains(self.value)


class Err[E](msgspec.Struct, frozen=True, gc=False):
    """Error variant of Result containing an error of type E.

    Err represents the failure outcome of an operation. It wraps an error
    value that can be transformed, recovered from, or matched on.

    Examples:
        >>> err = Err("something went wrong")
        >>> err.is_err()
        True
        >>> err.unwrap_or(0)
        0
    """

    error: E

    def is_ok(self) -> TypeIs[Ok[object]]:
        """Return False since this is Err."""
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        """Return True if the result is Err.

        This method provides type narrowing - after checking is_err(),
        the type checker knows the result is Err[E].
        """
        return True

    def is_ok_and(self, _predicate: Callable[[object], bool]) -> bool:
        """Return False without calling the predicate."""
        return False

    def is_err_and(self, predicate: Callable[[E], bool]) -> bool:
        """Return the result of the predicate applied to the error."""
        return bool(predicate(self.error))

    def contains(self, _x: object) -> bool:
        """Return False since this is Err."""
        return False

    def contains_err(self, e: object) -> bool:
        """Return True if the contained error equals ``e``."""
        return self.error == e

    def unwrap(self) -> NoReturn:
        """Raise an exception since this is Err.

        Raises:
            UnwrapError: Always, since Err has no Ok value to unwrap.
        """
        logger.debug("unwrap.failed", variant="Err", method="unwrap")
        raise UnwrapError(UNWRAP_ERR)

    def expect(self, msg: str) -> NoReturn:
        """Raise an exception with a custom message.

        Args:
            msg: Custom error message.

        Raises:
            UnwrapError: Always, with exactly ``msg`` as its message.
        """
        logger.debug("unwrap.failed", variant="Err", method="expect")
        raise UnwrapError(msg)

    def unwrap_err(self) -> E:
        """Return the contained error."""
        return self.error

    def expect_err(self, _msg: str) -> E:
        """Return the contained error, ignoring the message."""
        return self.error

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Err."""
        return default

    def unwrap_or_else[T](self, f: Callable[[E], T]) -> T:
        """Compute a default value from the error since this is Err."""
        return f(self.error)

    def map[T, U](self, _f: Callable[[T], U]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Apply a function to the contained error.

        Args:
            f: Function to apply to the error value.

        Returns:
            Err containing the transformed error.
        """
        return Err(f(self.error))

    def map_or[T, U](self, default: U, _f: Callable[[T], U]) -> U:
        """Return the default since there's no Ok value to map."""
        return default

    def map_or_else[T, U](self, default_f: Callable[[E], U], _f: Callable[[T], U]) -> U:
        """Return the fallback applied to the error."""
        return default_f(self.error)

    def inspect[T](self, _f: Callable[[T], Any]) -> Err[E]:
        """Return self without calling f."""
        return self

    def inspect_err(self, f: Callable[[E], Any]) -> Err[E]:
        """Call f with the error and return self unchanged."""
        f(self.error)
        return self

    def and_[U](self, _other: Ok[U] | Err[E]) -> Err[E]:
        """Return self since this is Err."""
        return self

    def and_then[T, U](self, _f: Callable[[T], Ok[U] | Err[E]]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def or_[T, F](self, other: Ok[T] | Err[F]) -> Ok[T] | Err[F]:
        """Return other since this is Err."""
        return other

    def or_else[T, F](self, f: Callable[[E], Ok[T] | Err[F]]) -> Ok[T] | Err[F]:
        """Apply a recovery function to the error.

        Args:
            f: Function that takes the error and returns a new Result.

        Returns:
            The Result returned by f.
        """
        return f(self.error)

    def zip[U](self, _other: Ok[U] | Err[E]) -> Err[E]:
        """Return self since this is Err."""
        return self

    def flatten(self) -> Err[E]:
        """Return self since this is Err (nothing to flatten)."""
        return self

    def ok(self) -> Option[object]:
        """Convert to Option, returning Nothing since this is Err."""
        from klaw_variant.types.option import Nothing

        return Nothing

    def err(self) -> Option[E]:
        """Convert to Option, returning Some(error)."""
        from klaw_variant.types.option import Some

        return Some(self.error)

    def match[U](self, arms: Iterable[Arm[U]]) -> U:
        """Return the outcome of the first arm whose pattern matches.

        A predicate pattern is called with the error. A Result pattern
        matches when it is an Err holding an equal error; an Ok pattern
        never matches, whatever its payload.

        Raises:
            MatchError: If arms is empty or no arm matches.
        """
        return select(arms, self._test, family=_RESULT_VARIANTS, variant="Err")

    def _test(self, pattern: Pattern) -> bool:
        if isinstance(pattern, Predicate):
            return pattern.test(self.error)
        return pattern.value.contains_err(self.error)


_RESULT_VARIANTS: tuple[type, ...] = (Ok, Err)

type Result[T, E = Exception] = Ok[T] | Err[E]


def collect[T, E](results: Iterable[Ok[T] | Err[E]]) -> Ok[list[T]] | Err[E]:
    """Collect an iterable of Results into a Result of list.

    Short-circuits on the first Err encountered.

    Args:
        results: An iterable of Result values.

    Returns:
        Ok(list[T]) if all results are Ok, otherwise the first Err.

    Examples:
        >>> collect([Ok(1), Ok(2), Ok(3)])
        Ok(value=[1, 2, 3])
        >>> collect([Ok(1), Err("fail"), Ok(3)])
        Err(error='fail')
    """
    values: list[T] = []
    for result in results:
        if isinstance(result, Err):
            return result
        values.append(result.value)
    return Ok(values)
