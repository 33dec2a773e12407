"""Result type: Ok[V] | Err[E] for explicit error handling."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from fallible.errors import IncorrectVariantError
from fallible.types.empty import EMPTY, Empty, _empty

if TYPE_CHECKING:
    from fallible.types.maybe import Maybe

__all__ = ["Err", "Ok", "Result", "collect"]


class Ok[V](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Result containing a value of type V.

    Ok represents the successful outcome of an operation. Called without an
    argument it holds the ``EMPTY`` sentinel.

    Examples:
        >>> Ok(42).take()
        42
        >>> Ok(42).map(lambda x: x * 2)
        Ok(value=84)
        >>> Ok()
        Ok(value=EMPTY)
    """

    value: V = msgspec.field(default_factory=_empty)

    def is_ok(self) -> TypeIs[Ok[V]]:
        """Return True if the result is Ok.

        This method provides type narrowing - after checking is_ok(),
        the type checker knows the result is Ok[V].
        """
        return True

    def is_err(self) -> TypeIs[Err[Any]]:
        """Return False since this is Ok."""
        return False

    def take(self) -> V:
        """Return the contained Ok value."""
        return self.value

    def take_err(self) -> NoReturn:
        """Raise since there is no error to take from Ok.

        Raises:
            IncorrectVariantError: Always.
        """
        raise IncorrectVariantError("take_err", "Ok")

    def take_or(self, default: V) -> V:  # noqa: ARG002
        """Return the contained Ok value, ignoring the default."""
        return self.value

    def take_or_else(self, f: Callable[[Any], V]) -> V:  # noqa: ARG002
        """Return the contained Ok value, ignoring the fallback function."""
        return self.value

    def on_ok(self, effect: Callable[[V], Any]) -> Ok[V]:
        """Call effect with the value and return self unchanged.

        The return value of effect is discarded.
        """
        effect(self.value)
        return self

    def on_err(self, effect: Callable[[Any], Any]) -> Ok[V]:  # noqa: ARG002
        """Return self unchanged since this is Ok."""
        return self

    def map[U](self, f: Callable[[V], U]) -> Ok[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Ok value.

        Returns:
            Ok containing the result of applying f to the value.
        """
        return Ok(f(self.value))

    def refine[F](self, f: Callable[[Any], F]) -> Ok[V]:  # noqa: ARG002
        """Return self unchanged since this is Ok."""
        return self

    def chain[U, F](self, f: Callable[[V], Ok[U] | Err[F]]) -> Ok[U] | Err[F]:
        """Apply a function that returns a Result to the contained value.

        Also known as flatmap or bind. The returned Result is unfolded one
        level, so a function returning a plain value yields Ok(value).

        Args:
            f: Function that takes V and returns Result[U, F].

        Returns:
            The Result returned by f.
        """
        return Ok(f(self.value)).unfold()

    def unfold(self) -> Ok[Any] | Err[Any]:
        """Flatten one level of nesting.

        Ok(Ok(x)) becomes Ok(x) and Ok(Err(e)) becomes Err(e). Any other
        Ok is returned unchanged.

        Examples:
            >>> Ok(Ok(5)).unfold()
            Ok(value=5)
            >>> Ok(5).unfold()
            Ok(value=5)
        """
        if isinstance(self.value, Ok | Err):
            return self.value
        return self

    def check[F](
        self, predicate: Callable[[V], bool], error: F = EMPTY
    ) -> Ok[V] | Err[F]:
        """Keep the value only if it satisfies predicate.

        Args:
            predicate: Test applied to the Ok value.
            error: Payload of the Err returned when the test fails.
                Defaults to the empty sentinel.

        Returns:
            Self if predicate(value) is True, else Err(error).
        """
        if predicate(self.value):
            return self
        return Err(error)

    def assert_[U, F](
        self, guard: Callable[[V], TypeIs[U]], error: F = EMPTY
    ) -> Ok[U] | Err[F]:
        """Like check, but narrows the value type to what guard asserts."""
        if guard(self.value):
            return self  # type: ignore[return-value]
        return Err(error)

    def or_(self, alternative: Ok[Any] | Err[Any]) -> Ok[V]:  # noqa: ARG002
        """Return self since this is Ok."""
        return self

    def or_else(self, f: Callable[[Any], Ok[Any] | Err[Any]]) -> Ok[V]:  # noqa: ARG002
        """Return self unchanged since this is Ok."""
        return self

    def or_if(  # noqa: ARG002
        self, predicate: Callable[[Any], bool], alternative: Ok[Any] | Err[Any]
    ) -> Ok[V]:
        """Return self since this is Ok."""
        return self

    def or_else_if(
        self,
        predicate: Callable[[Any], bool],  # noqa: ARG002
        f: Callable[[Any], Ok[Any] | Err[Any]],
    ) -> Ok[V]:
        """Return self since this is Ok."""
        return self

    def ok(self) -> Maybe[V]:
        """Convert to Maybe, returning Some(value)."""
        from fallible.types.maybe import Some

        return Some(self.value)

    def err(self) -> Maybe[Any]:
        """Convert to Maybe, returning Nothing since this is Ok."""
        from fallible.types.maybe import Nothing

        return Nothing


class Err[E](msgspec.Struct, frozen=True, gc=False):
    """Error variant of Result containing an error of type E.

    Err represents the failure outcome of an operation. The error is carried
    through combinators without being inspected. Called without an argument
    it holds the ``EMPTY`` sentinel.

    Examples:
        >>> err = Err("something went wrong")
        >>> err.is_err()
        True
        >>> err.map(lambda x: x * 2)
        Err(error='something went wrong')
    """

    error: E = msgspec.field(default_factory=_empty)

    def is_ok(self) -> TypeIs[Ok[Any]]:
        """Return False since this is Err."""
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        """Return True if the result is Err.

        This method provides type narrowing - after checking is_err(),
        the type checker knows the result is Err[E].
        """
        return True

    def take(self) -> NoReturn:
        """Raise since there is no value to take from Err.

        Raises:
            IncorrectVariantError: Always.
        """
        raise IncorrectVariantError("take", "Err", self.error)

    def take_err(self) -> E:
        """Return the contained error."""
        return self.error

    def take_or[V](self, default: V) -> V:
        """Return the default value since this is Err."""
        return default

    def take_or_else[V](self, f: Callable[[E], V]) -> V:
        """Compute a value from the error since this is Err."""
        return f(self.error)

    def on_ok(self, effect: Callable[[Any], Any]) -> Err[E]:  # noqa: ARG002
        """Return self unchanged since this is Err."""
        return self

    def on_err(self, effect: Callable[[E], Any]) -> Err[E]:
        """Call effect with the error and return self unchanged."""
        effect(self.error)
        return self

    def map(self, f: Callable[[Any], Any]) -> Err[E]:  # noqa: ARG002
        """Return self unchanged since this is Err."""
        return self

    def refine[F](self, f: Callable[[E], F]) -> Err[F]:
        """Apply a function to the contained error.

        Args:
            f: Function to apply to the error value.

        Returns:
            Err containing the transformed error.
        """
        return Err(f(self.error))

    def chain(self, f: Callable[[Any], Ok[Any] | Err[Any]]) -> Err[E]:  # noqa: ARG002
        """Return self unchanged since this is Err."""
        return self

    def unfold(self) -> Err[E]:
        """Return self since this is Err (nothing to flatten)."""
        return self

    def check(  # noqa: ARG002
        self, predicate: Callable[[Any], bool], error: Any = EMPTY
    ) -> Err[E]:
        """Return self; the predicate is never evaluated on Err."""
        return self

    def assert_(  # noqa: ARG002
        self, guard: Callable[[Any], bool], error: Any = EMPTY
    ) -> Err[E]:
        """Return self; the guard is never evaluated on Err."""
        return self

    def or_[R: Ok[Any] | Err[Any]](self, alternative: R) -> R:
        """Return alternative since this is Err."""
        return alternative

    def or_else[R: Ok[Any] | Err[Any]](self, f: Callable[[E], R]) -> R:
        """Apply a recovery function to the error.

        Args:
            f: Function that takes the error and returns a new Result.

        Returns:
            The Result returned by f.
        """
        return f(self.error)

    def or_if[R: Ok[Any] | Err[Any]](
        self, predicate: Callable[[E], bool], alternative: R
    ) -> R | Err[E]:
        """Return alternative if predicate(error) holds, else self."""
        if predicate(self.error):
            return alternative
        return self

    def or_else_if[R: Ok[Any] | Err[Any]](
        self, predicate: Callable[[E], bool], f: Callable[[E], R]
    ) -> R | Err[E]:
        """Return f(error) if predicate(error) holds, else self.

        f is only called when the recovery is actually taken.
        """
        if predicate(self.error):
            return f(self.error)
        return self

    def ok(self) -> Maybe[Any]:
        """Convert to Maybe, returning Nothing since this is Err."""
        from fallible.types.maybe import Nothing

        return Nothing

    def err(self) -> Maybe[E]:
        """Convert to Maybe, returning Some(error)."""
        from fallible.types.maybe import Some

        return Some(self.error)


type Result[V = Empty, E = Empty] = Ok[V] | Err[E]


def collect[V, E](results: Iterable[Ok[V] | Err[E]]) -> Ok[list[V]] | Err[E]:
    """Collect an iterable of Results into a Result of list.

    Short-circuits on the first Err encountered.

    Args:
        results: An iterable of Result values.

    Returns:
        Ok(list[V]) if all results are Ok, otherwise the first Err.

    Examples:
        >>> collect([Ok(1), Ok(2), Ok(3)])
        Ok(value=[1, 2, 3])
        >>> collect([Ok(1), Err("fail"), Ok(3)])
        Err(error='fail')
    """
    values: list[V] = []
    for result in results:
        if isinstance(result, Err):
            return result
        values.append(result.value)
    return Ok(values)
