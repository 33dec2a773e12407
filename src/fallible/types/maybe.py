"""Maybe type: Some[V] | Nothing for optional values."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from fallible.errors import IncorrectVariantError
from fallible.types.empty import _empty

if TYPE_CHECKING:
    from fallible.types.result import Err, Ok

__all__ = ["Maybe", "Nothing", "NothingType", "Option", "Some", "maybe"]


class Some[V](msgspec.Struct, frozen=True, gc=False):
    """Some variant of Maybe containing a value of type V.

    Some represents the presence of a value. Called without an argument it
    holds the ``EMPTY`` sentinel. ``Some(None)`` is a present value and is
    not ``Nothing``.

    Examples:
        >>> Some(42).take()
        42
        >>> Some(42).map(lambda x: x * 2)
        Some(value=84)
        >>> Some(3).check(lambda x: x > 5)
        Nothing
    """

    value: V = msgspec.field(default_factory=_empty)

    def is_some(self) -> TypeIs[Some[V]]:
        """Return True if the maybe is Some.

        This method provides type narrowing - after checking is_some(),
        the type checker knows the maybe is Some[V].
        """
        return True

    def is_nothing(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def take(self) -> V:
        """Return the contained Some value."""
        return self.value

    def take_or(self, default: V) -> V:  # noqa: ARG002
        """Return the contained Some value, ignoring the default."""
        return self.value

    def take_or_else(self, f: Callable[[], V]) -> V:  # noqa: ARG002
        """Return the contained Some value, ignoring the fallback function."""
        return self.value

    def on_some(self, effect: Callable[[V], Any]) -> Some[V]:
        """Call effect with the value and return self unchanged."""
        effect(self.value)
        return self

    def on_nothing(self, effect: Callable[[], Any]) -> Some[V]:  # noqa: ARG002
        """Return self unchanged since this is Some."""
        return self

    def map[U](self, f: Callable[[V], U]) -> Some[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Some value.

        Returns:
            Some containing the result of applying f to the value.
        """
        return Some(f(self.value))

    def chain[U](self, f: Callable[[V], Some[U] | NothingType]) -> Some[U] | NothingType:
        """Apply a function that returns a Maybe to the contained value.

        Also known as flatmap or bind. The returned Maybe is unfolded one
        level, so a function returning a plain value yields Some(value).

        Args:
            f: Function that takes V and returns Maybe[U].

        Returns:
            The Maybe returned by f.
        """
        return Some(f(self.value)).unfold()

    def unfold(self) -> Some[Any] | NothingType:
        """Flatten one level of nesting: Some(Some(x)) becomes Some(x)."""
        if isinstance(self.value, Some | NothingType):
            return self.value
        return self

    def check(self, predicate: Callable[[V], bool]) -> Some[V] | NothingType:
        """Return self if the predicate is satisfied, else Nothing.

        Args:
            predicate: Function that returns True to keep the value.
        """
        if predicate(self.value):
            return self
        return Nothing

    def assert_[U](self, guard: Callable[[V], TypeIs[U]]) -> Some[U] | NothingType:
        """Like check, but narrows the value type to what guard asserts."""
        if guard(self.value):
            return self  # type: ignore[return-value]
        return Nothing

    def or_(self, alternative: Some[Any] | NothingType) -> Some[V]:  # noqa: ARG002
        """Return self since this is Some."""
        return self

    def or_else(self, f: Callable[[], Some[Any] | NothingType]) -> Some[V]:  # noqa: ARG002
        """Return self unchanged since this is Some."""
        return self

    def ok_or[E](self, error: E) -> Ok[V]:  # noqa: ARG002
        """Convert to Result, returning Ok(value)."""
        from fallible.types.result import Ok

        return Ok(self.value)

    def ok_or_else[E](self, f: Callable[[], E]) -> Ok[V]:  # noqa: ARG002
        """Convert to Result, returning Ok(value) without calling f."""
        from fallible.types.result import Ok

        return Ok(self.value)


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Nothing variant of Maybe representing absence of a value.

    This is a singleton - use the `Nothing` constant instead of
    instantiating directly. Separate instances still compare equal.

    Examples:
        >>> Nothing.is_nothing()
        True
        >>> Nothing.take_or(0)
        0
    """

    def __repr__(self) -> str:
        return "Nothing"

    def is_some(self) -> TypeIs[Some[Any]]:
        """Return False since this is Nothing."""
        return False

    def is_nothing(self) -> TypeIs[NothingType]:
        """Return True if the maybe is Nothing.

        This method provides type narrowing - after checking is_nothing(),
        the type checker knows the maybe is Nothing.
        """
        return True

    def take(self) -> NoReturn:
        """Raise since there is no value to take from Nothing.

        Raises:
            IncorrectVariantError: Always.
        """
        raise IncorrectVariantError("take", "Nothing")

    def take_or[V](self, default: V) -> V:
        """Return the default value since this is Nothing."""
        return default

    def take_or_else[V](self, f: Callable[[], V]) -> V:
        """Compute and return a default value since this is Nothing."""
        return f()

    def on_some(self, effect: Callable[[Any], Any]) -> NothingType:  # noqa: ARG002
        """Return self unchanged since this is Nothing."""
        return self

    def on_nothing(self, effect: Callable[[], Any]) -> NothingType:
        """Call effect and return self unchanged."""
        effect()
        return self

    def map(self, f: Callable[[Any], Any]) -> NothingType:  # noqa: ARG002
        """Return Nothing since there's no value to map."""
        return self

    def chain(self, f: Callable[[Any], Any]) -> NothingType:  # noqa: ARG002
        """Return Nothing since there's no value to bind."""
        return self

    def unfold(self) -> NothingType:
        """Return Nothing since there's nothing to flatten."""
        return self

    def check(self, predicate: Callable[[Any], bool]) -> NothingType:  # noqa: ARG002
        """Return Nothing; the predicate is never evaluated."""
        return self

    def assert_(self, guard: Callable[[Any], bool]) -> NothingType:  # noqa: ARG002
        """Return Nothing; the guard is never evaluated."""
        return self

    def or_[R: Some[Any] | NothingType](self, alternative: R) -> R:
        """Return alternative since self is Nothing."""
        return alternative

    def or_else[R: Some[Any] | NothingType](self, f: Callable[[], R]) -> R:
        """Apply a recovery function since this is Nothing.

        Args:
            f: Zero-argument function that returns a new Maybe.

        Returns:
            The Maybe returned by f.
        """
        return f()

    def ok_or[E](self, error: E) -> Err[E]:
        """Convert to Result, returning Err(error)."""
        from fallible.types.result import Err

        return Err(error)

    def ok_or_else[E](self, f: Callable[[], E]) -> Err[E]:
        """Convert to Result, computing the error with f."""
        from fallible.types.result import Err

        return Err(f())


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Maybe[V] = Some[V] | NothingType

type Option[V] = Maybe[V]


def maybe[V](value: V | None) -> Maybe[V]:
    """Wrap a nullable value: Nothing for None, Some(value) otherwise.

    Examples:
        >>> maybe(10)
        Some(value=10)
        >>> maybe(None)
        Nothing
    """
    if value is None:
        return Nothing
    return Some(value)
