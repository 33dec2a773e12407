"""Point-free combinators for building pipelines over Result and Maybe.

Each function takes its arguments first and returns a step that takes the
container, so steps can be threaded with ``pipe``:

    pipe(
        Ok(" 42 "),
        map_(str.strip),
        chain(parse_int),
        check(lambda n: n > 0, "not positive"),
    )
    # Ok(value=42)

The steps dispatch on the container's own methods, so the same step works
on Ok/Err and on Some/Nothing. ``refine`` only touches Err; a Maybe passes
through it unchanged.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeIs

from fallible.types.empty import EMPTY
from fallible.types.maybe import NothingType, Some
from fallible.types.result import Err, Ok

__all__ = [
    "chain",
    "check",
    "flatmap",
    "is_err",
    "is_nothing",
    "is_ok",
    "is_some",
    "map_",
    "on_err",
    "on_ok",
    "or_",
    "or_else",
    "pipe",
    "refine",
    "unfold",
]

type Container = Ok[Any] | Err[Any] | Some[Any] | NothingType
type Step = Callable[[Any], Any]


def is_ok(value: object) -> TypeIs[Ok[Any]]:
    """Return True if value is an Ok."""
    return isinstance(value, Ok)


def is_err(value: object) -> TypeIs[Err[Any]]:
    """Return True if value is an Err."""
    return isinstance(value, Err)


def is_some(value: object) -> TypeIs[Some[Any]]:
    """Return True if value is a Some."""
    return isinstance(value, Some)


def is_nothing(value: object) -> TypeIs[NothingType]:
    """Return True if value is Nothing."""
    return isinstance(value, NothingType)


def map_(f: Callable[[Any], Any]) -> Step:
    """Step form of ``.map(f)``."""
    return lambda container: container.map(f)


def chain(f: Callable[[Any], Any]) -> Step:
    """Step form of ``.chain(f)``."""
    return lambda container: container.chain(f)


flatmap = chain


def refine(f: Callable[[Any], Any]) -> Step:
    """Step form of ``Result.refine(f)``.

    Some and Nothing carry no error and pass through unchanged.
    """

    def step(container: Container) -> Container:
        if isinstance(container, Some | NothingType):
            return container
        return container.refine(f)

    return step


def unfold() -> Step:
    """Step form of ``.unfold()``."""
    return lambda container: container.unfold()


def check(predicate: Callable[[Any], bool], error: Any = EMPTY) -> Step:
    """Step form of ``.check(predicate)``.

    The error only applies to Results; a failing Some becomes Nothing.
    """

    def step(container: Container) -> Container:
        if isinstance(container, Some | NothingType):
            return container.check(predicate)
        return container.check(predicate, error)

    return step


def or_(alternative: Container) -> Step:
    """Step form of ``.or_(alternative)``."""
    return lambda container: container.or_(alternative)


def or_else(f: Callable[..., Container]) -> Step:
    """Step form of ``.or_else(f)``.

    On Err, f receives the error. Nothing has no payload, so there f is
    called without arguments, as with ``on_err``. Ok and Some pass through.
    """
    return lambda container: container.or_else(f)


def on_ok(effect: Callable[[Any], Any]) -> Step:
    """Step form of ``.on_ok(effect)``; Some is treated as Ok."""

    def step(container: Container) -> Container:
        if isinstance(container, Some | NothingType):
            return container.on_some(effect)
        return container.on_ok(effect)

    return step


def on_err(effect: Callable[..., Any]) -> Step:
    """Step form of ``.on_err(effect)``; Nothing is treated as Err.

    For Nothing the effect is called without arguments.
    """

    def step(container: Container) -> Container:
        if isinstance(container, Some | NothingType):
            return container.on_nothing(effect)
        return container.on_err(effect)

    return step


def pipe(value: Any, *steps: Step) -> Any:
    """Thread a value through steps, left to right.

    A value that is not already a Result or Maybe is wrapped in Ok first.
    Every step is applied, so short-circuiting is left to the combinators
    themselves.

    Example:
        ```python
        pipe(5, map_(lambda x: x + 1), map_(lambda x: x * 2))
        # Ok(value=12)

        pipe(Some(3), check(lambda x: x > 5))
        # Nothing
        ```
    """
    current: Any = value
    if not isinstance(current, Ok | Err | Some | NothingType):
        current = Ok(current)
    for step in steps:
        current = step(current)
    return current
