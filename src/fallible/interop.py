"""Bridges between raise-based code and the Result algebra.

from_try_catch and from_promise capture an exception raised by a callable
or an awaitable into an Err. safe and safe_async do the same for every call
of a decorated function.

Only ``Exception`` subclasses are captured. Cancellation, KeyboardInterrupt
and SystemExit always propagate.
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from typing import Any, ParamSpec, TypeVar, overload

import wrapt

from fallible._config import get_config
from fallible._logging import get_logger
from fallible.types.result import Err, Ok, Result

__all__ = ["from_promise", "from_try_catch", "safe", "safe_async"]

P = ParamSpec("P")
T = TypeVar("T")


def _capture(
    exc: BaseException,
    mapper: Callable[[Any], Any] | None,
    boundary: str,
) -> Err[Any]:
    """Turn a caught exception into an Err, optionally mapping it."""
    if get_config().log_captures:
        get_logger("interop").debug(
            "exception captured",
            boundary=boundary,
            error_type=type(exc).__name__,
            error=str(exc),
            mapped=mapper is not None,
        )
    if mapper is not None:
        return Err(mapper(exc))
    return Err(exc)


@overload
def from_try_catch[V](fn: Callable[[], V]) -> Result[V, Exception]: ...


@overload
def from_try_catch[V, E](
    fn: Callable[[], V], mapper: Callable[[Exception], E]
) -> Result[V, E]: ...


def from_try_catch(
    fn: Callable[[], Any],
    mapper: Callable[[Exception], Any] | None = None,
) -> Result[Any, Any]:
    """Call fn and capture its outcome in a Result.

    Args:
        fn: Zero-argument callable to execute.
        mapper: Optional function applied to a caught exception.

    Returns:
        Ok(fn()) if fn returns, else Err(exception) or Err(mapper(exception)).

    Examples:
        >>> from_try_catch(lambda: 42)
        Ok(value=42)
        >>> from_try_catch(lambda: int("x"), lambda e: "bad int")
        Err(error='bad int')
    """
    try:
        value = fn()
    except Exception as e:
        return _capture(e, mapper, "try_catch")
    return Ok(value)


@overload
async def from_promise[V](
    promise: Awaitable[V] | Callable[[], Awaitable[V] | V],
) -> Result[V, Exception]: ...


@overload
async def from_promise[V, E](
    promise: Awaitable[V] | Callable[[], Awaitable[V] | V],
    mapper: Callable[[Exception], E],
) -> Result[V, E]: ...


async def from_promise(
    promise: Awaitable[Any] | Callable[[], Any],
    mapper: Callable[[Exception], Any] | None = None,
) -> Result[Any, Any]:
    """Await a value and capture its outcome in a Result.

    Args:
        promise: An awaitable, or a zero-argument callable. A callable is
            invoked inside the capture, so it may also raise synchronously.
            Its result is awaited when awaitable and taken as is otherwise.
        mapper: Optional function applied to a caught exception.

    Returns:
        Ok(resolved value), else Err(exception) or Err(mapper(exception)).

    Example:
        ```python
        async def fetch() -> int:
            return 1

        await from_promise(fetch())                      # Ok(value=1)
        await from_promise(fetch)                        # Ok(value=1)
        await from_promise(failing(), lambda e: str(e))  # Err(error='...')
        ```
    """
    try:
        value = promise if inspect.isawaitable(promise) else promise()
        if inspect.isawaitable(value):
            value = await value
    except Exception as e:
        return _capture(e, mapper, "promise")
    return Ok(value)


@overload
def safe[**P, T](
    func: Callable[P, T],
) -> Callable[P, Ok[T] | Err[Exception]]: ...


@overload
def safe(
    func: None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
    mapper: Callable[[Any], Any] | None = None,
) -> Callable[[Callable[P, T]], Callable[P, Ok[T] | Err[Any]]]: ...


def safe(
    func: Callable[..., Any] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
    mapper: Callable[[Any], Any] | None = None,
) -> Any:
    """Decorator that catches exceptions and returns Err.

    Wraps a function so that it returns Ok(value) on success and
    Err(exception) if an exception is raised.

    Can be used with or without arguments:
        @safe
        def risky(): ...

        @safe(exceptions=(ValueError, TypeError), mapper=str)
        def specific(): ...

    Args:
        func: The function to wrap (when used without parentheses).
        exceptions: Tuple of exception types to catch. Defaults to (Exception,).
        mapper: Optional function applied to a caught exception.

    Returns:
        A wrapped function that returns Result[T, E] instead of T.

    Example:
        ```python
        @safe
        def divide(a: int, b: int) -> float:
            return a / b
        divide(10, 2)
        # Ok(value=5.0)
        divide(10, 0)
        # Err(error=ZeroDivisionError('division by zero'))
        ```
    """
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., Any],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Ok[Any] | Err[Any]:
        try:
            result = wrapped(*args, **kwargs)
        except catch as e:
            return _capture(e, mapper, "safe")
        return Ok(result)

    if func is not None:
        return wrapper(func)
    return wrapper


@overload
def safe_async[**P, T](
    func: Callable[P, Awaitable[T]],
) -> Callable[P, Awaitable[Ok[T] | Err[Exception]]]: ...


@overload
def safe_async(
    func: None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
    mapper: Callable[[Any], Any] | None = None,
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[Ok[T] | Err[Any]]]]: ...


def safe_async(
    func: Callable[..., Awaitable[Any]] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
    mapper: Callable[[Any], Any] | None = None,
) -> Any:
    """Async decorator that catches exceptions and returns Err.

    Wraps an async function so that it returns Ok(value) on success and
    Err(exception) if an exception is raised.

    Args:
        func: The async function to wrap (when used without parentheses).
        exceptions: Tuple of exception types to catch. Defaults to (Exception,).
        mapper: Optional function applied to a caught exception.

    Returns:
        A wrapped async function that returns Result[T, E] instead of T.
    """
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    async def wrapper(
        wrapped: Callable[..., Awaitable[Any]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Ok[Any] | Err[Any]:
        try:
            result = await wrapped(*args, **kwargs)
        except catch as e:
            return _capture(e, mapper, "safe_async")
        return Ok(result)

    if func is not None:
        return wrapper(func)
    return wrapper
