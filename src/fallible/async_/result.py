"""AsyncResult type for async-aware Result operations.

AsyncResult wraps an Awaitable[Result[V, E]] so that transformations can be
composed before anything is awaited.

Example:
    ```python
    async def fetch_user(id: int) -> User: ...

    result = await (
        AsyncResult.from_promise(fetch_user(1), lambda e: "not found")
        .achain(validate_user)
        .amap(format_response)
    )
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Coroutine, Generator
from typing import Any

import anyio

from fallible.interop import from_promise
from fallible.types.result import Err, Ok, Result

__all__ = ["AsyncResult"]


class AsyncResult[V, E]:
    """Async-aware Result wrapper for composing async Result operations.

    Methods return new AsyncResult instances; nothing runs until the
    final AsyncResult is awaited.

    Note:
        AsyncResult is single-shot when wrapping a coroutine object.
        Coroutines can only be awaited once; awaiting the same AsyncResult
        twice raises RuntimeError.
    """

    __slots__ = ("_awaitable",)

    def __init__(self, awaitable: Awaitable[Result[V, E]]) -> None:
        self._awaitable = awaitable

    def __await__(self) -> Generator[Any, Any, Result[V, E]]:
        return self._awaitable.__await__()

    @classmethod
    def from_ok(cls, value: V) -> AsyncResult[V, E]:
        """Create an AsyncResult containing Ok(value)."""

        async def _ok() -> Result[V, E]:
            return Ok(value)

        return cls(_ok())

    @classmethod
    def from_err(cls, error: E) -> AsyncResult[V, E]:
        """Create an AsyncResult containing Err(error)."""

        async def _err() -> Result[V, E]:
            return Err(error)

        return cls(_err())

    @classmethod
    def from_result(cls, result: Result[V, E]) -> AsyncResult[V, E]:
        """Create an AsyncResult from a synchronous Result."""

        async def _result() -> Result[V, E]:
            return result

        return cls(_result())

    @classmethod
    def from_promise(
        cls,
        promise: Awaitable[V] | Callable[[], Awaitable[V] | V],
        mapper: Callable[[Exception], E] | None = None,
    ) -> AsyncResult[V, E]:
        """Capture a plain awaitable, see fallible.interop.from_promise."""
        if mapper is None:
            return cls(from_promise(promise))  # type: ignore[arg-type]
        return cls(from_promise(promise, mapper))

    def amap[U](self, f: Callable[[V], U]) -> AsyncResult[U, E]:
        """Apply a sync function to the Ok value.

        Example:
            ```python
            result = await AsyncResult.from_ok(5).amap(lambda x: x * 2)
            assert result == Ok(10)
            ```
        """

        async def _mapped() -> Result[U, E]:
            result = await self._awaitable
            return result.map(f)

        return AsyncResult(_mapped())

    def amap_async[U](self, f: Callable[[V], Awaitable[U]]) -> AsyncResult[U, E]:
        """Apply an async function to the Ok value."""

        async def _mapped() -> Result[U, E]:
            result = await self._awaitable
            if isinstance(result, Ok):
                return Ok(await f(result.value))
            return result

        return AsyncResult(_mapped())

    def arefine[F](self, f: Callable[[E], F]) -> AsyncResult[V, F]:
        """Apply a sync function to the Err value."""

        async def _refined() -> Result[V, F]:
            result = await self._awaitable
            return result.refine(f)

        return AsyncResult(_refined())

    def achain[U, F](self, f: Callable[[V], Result[U, F]]) -> AsyncResult[U, E | F]:
        """Chain with a sync function that returns a Result.

        Example:
            ```python
            def validate(x: int) -> Result[int, str]:
                return Ok(x) if x > 0 else Err("not positive")

            result = await AsyncResult.from_ok(5).achain(validate)
            assert result == Ok(5)
            ```
        """

        async def _chained() -> Result[U, E | F]:
            result = await self._awaitable
            return result.chain(f)

        return AsyncResult(_chained())

    def achain_async[U, F](
        self, f: Callable[[V], Awaitable[Result[U, F]]]
    ) -> AsyncResult[U, E | F]:
        """Chain with an async function that returns a Result."""

        async def _chained() -> Result[U, E | F]:
            result = await self._awaitable
            if isinstance(result, Ok):
                return Ok(await f(result.value)).unfold()
            return result

        return AsyncResult(_chained())

    def aor_else[U, F](self, f: Callable[[E], Result[U, F]]) -> AsyncResult[V | U, F]:
        """Recover from an Err with a sync function."""

        async def _recovered() -> Result[V | U, F]:
            result = await self._awaitable
            return result.or_else(f)

        return AsyncResult(_recovered())

    def aon_ok(self, effect: Callable[[V], Any]) -> AsyncResult[V, E]:
        """Run a side effect on the Ok value once resolved."""

        async def _tapped() -> Result[V, E]:
            result = await self._awaitable
            return result.on_ok(effect)

        return AsyncResult(_tapped())

    def aon_err(self, effect: Callable[[E], Any]) -> AsyncResult[V, E]:
        """Run a side effect on the Err value once resolved."""

        async def _tapped() -> Result[V, E]:
            result = await self._awaitable
            return result.on_err(effect)

        return AsyncResult(_tapped())

    def atake_or(self, default: V) -> Coroutine[Any, Any, V]:
        """Coroutine producing the Ok value or the default."""

        async def _take() -> V:
            result = await self._awaitable
            return result.take_or(default)

        return _take()

    def azip[U](self, other: AsyncResult[U, E]) -> AsyncResult[tuple[V, U], E]:
        """Combine two AsyncResults into a tuple.

        Runs both awaitables concurrently. If both are Ok, returns
        Ok((self.value, other.value)). If either is Err, returns the
        first Err by position: self first, then other.
        """

        async def _zipped() -> Result[tuple[V, U], E]:
            result1: Result[V, E] | None = None
            result2: Result[U, E] | None = None

            async with anyio.create_task_group() as tg:

                async def run_self() -> None:
                    nonlocal result1
                    result1 = await self._awaitable

                async def run_other() -> None:
                    nonlocal result2
                    result2 = await other._awaitable

                tg.start_soon(run_self)
                tg.start_soon(run_other)

            assert result1 is not None
            assert result2 is not None

            if isinstance(result1, Err):
                return result1
            if isinstance(result2, Err):
                return result2
            return Ok((result1.value, result2.value))

        return AsyncResult(_zipped())

    def __repr__(self) -> str:
        return f"AsyncResult({self._awaitable!r})"
