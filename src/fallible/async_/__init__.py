"""Async utilities: AsyncResult for composing awaitable Results.

Examples:
    >>> from fallible.async_ import AsyncResult
    >>>
    >>> async def main():
    ...     result = await AsyncResult.from_promise(fetch(1)).amap(len)
"""

from fallible.async_.result import AsyncResult

__all__ = ["AsyncResult"]
