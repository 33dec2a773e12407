"""Empty sentinel: the payload of Ok(), Err() and Some() with no argument."""

from __future__ import annotations

import msgspec

__all__ = ["EMPTY", "Empty"]


class Empty(msgspec.Struct, frozen=True, gc=False):
    """Unit placeholder carried by a variant that has no meaningful payload.

    All instances compare equal, so ``Ok()`` and ``Ok(Empty())`` are the
    same result. Use the ``EMPTY`` constant instead of instantiating.

    Examples:
        >>> Ok().take()
        EMPTY
        >>> Err() == Err(EMPTY)
        True
    """

    def __repr__(self) -> str:
        return "EMPTY"


EMPTY: Empty = Empty()
"""Singleton instance of the empty sentinel."""


def _empty() -> Empty:
    return EMPTY
