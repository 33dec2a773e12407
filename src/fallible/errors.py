"""Variant-misuse error raised by the extraction operations."""

from __future__ import annotations

__all__ = ["IncorrectVariantError"]

_MESSAGES = {
    ("take", "Err"): "Trying to take value from `Err` instance",
    ("take_err", "Ok"): "Trying to take error from `Ok` instance",
    ("take", "Nothing"): "Trying to take value from `Nothing` instance",
}


class IncorrectVariantError(RuntimeError):
    """A payload was extracted from the wrong variant.

    This is the only exception the algebra raises itself. Taking the
    "wrong side" of a container is a programming mistake, not a modeled
    failure, so it is never turned into an ``Err``.

    Attributes:
        operation: The extraction that was attempted ("take" or "take_err").
        variant: Name of the variant it was attempted on.
        payload: The payload the variant actually holds, if any.
    """

    def __init__(self, operation: str, variant: str, payload: object = None) -> None:
        self.operation = operation
        self.variant = variant
        self.payload = payload
        message = _MESSAGES.get(
            (operation, variant), f"Cannot {operation} from `{variant}` instance"
        )
        if payload is not None:
            message = f"{message}: {payload!r}"
        super().__init__(message)
