"""Core types: Result, Ok, Err, Maybe, Some, Nothing and the EMPTY sentinel."""

from fallible.types.empty import EMPTY, Empty
from fallible.types.maybe import Maybe, Nothing, NothingType, Option, Some, maybe
from fallible.types.result import Err, Ok, Result, collect

__all__ = [
    "EMPTY",
    "Empty",
    "Err",
    "Maybe",
    "Nothing",
    "NothingType",
    "Ok",
    "Option",
    "Result",
    "Some",
    "collect",
    "maybe",
]
