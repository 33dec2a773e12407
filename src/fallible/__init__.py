"""fallible: Result and Maybe types with exception-free combinators.

Flat imports (preferred):
    from fallible import Result, Ok, Err, Maybe, Some, Nothing, EMPTY
    from fallible import from_try_catch, from_promise, safe, safe_async

Submodule imports (for organization):
    from fallible.types import Result, Maybe
    from fallible.scoped import pipe, map_, chain
    from fallible.async_ import AsyncResult
"""

from fallible._config import FallibleConfig, get_config, init
from fallible._logging import configure_logging, get_logger

# Async
from fallible.async_ import AsyncResult
from fallible.errors import IncorrectVariantError

# Interop
from fallible.interop import from_promise, from_try_catch, safe, safe_async

# Types
from fallible.types import (
    EMPTY,
    Empty,
    Err,
    Maybe,
    Nothing,
    NothingType,
    Ok,
    Option,
    Result,
    Some,
    collect,
    maybe,
)

__all__ = [
    "EMPTY",
    "AsyncResult",
    "Empty",
    "Err",
    "FallibleConfig",
    "IncorrectVariantError",
    "Maybe",
    "Nothing",
    "NothingType",
    "Ok",
    "Option",
    "Result",
    "Some",
    "collect",
    "configure_logging",
    "from_promise",
    "from_try_catch",
    "get_config",
    "get_logger",
    "init",
    "maybe",
    "safe",
    "safe_async",
]
