"""fallible - explicit success/failure and presence/absence containers.

- Result/Ok/Err: success or failure, with origin traces on Err
- Option/Some/Nothing: present or absent value
- wrap: turn raising callables into Result-returning ones
"""

from .errors import ErrorCode, InvalidUnwrap, UnwrapError, UnwrapOnErr, UnwrapOnOk
from .monads import (
    Err,
    Nothing,
    Ok,
    Option,
    Result,
    Some,
    collect_results,
    sequence,
    stringify,
    traverse,
    wrap,
)

__version__ = "0.1.0"

__all__ = [
    # Containers
    "Result", "Ok", "Err", "Option", "Some", "Nothing",
    # Adapter
    "wrap",
    # Collection ops
    "sequence", "traverse", "collect_results",
    # Errors
    "ErrorCode", "UnwrapError", "InvalidUnwrap", "UnwrapOnErr", "UnwrapOnOk",
    # Formatting
    "stringify",
]
