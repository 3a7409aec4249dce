"""Result and Option containers for explicit error handling.

Example:
    >>> from fallible.monads import Result, Ok, Err
    >>>
    >>> def divide(a: int, b: int) -> Result[float, str]:
    ...     if b == 0:
    ...         return Err("division by zero")
    ...     return Ok(a / b)
    >>>
    >>> divide(10, 2).map(lambda x: x * 2).unwrap()
    10.0
    >>> divide(10, 0).unwrap_or(0)
    0
"""

from .option import Nothing, Option, Some
from .result import Err, Ok, Result, collect_results, sequence, traverse
from .utils import stringify
from .wrap import wrap

__all__ = [
    # Core types
    "Result",
    "Ok",
    "Err",
    "Option",
    "Some",
    "Nothing",
    # Adapter
    "wrap",
    # Collection operations
    "sequence",
    "traverse",
    "collect_results",
    # Formatting
    "stringify",
]
