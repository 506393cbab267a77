"""Result and Option types with railway-oriented combinators.

Example:
    >>> from resultcase.monads import Failure, Result, Success
    >>>
    >>> def divide(a: int, b: int) -> Result[float, str]:
    ...     if b == 0:
    ...         return Failure("division by zero")
    ...     return Success(a / b)
    >>>
    >>> (
    ...     divide(10, 2)
    ...     .map_success(lambda x: x * 2)
    ...     .flat_map_success(lambda x: Success(x + 1))
    ...     .or_else(0.0)
    ... )
    11.0
"""

from .aggregate import collect_results, partition, sequence, traverse
from .factories import catching, failure, of_callable, of_nullable, of_optional, success
from .option import Nothing, Option, Some
from .result import Failure, Result, Success

__all__ = [
    # Core types
    "Result",
    "Success",
    "Failure",
    "Option",
    "Some",
    "Nothing",
    # Construction
    "success",
    "failure",
    "of_nullable",
    "of_optional",
    "of_callable",
    "catching",
    # Collection operations
    "sequence",
    "traverse",
    "collect_results",
    "partition",
]
