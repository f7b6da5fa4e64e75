"""
An error type with no values, and the helpers that make it useful.

A function returning ``Result[T, Infallible]`` is statically proven not to fail.
The helpers here let such results flow into code written for
``Result[T, Error]`` without runtime failure handling.

Responsibilities
- Infallible: exception subclass whose constructor can never return.
- absurd: vacuous case analysis over Infallible.
- unwrap_infallible / into_fallible: consume or widen infallible results.
- Bridges to the platform uninhabited type (typing.Never) and to OSError.

Notes:
    - quadkit.core.convert.from_infallible is the bridge into the Error facade.
    - Neither Infallible nor typing.Never is treated as canonical; both convert
      into each other.

Examples:
    >>> from quadkit.core.infallible import unwrap_infallible
    >>> from quadkit.core.result import Ok
    >>> unwrap_infallible(Ok("x"))
    'x'
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Never, NoReturn, TypeVar, assert_never, final

from .result import Err, Ok, Result

if TYPE_CHECKING:
    from .errors import Error

__all__ = [
    "Infallible",
    "absurd",
    "unwrap_infallible",
    "into_fallible",
    "into_never",
    "from_never",
    "infallible_to_io_error",
]

T = TypeVar("T")


@final
class Infallible(Exception):
    """
    Error type for operations that cannot fail.

    Raises:
        TypeError: Always, on any attempt to construct a value or to subclass.
    """

    __slots__ = ()

    def __init_subclass__(cls, **kwargs: object) -> NoReturn:
        raise TypeError("Infallible cannot be subclassed")

    def __new__(cls, *args: object, **kwargs: object) -> NoReturn:
        raise TypeError("Infallible has no values")

    def __str__(self) -> str:
        absurd(self)


def absurd(value: Infallible) -> NoReturn:
    """
    Exhaustive case analysis over Infallible (there are no cases).

    Reaching the body means an Infallible value exists, which construction rules out.
    """
    raise AssertionError(f"unreachable: got an Infallible value {value!r}")


def unwrap_infallible(result: Result[T, Infallible]) -> T:
    """
    Return the success value of a result that cannot hold an error.

    Args:
        result (Result[T, Infallible]): Result whose error slot is uninhabited.

    Returns:
        T: The Ok payload.
    """
    match result:
        case Ok(value):
            return value
        case Err(error):
            absurd(error)


def into_fallible(result: Result[T, Infallible]) -> Result[T, Error]:
    """Re-type an infallible result for code expecting ``Result[T, Error]``."""
    return Ok(unwrap_infallible(result))


def into_never(value: Infallible) -> Never:
    absurd(value)


def from_never(value: Never) -> Infallible:
    assert_never(value)


def infallible_to_io_error(value: Infallible) -> OSError:
    absurd(value)
