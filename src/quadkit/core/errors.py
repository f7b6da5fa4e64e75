"""
The quadkit error facade.

Provides the single public error type raised at every quadkit boundary:
- Error wraps exactly one ErrorKind together with its payload.
- Well-known failures (I/O, text decoding, IRI, blank node and language tag parsing)
  are stored as typed payloads in a fixed slot.
- Anything else is accepted through Error.wrap and kept in the OTHER slot.

Notes:
    - Display is never decorated: ``str(error)`` is the message text for MESSAGE and
      the payload's own text for every other kind.
    - The original failure object is kept verbatim; ``error.source()`` returns it
      (``None`` for MESSAGE) and ``__cause__`` points at it so tracebacks chain.
    - Named conversions for each subsystem live in quadkit.core.convert.
    - This module performs no IO and never logs.

Examples:
    Build, display and inspect errors.

    >>> from quadkit.core.errors import Error, ErrorKind
    >>> str(Error.msg("store is read-only"))
    'store is read-only'
    >>> Error.msg("store is read-only").source() is None
    True
    >>> err = Error.wrap(RuntimeError("boom"))
    >>> err.kind is ErrorKind.OTHER, str(err)
    (True, 'boom')
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum
from typing import Any, Final

from .model import BlankNodeIdParseError, IriParseError, LanguageTagParseError

__all__ = [
    "Error",
    "ErrorKind",
    "iter_causes",
]


class ErrorKind(Enum):
    """
    Variants an Error can hold.

    Serialized values appear in ErrorReport.kind and in CLI output.
    """

    MESSAGE = "message"
    IO = "io"
    TEXT_DECODE = "text_decode"
    IRI = "iri"
    BLANK_NODE = "blank_node"
    LANGUAGE_TAG = "language_tag"
    OTHER = "other"


# Payload type required by each typed kind. OTHER takes any exception.
_PAYLOAD_TYPES: Final[dict[ErrorKind, type]] = {
    ErrorKind.MESSAGE: str,
    ErrorKind.IO: OSError,
    ErrorKind.TEXT_DECODE: UnicodeDecodeError,
    ErrorKind.IRI: IriParseError,
    ErrorKind.BLANK_NODE: BlankNodeIdParseError,
    ErrorKind.LANGUAGE_TAG: LanguageTagParseError,
    ErrorKind.OTHER: BaseException,
}


class Error(Exception):
    """
    The quadkit error type.

    Args:
        kind (ErrorKind): Active variant. Fixed for the lifetime of the error.
        payload (Any): Message text for MESSAGE, otherwise the original failure.

    Raises:
        TypeError: If payload does not match the type required by kind.

    Notes:
        Prefer Error.msg, Error.wrap or the quadkit.core.convert functions over
        calling the constructor directly.

        source() is the authoritative immediate cause. ``__cause__`` starts out as
        the payload but ``raise error from other`` rebinds it; quadkit.core.convert.boundary
        only ever chains from the payload itself.
    """

    __slots__ = ("_kind", "_payload")

    def __init__(self, kind: ErrorKind, payload: Any) -> None:
        expected = _PAYLOAD_TYPES[kind]
        if not isinstance(payload, expected):
            raise TypeError(
                f"{kind.value} error payload must be {expected.__name__} "
                f"(got {type(payload).__name__})"
            )
        super().__init__(payload)
        self._kind = kind
        self._payload = payload
        if kind is not ErrorKind.MESSAGE:
            self.__cause__ = payload

    @classmethod
    def msg(cls, message: object) -> Error:
        """
        Build an error from a printable message.

        Args:
            message (object): Text (or any printable value) describing the failure.

        Returns:
            Error: A MESSAGE error whose display is exactly ``str(message)``.
        """
        return cls(ErrorKind.MESSAGE, str(message))

    @classmethod
    def wrap(cls, error: BaseException) -> Error:
        """
        Wrap an arbitrary failure.

        Args:
            error (BaseException): Failure of any type outside the well-known kinds.
                It is stored as-is; it should own its data.

        Returns:
            Error: An OTHER error whose display and cause are the wrapped failure.

        Examples:
            >>> str(Error.wrap(KeyError("graph")).source())
            "'graph'"
        """
        return cls(ErrorKind.OTHER, error)

    @property
    def kind(self) -> ErrorKind:
        return self._kind

    def source(self) -> BaseException | None:
        """Return the immediate cause, or None for a MESSAGE error."""
        if self._kind is ErrorKind.MESSAGE:
            return None
        return self._payload

    def __str__(self) -> str:
        return str(self._payload)

    def __repr__(self) -> str:
        return f"Error({self._kind.value}, {self._payload!r})"

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self._kind, self._payload))


def iter_causes(error: BaseException) -> Iterator[BaseException]:
    """
    Iterate over the immediate-cause chain of any exception.

    Args:
        error (BaseException): Starting point; it is not yielded itself.

    Yields:
        BaseException: Each cause in order, via Error.source() for the facade and
        ``__cause__`` otherwise. Stops at the first repeated exception.
    """
    seen = {id(error)}
    current: BaseException | None = error
    while current is not None:
        if isinstance(current, Error):
            current = current.source()
        else:
            current = current.__cause__
        if current is None or id(current) in seen:
            return
        seen.add(id(current))
        yield current
