"""
Conversions from subsystem failures into the Error facade.

Each well-known failure source has exactly one named conversion. Callers pick the
conversion from the failure type their subsystem declares; nothing here inspects
a failure to decide where it goes.

Typed slots
- from_io_error: OSError -> ErrorKind.IO
- from_decode_error: UnicodeDecodeError -> ErrorKind.TEXT_DECODE
- from_iri_error: IriParseError -> ErrorKind.IRI
- from_blank_node_error: BlankNodeIdParseError -> ErrorKind.BLANK_NODE
- from_language_tag_error: LanguageTagParseError -> ErrorKind.LANGUAGE_TAG

Wrapped (ErrorKind.OTHER)
- from_turtle_error, from_rdf_xml_error, from_xml_error, from_sparql_error

Boundary helpers
- boundary: context manager converting one failure type where the subsystem is called.
- map_err: apply a conversion to the error slot of a Result.

Examples:
    Convert an identifier failure at the call site.

    >>> from quadkit.core.convert import boundary, from_iri_error
    >>> from quadkit.core.errors import Error
    >>> from quadkit.core.model import IriParseError, parse_iri
    >>> try:
    ...     with boundary(IriParseError, from_iri_error):
    ...         parse_iri("not an iri")
    ... except Error as e:
    ...     print(e)
    No scheme found in an absolute IRI
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import TypeVar
from xml.etree.ElementTree import ParseError

from .errors import Error, ErrorKind
from .infallible import Infallible, absurd
from .model import BlankNodeIdParseError, IriParseError, LanguageTagParseError
from .result import Err, Ok, Result
from .syntax import RdfXmlError, SparqlParseError, TurtleError

__all__ = [
    "from_io_error",
    "from_decode_error",
    "from_iri_error",
    "from_blank_node_error",
    "from_language_tag_error",
    "from_turtle_error",
    "from_rdf_xml_error",
    "from_xml_error",
    "from_sparql_error",
    "from_infallible",
    "boundary",
    "map_err",
]

T = TypeVar("T")
E = TypeVar("E", bound=BaseException)


def from_io_error(error: OSError) -> Error:
    return Error(ErrorKind.IO, error)


def from_decode_error(error: UnicodeDecodeError) -> Error:
    return Error(ErrorKind.TEXT_DECODE, error)


def from_iri_error(error: IriParseError) -> Error:
    return Error(ErrorKind.IRI, error)


def from_blank_node_error(error: BlankNodeIdParseError) -> Error:
    return Error(ErrorKind.BLANK_NODE, error)


def from_language_tag_error(error: LanguageTagParseError) -> Error:
    return Error(ErrorKind.LANGUAGE_TAG, error)


def from_turtle_error(error: TurtleError) -> Error:
    return Error.wrap(error)


def from_rdf_xml_error(error: RdfXmlError) -> Error:
    return Error.wrap(error)


def from_xml_error(error: ParseError) -> Error:
    """Convert a failure of the generic XML tokenizer (xml.etree.ElementTree)."""
    return Error.wrap(error)


def from_sparql_error(error: SparqlParseError) -> Error:
    return Error.wrap(error)


def from_infallible(error: Infallible) -> Error:
    """Bridge for ``Result[T, Infallible]`` code paths; can never be reached."""
    absurd(error)


@contextmanager
def boundary(failure: type[E], convert: Callable[[E], Error]) -> Iterator[None]:
    """
    Convert one subsystem failure type into Error at a call site.

    Args:
        failure (type[E]): Failure type declared by the wrapped subsystem call.
        convert (Callable[[E], Error]): Named conversion for that type.

    Raises:
        Error: The converted failure, chained from the original.

    Notes:
        Other exceptions pass through untouched, including an Error raised by a
        nested boundary.
    """
    try:
        yield
    except Error:
        raise
    except failure as exc:
        raise convert(exc) from exc


def map_err(result: Result[T, E], convert: Callable[[E], Error]) -> Result[T, Error]:
    """
    Apply a named conversion to the error slot of a result.

    Examples:
        >>> from quadkit.core.syntax import TurtleError
        >>> map_err(Err(TurtleError("unexpected EOF")), from_turtle_error)
        Err(error=Error(other, TurtleError('unexpected EOF', None, None)))
    """
    match result:
        case Ok():
            return result
        case Err(error):
            return Err(convert(error))
