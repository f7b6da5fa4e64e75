"""Tests for `quadkit.core.convert` named conversions and call-site helpers."""

from __future__ import annotations

from collections.abc import Callable
from xml.etree import ElementTree

import pytest

from quadkit.core.convert import (
    boundary,
    from_blank_node_error,
    from_decode_error,
    from_io_error,
    from_iri_error,
    from_language_tag_error,
    from_rdf_xml_error,
    from_sparql_error,
    from_turtle_error,
    from_xml_error,
    map_err,
)
from quadkit.core.errors import Error, ErrorKind
from quadkit.core.model import (
    BlankNodeIdParseError,
    IriParseError,
    LanguageTagParseError,
    parse_blank_node_id,
    parse_iri,
    parse_language_tag,
)
from quadkit.core.result import Err, Ok
from quadkit.core.syntax import RdfXmlError, SparqlParseError, TurtleError


def _xml_parse_error() -> ElementTree.ParseError:
    try:
        ElementTree.fromstring("<rdf:RDF><unclosed></rdf:RDF>")
    except ElementTree.ParseError as exc:
        return exc
    raise AssertionError("expected the XML tokenizer to fail")


def _decode_error() -> UnicodeDecodeError:
    try:
        b"\xff\xfe\xfa".decode("utf-8")
    except UnicodeDecodeError as exc:
        return exc
    raise AssertionError("expected decoding to fail")


CASES: list[tuple[Callable[[], BaseException], Callable[..., Error], ErrorKind]] = [
    (lambda: FileNotFoundError(2, "No such file or directory", "data.ttl"), from_io_error, ErrorKind.IO),
    (_decode_error, from_decode_error, ErrorKind.TEXT_DECODE),
    (lambda: IriParseError("No scheme found in an absolute IRI", "x"), from_iri_error, ErrorKind.IRI),
    (
        lambda: BlankNodeIdParseError("The blank node identifier is invalid", "a."),
        from_blank_node_error,
        ErrorKind.BLANK_NODE,
    ),
    (
        lambda: LanguageTagParseError("A language tag must not be empty", ""),
        from_language_tag_error,
        ErrorKind.LANGUAGE_TAG,
    ),
    (lambda: TurtleError("expected '.'", line=3, column=14), from_turtle_error, ErrorKind.OTHER),
    (lambda: RdfXmlError("rdf:about and rdf:ID both set"), from_rdf_xml_error, ErrorKind.OTHER),
    (_xml_parse_error, from_xml_error, ErrorKind.OTHER),
    (lambda: SparqlParseError("expected WHERE", offset=9), from_sparql_error, ErrorKind.OTHER),
]


@pytest.mark.parametrize("make,convert,kind", CASES)
def test_conversion_is_lossless(
    make: Callable[[], BaseException], convert: Callable[..., Error], kind: ErrorKind
) -> None:
    original = make()

    err = convert(original)

    assert err.kind is kind
    assert err.source() is original
    assert str(err.source()) == str(original)
    assert str(err) == str(original)


def test_not_an_iri_reports_parser_message() -> None:
    with pytest.raises(IriParseError) as info:
        parse_iri("not an iri")

    err = from_iri_error(info.value)

    assert str(err) == str(info.value) == "No scheme found in an absolute IRI"
    assert err.source().value == "not an iri"


def test_boundary_converts_declared_failure() -> None:
    with pytest.raises(Error) as info:
        with boundary(LanguageTagParseError, from_language_tag_error):
            parse_language_tag("e")

    err = info.value
    assert err.kind is ErrorKind.LANGUAGE_TAG
    assert isinstance(err.source(), LanguageTagParseError)
    assert err.__cause__ is err.source()


def test_boundary_passes_other_failures_through() -> None:
    with pytest.raises(BlankNodeIdParseError):
        with boundary(IriParseError, from_iri_error):
            parse_blank_node_id("")


def test_boundary_does_not_rewrap_nested_errors() -> None:
    with pytest.raises(Error) as info:
        with boundary(Exception, Error.wrap):
            with boundary(IriParseError, from_iri_error):
                parse_iri("no scheme")

    assert info.value.kind is ErrorKind.IRI


def test_boundary_is_silent_on_success() -> None:
    with boundary(IriParseError, from_iri_error):
        iri = parse_iri("urn:example:s")

    assert iri == "urn:example:s"


def test_map_err_converts_error_slot() -> None:
    original = SparqlParseError("expected WHERE", offset=9)

    result = map_err(Err(original), from_sparql_error)

    assert isinstance(result, Err)
    assert result.error.kind is ErrorKind.OTHER
    assert result.error.source() is original
    assert str(result.error) == "expected WHERE at offset 9"


def test_map_err_keeps_success() -> None:
    ok = Ok("http://example.com/")

    assert map_err(ok, from_iri_error) is ok
