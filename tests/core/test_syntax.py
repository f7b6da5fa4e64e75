import pickle

import pytest

from quadkit.core.syntax import RdfXmlError, SparqlParseError, TurtleError


@pytest.mark.parametrize(
    "error,expected",
    [
        (TurtleError("unexpected EOF"), "unexpected EOF"),
        (TurtleError("expected '.'", line=2), "expected '.' on line 2"),
        (TurtleError("expected '.'", line=2, column=7), "expected '.' on line 2 at position 7"),
        (RdfXmlError("rdf:li is not allowed here"), "rdf:li is not allowed here"),
        (SparqlParseError("expected WHERE"), "expected WHERE"),
        (SparqlParseError("expected WHERE", offset=9), "expected WHERE at offset 9"),
    ],
)
def test_syntax_error_display(error: Exception, expected: str) -> None:
    assert str(error) == expected


def test_turtle_error_survives_pickling() -> None:
    restored = pickle.loads(pickle.dumps(TurtleError("bad IRI", line=1, column=3)))

    assert (restored.message, restored.line, restored.column) == ("bad IRI", 1, 3)
