"""
Syntax failures raised by the document and query parsers.

These are foreign to the error facade: quadkit.core.convert always carries them
through Error.wrap rather than a typed slot.
- TurtleError for the Turtle family (Turtle, TriG, N-Triples, N-Quads).
- RdfXmlError for RDF/XML documents.
- SparqlParseError for SPARQL queries and updates.

The generic XML tokenizer is the standard library's xml.etree.ElementTree, whose
failures are xml.etree.ElementTree.ParseError.
"""

from __future__ import annotations

__all__ = [
    "TurtleError",
    "RdfXmlError",
    "SparqlParseError",
]


class TurtleError(ValueError):
    """
    Turtle-family syntax error.

    Args:
        message (str): Parser diagnostic.
        line (int | None): 1-based line of the offending token, if known.
        column (int | None): 1-based column of the offending token, if known.

    Examples:
        >>> str(TurtleError("expected '.'", line=3, column=14))
        "expected '.' on line 3 at position 14"
    """

    def __init__(self, message: str, line: int | None = None, column: int | None = None) -> None:
        super().__init__(message, line, column)
        self.message = message
        self.line = line
        self.column = column

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        if self.column is None:
            return f"{self.message} on line {self.line}"
        return f"{self.message} on line {self.line} at position {self.column}"


class RdfXmlError(ValueError):
    """RDF/XML structural error (the XML itself tokenized fine)."""


class SparqlParseError(ValueError):
    """
    SPARQL syntax error.

    Args:
        message (str): Parser diagnostic.
        offset (int | None): 0-based character offset in the query, if known.
    """

    def __init__(self, message: str, offset: int | None = None) -> None:
        super().__init__(message, offset)
        self.message = message
        self.offset = offset

    def __str__(self) -> str:
        if self.offset is None:
            return self.message
        return f"{self.message} at offset {self.offset}"
