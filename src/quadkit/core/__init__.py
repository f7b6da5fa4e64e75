"""
Core package aggregator for quadkit failure handling (facade, conversions, infallible results).

## Contracts
- Errors — Error, the single public error type, and ErrorKind.
- Convert — one named conversion per well-known failure source, boundary, map_err.
- Infallible — uninhabited error type, unwrap_infallible and bridges.
- Result — Ok/Err values for code that returns failures instead of raising.
- Model / Syntax — failure types of the identifier checks and of the parsers.
- Report — pydantic snapshot of a failure for top-level handlers.

## Notes
- Zero-IO policy: stdlib + pydantic only; no file/network IO and no logging.
- Failures are carried verbatim; text is rendered only when displayed or reported.

## Examples
```python
from quadkit.core import Error, ErrorKind, boundary, from_language_tag_error
from quadkit.core.model import LanguageTagParseError, parse_language_tag

try:
    with boundary(LanguageTagParseError, from_language_tag_error):
        parse_language_tag("e")
except Error as err:
    err.kind is ErrorKind.LANGUAGE_TAG  # True
    err.source().value  # 'e'
```
"""

from __future__ import annotations

from .convert import (
    boundary,
    from_blank_node_error,
    from_decode_error,
    from_infallible,
    from_io_error,
    from_iri_error,
    from_language_tag_error,
    from_rdf_xml_error,
    from_sparql_error,
    from_turtle_error,
    from_xml_error,
    map_err,
)
from .errors import Error, ErrorKind, iter_causes
from .infallible import Infallible, into_fallible, unwrap_infallible
from .result import Err, Ok, Result

__all__ = [
    "Error",
    "ErrorKind",
    "iter_causes",
    "Infallible",
    "unwrap_infallible",
    "into_fallible",
    "Ok",
    "Err",
    "Result",
    "boundary",
    "map_err",
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
]
