"""quadkit — RDF toolkit failure handling: one public error type for every subsystem."""

from .core.errors import Error, ErrorKind

__all__ = [
    "Error",
    "ErrorKind",
]
