"""
Identifier well-formedness checks and their failure types.

Provides the zero-IO producers behind the well-known identifier error kinds:
- IriParseError from parse_iri (absolute IRIs).
- BlankNodeIdParseError from parse_blank_node_id (blank node labels, without ``_:``).
- LanguageTagParseError from parse_language_tag (BCP47-shaped tags).

Notes:
    - Checks are syntactic only; no IRI resolution or tag registry lookups.
    - Each failure keeps the rejected input so callers can inspect it after the
      failure has been carried through quadkit.core.errors.Error.

Examples:
    >>> from quadkit.core.model import parse_iri, parse_language_tag
    >>> parse_iri("http://example.com/s")
    'http://example.com/s'
    >>> parse_language_tag("en-US")
    'en-us'
"""

from __future__ import annotations

import re
from typing import Final

__all__ = [
    "IriParseError",
    "BlankNodeIdParseError",
    "LanguageTagParseError",
    "parse_iri",
    "parse_blank_node_id",
    "parse_language_tag",
]


class _InputError(ValueError):
    """Failure carrying a human-readable reason and the rejected input."""

    def __init__(self, reason: str, value: str) -> None:
        super().__init__(reason, value)
        self.reason = reason
        self.value = value

    def __str__(self) -> str:
        return self.reason


class IriParseError(_InputError):
    """The text is not a valid absolute IRI."""


class BlankNodeIdParseError(_InputError):
    """The text is not a valid blank node identifier."""


class LanguageTagParseError(_InputError):
    """The text is not a well-formed language tag."""


_SCHEME_RE: Final[re.Pattern[str]] = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*:")
_IRI_FORBIDDEN: Final[frozenset[str]] = frozenset('<>"{}|\\^`')
_BLANK_NODE_RE: Final[re.Pattern[str]] = re.compile(r"^\w(?:[\w.\-·]*[\w\-·])?$")
_PRIMARY_SUBTAG_RE: Final[re.Pattern[str]] = re.compile(r"^[A-Za-z]{2,8}$")
_SUBTAG_RE: Final[re.Pattern[str]] = re.compile(r"^[A-Za-z0-9]{1,8}$")


def parse_iri(text: str) -> str:
    """
    Validate an absolute IRI.

    Args:
        text (str): Candidate IRI.

    Returns:
        str: The IRI, unchanged.

    Raises:
        IriParseError: If no scheme is present or a forbidden code point occurs.

    Examples:
        >>> parse_iri("not an iri")
        Traceback (most recent call last):
        ...
        quadkit.core.model.IriParseError: No scheme found in an absolute IRI
    """
    if not _SCHEME_RE.match(text):
        raise IriParseError("No scheme found in an absolute IRI", text)
    for ch in text:
        if ch in _IRI_FORBIDDEN or ch.isspace() or ord(ch) < 0x20:
            raise IriParseError(f"Invalid IRI code point {ch!r}", text)
    return text


def parse_blank_node_id(text: str) -> str:
    """
    Validate a blank node identifier (the part after ``_:``).

    Raises:
        BlankNodeIdParseError: If the label is empty, starts with a non word
            character, contains other punctuation or ends with ``.``.
    """
    if not _BLANK_NODE_RE.match(text):
        raise BlankNodeIdParseError("The blank node identifier is invalid", text)
    return text


def parse_language_tag(text: str) -> str:
    """
    Validate and normalize a language tag.

    Args:
        text (str): Candidate tag such as "en" or "de-CH-1996".

    Returns:
        str: Lower-cased tag.

    Raises:
        LanguageTagParseError: If the tag is empty or any subtag is malformed.
    """
    if not text:
        raise LanguageTagParseError("A language tag must not be empty", text)
    primary, *rest = text.split("-")
    if not _PRIMARY_SUBTAG_RE.match(primary):
        raise LanguageTagParseError(
            f"The primary language subtag must be 2 to 8 letters (got {primary!r})", text
        )
    for sub in rest:
        if not _SUBTAG_RE.match(sub):
            raise LanguageTagParseError(
                f"A subtag must be 1 to 8 alphanumeric characters (got {sub!r})", text
            )
    return text.lower()
