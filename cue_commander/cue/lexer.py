"""Small lexical primitives shared by the cue command parser.

All helpers operate on an already-trimmed line (or the remainder of one)
and either return the recognized pieces or raise a typed
:class:`~cue_commander.exceptions.CueParseError`.
"""

from __future__ import annotations

import re

from cue_commander.exceptions import (
    CueSyntaxError,
    InvalidIdError,
    MissingArgumentError,
    UnexpectedTokenError,
)

_QUOTE = '"'


def keyword(name: str, content: str) -> str:
    """Match ``name`` case-insensitively followed by exactly one space.

    Returns:
        The content after the separating space.

    Raises:
        UnexpectedTokenError: If ``content`` does not start with ``name ``.
    """
    head = content[: len(name)]
    if head.upper() != name.upper() or content[len(name) : len(name) + 1] != " ":
        raise UnexpectedTokenError(token(content)[1] or content)
    return content[len(name) + 1 :]


def token(content: str) -> tuple[str, str]:
    """Split ``content`` at the first space.

    Returns:
        Tuple of (rest, first_token). ``rest`` is empty when there is no space.
        Extra spaces between the two parts are not part of ``rest``.
    """
    first, _, rest = content.partition(" ")
    return rest.lstrip(" "), first


def quoted_or_bare(content: str) -> str:
    """Return the value of a quote-optional argument.

    ``"inner text"`` yields ``inner text`` (no escape processing); anything
    else is returned verbatim.

    Raises:
        CueSyntaxError: If a bare value contains a stray double quote.
    """
    if len(content) >= 2 and content.startswith(_QUOTE) and content.endswith(_QUOTE):
        return content[1:-1]
    if _QUOTE in content:
        raise CueSyntaxError(content, "unmatched quote")
    return content


def quoted_with_tail(content: str) -> tuple[str, str]:
    """Split a leading, possibly quoted value from the trailing field.

    Used for ``FILE "name with spaces.flac" WAVE``. An unquoted value runs up
    to the last space.

    Returns:
        Tuple of (tail, value).

    Raises:
        CueSyntaxError: If the opening quote is never closed.
    """
    if content.startswith(_QUOTE):
        end = content.find(_QUOTE, 1)
        if end < 0:
            raise CueSyntaxError(content, "unmatched quote")
        return content[end + 1 :].strip(" "), content[1:end]
    value, _, tail = content.rpartition(" ")
    if not value:
        return "", tail
    if _QUOTE in value:
        raise CueSyntaxError(content, "unmatched quote")
    return tail, value.rstrip(" ")


def fixed_digits(count: int, text: str) -> int:
    """Parse exactly ``count`` ASCII decimal digits.

    Raises:
        InvalidIdError: If ``text`` is not exactly ``count`` digits.
    """
    if not re.fullmatch(r"[0-9]{%d}" % count, text):
        raise InvalidIdError(text, f"expected exactly {count} digits")
    return int(text)


def require(keyword_name: str, content: str) -> str:
    """Return ``content`` or raise MissingArgumentError when it is empty."""
    if not content:
        raise MissingArgumentError(keyword_name)
    return content
