"""wurllib.url.normalize
Syntax-based normalization (RFC 3986 section 6.2.2) of a URL buffer.
"""

import logging
import re

from .grammar import LOWER_PCT_ENCODED_PAT, PCT_ENCODED_PAT, UNRESERVED_CHARS
from .parse import parse
from .parts import UrlParts, advance_parts

logger = logging.getLogger(__name__)

_UNRESERVED: frozenset[str] = frozenset(UNRESERVED_CHARS)

# Locale-independent; non-ASCII letters are left alone.
_ASCII_LOWER: dict[int, int] = str.maketrans("ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz")


def capitalize_percent_encodings(string: str) -> str:
    """Returns string with all percent-encoded sequences expressed in capital letters.
    e.g. capitalize_percent_encodings("example%2ecom") == "example%2Ecom"
    Does not change the length of the string.
    """
    return LOWER_PCT_ENCODED_PAT.sub(lambda m: m[0].upper(), string)


def _decode_if_unreserved(m: re.Match[str]) -> str:
    char: str = chr(int(m[1], base=16))
    return char if char in _UNRESERVED else m[0]


def decode_encoded_unreserved_chars(string: str) -> str:
    """Replaces %XX triplets that encode an unreserved character with that character.
    e.g. decode_encoded_unreserved_chars("%7Euser%2F") == "~user%2F"
    """
    return PCT_ENCODED_PAT.sub(_decode_if_unreserved, string)


def remove_dot_segments(path: str) -> str:
    """Implementation of the "remove_dot_segments" routine from RFC 3986 section 5.2.4.
    A ".." above the root is dropped.
    """
    result: list[str] = []
    while len(path) > 0:
        if path.startswith("../"):
            path = path[len("../") :]
        elif path.startswith("./"):
            path = path[len("./") :]
        elif path.startswith("/./") or path == "/.":
            path = f"/{path[len('/./') :]}"
        elif path.startswith("/../") or path == "/..":
            path = f"/{path[len('/../') :]}"
            if result:
                result.pop()
        elif path in (".", ".."):
            path = ""
        else:
            # Move the first segment, with its leading "/" if any, to the output.
            end: int = path.find("/", 1)
            if end == -1:
                end = len(path)
            result.append(path[:end])
            path = path[end:]
    return "".join(result)


def _lower_keeping_percent_encodings(text: str) -> str:
    # Hex digits of percent-encodings stay upper-case.
    return capitalize_percent_encodings(text.translate(_ASCII_LOWER))


def _fold_case(buffer: str, parts: UrlParts) -> str:
    for span in (parts.scheme, parts.host):
        if span is not None:
            buffer = buffer[: span.first] + _lower_keeping_percent_encodings(span.slice(buffer)) + buffer[span.last :]
    return buffer


def _normalize_path(path: str, parts: UrlParts) -> str:
    path = remove_dot_segments(path)
    if parts.host is None and path.startswith("//"):
        # Otherwise the first segment would be read back as an authority.
        path = f"/.{path}"
    elif parts.scheme is None and ":" in path.partition("/")[0]:
        # Otherwise the first segment would be read back as a scheme.
        path = f"./{path}"
    return path


def normalize_buffer(buffer: str, parts: UrlParts) -> str:
    """Returns the normalized form of buffer, whose spans are parts.
    The result is a fixed point: normalizing it again changes nothing.
    """
    normalized: str = buffer
    normalized_parts: UrlParts = advance_parts(normalized, parts)

    # All alphabetic characters in the scheme and host are lower-case...
    normalized = _fold_case(normalized, normalized_parts)

    # ...except when used in percent encoding.
    # Decoding changes the length of the buffer, so the spans are stale after this.
    # In an invalid buffer a stray "%" can meet the output of a decode and form a
    # new triplet, so repeat until nothing changes.
    while True:
        rewritten: str = decode_encoded_unreserved_chars(capitalize_percent_encodings(normalized))
        if rewritten == normalized:
            break
        normalized = rewritten
    normalized_parts, _ = parse(normalized)

    # Decoding may have turned %41 into A inside the host.
    normalized = _fold_case(normalized, normalized_parts)

    if normalized_parts.path is not None:
        path: str = _normalize_path(normalized_parts.path.slice(normalized), normalized_parts)

        query: str | None = None
        if normalized_parts.query is not None:
            query = normalized_parts.query.slice(normalized)

        fragment: str | None = None
        if normalized_parts.fragment is not None:
            fragment = normalized_parts.fragment.slice(normalized)

        normalized = normalized[: normalized_parts.path.first] + path
        if query is not None:
            normalized += f"?{query}"
        if fragment is not None:
            normalized += f"#{fragment}"

    if normalized != buffer:
        logger.debug("normalized %r to %r", buffer, normalized)
    return normalized
