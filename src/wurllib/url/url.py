"""wurllib.url.url
The URL value: one owned buffer plus the spans of its components.
"""

import functools
import logging
import re

from typing import Iterator, Self

from . import unicode
from .normalize import normalize_buffer
from .parse import parse, trim
from .parts import Span, UrlParts, advance_parts
from .unicode import UnicodeErrc

logger = logging.getLogger(__name__)

_DEFAULT_ENCODING: str = "utf-8"

# Bytes that are not valid UTF-8 survive as lone surrogates, so u8string()
# gives back exactly what was passed in.
_ENCODING_ERRORS: str = "surrogateescape"

_PAIR_SEPARATOR_PAT: re.Pattern[str] = re.compile(r"[&;]")


class UnicodeTranscodingError(ValueError):
    def __init__(self: Self, errc: UnicodeErrc) -> None:
        super().__init__(errc.value)
        self.errc: UnicodeErrc = errc


def _decode(data: bytes) -> str:
    if logger.isEnabledFor(logging.DEBUG):
        invalid_at: int = unicode.find_invalid(data)
        if invalid_at != len(data):
            logger.debug("invalid UTF-8 at offset %d of %r", invalid_at, data)
    return data.decode(_DEFAULT_ENCODING, _ENCODING_ERRORS)


class QueryIterator:
    """Lazily splits a query into (key, value) pairs.

    Pairs are separated by "&" or ";", and the key ends at the first "=".
    Two iterators are equal only if both are exhausted, or if both walk the
    same URL object and stand at the same place in its query. Iterators over
    two separately built URLs never compare equal, even when the URLs do.
    """

    def __init__(self: Self, owner: "URL", query: Span | None) -> None:
        self._owner: URL = owner
        self._generation: int = owner._generation
        self._query: Span | None = query if query is not None and not query.empty else None
        self._kvp: tuple[str, str] = ("", "")
        if self._query is not None:
            self._assign_kvp()

    @property
    def exhausted(self: Self) -> bool:
        return self._query is None

    def __iter__(self: Self) -> Self:
        return self

    def __next__(self: Self) -> tuple[str, str]:
        if self._query is None:
            raise StopIteration
        if self._owner._generation != self._generation:
            raise RuntimeError("URL changed during query iteration")
        kvp: tuple[str, str] = self._kvp
        self._increment()
        return kvp

    def __eq__(self: Self, other: object) -> bool:
        if not isinstance(other, QueryIterator):
            return NotImplemented
        if self._query is None or other._query is None:
            return self._query is None and other._query is None
        return (
            self._owner is other._owner
            and self._generation == other._generation
            and self._query.first == other._query.first
        )

    def _separator(self: Self, query: Span) -> int:
        m: re.Match[str] | None = _PAIR_SEPARATOR_PAT.search(self._owner._buffer, query.first, query.last)
        return query.last if m is None else m.start()

    def _assign_kvp(self: Self) -> None:
        buffer: str = self._owner._buffer
        first: int = self._query.first
        sep: int = self._separator(self._query)
        eq: int = buffer.find("=", first, sep)
        if eq == -1:
            self._kvp = (buffer[first:sep], "")
        else:
            self._kvp = (buffer[first:eq], buffer[eq + 1 : sep])

    def _increment(self: Self) -> None:
        sep: int = self._separator(self._query)
        if sep != self._query.last:
            sep += 1  # skip the separator itself
        self._query = Span(sep, self._query.last)
        if self._query.empty:
            self._query = None
        else:
            self._assign_kvp()


@functools.total_ordering
class URL:
    """A URL held as its text plus the offsets of its components.

    Constructing a URL never fails: text that doesn't parse is kept verbatim,
    `valid` is False and every component is absent.
    Component accessors return the empty string for absent components; use the
    has_* properties to tell an absent component from an empty one.
    Query iterators taken from a URL are invalidated by assign() and swap().
    """

    def __init__(self: Self, data: str | bytes = "") -> None:
        if isinstance(data, (bytes, bytearray)):
            data = _decode(bytes(data))
        elif not isinstance(data, str):
            raise TypeError(f"URL needs str or bytes, not {type(data).__name__}")
        self._buffer: str = trim(data)
        self._parts: UrlParts
        self._valid: bool
        self._parts, self._valid = parse(self._buffer)
        self._generation: int = 0

    def _view(self: Self, span: Span | None) -> str:
        return "" if span is None else span.slice(self._buffer)

    @property
    def valid(self: Self) -> bool:
        return self._valid

    @property
    def has_scheme(self: Self) -> bool:
        return self._parts.scheme is not None

    @property
    def scheme(self: Self) -> str:
        return self._view(self._parts.scheme)

    @property
    def has_user_info(self: Self) -> bool:
        return self._parts.user_info is not None

    @property
    def user_info(self: Self) -> str:
        return self._view(self._parts.user_info)

    @property
    def has_host(self: Self) -> bool:
        return self._parts.host is not None

    @property
    def host(self: Self) -> str:
        return self._view(self._parts.host)

    @property
    def has_port(self: Self) -> bool:
        return self._parts.port is not None

    @property
    def port(self: Self) -> str:
        return self._view(self._parts.port)

    @property
    def has_path(self: Self) -> bool:
        return self._parts.path is not None

    @property
    def path(self: Self) -> str:
        return self._view(self._parts.path)

    @property
    def has_query(self: Self) -> bool:
        return self._parts.query is not None

    @property
    def query(self: Self) -> str:
        return self._view(self._parts.query)

    @property
    def has_fragment(self: Self) -> bool:
        return self._parts.fragment is not None

    @property
    def fragment(self: Self) -> str:
        return self._view(self._parts.fragment)

    @property
    def has_authority(self: Self) -> bool:
        return self.has_host

    @property
    def authority(self: Self) -> str:
        """userinfo@host:port, cut straight out of the buffer"""
        host: Span | None = self._parts.host
        if host is None:
            return ""
        user_info: Span | None = self._parts.user_info
        port: Span | None = self._parts.port

        first, last = host.first, host.last
        if user_info is not None and not user_info.empty:
            first = user_info.first
        elif host.empty and port is not None and not port.empty:
            first = port.first - 1  # the ":" before the port

        if host.empty:
            if port is not None and not port.empty:
                last = port.last
            elif user_info is not None and not user_info.empty:
                last = user_info.last + 1  # the "@" after the user info
        elif port is not None:
            if port.empty:
                last += 1  # the bare ":" after the host
            else:
                last = port.last

        return self._buffer[first:last]

    @property
    def empty(self: Self) -> bool:
        return len(self._buffer) == 0

    @property
    def is_absolute(self: Self) -> bool:
        return self.has_scheme

    @property
    def is_opaque(self: Self) -> bool:
        return self.is_absolute and not self.has_authority

    def query_pairs(self: Self) -> QueryIterator:
        return QueryIterator(self, self._parts.query)

    def string(self: Self) -> str:
        return self._buffer

    def u8string(self: Self) -> bytes:
        try:
            return self._buffer.encode(_DEFAULT_ENCODING, _ENCODING_ERRORS)
        except UnicodeEncodeError as e:
            # A lone surrogate that did not come from undecodable input bytes
            raise UnicodeTranscodingError(UnicodeErrc.INVALID_CODE_POINT) from e

    def u16string(self: Self) -> list[int]:
        """The URL as UTF-16 code units."""
        result = unicode.utf8_to_utf16(self.u8string())
        if not result:
            raise UnicodeTranscodingError(result.error)
        return result.value

    def u32string(self: Self) -> list[int]:
        """The URL as code points."""
        result = unicode.utf8_to_utf32(self.u8string())
        if not result:
            raise UnicodeTranscodingError(result.error)
        return result.value

    def __str__(self: Self) -> str:
        return self._buffer

    def __bytes__(self: Self) -> bytes:
        return self.u8string()

    def __repr__(self: Self) -> str:
        return f"{self.__class__.__name__}({self._buffer!r})"

    def __len__(self: Self) -> int:
        return len(self._buffer)

    def __iter__(self: Self) -> Iterator[str]:
        return iter(self._buffer)

    def normalize(self: Self) -> "URL":
        """Returns a new URL with the scheme and host lower-cased, percent-encodings
        upper-cased, encoded unreserved characters decoded and dot-segments removed.
        """
        return self.__class__(normalize_buffer(self._buffer, self._parts))

    def compare(self: Self, other: "URL") -> int:
        # Two empty URLs are equal, even though they have no components at all.
        if self.empty and other.empty:
            return 0
        if self.empty:
            return -1
        if other.empty:
            return 1

        lhs: str = self.normalize()._buffer
        rhs: str = other.normalize()._buffer
        return (lhs > rhs) - (lhs < rhs)

    def __eq__(self: Self, other: object) -> bool:
        if isinstance(other, URL):
            return self.compare(other) == 0
        if isinstance(other, str):
            return self._buffer == other
        return NotImplemented

    def __lt__(self: Self, other: object) -> bool:
        if isinstance(other, URL):
            return self.compare(other) < 0
        return NotImplemented

    # assign() and swap() mutate a URL in place.
    __hash__ = None  # type: ignore[assignment]

    def __copy__(self: Self) -> Self:
        result: Self = self.__class__.__new__(self.__class__)
        result._buffer = self._buffer
        result._parts = advance_parts(result._buffer, self._parts)
        result._valid = self._valid
        result._generation = 0
        return result

    def __deepcopy__(self: Self, memo: dict) -> Self:
        return self.__copy__()

    def assign(self: Self, other: "URL") -> None:
        self._buffer = other._buffer
        self._parts = advance_parts(self._buffer, other._parts)
        self._valid = other._valid
        self._generation += 1

    def swap(self: Self, other: "URL") -> None:
        mine: UrlParts = advance_parts(other._buffer, other._parts)
        theirs: UrlParts = advance_parts(self._buffer, self._parts)
        self._buffer, other._buffer = other._buffer, self._buffer
        self._parts, other._parts = mine, theirs
        self._valid, other._valid = other._valid, self._valid
        self._generation += 1
        other._generation += 1


def compare(lhs: URL, rhs: URL) -> int:
    return lhs.compare(rhs)


def swap(lhs: URL, rhs: URL) -> None:
    lhs.swap(rhs)


def make_url(data: str | bytes) -> URL:
    """Strict constructor: raises ValueError if data isn't a valid IRI-reference."""
    result: URL = URL(data)
    if not result.valid:
        raise ValueError("failed to parse URL")
    return result
