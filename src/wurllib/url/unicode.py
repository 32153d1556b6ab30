"""wurllib.url.unicode
Strict UTF-8 / UTF-16 / UTF-32 transcoding.
Malformed input is always reported, never replaced with U+FFFD.
Nothing in here raises: every operation returns an Expected.
"""

import dataclasses
import enum

from typing import Generic, Iterable, MutableSequence, Self, TypeVar

_T = TypeVar("_T")

_LEAD_SURROGATE_MIN: int = 0xD800
_LEAD_SURROGATE_MAX: int = 0xDBFF
_TRAIL_SURROGATE_MIN: int = 0xDC00
_TRAIL_SURROGATE_MAX: int = 0xDFFF
_LEAD_OFFSET: int = _LEAD_SURROGATE_MIN - (0x10000 >> 10)
_SURROGATE_OFFSET: int = 0x10000 - (_LEAD_SURROGATE_MIN << 10) - _TRAIL_SURROGATE_MIN

CODE_POINT_MAX: int = 0x10FFFF


class UnicodeErrc(enum.Enum):
    OVERFLOW = "overflow"
    ILLEGAL_BYTE_SEQUENCE = "illegal byte sequence"
    INVALID_CODE_POINT = "invalid code point"


@dataclasses.dataclass(frozen=True)
class Expected(Generic[_T]):
    """Either a value or a UnicodeErrc. Truthy iff it holds a value."""

    value: _T | None = None
    error: UnicodeErrc | None = None

    def __bool__(self: Self) -> bool:
        return self.error is None

    @classmethod
    def fail(cls, error: UnicodeErrc) -> "Expected":
        return cls(error=error)


def _is_trail(octet: int) -> bool:
    return (octet & 0xFF) >> 6 == 0x2


def is_lead_surrogate(unit: int) -> bool:
    return _LEAD_SURROGATE_MIN <= unit <= _LEAD_SURROGATE_MAX


def is_trail_surrogate(unit: int) -> bool:
    return _TRAIL_SURROGATE_MIN <= unit <= _TRAIL_SURROGATE_MAX


def is_surrogate(unit: int) -> bool:
    return _LEAD_SURROGATE_MIN <= unit <= _TRAIL_SURROGATE_MAX


def is_code_point_valid(code_point: int) -> bool:
    return 0 <= code_point <= CODE_POINT_MAX and not is_surrogate(code_point)


def sequence_length(lead: int) -> int:
    """Number of octets announced by a lead byte, or 0 if it is not a lead byte."""
    lead &= 0xFF
    if lead < 0x80:
        return 1
    if lead >> 5 == 0x6:
        return 2
    if lead >> 4 == 0xE:
        return 3
    if lead >> 3 == 0x1E:
        return 4
    return 0


def _minimal_length(code_point: int) -> int:
    if code_point < 0x80:
        return 1
    if code_point < 0x800:
        return 2
    if code_point < 0x10000:
        return 3
    return 4


def is_overlong_sequence(code_point: int, length: int) -> bool:
    return length != _minimal_length(code_point)


# Payload bits carried by a lead byte, indexed by sequence length.
_LEAD_MASKS: tuple[int, ...] = (0, 0x7F, 0x1F, 0x0F, 0x07)


def decode_one(data: bytes, pos: int, end: int | None = None) -> Expected[tuple[int, int]]:
    """Decode the code point starting at data[pos].
    On success the value is (code_point, position just past the sequence).
    """
    if end is None:
        end = len(data)
    if pos >= end:
        return Expected.fail(UnicodeErrc.OVERFLOW)

    length: int = sequence_length(data[pos])
    if length == 0:
        return Expected.fail(UnicodeErrc.ILLEGAL_BYTE_SEQUENCE)

    code_point: int = data[pos] & _LEAD_MASKS[length]
    it: int = pos
    for _ in range(length - 1):
        it += 1
        if it == end:
            return Expected.fail(UnicodeErrc.OVERFLOW)
        if not _is_trail(data[it]):
            return Expected.fail(UnicodeErrc.ILLEGAL_BYTE_SEQUENCE)
        code_point = (code_point << 6) | (data[it] & 0x3F)

    if not is_code_point_valid(code_point):
        return Expected.fail(UnicodeErrc.INVALID_CODE_POINT)
    if is_overlong_sequence(code_point, length):
        return Expected.fail(UnicodeErrc.ILLEGAL_BYTE_SEQUENCE)
    return Expected((code_point, it + 1))


def peek_next(data: bytes, pos: int, end: int | None = None) -> Expected[int]:
    """Like decode_one, but only reports the code point."""
    result = decode_one(data, pos, end)
    if not result:
        return Expected.fail(result.error)
    return Expected(result.value[0])


def encode_one(code_point: int) -> Expected[bytes]:
    if not is_code_point_valid(code_point):
        return Expected.fail(UnicodeErrc.INVALID_CODE_POINT)

    if code_point < 0x80:
        return Expected(bytes((code_point,)))
    if code_point < 0x800:
        return Expected(bytes(((code_point >> 6) | 0xC0, (code_point & 0x3F) | 0x80)))
    if code_point < 0x10000:
        return Expected(
            bytes(
                (
                    (code_point >> 12) | 0xE0,
                    ((code_point >> 6) & 0x3F) | 0x80,
                    (code_point & 0x3F) | 0x80,
                )
            )
        )
    return Expected(
        bytes(
            (
                (code_point >> 18) | 0xF0,
                ((code_point >> 12) & 0x3F) | 0x80,
                ((code_point >> 6) & 0x3F) | 0x80,
                (code_point & 0x3F) | 0x80,
            )
        )
    )


def find_invalid(data: bytes, first: int = 0, last: int | None = None) -> int:
    """Position of the first byte that starts an invalid sequence, or `last` if there is none."""
    if last is None:
        last = len(data)
    it: int = first
    while it != last:
        result = decode_one(data, it, last)
        if not result:
            return it
        it = result.value[1]
    return it


def is_valid(data: bytes) -> bool:
    return find_invalid(data) == len(data)


def prior(data: bytes, pos: int, first: int = 0) -> Expected[tuple[int, int]]:
    """Decode the code point that ends just before data[pos].
    On success the value is (code_point, position of its lead byte).
    """
    if pos == first:
        return Expected.fail(UnicodeErrc.OVERFLOW)

    it: int = pos - 1
    while _is_trail(data[it]):
        if it == first:
            return Expected.fail(UnicodeErrc.INVALID_CODE_POINT)
        it -= 1

    result = decode_one(data, it, pos)
    if not result:
        return Expected.fail(result.error)
    return Expected((result.value[0], it))


def advance(data: bytes, pos: int, n: int, end: int | None = None) -> Expected[int]:
    """Skip n code points forward from pos."""
    while n > 0:
        result = decode_one(data, pos, end)
        if not result:
            return Expected.fail(result.error)
        pos = result.value[1]
        n -= 1
    return Expected(pos)


def distance(data: bytes, first: int = 0, last: int | None = None) -> Expected[int]:
    """Number of code points in data[first:last]."""
    if last is None:
        last = len(data)
    count: int = 0
    it: int = first
    while it != last:
        result = decode_one(data, it, last)
        if not result:
            return Expected.fail(result.error)
        it = result.value[1]
        count += 1
    return Expected(count)


def _rollback(out: MutableSequence, mark: int, error: UnicodeErrc) -> Expected:
    del out[mark:]
    return Expected.fail(error)


def utf16_to_utf8(units: Iterable[int], out: bytearray | None = None) -> Expected[bytearray]:
    if out is None:
        out = bytearray()
    mark: int = len(out)
    it = iter(units)
    for unit in it:
        code_point: int = unit & 0xFFFF

        # Surrogate pairs first
        if is_lead_surrogate(code_point):
            trail: int | None = next(it, None)
            if trail is None or not is_trail_surrogate(trail & 0xFFFF):
                return _rollback(out, mark, UnicodeErrc.INVALID_CODE_POINT)
            code_point = (code_point << 10) + (trail & 0xFFFF) + _SURROGATE_OFFSET
        elif is_trail_surrogate(code_point):
            return _rollback(out, mark, UnicodeErrc.INVALID_CODE_POINT)

        encoded = encode_one(code_point)
        if not encoded:
            return _rollback(out, mark, encoded.error)
        out += encoded.value
    return Expected(out)


def utf8_to_utf16(data: bytes, out: list[int] | None = None) -> Expected[list[int]]:
    if out is None:
        out = []
    mark: int = len(out)
    it: int = 0
    while it != len(data):
        result = decode_one(data, it)
        if not result:
            return _rollback(out, mark, result.error)
        code_point, it = result.value
        if code_point > 0xFFFF:
            out.append((code_point >> 10) + _LEAD_OFFSET)
            out.append((code_point & 0x3FF) + _TRAIL_SURROGATE_MIN)
        else:
            out.append(code_point)
    return Expected(out)


def utf32_to_utf8(code_points: Iterable[int], out: bytearray | None = None) -> Expected[bytearray]:
    if out is None:
        out = bytearray()
    mark: int = len(out)
    for code_point in code_points:
        encoded = encode_one(code_point)
        if not encoded:
            return _rollback(out, mark, encoded.error)
        out += encoded.value
    return Expected(out)


def utf8_to_utf32(data: bytes, out: list[int] | None = None) -> Expected[list[int]]:
    if out is None:
        out = []
    mark: int = len(out)
    it: int = 0
    while it != len(data):
        result = decode_one(data, it)
        if not result:
            return _rollback(out, mark, result.error)
        code_point, it = result.value
        out.append(code_point)
    return Expected(out)
