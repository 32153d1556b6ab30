"""wurllib.url.grammar
RFC 3986 / 3987 ABNF rules for IRI-references, written as regexes.
Every component is a named group so the parser can read its offsets off the match.
"""

import re

# Each of these ABNF rules is from RFC 3986, 3987, or 5234.

# ALPHA = %x41-5A / %x61-7A
_ALPHA: str = r"[A-Za-z]"

# DIGIT = %x30-39
_DIGIT: str = r"[0-9]"

# HEXDIG = DIGIT / "A" / "B" / "C" / "D" / "E" / "F"
HEXDIG: str = r"[0-9A-Fa-f]"

# ucschar = %xA0-D7FF / %xF900-FDCF / %xFDF0-FFEF
#         / %x10000-1FFFD / %x20000-2FFFD / %x30000-3FFFD
#         / %x40000-4FFFD / %x50000-5FFFD / %x60000-6FFFD
#         / %x70000-7FFFD / %x80000-8FFFD / %x90000-9FFFD
#         / %xA0000-AFFFD / %xB0000-BFFFD / %xC0000-CFFFD
#         / %xD0000-DFFFD / %xE1000-EFFFD
_UCSCHAR_RANGES: tuple[tuple[int, int], ...] = (
    (0xA0, 0xD7FF),
    (0xF900, 0xFDCF),
    (0xFDF0, 0xFFEF),
    *(((plane << 16), (plane << 16) | 0xFFFD) for plane in range(0x1, 0xE)),
    (0xE1000, 0xEFFFD),
)

# iprivate = %xE000-F8FF / %xF0000-FFFFD / %x100000-10FFFD
_IPRIVATE_RANGES: tuple[tuple[int, int], ...] = ((0xE000, 0xF8FF), (0xF0000, 0xFFFFD), (0x100000, 0x10FFFD))


def _char_class(ranges: tuple[tuple[int, int], ...]) -> str:
    return "[" + "".join(f"{chr(low)}-{chr(high)}" for low, high in ranges) + "]"


_UCSCHAR: str = _char_class(_UCSCHAR_RANGES)
_IPRIVATE: str = _char_class(_IPRIVATE_RANGES)

# unreserved = ALPHA / DIGIT / "-" / "." / "_" / "~"
UNRESERVED_CHARS: str = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-._~"
_UNRESERVED: str = r"[A-Za-z0-9\-._~]"

# iunreserved = unreserved / ucschar
_IUNRESERVED: str = rf"(?:{_UNRESERVED}|{_UCSCHAR})"

# pct-encoded = "%" HEXDIG HEXDIG
_PCT_ENCODED: str = rf"%{HEXDIG}{HEXDIG}"

# sub-delims = "!" / "$" / "&" / "'" / "(" / ")" / "*" / "+" / "," / ";" / "="
_SUB_DELIMS: str = r"[!$&'()*+,;=]"

# ipchar = iunreserved / pct-encoded / sub-delims / ":" / "@"
_IPCHAR: str = rf"(?:{_IUNRESERVED}|{_PCT_ENCODED}|{_SUB_DELIMS}|[:@])"

# iquery = *( ipchar / iprivate / "/" / "?" )
_IQUERY: str = rf"(?P<query>(?:{_IPCHAR}|{_IPRIVATE}|[/?])*)"

# ifragment = *( ipchar / "/" / "?" )
_IFRAGMENT: str = rf"(?P<fragment>(?:{_IPCHAR}|[/?])*)"

# scheme = ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )
_SCHEME: str = rf"(?P<scheme>{_ALPHA}[A-Za-z0-9+\-.]*)"

# isegment = *ipchar
_ISEGMENT: str = rf"{_IPCHAR}*"

# isegment-nz = 1*ipchar
_ISEGMENT_NZ: str = rf"{_IPCHAR}+"

# isegment-nz-nc = 1*( iunreserved / pct-encoded / sub-delims / "@" )
_ISEGMENT_NZ_NC: str = rf"(?:{_IUNRESERVED}|{_PCT_ENCODED}|{_SUB_DELIMS}|@)+"

# ipath-abempty = *( "/" isegment )
_IPATH_ABEMPTY: str = rf"(?P<path_abempty>(?:/{_ISEGMENT})*)"

# ipath-absolute = "/" [ isegment-nz *( "/" isegment ) ]
_IPATH_ABSOLUTE: str = rf"(?P<path_absolute>/(?:{_ISEGMENT_NZ}(?:/{_ISEGMENT})*)?)"

# ipath-rootless = isegment-nz *( "/" isegment )
_IPATH_ROOTLESS: str = rf"(?P<path_rootless>{_ISEGMENT_NZ}(?:/{_ISEGMENT})*)"

# ipath-noscheme = isegment-nz-nc *( "/" isegment )
_IPATH_NOSCHEME: str = rf"(?P<path_noscheme>{_ISEGMENT_NZ_NC}(?:/{_ISEGMENT})*)"

# ipath-empty = 0<ipchar>
_IPATH_EMPTY: str = r"(?P<path_empty>)"

# iuserinfo = *( iunreserved / pct-encoded / sub-delims / ":" )
_IUSERINFO: str = rf"(?P<user_info>(?:{_IUNRESERVED}|{_PCT_ENCODED}|{_SUB_DELIMS}|:)*)"

# dec-octet = DIGIT / %x31-39 DIGIT / "1" 2DIGIT / "2" %x30-34 DIGIT / "25" %x30-35
_DEC_OCTET: str = rf"(?:25[0-5]|2[0-4]{_DIGIT}|1{_DIGIT}{{2}}|[1-9]{_DIGIT}|{_DIGIT})"

# IPv4address = dec-octet "." dec-octet "." dec-octet "." dec-octet
_IPV4ADDRESS: str = rf"{_DEC_OCTET}(?:\.{_DEC_OCTET}){{3}}"

# IP-literal = "[" ( IPv6address / IPvFuture ) "]"
# Literals are kept opaque: anything made of hex digits, ":" and "." between the
# brackets is accepted, as is IPvFuture.
_IP_LITERAL: str = rf"\[(?:[0-9A-Fa-f:.]+|v{HEXDIG}+\.(?:{_UNRESERVED}|{_SUB_DELIMS}|:)+)\]"

# ireg-name = *( iunreserved / pct-encoded / sub-delims )
_IREG_NAME: str = rf"(?:{_IUNRESERVED}|{_PCT_ENCODED}|{_SUB_DELIMS})*"

# ihost = IP-literal / IPv4address / ireg-name
_IHOST: str = rf"(?P<host>{_IP_LITERAL}|{_IPV4ADDRESS}|{_IREG_NAME})"

# port = *DIGIT
_PORT: str = rf"(?P<port>{_DIGIT}*)"

# iauthority = [ iuserinfo "@" ] ihost [ ":" port ]
_IAUTHORITY: str = rf"(?:{_IUSERINFO}@)?{_IHOST}(?::{_PORT})?"

# ihier-part = "//" iauthority ipath-abempty / ipath-absolute / ipath-rootless / ipath-empty
_IHIER_PART: str = rf"(?://{_IAUTHORITY}{_IPATH_ABEMPTY}|{_IPATH_ABSOLUTE}|{_IPATH_ROOTLESS}|{_IPATH_EMPTY})"

# irelative-part = "//" iauthority ipath-abempty / ipath-absolute / ipath-noscheme / ipath-empty
_IRELATIVE_PART: str = (
    rf"(?://{_IAUTHORITY}{_IPATH_ABEMPTY}|{_IPATH_ABSOLUTE}|{_IPATH_NOSCHEME}|{_IPATH_EMPTY})"
)

# IRI = scheme ":" ihier-part [ "?" iquery ] [ "#" ifragment ]
IRI_PAT: re.Pattern[str] = re.compile(rf"{_SCHEME}:{_IHIER_PART}(?:\?{_IQUERY})?(?:#{_IFRAGMENT})?")

# irelative-ref = irelative-part [ "?" iquery ] [ "#" ifragment ]
IRELATIVE_REF_PAT: re.Pattern[str] = re.compile(rf"{_IRELATIVE_PART}(?:\?{_IQUERY})?(?:#{_IFRAGMENT})?")

IRI_PATH_KINDS: tuple[str, ...] = ("path_abempty", "path_absolute", "path_rootless", "path_empty")
IRELATIVE_REF_PATH_KINDS: tuple[str, ...] = ("path_abempty", "path_absolute", "path_noscheme", "path_empty")

# pct-encoded triplet with at least one lower-case hex digit
LOWER_PCT_ENCODED_PAT: re.Pattern[str] = re.compile(r"%(?:[a-f][0-9A-Fa-f]|[0-9A-F][a-f])")

# any pct-encoded triplet, hex digits captured
PCT_ENCODED_PAT: re.Pattern[str] = re.compile(rf"%({HEXDIG}{HEXDIG})")
