"""wurllib.url.schemes
Special schemes and their default ports, keyed by lower-cased scheme name.
"""

_SPECIAL_SCHEMES: dict[str, int | None] = {
    "file": None,
    "ftp": 21,
    "gopher": 70,
    "http": 80,
    "https": 443,
    "ws": 80,
    "wss": 443,
}


def special_schemes() -> list[tuple[str, int | None]]:
    return list(_SPECIAL_SCHEMES.items())


def is_special(scheme: str) -> bool:
    return scheme.lower() in _SPECIAL_SCHEMES


def default_port(scheme: str) -> int | None:
    return _SPECIAL_SCHEMES.get(scheme.lower())


def is_default_port(scheme: str, port: int) -> bool:
    dport: int | None = default_port(scheme)
    return dport is not None and dport == port
