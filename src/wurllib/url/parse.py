"""wurllib.url.parse
Split an IRI-reference into component spans without copying it.
"""

import logging
import re

from typing import Iterable

from .grammar import IRELATIVE_REF_PAT, IRELATIVE_REF_PATH_KINDS, IRI_PAT, IRI_PATH_KINDS
from .parts import Span, UrlParts

logger = logging.getLogger(__name__)

# Leading and trailing C0 control or space, stripped before parsing.
C0_CONTROL_OR_SPACE: str = "".join(chr(i) for i in range(0x20 + 1))


def trim(text: str) -> str:
    return text.strip(C0_CONTROL_OR_SPACE)


def _span(m: re.Match[str], group: str) -> Span | None:
    first, last = m.span(group)
    if first == -1:
        return None
    return Span(first, last)


def _parts_from_match(m: re.Match[str], path_kinds: Iterable[str]) -> UrlParts:
    # Relative references don't have a scheme group in their regex.
    scheme: Span | None = _span(m, "scheme") if "scheme" in m.re.groupindex else None
    return UrlParts(
        scheme=scheme,
        user_info=_span(m, "user_info"),
        host=_span(m, "host"),
        port=_span(m, "port"),
        path=next(span for span in map(lambda pk: _span(m, pk), path_kinds) if span is not None),
        query=_span(m, "query"),
        fragment=_span(m, "fragment"),
    )


def parse(buffer: str) -> tuple[UrlParts, bool]:
    """Parse an already trimmed buffer as an IRI, or failing that as an irelative-ref.
    Returns the component spans and whether the buffer was valid.
    An empty buffer is a valid URL with no components.
    An invalid buffer yields no components at all.
    """
    if len(buffer) == 0:
        return UrlParts(), True

    for pattern, path_kinds in ((IRI_PAT, IRI_PATH_KINDS), (IRELATIVE_REF_PAT, IRELATIVE_REF_PATH_KINDS)):
        m: re.Match[str] | None = pattern.fullmatch(buffer)
        if m is not None:
            return _parts_from_match(m, path_kinds), True

    logger.debug("rejected URL %r", buffer)
    return UrlParts(), False
