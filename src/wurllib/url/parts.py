"""wurllib.url.parts
Where each URL component lives inside the URL's buffer.

Spans are stored as offsets rather than substrings, so a span set computed
against one buffer stays meaningful for any byte-identical copy of it.
"""

import dataclasses

from typing import Iterator, Self


@dataclasses.dataclass(frozen=True)
class Span:
    """Half-open [first, last) range of offsets into a buffer."""

    first: int
    last: int

    def __len__(self: Self) -> int:
        return self.last - self.first

    @property
    def empty(self: Self) -> bool:
        return self.first == self.last

    def slice(self: Self, buffer: str) -> str:
        return buffer[self.first : self.last]


COMPONENTS: tuple[str, ...] = ("scheme", "user_info", "host", "port", "path", "query", "fragment")


@dataclasses.dataclass
class UrlParts:
    """The seven optional component spans of one URL.
    None means the component is absent; an empty Span means present-but-empty.
    """

    scheme: Span | None = None
    user_info: Span | None = None
    host: Span | None = None
    port: Span | None = None
    path: Span | None = None
    query: Span | None = None
    fragment: Span | None = None

    def present(self: Self) -> Iterator[tuple[str, Span]]:
        """(name, span) for every present component, in buffer order."""
        for name in COMPONENTS:
            span: Span | None = getattr(self, name)
            if span is not None:
                yield name, span

    def last_offset(self: Self) -> int:
        return max((span.last for _, span in self.present()), default=0)


def advance_parts(new_view: str, reference: UrlParts) -> UrlParts:
    """Rebind the spans of `reference` onto `new_view`.

    `new_view` must be a verbatim copy of the buffer `reference` was computed
    against. Nothing is re-parsed or re-validated; only the O(1) check that the
    new view can hold the last span is made.
    """
    if reference.last_offset() > len(new_view):
        raise ValueError("buffer is too short for the spans being relocated")
    return UrlParts(**{name: Span(span.first, span.last) for name, span in reference.present()})
