__version__ = "0.1"

from .parse import parse, trim
from .parts import Span, UrlParts, advance_parts
from .schemes import default_port, is_default_port, is_special, special_schemes
from .unicode import Expected, UnicodeErrc
from .url import QueryIterator, URL, UnicodeTranscodingError, compare, make_url, swap
