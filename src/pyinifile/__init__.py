"""Round-trip preserving INI reader and writer."""

from .api import dump, dumps, get_key, get_option, load, loads, set_key, set_option
from .config import IniConfig
from .errors import IniFileError, IniFormatError, IniIOError, UnknownBackendError
from .model import NO_SECTION, PRE_SECTION, Metadata, ParseResult, SectionOrder
from .parser import parse
from .serializer import render_lines, save
from .values import Stringable

__version__ = "1.2.0"


__all__ = [
    "parse",
    "save",
    "render_lines",
    "load",
    "loads",
    "dump",
    "dumps",
    "get_key",
    "set_key",
    "get_option",
    "set_option",
    "IniConfig",
    "Metadata",
    "ParseResult",
    "SectionOrder",
    "NO_SECTION",
    "PRE_SECTION",
    "Stringable",
    "IniFileError",
    "IniFormatError",
    "IniIOError",
    "UnknownBackendError",
]
