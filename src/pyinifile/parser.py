"""Line parser producing a document, its layout metadata and warnings."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from types import MappingProxyType
from typing import Any

from .config import DEFAULT_CONFIG, IniConfig
from .model import (
    NO_SECTION,
    PRE_SECTION,
    CommentOwner,
    Metadata,
    ParseResult,
    SectionOrder,
)
from .values import coerce_value

logger = logging.getLogger(__name__)

_SECTION_RE = re.compile(r"^\[([^\]]+)\]$")
_COMMENT_RE = re.compile(r"^;(.+)$")
_KEY_VALUE_RE = re.compile(r"^([A-Za-z0-9_]+)\s*=\s*(.+)$")


class _OpenSection:
    """Mutable counterpart of :class:`SectionOrder` used while parsing."""

    __slots__ = ("name", "keys")

    def __init__(self, name: str) -> None:
        self.name = name
        self.keys: list[str] = []

    def freeze(self) -> SectionOrder:
        return SectionOrder(self.name, tuple(self.keys))


def parse(lines: Iterable[str], config: IniConfig | None = None) -> ParseResult:
    """Parse INI *lines* into a :class:`ParseResult`.

    Each line is classified as a section header, a comment and/or a
    ``key=value`` pair.  Lines that contribute nothing are reported as
    ``"Line <n>: Invalid data found '<line>'"`` warnings and parsing carries
    on; this function never raises for malformed content.
    """
    cfg = config or DEFAULT_CONFIG
    document: dict[str, dict[str, Any]] = {}
    comments: dict[CommentOwner, list[str]] = {}
    order: list[_OpenSection] = []
    warnings: list[str] = []
    current: _OpenSection | None = None

    if cfg.nosection_compat:
        document[NO_SECTION] = {}
        current = _OpenSection(NO_SECTION)
        order.append(current)

    for number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")

        match = _SECTION_RE.match(line)
        if match:
            name = match.group(1)
            document.setdefault(name, {})
            current = _OpenSection(name)
            order.append(current)
            continue

        valid = False

        match = _COMMENT_RE.match(line)
        if match:
            owner: CommentOwner = current.name if current is not None else PRE_SECTION
            comments.setdefault(owner, []).append(match.group(1))
            valid = True

        match = _KEY_VALUE_RE.match(line)
        if match and current is not None:
            key, value = match.group(1), coerce_value(match.group(2))
            document[current.name][key] = value
            current.keys.append(key)
            valid = True

        if not valid:
            message = f"Line {number}: Invalid data found '{line}'"
            logger.debug("%s", message)
            warnings.append(message)

    metadata = Metadata(
        section_order=tuple(rec.freeze() for rec in order),
        comments=MappingProxyType(
            {owner: tuple(texts) for owner, texts in comments.items()}
        ),
    )
    logger.debug(
        "Parsed %d section(s) from %d header occurrence(s) with %d warning(s)",
        len(document),
        len(order),
        len(warnings),
    )
    return ParseResult(document=document, metadata=metadata, warnings=warnings)
