"""Serializer writing a document back to INI text.

The output layout follows the :class:`~pyinifile.model.Metadata` recorded at
parse time: sections are written per recorded header occurrence, keys in
their recorded order, and comments at the top of their section.  Entries the
caller removed are skipped, entries the caller added are appended after the
recorded ones.  Comments placed between keys move to the top of their
section; their position within a section is not recorded.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .config import DEFAULT_CONFIG, IniConfig
from .errors import IniFormatError
from .model import NO_SECTION, PRE_SECTION, Metadata, SectionOrder
from .values import format_value

logger = logging.getLogger(__name__)


def _comment_lines(texts) -> list[str]:
    return [f";{text}" for text in texts]


def _section_keys(order: tuple[SectionOrder, ...]) -> dict[str, set[str]]:
    keys: dict[str, set[str]] = {}
    for rec in order:
        keys.setdefault(rec.name, set()).update(rec.keys)
    return keys


def _last_occurrence(order: tuple[SectionOrder, ...]) -> dict[str, int]:
    return {rec.name: idx for idx, rec in enumerate(order)}


class _Writer:
    def __init__(
        self, document: Mapping[str, Any], metadata: Metadata, config: IniConfig
    ) -> None:
        self.document = document
        self.metadata = metadata
        self.config = config
        self.lines: list[str] = []

    def _section(self, name: str) -> Mapping[str, Any] | None:
        section = self.document[name]
        if isinstance(section, Mapping):
            return section
        if self.config.nosection_compat:
            logger.warning("Skipping %r: not a section (%s)", name, type(section).__name__)
            return None
        raise IniFormatError(
            f"Invalid section {name!r}: expected a mapping of keys to values, "
            f"got {type(section).__name__}; if the file has no sections, enable "
            "nosection_compat"
        )

    def _is_empty_nosection(self, name: str, section: Mapping[str, Any]) -> bool:
        return (
            name == NO_SECTION
            and not section
            and not self.metadata.comments_for(name)
        )

    def write_section(
        self,
        name: str,
        ordered: tuple[str, ...] = (),
        *,
        with_comments: bool = True,
        extras: bool = True,
        known: set[str] | None = None,
    ) -> None:
        section = self._section(name)
        if section is None:
            return
        if self.config.nosection_compat and self._is_empty_nosection(name, section):
            return

        if name != NO_SECTION:
            self.lines.append(f"[{name}]")
        if with_comments:
            self.lines.extend(_comment_lines(self.metadata.comments_for(name)))

        for key in ordered:
            if key in section:
                self.lines.append(f"{key}={format_value(section[key])}")
        if extras:
            skip = set(ordered) if known is None else known
            for key, value in section.items():
                if key not in skip:
                    self.lines.append(f"{key}={format_value(value)}")

        self.lines.append("")

    def run(self) -> list[str]:
        pre = self.metadata.comments_for(PRE_SECTION)
        if pre:
            self.lines.extend(_comment_lines(pre))
            self.lines.append("")

        order = self.metadata.section_order
        known = _section_keys(order)
        # a headerless block must come before any header to keep its keys
        if NO_SECTION in self.document and NO_SECTION not in known:
            self.write_section(NO_SECTION)

        last = _last_occurrence(order)
        commented: set[str] = set()

        for idx, rec in enumerate(order):
            if rec.name not in self.document:
                continue
            self.write_section(
                rec.name,
                rec.keys,
                with_comments=rec.name not in commented,
                extras=last[rec.name] == idx,
                known=known[rec.name],
            )
            commented.add(rec.name)

        for name in self.document:
            if name not in known and name != NO_SECTION:
                self.write_section(name)
        return self.lines


def render_lines(
    document: Mapping[str, Any],
    metadata: Metadata | None = None,
    config: IniConfig | None = None,
) -> list[str]:
    """Return the INI lines for *document*, without line terminators."""
    writer = _Writer(document, metadata or Metadata(), config or DEFAULT_CONFIG)
    return writer.run()


def save(
    document: Mapping[str, Any],
    metadata: Metadata | None = None,
    config: IniConfig | None = None,
) -> str:
    """Serialise *document* to INI text.

    Without *metadata* sections and keys are written in mapping order and no
    comments are emitted.  Raises :class:`IniFormatError` when a section is
    not a mapping, unless ``config.nosection_compat`` is set.
    """
    lines = render_lines(document, metadata, config)
    logger.debug("Rendered %d line(s) for %d section(s)", len(lines), len(document))
    return "\n".join(lines)
