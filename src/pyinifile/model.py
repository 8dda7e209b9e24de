"""Document model shared by the parser and the serializer."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass, field
from typing import Any, Final, Union

Section = MutableMapping[str, Any]
Document = MutableMapping[str, Section]

# Reserved section holding key/value lines found before any header when the
# no-section compatibility mode is enabled.  Never written as a header.
NO_SECTION: Final = "_nosection_"


class _PreSection:
    """Owner of the comments found before the first section header."""

    _instance: _PreSection | None = None

    def __new__(cls) -> _PreSection:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "PRE_SECTION"

    def __reduce__(self):
        return (_PreSection, ())


PRE_SECTION: Final = _PreSection()

CommentOwner = Union[str, _PreSection]


@dataclass(frozen=True)
class SectionOrder:
    """One physical occurrence of a section header and the keys under it."""

    name: str
    keys: tuple[str, ...] = ()


@dataclass(frozen=True)
class Metadata:
    """Layout information recorded by :func:`pyinifile.parser.parse`.

    ``section_order`` holds one record per header occurrence, in source
    order; a section opened twice appears twice.  ``comments`` maps a section
    name, or :data:`PRE_SECTION`, to the comment texts found under it.  The
    metadata describes the source as parsed and is not updated when the
    document is changed afterwards.
    """

    section_order: tuple[SectionOrder, ...] = ()
    comments: Mapping[CommentOwner, tuple[str, ...]] = field(default_factory=dict)

    def comments_for(self, owner: CommentOwner) -> tuple[str, ...]:
        return self.comments.get(owner, ())

    def recorded_sections(self) -> set[str]:
        return {rec.name for rec in self.section_order}


@dataclass
class ParseResult:
    """A parsed document together with its metadata and line warnings."""

    document: dict[str, dict[str, Any]]
    metadata: Metadata
    warnings: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.warnings
