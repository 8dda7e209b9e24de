from __future__ import annotations

import re
from collections.abc import Iterator

from . import register_backend
from .base import BaseBackend

_LINE_RE = re.compile(r"([^\r\n]+)(?:\r?\n|$)")


@register_backend
class MemoryBackend(BaseBackend):
    """In-memory backend: the *name* passed to :meth:`lines` is the text.

    Only non-empty lines are produced, so blank separator
    lines never reach the parser.  :meth:`write` hands the text back.
    """

    name = "memory"

    def lines(self, name: str) -> Iterator[str]:
        return (m.group(1) for m in _LINE_RE.finditer(name))

    def write(self, name: object, contents: str) -> str:
        return contents
