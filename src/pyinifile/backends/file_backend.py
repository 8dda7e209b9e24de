from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from ..errors import IniIOError
from . import register_backend
from .base import BaseBackend

logger = logging.getLogger(__name__)


@register_backend
class FileBackend(BaseBackend):
    """Filesystem backend reading and writing UTF-8 text files."""

    name = "file"

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def lines(self, name: str | Path) -> Iterator[str]:
        path = Path(name)
        try:
            text = path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as exc:
            raise IniIOError(f"Can't open file '{path}' for reading: {exc}") from exc
        logger.debug("Read %d character(s) from %s", len(text), path)
        # read_text already folds \r\n; other separators belong to the value
        lines = text.split("\n") if text else []
        if lines and lines[-1] == "":
            lines.pop()
        return iter(lines)

    def write(self, name: str | Path, contents: str) -> None:
        path = Path(name)
        tmp = path.with_suffix(path.suffix + ".tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with tmp.open("w", encoding=self.encoding, newline="") as fh:
                fh.write(contents)
            tmp.replace(path)
        except OSError as exc:
            raise IniIOError(f"Can't open file '{path}' for writing: {exc}") from exc
        logger.debug("Wrote %d character(s) to %s", len(contents), path)
