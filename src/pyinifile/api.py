"""High level helpers tying the codec to line sources and text sinks."""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping
from typing import Any

from .backends import DEFAULT_BACKEND, BaseBackend, get_backend
from .config import IniConfig
from .model import NO_SECTION, Metadata, ParseResult
from .parser import parse
from .paths import DEFAULT_APP_NAME, config_file
from .serializer import save
from .values import format_value

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Backend round trips
# ---------------------------------------------------------------------------

def _unpack(
    document: Mapping[str, Any] | ParseResult, metadata: Metadata | None
) -> tuple[Mapping[str, Any], Metadata | None]:
    if isinstance(document, ParseResult):
        return document.document, metadata or document.metadata
    return document, metadata


def load(
    name: Any,
    backend: str | BaseBackend = DEFAULT_BACKEND,
    *,
    config: IniConfig | None = None,
) -> ParseResult:
    """Parse the lines *backend* provides for *name*.

    Failing to read the source raises :class:`~pyinifile.errors.IniIOError`;
    malformed lines only produce warnings on the result.
    """
    return parse(get_backend(backend).lines(name), config)


def loads(text: str, *, config: IniConfig | None = None) -> ParseResult:
    return load(text, "memory", config=config)


def dump(
    name: Any,
    document: Mapping[str, Any] | ParseResult,
    metadata: Metadata | None = None,
    backend: str | BaseBackend = DEFAULT_BACKEND,
    *,
    config: IniConfig | None = None,
) -> str | None:
    """Serialise *document* and hand the text to *backend* under *name*.

    A :class:`ParseResult` may be passed instead of a document, in which case
    its metadata is used unless *metadata* is given.  Returns whatever the
    backend's ``write`` returns (the text for the memory backend).
    """
    document, metadata = _unpack(document, metadata)
    text = save(document, metadata, config)
    return get_backend(backend).write(name, text)


def dumps(
    document: Mapping[str, Any] | ParseResult,
    metadata: Metadata | None = None,
    *,
    config: IniConfig | None = None,
) -> str:
    document, metadata = _unpack(document, metadata)
    return save(document, metadata, config)


# ---------------------------------------------------------------------------
# Key helpers
# ---------------------------------------------------------------------------

def get_key(document: Mapping[str, Mapping[str, Any]], key: str, section: str | None = None) -> Any:
    """Return ``document[section][key]``; ``section=None`` is the no-section block."""
    return document[NO_SECTION if section is None else section][key]


def set_key(
    document: MutableMapping[str, MutableMapping[str, Any]],
    key: str,
    value: Any,
    section: str | None = None,
) -> None:
    name = NO_SECTION if section is None else section
    document.setdefault(name, {})[key] = value


# ---------------------------------------------------------------------------
# Per-user option files
# ---------------------------------------------------------------------------

def get_option(
    identifier: str,
    name: str,
    section: str | None = None,
    *,
    app_name: str = DEFAULT_APP_NAME,
    config: IniConfig | None = None,
) -> Any:
    path = config_file(identifier, app_name)
    result = load(path, config=config or IniConfig(nosection_compat=True))
    return get_key(result.document, name, section)


def set_option(
    identifier: str,
    name: str,
    value: Any,
    section: str | None = None,
    *,
    app_name: str = DEFAULT_APP_NAME,
    config: IniConfig | None = None,
) -> None:
    """Set *name* in the option file for *identifier*, keeping its layout.

    Option files default to the no-section compatibility mode, where keys
    without a section live at the top of the file.  A missing file is
    created holding just the new entry.
    """
    cfg = config or IniConfig(nosection_compat=True)
    path = config_file(identifier, app_name)
    if not path.exists():
        lines = [] if section is None else [f"[{section}]"]
        lines.append(f"{name}={format_value(value)}")
        logger.info("Creating option file %s", path)
        get_backend(DEFAULT_BACKEND).write(path, "\n".join(lines) + "\n")
        return
    result = load(path, config=cfg)
    set_key(result.document, name, value, section)
    dump(path, result, config=cfg)
