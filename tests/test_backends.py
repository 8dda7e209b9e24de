from __future__ import annotations

from pathlib import Path

import pytest

from pyinifile import IniIOError, UnknownBackendError, load, dump
from pyinifile.backends import available_backends, get_backend, register_backend
from pyinifile.backends.base import BaseBackend
from pyinifile.backends.file_backend import FileBackend
from pyinifile.backends.memory_backend import MemoryBackend


def test_default_backends_registered():
    assert available_backends() == ["file", "memory"]
    assert isinstance(get_backend(), FileBackend)
    assert isinstance(get_backend("memory"), MemoryBackend)


def test_backend_instance_passes_through():
    backend = MemoryBackend()
    assert get_backend(backend) is backend


def test_unknown_backend():
    with pytest.raises(UnknownBackendError):
        get_backend("love")


def test_register_requires_name():
    class Nameless(BaseBackend):
        def lines(self, name):
            return iter(())

        def write(self, name, contents):
            return None

    with pytest.raises(ValueError):
        register_backend(Nameless)


def test_memory_lines_skip_blank_lines():
    lines = list(MemoryBackend().lines("[A]\r\nx=1\n\n\ny=2"))
    assert lines == ["[A]", "x=1", "y=2"]


def test_file_roundtrip_is_byte_identical(tmp_path: Path):
    path = tmp_path / "cfg.ini"
    text = ";top\n\n[S]\n;c\nA=1\nB=text\n\n[T]\nC=true\n"
    path.write_text(text, encoding="utf-8")
    result = load(path)
    # blank separator lines are reported but do not affect the document
    assert result.warnings == [
        "Line 2: Invalid data found ''",
        "Line 7: Invalid data found ''",
    ]
    dump(path, result)
    assert path.read_text(encoding="utf-8") == text
    assert not (tmp_path / "cfg.ini.tmp").exists()


def test_file_write_creates_parent_dirs(tmp_path: Path):
    path = tmp_path / "a" / "b" / "cfg.ini"
    dump(path, {"S": {"k": 1}})
    assert path.read_text(encoding="utf-8") == "[S]\nk=1\n"


def test_missing_file_is_fatal(tmp_path: Path):
    with pytest.raises(IniIOError, match="reading"):
        load(tmp_path / "missing.ini")


def test_unwritable_target_is_fatal(tmp_path: Path):
    target = tmp_path / "dir.ini"
    target.mkdir()
    with pytest.raises(IniIOError, match="writing"):
        FileBackend().write(target, "[S]\n")


def test_file_lines_only_split_on_newlines(tmp_path: Path):
    path = tmp_path / "cfg.ini"
    text = "[S]\nA=page\x0cbreak\nB=x\u2028y\n"
    path.write_text(text, encoding="utf-8")
    result = load(path)
    assert result.warnings == []
    assert result.document == {"S": {"A": "page\x0cbreak", "B": "x\u2028y"}}
    dump(path, result)
    assert path.read_text(encoding="utf-8") == text


def test_file_lines_fold_crlf_and_keep_inner_blank_lines(tmp_path: Path):
    path = tmp_path / "cfg.ini"
    path.write_bytes(b"[S]\r\nA=1\r\n\r\n")
    assert list(FileBackend().lines(path)) == ["[S]", "A=1", ""]
    empty = tmp_path / "empty.ini"
    empty.write_text("", encoding="utf-8")
    assert list(FileBackend().lines(empty)) == []
