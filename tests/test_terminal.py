"""Unit tests for the terminal rendering surface."""

from __future__ import annotations

import io
import os
from unittest.mock import Mock, patch

import pytest
from rich.console import Console

from shell.errors import TerminalUnavailableError
from ui_service import terminal
from ui_service.terminal import TerminalSurface, decode_key, read_raw_key


def _surface(is_tty: bool = True, force_terminal: bool = True) -> TerminalSurface:
    console = Console(file=io.StringIO(), force_terminal=force_terminal, width=80, height=24)
    stdin = Mock()
    stdin.isatty.return_value = is_tty
    stdin.fileno.return_value = 0
    return TerminalSurface(console=console, stdin=stdin)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("f", "f"),
        ("7", "7"),
        ("\r", "enter"),
        ("\n", "enter"),
        ("\x7f", "backspace"),
        ("\t", "tab"),
        ("\x1b", "esc"),
        ("\x1b[A", "up"),
        ("\x1b[B", "down"),
        ("\x1b[5~", "pgup"),
        ("\x1b[Z", "esc"),
        ("\x03", "\x03"),
        ("ab", "a"),
    ],
)
def test_decode_key(raw, expected) -> None:
    assert decode_key(raw) == expected


def test_read_key_returns_decoded_key() -> None:
    surface = _surface()
    with patch.object(terminal.os, "name", "posix"), \
            patch.object(terminal, "_read_key_posix", return_value="q") as reader:
        assert surface.read_key() == "q"
    reader.assert_called_once_with(0)


def test_read_key_ctrl_c_raises_keyboard_interrupt() -> None:
    surface = _surface()
    with patch.object(terminal.os, "name", "posix"), \
            patch.object(terminal, "_read_key_posix", return_value="\x03"):
        with pytest.raises(KeyboardInterrupt):
            surface.read_key()


def test_ensure_ready_rejects_piped_stdin() -> None:
    with pytest.raises(TerminalUnavailableError):
        _surface(is_tty=False).ensure_ready()


def test_ensure_ready_rejects_redirected_stdout() -> None:
    with pytest.raises(TerminalUnavailableError):
        _surface(force_terminal=False).ensure_ready()


def test_ensure_ready_accepts_terminal() -> None:
    _surface().ensure_ready()


def test_confirm_delegates_to_rich_prompt() -> None:
    surface = _surface()
    with patch.object(terminal.Confirm, "ask", return_value=True) as ask:
        assert surface.confirm("Quit?", default=False) is True
    ask.assert_called_once_with("Quit?", default=False, console=surface.console)


def test_write_prints_to_console() -> None:
    surface = _surface(force_terminal=False)
    surface.write("hello")
    assert "hello" in surface.console.file.getvalue()


def test_screen_height_leaves_last_row_free() -> None:
    assert _surface().screen_height() == 23


@pytest.fixture
def key_pipe():
    read_fd, write_fd = os.pipe()
    yield read_fd, write_fd
    os.close(read_fd)
    os.close(write_fd)


posix_only = pytest.mark.skipif(os.name == "nt", reason="select() on pipes needs POSIX")


@posix_only
def test_read_raw_key_keeps_typed_ahead_keys(key_pipe) -> None:
    read_fd, write_fd = key_pipe
    os.write(write_fd, b"ab")

    assert read_raw_key(read_fd) == b"a"
    assert read_raw_key(read_fd) == b"b"


@posix_only
def test_read_raw_key_reads_escape_sequence(key_pipe) -> None:
    read_fd, write_fd = key_pipe
    os.write(write_fd, b"\x1b[Aq")

    assert read_raw_key(read_fd) == b"\x1b[A"
    assert read_raw_key(read_fd) == b"q"


@posix_only
def test_read_raw_key_reads_page_key(key_pipe) -> None:
    read_fd, write_fd = key_pipe
    os.write(write_fd, b"\x1b[6~")

    assert decode_key(read_raw_key(read_fd).decode("utf-8")) == "pgdn"


@posix_only
def test_read_raw_key_lone_escape(key_pipe) -> None:
    read_fd, write_fd = key_pipe
    os.write(write_fd, b"\x1b")

    assert read_raw_key(read_fd) == b"\x1b"


@posix_only
def test_read_raw_key_reads_whole_utf8_character(key_pipe) -> None:
    read_fd, write_fd = key_pipe
    os.write(write_fd, "ßf".encode("utf-8"))

    assert read_raw_key(read_fd).decode("utf-8") == "ß"
    assert read_raw_key(read_fd) == b"f"
