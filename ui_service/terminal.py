"""Terminal rendering surface: rich console output and single-key input."""

from __future__ import annotations

import os
import sys
from typing import Any, Optional, TextIO

from rich.console import Console
from rich.prompt import Confirm

from shell.errors import TerminalUnavailableError

CTRL_C = "\x03"

ESCAPE_SEQUENCES = {
    "\x1b[A": "up",
    "\x1b[B": "down",
    "\x1b[C": "right",
    "\x1b[D": "left",
    "\x1b[5~": "pgup",
    "\x1b[6~": "pgdn",
}


class TerminalSurface:
    """
    The four primitives the shell renders through: clear, write, read one
    key, and a yes/no prompt.

    Raw mode is held only while a key is being read, so prompts and actions
    always run against a normal terminal.
    """

    def __init__(self, console: Optional[Console] = None, stdin: Optional[TextIO] = None) -> None:
        self.console = console or Console()
        self._stdin = stdin or sys.stdin

    def ensure_ready(self) -> None:
        """Raise TerminalUnavailableError unless stdin and stdout are terminals."""
        if not self._stdin.isatty():
            raise TerminalUnavailableError("standard input is not a terminal")
        if not self.console.is_terminal:
            raise TerminalUnavailableError("standard output is not a terminal")

    def clear(self) -> None:
        self.console.clear()

    def write(self, renderable: Any, height: Optional[int] = None) -> None:
        self.console.print(renderable, height=height)

    def screen_height(self) -> int:
        # One row short of the screen so the trailing newline does not scroll
        return max(1, self.console.size.height - 1)

    def read_key(self) -> str:
        """
        Block until one key is pressed.

        Returns:
            The character typed, or a key name such as "up" or "enter"

        Raises:
            KeyboardInterrupt: on Ctrl+C, which raw mode does not turn into
                a signal
        """
        if os.name == "nt":
            key = _read_key_windows()
        else:
            key = _read_key_posix(self._stdin.fileno())
        if key == CTRL_C:
            raise KeyboardInterrupt
        return key

    def confirm(self, prompt: str, default: bool = False) -> bool:
        return Confirm.ask(prompt, default=default, console=self.console)


def _read_key_windows() -> str:
    import msvcrt

    ch = msvcrt.getwch()
    if ch in ("\x00", "\xe0"):
        ch2 = msvcrt.getwch()
        mapping = {
            "H": "up",
            "P": "down",
            "K": "left",
            "M": "right",
            "I": "pgup",
            "Q": "pgdn",
        }
        return mapping.get(ch2, "")
    return decode_key(ch)


def _read_key_posix(fd: int) -> str:
    import termios
    import tty

    try:
        old_settings = termios.tcgetattr(fd)
    except termios.error as exc:
        raise TerminalUnavailableError(f"cannot read keys from this terminal: {exc}") from exc
    try:
        tty.setraw(fd)
        data = read_raw_key(fd)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)
    return decode_key(data.decode("utf-8", errors="replace"))


def _read_pending(fd: int, count: int, timeout: float = 0.05) -> bytes:
    """Read up to count bytes that are already on their way."""
    import select

    data = b""
    while len(data) < count:
        readable, _, _ = select.select([fd], [], [], timeout)
        if not readable:
            break
        data += os.read(fd, 1)
    return data


def read_raw_key(fd: int) -> bytes:
    """
    Read the bytes of exactly one key press.

    Keys typed ahead stay unread for the next call; only an escape sequence
    or the continuation bytes of a UTF-8 character are read past the first
    byte.
    """
    data = os.read(fd, 1)
    if not data:
        return data
    lead = data[0]
    if data == b"\x1b":
        data += _read_pending(fd, 2)
        if data in (b"\x1b[5", b"\x1b[6"):
            data += _read_pending(fd, 1)
    elif lead >= 0xF0:
        data += os.read(fd, 3)
    elif lead >= 0xE0:
        data += os.read(fd, 2)
    elif lead >= 0xC0:
        data += os.read(fd, 1)
    return data


def decode_key(raw: str) -> str:
    """Translate raw terminal input into a character or key name."""
    if raw.startswith("\x1b"):
        return ESCAPE_SEQUENCES.get(raw, "esc")
    ch = raw[:1]
    if ch in ("\r", "\n"):
        return "enter"
    if ch in ("\x7f", "\x08"):
        return "backspace"
    if ch == "\t":
        return "tab"
    return ch
