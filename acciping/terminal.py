"""A terminal that can be drawn to and that dispatches key presses to listeners."""

from __future__ import annotations

import os
import re
import sys
import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, BinaryIO

from acciping import ansi
from acciping.errors import wrap, wrapf

_SIZE_PART = re.compile(r"[+-]?[0-9]+")
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_READ_CHUNK = 10


@dataclass(frozen=True)
class Size:
    """Terminal dimensions in character cells."""

    height: int
    width: int

    def __str__(self) -> str:
        return f"W: {self.width} H: {self.height}"


def _parse_int32(text: str) -> int:
    if not _SIZE_PART.fullmatch(text):
        raise ValueError(f"not an integer: {text!r}")
    value = int(text)
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise ValueError(f"out of range: {text!r}")
    return value


def parse_size(text: str) -> Size:
    """Parse ``<H>x<W>`` into a :class:`Size`; raise ValueError if malformed."""
    parts = text.split("x")
    if len(parts) != 2:
        raise ValueError(f"expected <H>x<W>, got {text!r}")
    height_text, width_text = parts
    return Size(height=_parse_int32(height_text), width=_parse_int32(width_text))


@dataclass
class Listener:
    """A callback fired for input characters that ``applicable`` accepts."""

    applicable: Callable[[str], bool]
    action: Callable[[str], None]
    name: str = ""


class UserCancelled(Exception):
    """The cause given to ``stop`` when the user presses ctrl+c."""

    def __init__(self) -> None:
        super().__init__("user cancelled")


def _std_stream(stream: Any) -> Any:
    buffer = getattr(stream, "buffer", stream)
    return getattr(buffer, "raw", buffer)


class Terminal:
    """Owns stdin and stdout, tracks the terminal size and forwards input to listeners."""

    def __init__(
        self,
        stdin: BinaryIO,
        stdout: BinaryIO,
        size: Size,
        dynamic_size: bool,
        size_callback: Callable[[], Size] | None,
    ) -> None:
        self._stdin = stdin
        self._stdout = stdout
        self._size = size
        self._dynamic_size = dynamic_size
        self._size_callback = size_callback
        self._is_test_terminal = size_callback is not None
        self._listeners: list[Listener] = []
        self._write_lock = threading.Lock()

    @classmethod
    def create(cls) -> Terminal:
        """A terminal on the process's real stdin/stdout whose size follows the window."""
        if not sys.stdout.isatty():
            raise OSError("Not an expected terminal environment cannot get terminal size")
        stdout = _std_stream(sys.stdout)
        terminal = cls(_std_stream(sys.stdin), stdout, Size(0, 0), True, None)
        terminal._size = _current_terminal_size(stdout)
        return terminal

    @classmethod
    def fixed_size(cls, size: Size) -> Terminal:
        """A terminal on the real stdin/stdout that never changes size."""
        return cls(_std_stream(sys.stdin), _std_stream(sys.stdout), size, False, None)

    @classmethod
    def parsed_fixed_size(cls, text: str) -> Terminal:
        """A fixed size terminal with its size parsed from ``<H>x<W>``."""
        try:
            size = parse_size(text)
        except ValueError:
            raise ValueError(
                f"Cannot parse {text!r} as terminal a size, should be in the form "
                '"<H>x<W>", where H and W are integers.'
            ) from None
        return cls.fixed_size(size)

    @classmethod
    def for_testing(
        cls, stdin: BinaryIO, stdout: BinaryIO, size_callback: Callable[[], Size]
    ) -> Terminal:
        """A terminal over stub streams whose size comes from ``size_callback``."""
        return cls(stdin, stdout, size_callback(), True, size_callback)

    def size(self) -> Size:
        return self._size

    def start_raw(
        self,
        done: threading.Event,
        stop: Callable[[BaseException], None],
        *args: Listener,
    ) -> Callable[[], None]:
        """Put the terminal in raw mode and start dispatching input to listeners.

        A ctrl+c listener is always added; it restores the terminal and calls
        ``stop`` with :class:`UserCancelled`. Listening ends once ``done`` is set.
        Returns a function that restores the terminal to normal mode.
        """
        closer: Callable[[], None] = lambda: None
        if not self._is_test_terminal:
            closer = self._make_raw()

        def ctrl_c_action(_: str) -> None:
            self.print(ansi.SHOW_CURSOR)
            closer()
            stop(UserCancelled())

        def cleanup() -> None:
            self.print(ansi.SHOW_CURSOR)
            closer()

        control_c = Listener(
            name="ctrl+c", applicable=lambda r: r == "\x03", action=ctrl_c_action
        )
        self._listeners = [*self._listeners, control_c, *args]
        self.print(ansi.HIDE_CURSOR)
        threading.Thread(
            target=self._listen, args=(done, cleanup), name="terminal-input", daemon=True
        ).start()
        return cleanup

    def _make_raw(self) -> Callable[[], None]:
        try:
            import termios
            import tty

            fd = self._stdin.fileno()
            old_state = termios.tcgetattr(fd)
            tty.setraw(fd)
        except (ImportError, OSError, ValueError) as exc:
            raise wrap(exc, "failed to set terminal to raw mode") from exc

        def restore() -> None:
            try:
                termios.tcsetattr(fd, termios.TCSADRAIN, old_state)
            except (OSError, termios.error):
                pass

        return restore

    def _listen(self, done: threading.Event, cleanup: Callable[[], None]) -> None:
        try:
            while not done.is_set():
                try:
                    data = self._stdin.read(_READ_CHUNK)
                except OSError as exc:
                    raise wrap(exc, "unexpected read failure in terminal") from exc
                if done.is_set():
                    return
                try:
                    self.update_current_terminal_size()
                except OSError as exc:
                    raise wrap(exc, "unexpected read failure in terminal") from exc
                if not data:
                    return
                char = chr(data[0])
                for listener in self._listeners:
                    if not listener.applicable(char):
                        continue
                    try:
                        listener.action(char)
                    except Exception as exc:
                        raise wrapf(
                            exc, "unexpected failure Action %r in terminal", listener.name
                        ) from exc
        except BaseException:
            cleanup()
            raise

    def clear_screen(self, update_size: bool) -> None:
        """Scroll the old contents away, clear the screen and home the cursor."""
        if update_size:
            try:
                self.update_current_terminal_size()
            except OSError as exc:
                raise wrap(exc, "while ClearScreen") from exc
        self.print("\n" * self._size.height)
        self.print(ansi.CLEAR + ansi.HOME)

    def print(self, text: str) -> None:
        self.write(text.encode("utf-8"))

    def write(self, data: bytes) -> int:
        with self._write_lock:
            written = self._stdout.write(data)
            flush = getattr(self._stdout, "flush", None)
            if flush is not None:
                flush()
        return len(data) if written is None else written

    def update_current_terminal_size(self) -> None:
        """Refresh the stored size; a fixed size terminal keeps its size."""
        if not self._dynamic_size:
            return
        if self._size_callback is not None:
            self._size = self._size_callback()
        else:
            self._size = _current_terminal_size(self._stdout)


def _current_terminal_size(stream: Any) -> Size:
    try:
        columns, lines = os.get_terminal_size(stream.fileno())
    except (OSError, ValueError, AttributeError) as exc:
        raise wrap(OSError(str(exc)), "failed to get terminal size") from exc
    return Size(height=lines, width=columns)