import threading

import pytest

from acciping import ansi
from acciping.terminal import (
    Listener,
    Size,
    Terminal,
    UserCancelled,
    parse_size,
)


class _PipeFile:
    """An in-memory byte pipe whose reads block until data is written."""

    def __init__(self) -> None:
        self._cond = threading.Condition()
        self._buffer = bytearray()
        self._pos = 0

    def write(self, data: bytes) -> int:
        with self._cond:
            self._buffer.extend(data)
            self._cond.notify_all()
        return len(data)

    def read(self, n: int = -1) -> bytes:
        with self._cond:
            self._cond.wait_for(lambda: self._pos < len(self._buffer))
            return self._take(n)

    def _take(self, n: int) -> bytes:
        end = len(self._buffer) if n < 0 else min(len(self._buffer), self._pos + n)
        chunk = bytes(self._buffer[self._pos : end])
        self._pos = end
        return chunk

    def read_string(self, timeout: float = 2.0) -> str:
        with self._cond:
            if not self._cond.wait_for(lambda: self._pos < len(self._buffer), timeout):
                raise AssertionError("no data written in time")
            return self._take(-1).decode("utf-8")


def _new_test_terminal():
    stdin = _PipeFile()
    stdout = _PipeFile()
    lock = threading.Lock()
    captured = {"size": Size(height=5, width=5)}

    def callback() -> Size:
        with lock:
            return captured["size"]

    term = Terminal.for_testing(stdin, stdout, callback)

    def set_size(new: Size) -> None:
        with lock:
            captured["size"] = new
        term.update_current_terminal_size()

    return stdin, stdout, term, set_size


def test_terminal_write():
    _, stdout, term, _ = _new_test_terminal()
    done = threading.Event()
    try:
        term.start_raw(done, lambda cause: done.set())
        term.print("Hello world")
        assert stdout.read_string() == ansi.HIDE_CURSOR + "Hello world"
    finally:
        done.set()


def test_terminal_reading_ctrl_c_cancels():
    stdin, stdout, term, _ = _new_test_terminal()
    done = threading.Event()
    causes = []

    def stop(cause):
        causes.append(cause)
        done.set()

    term.start_raw(done, stop)
    stdin.write(b"\x03")
    assert done.wait(2.0)
    assert len(causes) == 1
    assert isinstance(causes[0], UserCancelled)
    assert str(causes[0]) == "user cancelled"
    assert ansi.SHOW_CURSOR in stdout.read_string()


def test_terminal_listener():
    stdin, stdout, term, _ = _new_test_terminal()
    done = threading.Event()
    seen = []

    def applicable(r):
        seen.append(r)
        return True

    listener = Listener(applicable=applicable, action=lambda r: term.print(r))
    try:
        term.start_raw(done, lambda cause: done.set(), listener)
        assert stdout.read_string() == ansi.HIDE_CURSOR
        for char in "abc":
            stdin.write(char.encode())
            assert stdout.read_string() == char
        assert seen == ["a", "b", "c"]
    finally:
        done.set()


def test_cleanup_shows_cursor():
    _, stdout, term, _ = _new_test_terminal()
    done = threading.Event()
    try:
        cleanup = term.start_raw(done, lambda cause: done.set())
        assert stdout.read_string() == ansi.HIDE_CURSOR
        cleanup()
        assert stdout.read_string() == ansi.SHOW_CURSOR
    finally:
        done.set()


def test_dynamic_size_follows_callback():
    _, _, term, set_size = _new_test_terminal()
    assert term.size() == Size(height=5, width=5)
    set_size(Size(height=40, width=80))
    assert term.size() == Size(height=40, width=80)


def test_clear_screen_output():
    _, stdout, term, set_size = _new_test_terminal()
    set_size(Size(height=3, width=10))
    term.clear_screen(True)
    assert stdout.read_string() == "\n\n\n" + ansi.CLEAR + ansi.HOME


def test_write_returns_count():
    _, stdout, term, _ = _new_test_terminal()
    assert term.write(b"xyz") == 3
    assert stdout.read_string() == "xyz"


def test_parse_size_valid():
    assert parse_size("40x80") == Size(height=40, width=80)
    assert parse_size("16x284") == Size(height=16, width=284)


@pytest.mark.parametrize("text", ["40", "40x", "ax80", "1x2x3", "", "99999999999x1"])
def test_parse_size_invalid(text):
    with pytest.raises(ValueError):
        parse_size(text)


def test_size_str():
    assert str(Size(height=40, width=80)) == "W: 80 H: 40"


def test_fixed_size_never_changes():
    term = Terminal.fixed_size(Size(height=25, width=80))
    term.update_current_terminal_size()
    assert term.size() == Size(height=25, width=80)


def test_parsed_fixed_size():
    term = Terminal.parsed_fixed_size("30x300")
    assert term.size() == Size(height=30, width=300)


def test_parsed_fixed_size_invalid():
    with pytest.raises(ValueError, match="Cannot parse"):
        Terminal.parsed_fixed_size("big")