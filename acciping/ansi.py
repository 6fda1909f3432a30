"""ANSI escape sequences for cursor control and colour."""

from __future__ import annotations

from enum import IntEnum

CSI = "\033["
RESET = CSI + "0m"
HIDE_CURSOR = CSI + "?25l"
SHOW_CURSOR = CSI + "?25h"


class EraseInDisplay(IntEnum):
    """Modes for the erase-in-display sequence."""

    CURSOR_TO_SCREEN_END = 0
    CURSOR_TO_SCREEN_BEGIN = 1
    CURSOR_SCREEN = 2
    CURSOR_SCREEN_AND_SCROLL_BACK = 3


class EraseInLine(IntEnum):
    """Modes for the erase-in-line sequence."""

    CURSOR_TO_END_OF_LINE = 0
    CURSOR_TO_BEGIN_OF_LINE = 1
    ENTIRE_LINE = 2


def cursor_up(n: int) -> str:
    return f"{CSI}{n}A"


def cursor_down(n: int) -> str:
    return f"{CSI}{n}B"


def cursor_forward(n: int) -> str:
    """Move right by ``n``; empty for ``n`` <= 0."""
    return f"{CSI}{n}C" if n > 0 else ""


def cursor_back(n: int) -> str:
    """Move left by ``n``; empty for ``n`` <= 0."""
    return f"{CSI}{n}D" if n > 0 else ""


def cursor_next_line(n: int) -> str:
    return f"{CSI}{n}E"


def cursor_previous_line(n: int) -> str:
    return f"{CSI}{n}F"


def cursor_horizontal_absolute(n: int) -> str:
    return f"{CSI}{n}G"


def cursor_position(row: int, column: int) -> str:
    """Move to a 1-based position, omitting parameters that equal the default 1."""
    if row == 1 and column == 1:
        return CSI + "H"
    if row == 1:
        return f"{CSI};{column}H"
    if column == 1:
        return f"{CSI}{row}H"
    return f"{CSI}{row};{column}H"


def erase_in_display(mode: EraseInDisplay) -> str:
    return f"{CSI}{int(mode)}J"


def erase_in_line(mode: EraseInLine) -> str:
    return f"{CSI}{int(mode)}K"


CLEAR = erase_in_display(EraseInDisplay.CURSOR_SCREEN)
HOME = cursor_position(1, 1)


def _colour(code: int, text: str) -> str:
    return f"{CSI}{code}m{text}{RESET}"


def black(text: str) -> str:
    return _colour(30, text)


def gray(text: str) -> str:
    return _colour(90, text)


def light_gray(text: str) -> str:
    return _colour(37, text)


def white(text: str) -> str:
    return _colour(97, text)


def dark_red(text: str) -> str:
    return _colour(31, text)


def dark_green(text: str) -> str:
    return _colour(32, text)


def dark_yellow(text: str) -> str:
    return _colour(33, text)


def dark_blue(text: str) -> str:
    return _colour(34, text)


def dark_magenta(text: str) -> str:
    return _colour(35, text)


def dark_cyan(text: str) -> str:
    return _colour(36, text)


def red(text: str) -> str:
    return _colour(91, text)


def green(text: str) -> str:
    return _colour(92, text)


def yellow(text: str) -> str:
    return _colour(93, text)


def blue(text: str) -> str:
    return _colour(94, text)


def magenta(text: str) -> str:
    return _colour(95, text)


def cyan(text: str) -> str:
    return _colour(96, text)