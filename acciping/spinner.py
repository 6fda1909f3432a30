"""A small rotating indicator drawn in the top right corner."""

from __future__ import annotations

from datetime import timedelta

from acciping import ansi, typography
from acciping.terminal import Size

SPINNER_FRAMES = (
    typography.UPPER_LEFT_QUADRANT_CIRCULAR_ARC,
    typography.UPPER_RIGHT_QUADRANT_CIRCULAR_ARC,
    typography.LOWER_RIGHT_QUADRANT_CIRCULAR_ARC,
    typography.LOWER_LEFT_QUADRANT_CIRCULAR_ARC,
)

_UPDATE_MS = 200


def spinner(size: Size, index: int, time_between_frames: timedelta) -> str:
    """Return the spinner glyph for frame ``index``, advancing about every 200ms."""
    step_index = index
    frame_ms = time_between_frames // timedelta(milliseconds=1)
    if frame_ms != 0 and _UPDATE_MS // frame_ms != 0:
        step_index = index // (_UPDATE_MS // frame_ms)
    glyph = SPINNER_FRAMES[step_index % len(SPINNER_FRAMES)]
    return ansi.cursor_position(1, size.width - 3) + ansi.cyan(glyph)