"""Drawing layers of a graph frame and the order they are painted in."""

from __future__ import annotations

from enum import IntEnum


class Layer(IntEnum):
    """A drawing layer; each has its own slot in the draw buffer."""

    BAR = 0
    X_AXIS = 1
    Y_AXIS = 2
    KEY = 3
    GRADIENT = 4
    DATA = 5
    SPINNER = 6


LAYER_COUNT = len(Layer)

# Back to front: the first layer is painted first and ends up underneath.
_PAINT_ORDER = (
    # interpolated data is the least important, so it sits at the back
    Layer.GRADIENT,
    Layer.BAR,
    # bars are overwritten by data and axes
    Layer.DATA,
    Layer.Y_AXIS,
    Layer.X_AXIS,
    # the key lies inside the frame, so it must stay readable over the data
    Layer.KEY,
    # always visible, so the program never looks stuck
    Layer.SPINNER,
)


def paint_order() -> tuple[Layer, ...]:
    """Return every layer from back to front."""
    return _PAINT_ORDER