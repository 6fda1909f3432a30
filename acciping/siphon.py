"""Duplicating a queue of values into two consumer queues."""

from __future__ import annotations

import queue
import threading
from typing import TypeVar

T = TypeVar("T")

_POLL_INTERVAL = 0.05


def _deliver(target: queue.Queue, value: object) -> None:
    try:
        target.put_nowait(value)
    except queue.Full:
        threading.Thread(target=target.put, args=(value,), daemon=True).start()


def tee(
    source: queue.Queue, stop: threading.Event, size: int
) -> tuple[queue.Queue, queue.Queue]:
    """Forward every value from ``source`` to two new queues until ``stop`` is set.

    Delivery to the two queues is unsynchronised: a slow consumer on one side
    does not hold up the other.
    """
    left: queue.Queue = queue.Queue(maxsize=size)
    right: queue.Queue = queue.Queue(maxsize=size)

    def pump() -> None:
        while not stop.is_set():
            try:
                value = source.get(timeout=_POLL_INTERVAL)
            except queue.Empty:
                continue
            _deliver(left, value)
            _deliver(right, value)

    threading.Thread(target=pump, name="tee", daemon=True).start()
    return left, right