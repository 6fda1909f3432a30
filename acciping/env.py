"""Feature switches read from the environment."""

from __future__ import annotations

import os


def _flag(name: str) -> bool:
    return os.environ.get(name) == "1"


def should_test_network() -> bool:
    """True when SHOULD_TEST_NETWORK is set to ``1``."""
    return _flag("SHOULD_TEST_NETWORK")


def local_frame_diffs() -> bool:
    """True when LOCAL_FRAME_DIFFS is set to ``1``."""
    return _flag("LOCAL_FRAME_DIFFS")