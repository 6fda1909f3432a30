"""Helpers for working with raw byte buffers."""

from __future__ import annotations


def clear(buffer: bytearray, count: int) -> None:
    """Zero the first ``count`` bytes of ``buffer`` in place."""
    if count > len(buffer):
        raise IndexError(f"cannot clear {count} bytes of a {len(buffer)} byte buffer")
    buffer[:count] = bytes(count)


def hex_print(buffer: bytes) -> str:
    """Render bytes as a bracketed, comma separated list of hex literals."""
    return "[" + ", ".join(f"0x{byte:x}" for byte in buffer) + "]"