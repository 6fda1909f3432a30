"""Error wrapping that keeps a readable chain of causes."""

from __future__ import annotations

from typing import Any


class WrappedError(Exception):
    """An error that adds context to an underlying cause."""

    def __init__(self, cause: BaseException, message: str) -> None:
        super().__init__(message)
        self.cause = cause
        self.message = message
        self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.message} caused by: {self.cause}"


def wrap(error: BaseException | None, message: str) -> WrappedError | None:
    """Wrap ``error`` with ``message``; ``None`` passes through unchanged."""
    if error is None:
        return None
    return WrappedError(error, message)


def wrapf(error: BaseException | None, template: str, *args: Any) -> WrappedError | None:
    """Like :func:`wrap`, with ``template % args`` as the message."""
    return wrap(error, template % args if args else template)