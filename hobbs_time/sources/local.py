"""Openers for log exports on the local filesystem."""

from os import PathLike
from typing import BinaryIO, Callable, ContextManager, Union

SourceOpener = Callable[[], ContextManager[BinaryIO]]


def path_opener(path: Union[str, PathLike]) -> SourceOpener:
    """Return a callable that opens ``path`` for binary reading on each call."""

    def open_path() -> BinaryIO:
        return open(path, "rb")

    return open_path


__all__ = ["SourceOpener", "path_opener"]
