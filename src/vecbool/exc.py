from __future__ import annotations

from collections.abc import Callable
from typing import Self

from typing_extensions import override

__all__ = (
    "VecBoolError",
    "InvalidChunkWidthError",
    "VecBoolIndexError",
)


class VecBoolError(Exception):
    """
    Base class exception for all vecbool-related exceptions.
    """

    __slots__ = ()


class InvalidChunkWidthError(VecBoolError, ValueError):
    """
    Thrown when a vector is created with a chunk width that has no unsigned array backing.
    """

    __slots__ = ("width",)

    def __init__(self, width: object):
        #: The width that was requested.
        self.width = width

        super().__init__(width)

    @override
    def __str__(self) -> str:
        return f"Unsupported chunk width: {self.width!r} (expected one of 8, 16, 32, 64)"

    __repr__: Callable[[Self], str] = __str__


class VecBoolIndexError(VecBoolError, IndexError):
    """
    Thrown when the sequence protocol is used with an index outside of the logical length.
    """

    __slots__ = ("index", "length")

    def __init__(self, index: int, length: int):
        #: The index that was requested.
        self.index: int = index
        #: The logical length of the vector at the time of the access.
        self.length: int = length

        super().__init__(f"index {index} out of range (length: {length})")
