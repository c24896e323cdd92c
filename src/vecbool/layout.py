from __future__ import annotations

from array import array

import attr

from vecbool.enums import ChunkWidth
from vecbool.exc import InvalidChunkWidthError

__all__ = ("ChunkLayout",)

# unsigned typecodes, smallest first. item sizes are platform-dependent so the first exact
# match wins (``L`` is 8 octets on most 64-bit unixes but 4 on windows).
_UNSIGNED_TYPECODES = "BHILQ"


def _typecode_for(width: ChunkWidth) -> str:
    for code in _UNSIGNED_TYPECODES:
        if array(code).itemsize * 8 == width:
            return code

    raise InvalidChunkWidthError(width)  # pragma: no cover


@attr.s(frozen=True, slots=True)
class ChunkLayout:
    """
    Describes how logical bit indexes map onto fixed-width storage chunks.

    This is the only place that knows about chunk indexes and bit masks; every accessor on a
    vector goes through :meth:`locate`, :meth:`read` and :meth:`write`.
    """

    #: The number of bits held by each chunk.
    width: ChunkWidth = attr.ib()

    #: The :mod:`array` typecode whose items are exactly one chunk wide.
    typecode: str = attr.ib()

    #: ``1 << offset`` for every bit offset inside a chunk, in index order.
    masks: tuple[int, ...] = attr.ib(init=False)

    @masks.default
    def _make_masks(self) -> tuple[int, ...]:
        return tuple(1 << offset for offset in range(self.width))

    @classmethod
    def of(cls, width: int) -> ChunkLayout:
        """
        Creates the layout for the provided chunk width.

        :param width: The chunk width in bits. Must be one of the :class:`.ChunkWidth` values.
        :raises InvalidChunkWidthError: If there is no unsigned array type of that width.
        """

        try:
            chunk_width = ChunkWidth(width)
        except ValueError:
            raise InvalidChunkWidthError(width) from None

        return ChunkLayout(width=chunk_width, typecode=_typecode_for(chunk_width))

    def chunks_for(self, bits: int) -> int:
        """
        Returns the number of chunks allocated to hold ``bits`` bits. This always includes one
        slack chunk, even on an exact chunk boundary.
        """

        return bits // self.width + 1

    def new_storage(self, chunks: int) -> array[int]:
        """
        Creates a zero-filled backing array of ``chunks`` chunks.
        """

        return array(self.typecode, bytes(chunks * (self.width // 8)))

    def locate(self, index: int) -> tuple[int, int]:
        """
        Translates a logical bit index into a ``(chunk_index, mask)`` pair.
        """

        chunk_index, bit_offset = divmod(index, self.width)
        return chunk_index, self.masks[bit_offset]

    @staticmethod
    def read(chunk: int, mask: int) -> bool:
        return (chunk & mask) != 0

    @staticmethod
    def write(chunk: int, mask: int, value: bool) -> int:
        if value:
            return chunk | mask

        return chunk & ~mask
