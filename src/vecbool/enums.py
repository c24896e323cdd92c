from enum import IntEnum

__all__ = (
    "ChunkWidth",
    "DEFAULT_CHUNK_WIDTH",
)


class ChunkWidth(IntEnum):
    """
    Enumeration of supported chunk widths, in bits. Each chunk is backed by exactly one item of
    an unsigned :class:`array.array`.
    """

    #: One octet per chunk. This is the densest layout and the default.
    BYTE = 8

    #: Two octets per chunk.
    SHORT = 16

    #: Four octets per chunk.
    LONG = 32

    #: Eight octets per chunk.
    LONGLONG = 64


#: The chunk width used when none is provided.
DEFAULT_CHUNK_WIDTH = ChunkWidth.BYTE
