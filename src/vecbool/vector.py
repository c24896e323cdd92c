from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import islice

from typing_extensions import override

from vecbool.enums import DEFAULT_CHUNK_WIDTH, ChunkWidth
from vecbool.exc import VecBoolIndexError
from vecbool.layout import ChunkLayout
from vecbool.utils import LoggerWithTrace

__all__ = ("PackedBoolVector",)

logger: LoggerWithTrace = LoggerWithTrace.get(__name__)

# how many bits are rendered by ``repr`` before truncating
_REPR_BITS = 64


class PackedBoolVector:
    """
    A growable, compact sequence of booleans that stores one bit per element.

    Bits are packed into fixed-width chunks held in an :class:`array.array`. The vector tracks a
    logical length separately from its chunk count; bits past the logical length are never
    exposed.

    This object is not thread-safe. Concurrent mutation needs external locking, and an iterator
    must not be advanced after the vector it came from has been pushed to or popped from.
    """

    __slots__ = ("_layout", "_storage", "_chunk_count", "_reserved_chunks", "_length")

    def __init__(self, *, chunk_width: int = DEFAULT_CHUNK_WIDTH) -> None:
        """
        Creates a new, empty vector. No chunks are allocated until the first push.

        :param chunk_width: The width of a single storage chunk, in bits.
        """

        self._layout = ChunkLayout.of(chunk_width)
        self._storage = self._layout.new_storage(0)

        # addressable chunks. the physical array may be longer when storage was reserved.
        self._chunk_count = 0
        self._reserved_chunks = 0
        self._length = 0

    @classmethod
    def with_capacity(
        cls, capacity_hint: int, *, chunk_width: int = DEFAULT_CHUNK_WIDTH
    ) -> PackedBoolVector:
        """
        Creates a new, empty vector with storage pre-allocated for at least ``capacity_hint``
        bits.

        The pre-allocation is only an optimisation; the new vector behaves exactly like an
        empty one. The allocated amount is available through :attr:`reserved`.

        :param capacity_hint: The number of bits expected to be pushed.
        :param chunk_width: The width of a single storage chunk, in bits.
        """

        if capacity_hint < 0:
            raise ValueError(f"capacity hint must be non-negative, not {capacity_hint}")

        vec = cls(chunk_width=chunk_width)
        reserved = vec._layout.chunks_for(capacity_hint)
        vec._storage = vec._layout.new_storage(reserved)
        vec._reserved_chunks = reserved

        logger.debug(f"Reserved {reserved} chunks ({vec.reserved} bits) for {capacity_hint} bits")
        return vec

    @classmethod
    def zeroed(cls, length: int, *, chunk_width: int = DEFAULT_CHUNK_WIDTH) -> PackedBoolVector:
        """
        Creates a new vector of ``length`` bits, all of them cleared.

        :param length: The logical length of the new vector.
        :param chunk_width: The width of a single storage chunk, in bits.
        """

        if length < 0:
            raise ValueError(f"length must be non-negative, not {length}")

        vec = cls(chunk_width=chunk_width)
        chunks = vec._layout.chunks_for(length)
        vec._storage = vec._layout.new_storage(chunks)
        vec._chunk_count = chunks
        vec._length = length

        logger.debug(f"Allocated {chunks} zeroed chunks for {length} bits")
        return vec

    @classmethod
    def from_iterable(
        cls, values: Iterable[bool], *, chunk_width: int = DEFAULT_CHUNK_WIDTH
    ) -> PackedBoolVector:
        """
        Creates a new vector by pushing every value of ``values`` in order.
        """

        vec = cls(chunk_width=chunk_width)
        vec.extend(values)
        return vec

    @property
    def chunk_width(self) -> ChunkWidth:
        """
        Returns the width of a single storage chunk, in bits.
        """

        return self._layout.width

    @property
    def chunk_count(self) -> int:
        """
        Returns the number of addressable storage chunks.
        """

        return self._chunk_count

    @property
    def capacity(self) -> int:
        """
        Returns the number of addressable bit slots. This is always at least the length.
        """

        return self._chunk_count * self._layout.width

    @property
    def reserved(self) -> int:
        """
        Returns the number of bit slots physically allocated, including reserved chunks that are
        not yet addressable.
        """

        return len(self._storage) * self._layout.width

    def __len__(self) -> int:
        return self._length

    def get(self, index: int) -> bool | None:
        """
        Gets the bit at ``index``, or None if the index is outside of the vector.
        """

        if not 0 <= index < self._length:
            return None

        return self.get_unchecked(index)

    def get_unchecked(self, index: int) -> bool:
        """
        Gets the bit at ``index`` without checking it against the length.

        The caller must guarantee that ``0 <= index < capacity``. Bits between the length and the
        capacity are unspecified.
        """

        assert 0 <= index < self.capacity, f"index {index} out of capacity ({self.capacity})"

        chunk_index, mask = self._layout.locate(index)
        return self._layout.read(self._storage[chunk_index], mask)

    def set(self, index: int, value: bool) -> bool:
        """
        Sets the bit at ``index``.

        :return: True if the bit was set, False if the index is outside of the vector.
        """

        if not 0 <= index < self._length:
            return False

        self.set_unchecked(index, value)
        return True

    def set_unchecked(self, index: int, value: bool) -> None:
        """
        Sets the bit at ``index`` without checking it against the length.

        The caller must guarantee that ``0 <= index < capacity``.
        """

        assert 0 <= index < self.capacity, f"index {index} out of capacity ({self.capacity})"

        chunk_index, mask = self._layout.locate(index)
        self._storage[chunk_index] = self._layout.write(self._storage[chunk_index], mask, value)

    def push(self, value: bool) -> None:
        """
        Appends a single bit to the end of this vector.
        """

        if self._length == self.capacity:
            self._grow()

        self._length += 1
        self.set_unchecked(self._length - 1, value)

    def pop(self) -> bool | None:
        """
        Removes the last bit of this vector.

        :return: The removed bit, or None if the vector is empty.
        """

        if self._length == 0:
            return None

        self._length -= 1
        value = self.get_unchecked(self._length)

        if self._length % self._layout.width == 0:
            self._shrink()

        return value

    def extend(self, values: Iterable[bool]) -> None:
        """
        Appends every value of ``values`` to the end of this vector.
        """

        for value in values:
            self.push(value)

    def _grow(self) -> None:
        if self._chunk_count < len(self._storage):
            # reserved slot, may still hold bits from before a pop
            self._storage[self._chunk_count] = 0
        else:
            self._storage.append(0)

        self._chunk_count += 1
        logger.trace(f"Grew to {self._chunk_count} chunks ({self.capacity} bits)")

    def _shrink(self) -> None:
        self._chunk_count -= 1

        if len(self._storage) > self._reserved_chunks:
            self._storage.pop()

        logger.trace(f"Shrank to {self._chunk_count} chunks ({self.capacity} bits)")

    def __iter__(self) -> Iterator[bool]:
        layout = self._layout
        storage = self._storage
        full_chunks, tail = divmod(self._length, layout.width)

        for chunk_index in range(full_chunks):
            chunk = storage[chunk_index]
            for mask in layout.masks:
                yield layout.read(chunk, mask)

        # only the valid prefix of the last chunk, the rest is stale
        if tail:
            chunk = storage[full_chunks]
            for mask in layout.masks[:tail]:
                yield layout.read(chunk, mask)

    def _checked_index(self, index: int) -> int:
        if not isinstance(index, int):
            raise TypeError(f"vector indices must be integers, not {type(index).__name__}")

        real_index = index + self._length if index < 0 else index
        if not 0 <= real_index < self._length:
            raise VecBoolIndexError(index, self._length)

        return real_index

    def __getitem__(self, index: int) -> bool:
        return self.get_unchecked(self._checked_index(index))

    def __setitem__(self, index: int, value: bool) -> None:
        self.set_unchecked(self._checked_index(index), value)

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PackedBoolVector):
            return NotImplemented

        if len(self) != len(other):
            return False

        return all(ours == theirs for ours, theirs in zip(self, other))

    __hash__ = None  # type: ignore

    @override
    def __repr__(self) -> str:
        bits = "".join("1" if bit else "0" for bit in islice(self, _REPR_BITS))
        if self._length > _REPR_BITS:
            bits += "..."

        return f"<PackedBoolVector len={self._length} bits={bits}>"
