from vecbool import ChunkWidth, PackedBoolVector

from tests import _pattern, all_widths


@all_widths
def test_iteration_matches_get(width: ChunkWidth):
    """
    Tests that iteration yields exactly ``len()`` bits, each equal to ``get`` at that index.
    """

    for size in (0, 1, width - 1, width, width + 1, width * 2, width * 3 - 1):
        mask = PackedBoolVector.from_iterable(_pattern(size), chunk_width=width)
        bits = list(mask)

        assert len(bits) == size
        assert bits == [mask.get(i) for i in range(size)]


def test_partial_chunk_hides_stale_bits():
    """
    Tests that bits left behind by a pop are not yielded.
    """

    mask = PackedBoolVector()
    mask.extend([True] * 6)

    for _ in range(4):
        mask.pop()

    assert list(mask) == [True, True]

    mask.push(False)
    assert list(mask) == [True, True, False]


def test_zeroed_iteration():
    """
    Tests iterating over a zeroed vector, including the trailing slack chunk.
    """

    assert list(PackedBoolVector.zeroed(0)) == []
    assert list(PackedBoolVector.zeroed(8)) == [False] * 8
    assert list(PackedBoolVector.zeroed(13)) == [False] * 13


def test_iterators_are_independent():
    """
    Tests that each call to ``iter`` produces a fresh iterator.
    """

    mask = PackedBoolVector.from_iterable(_pattern(10))

    first = iter(mask)
    assert next(first) is True
    assert next(first) is False

    second = iter(mask)
    assert list(second) == _pattern(10)
    assert list(first) == _pattern(10)[2:]


def test_iteration_is_lazy():
    """
    Tests that iteration does not read ahead, and that it does not change the vector.
    """

    mask = PackedBoolVector.from_iterable(_pattern(24))
    it = iter(mask)

    assert [next(it) for _ in range(3)] == [True, False, False]
    assert len(mask) == 24
    assert mask.chunk_count == 3
