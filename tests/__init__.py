import pytest
from vecbool import ChunkWidth

#: Parametrises a test over every supported chunk width, as the ``width`` argument.
all_widths = pytest.mark.parametrize("width", list(ChunkWidth), ids=lambda w: w.name.lower())


def _pattern(size: int) -> list[bool]:
    """
    Returns the reference pattern of ``size`` bits, where every third bit is set.
    """

    return [i % 3 == 0 for i in range(size)]
