import logging

import pytest
from vecbool import PackedBoolVector
from vecbool.utils import TRACE


def test_trace_level_name():
    """
    Tests that importing the package registers the TRACE level.
    """

    assert logging.getLevelName(TRACE) == "TRACE"


def test_chunk_changes_are_traced(caplog: pytest.LogCaptureFixture):
    """
    Tests that adding and releasing chunks is logged at TRACE.
    """

    caplog.set_level(TRACE, logger="vecbool.vector")

    mask = PackedBoolVector()
    mask.extend([True] * 9)
    mask.pop()

    messages = [record.getMessage() for record in caplog.records if record.levelno == TRACE]
    assert messages == [
        "Grew to 1 chunks (8 bits)",
        "Grew to 2 chunks (16 bits)",
        "Shrank to 1 chunks (8 bits)",
    ]


def test_allocation_is_logged(caplog: pytest.LogCaptureFixture):
    """
    Tests that pre-allocating constructors log at DEBUG.
    """

    caplog.set_level(logging.DEBUG, logger="vecbool.vector")

    PackedBoolVector.with_capacity(16)
    PackedBoolVector.zeroed(4)

    messages = [record.getMessage() for record in caplog.records]
    assert "Reserved 3 chunks (24 bits) for 16 bits" in messages
    assert "Allocated 1 zeroed chunks for 4 bits" in messages


def test_bit_access_is_not_logged(caplog: pytest.LogCaptureFixture):
    """
    Tests that per-bit operations stay quiet.
    """

    mask = PackedBoolVector.zeroed(4)
    caplog.set_level(TRACE, logger="vecbool.vector")
    caplog.clear()

    mask.set(1, True)
    mask.get(1)
    mask.push(False)
    list(mask)

    assert caplog.records == []
