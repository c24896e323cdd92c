import logging

# our public exports, relatively minimal
from vecbool.enums import DEFAULT_CHUNK_WIDTH as DEFAULT_CHUNK_WIDTH, ChunkWidth as ChunkWidth
from vecbool.exc import (
    InvalidChunkWidthError as InvalidChunkWidthError,
    VecBoolError as VecBoolError,
    VecBoolIndexError as VecBoolIndexError,
)
from vecbool.layout import ChunkLayout as ChunkLayout
from vecbool.utils import TRACE
from vecbool.vector import PackedBoolVector as PackedBoolVector

logging.addLevelName(TRACE, "TRACE")
