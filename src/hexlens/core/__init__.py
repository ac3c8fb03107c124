from .assembler import ELISION_MARKER, HEADER, format_hexdump, render_hexdump, render_hexdump_file
from .chunker import BLOCK_SIZE, Block, chunk
from .classifier import ByteCategory, ClassifiedByte, classify
from .escapes import remove_escapes
from .line import render_line

__all__ = [
    "BLOCK_SIZE",
    "Block",
    "ByteCategory",
    "ClassifiedByte",
    "ELISION_MARKER",
    "HEADER",
    "chunk",
    "classify",
    "format_hexdump",
    "remove_escapes",
    "render_hexdump",
    "render_hexdump_file",
    "render_line",
]
