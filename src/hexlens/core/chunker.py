import io
import logging
from dataclasses import dataclass
from typing import BinaryIO, Callable, Iterator, Optional, Tuple, Union

from ..errors import InvalidInputError
from .classifier import ClassifiedByte, classify

BLOCK_SIZE = 16

logger = logging.getLogger(__name__)

ByteSource = Union[bytes, bytearray, memoryview, BinaryIO]


@dataclass(frozen=True)
class Block:
    index: int  # position in the original byte sequence, in blocks
    cells: Tuple[ClassifiedByte, ...]

    @classmethod
    def from_bytes(cls, index: int, data: bytes) -> "Block":
        return cls(index=index, cells=tuple(classify(b) for b in data))

    @property
    def offset(self) -> int:
        return self.index * BLOCK_SIZE

    def __len__(self) -> int:
        return len(self.cells)


def _buffer_reader(data) -> Callable[[int], bytes]:
    view = memoryview(data).cast("B")
    position = 0

    def read(n: int) -> bytes:
        nonlocal position
        piece = view[position : position + n].tobytes()
        position += len(piece)
        return piece

    return read


def _stream_reader(stream) -> Callable[[int], bytes]:
    def read(n: int) -> bytes:
        buf = bytearray()
        while len(buf) < n:
            piece = stream.read(n - len(buf))
            if not piece:
                break
            if not isinstance(piece, (bytes, bytearray)):
                raise InvalidInputError(f"stream returned {type(piece).__name__}, expected bytes")
            buf += piece
        return bytes(buf)

    return read


def reader_for(source: ByteSource) -> Callable[[int], bytes]:
    """
    Return a read(n) callable over a bytes-like object or a binary stream.

    Text is refused up front, whether handed over as str or as a text mode
    stream, so a bad source fails before any block is produced.
    """
    if isinstance(source, (str, io.TextIOBase)):
        raise InvalidInputError(f"cannot dump text ({type(source).__name__}), encode it to bytes first")
    if isinstance(source, (bytes, bytearray, memoryview)):
        return _buffer_reader(source)
    if callable(getattr(source, "read", None)):
        mode = getattr(source, "mode", None)
        if isinstance(mode, str) and "b" not in mode:
            raise InvalidInputError(f"stream {source!r} is opened in text mode")
        return _stream_reader(source)
    raise InvalidInputError(f"expected a bytes-like object or binary stream, got {type(source)}")


def chunk(
    source: ByteSource,
    block_size: int = BLOCK_SIZE,
    max_blocks: Optional[int] = None,
) -> Iterator[Block]:
    """
    Lazily split source into consecutive blocks of block_size bytes.

    The final block may be short. max_blocks caps how many blocks are
    emitted; None emits every block.
    """
    if not isinstance(block_size, int) or block_size <= 0:
        raise InvalidInputError(f"block_size must be a positive integer, got {block_size!r}")
    if max_blocks is not None and (not isinstance(max_blocks, int) or max_blocks < 0):
        raise InvalidInputError(f"max_blocks must be None or a non-negative integer, got {max_blocks!r}")

    read = reader_for(source)
    return _blocks(read, block_size, max_blocks)


def _blocks(read, block_size, max_blocks) -> Iterator[Block]:
    index = 0
    while max_blocks is None or index < max_blocks:
        data = read(block_size)
        if not data:
            break
        yield Block.from_bytes(index, data)
        index += 1
    logger.debug(f"Chunked {index} blocks of up to {block_size} bytes")
