"""
Streaming Read/Write

Position-aware reads and writes over capability-tagged handles.

With position=None an operation uses the handle's cursor and advances
it. With an explicit offset it touches only that offset and leaves the
cursor where it was, so several explicit-offset operations on one
handle never race each other's cursor.

Author: YSNRFD
Version: 1.0.0
"""

from dataclasses import dataclass
from typing import Optional, Union

from .classifier import ErrorContext, classify, classify_result
from .handle import Handle, Readable, Writable
from typedio.core.config_loader import get_config
from typedio.logger import get_logger


_logger = get_logger('stream')


@dataclass(frozen=True)
class EndOfFile:
    """No bytes were left to read."""


@dataclass(frozen=True)
class ReadBytes:
    """
    A successful read of at least one byte.
    
    Attributes:
        count: Number of bytes read, always len(data)
        data: The bytes read
    """
    count: int
    data: bytes
    
    def __post_init__(self):
        if self.count != len(self.data):
            raise ValueError(f"count {self.count} does not match {len(self.data)} bytes of data")
        if self.count == 0:
            raise ValueError("An empty read is reported as EndOfFile")


ReadResult = Union[EndOfFile, ReadBytes]

END_OF_FILE = EndOfFile()

Content = Union[bytes, bytearray, memoryview, str]


def _check_position(position: Optional[int]) -> None:
    if position is not None and position < 0:
        raise ValueError(f"position must be non-negative, got {position}")


def to_bytes(content: Content, encoding: Optional[str] = None) -> bytes:
    """Encode text with the configured encoding; pass bytes-like content through."""
    if isinstance(content, str):
        return content.encode(encoding or get_config().io.encoding)
    return bytes(content)


def read_stream(
    handle: Handle[Readable],
    length: int,
    position: Optional[int] = None
) -> ReadResult:
    """
    Read up to length bytes.
    
    Args:
        handle: Open readable handle
        length: Maximum number of bytes; the engine may return fewer
        position: Offset to read at, or None for the cursor
    
    Returns:
        ReadBytes, or END_OF_FILE when no byte was available
    
    Raises:
        OpenError: For ENOENT, EACCES, EISDIR or EMFILE
        CouldNotRead: For any other engine failure
        HandleClosedError: If the handle is closed
    """
    if length <= 0:
        raise ValueError(f"length must be positive, got {length}")
    _check_position(position)
    handle.ensure_open('read')
    
    result = handle.bound_engine.read(handle.fd, length, position)
    if not result.success:
        raise classify_result(result, ErrorContext.READ, path=handle.path)
    
    data = bytes(result.return_value)
    if len(data) > length:
        _logger.error(
            "Engine returned more bytes than requested",
            fd=handle.fd,
            context={'path': handle.path, 'requested': length, 'returned': len(data)}
        )
        raise classify(
            'EIO',
            f"Engine returned {len(data)} bytes for a read of {length}",
            ErrorContext.READ,
            path=handle.path
        )
    if not data:
        return END_OF_FILE
    return ReadBytes(len(data), data)


def read_to_end(handle: Handle[Readable], chunk_size: Optional[int] = None) -> bytes:
    """Read from the cursor until EndOfFile and return everything read."""
    chunk_size = chunk_size or get_config().io.chunk_size
    chunks = []
    
    while True:
        result = read_stream(handle, chunk_size)
        if isinstance(result, EndOfFile):
            break
        chunks.append(result.data)
    
    return b''.join(chunks)


def write_stream(
    handle: Handle[Writable],
    content: Content,
    position: Optional[int] = None
) -> int:
    """
    Write content once.
    
    Returns:
        The number of bytes the engine accepted, which may be less than
        the length of content
    
    Raises:
        OpenError: For ENOENT, EACCES, EISDIR or EMFILE
        CouldNotCreateFile: For any other engine failure
        HandleClosedError: If the handle is closed
    """
    _check_position(position)
    handle.ensure_open('write')
    
    result = handle.bound_engine.write(handle.fd, to_bytes(content), position)
    if not result.success:
        raise classify_result(result, ErrorContext.WRITE, path=handle.path)
    
    return result.return_value


def write_all(
    handle: Handle[Writable],
    content: Content,
    position: Optional[int] = None
) -> int:
    """
    Write content completely, looping over short writes.
    
    With an explicit position each further write continues right after
    the bytes already accepted.
    
    Returns:
        Total number of bytes written; short only if the engine stopped
        accepting bytes without reporting an error
    """
    data = to_bytes(content)
    total = 0
    
    while total < len(data):
        offset = None if position is None else position + total
        written = write_stream(handle, data[total:], offset)
        if written == 0:
            _logger.warning(
                "Engine accepted no bytes; giving up",
                fd=handle.fd,
                context={'path': handle.path, 'written': total, 'expected': len(data)}
            )
            break
        total += written
    
    return total
