"""
Whole-File Convenience Layer

Read or write an entire file in one call, built from open, streaming
and close.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional

from .classifier import ErrorContext, classify_result
from .handle import open_read, open_write
from .open_mode import WriteMode
from .streaming import Content, read_to_end, to_bytes, write_all
from typedio.core.config_loader import get_config
from typedio.engine import NativeEngine, get_engine
from typedio.logger import get_logger


_logger = get_logger('files')


def read_file(filename: str, engine: Optional[NativeEngine] = None) -> bytes:
    """
    Read a whole file by streaming it in configured chunks.
    
    Raises:
        OpenError: FileDoesNotExist, MissingPermission, IsDirectory or
            TooManyFilesOpen
        CouldNotRead: For any other read failure
    """
    with open_read(filename, engine) as handle:
        data = read_to_end(handle)
    
    _logger.debug("Read file", context={'path': filename, 'bytes': len(data)})
    return data


def read_whole_file(filename: str, engine: Optional[NativeEngine] = None) -> bytes:
    """
    Read a whole file with the engine's single-call primitive.
    
    Failures outside the four universal codes become OtherError.
    """
    engine = engine or get_engine()
    result = engine.read_whole_file(filename)
    
    if not result.success:
        raise classify_result(result, ErrorContext.MESSAGE, path=filename)
    
    return bytes(result.return_value)


def write_file(
    mode: WriteMode,
    filename: str,
    content: Content,
    engine: Optional[NativeEngine] = None
) -> int:
    """
    Write content as the whole file (or append it, per mode).
    
    Returns:
        Number of bytes written
    
    Raises:
        OpenError: FileDoesNotExist, MissingPermission, IsDirectory or
            TooManyFilesOpen
        FileAlreadyExists: FailIfExists and the file exists
        CouldNotCreateFile: For any other write failure
    """
    with open_write(mode, filename, engine) as handle:
        written = write_all(handle, content)
    
    _logger.debug("Wrote file", context={'path': filename, 'bytes': written})
    return written


def read_text(
    filename: str,
    engine: Optional[NativeEngine] = None,
    encoding: Optional[str] = None
) -> str:
    """read_file, decoded with the given or configured encoding."""
    return read_file(filename, engine).decode(encoding or get_config().io.encoding)


def write_text(
    mode: WriteMode,
    filename: str,
    text: str,
    engine: Optional[NativeEngine] = None,
    encoding: Optional[str] = None
) -> int:
    """write_file for text, encoded with the given or configured encoding."""
    return write_file(mode, filename, to_bytes(text, encoding), engine)
