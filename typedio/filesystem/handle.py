"""
Capability-Tagged Handles

An open file descriptor together with the capability it was opened
with. The capability is a type parameter only: Handle[Readable] can be
passed to read_stream, Handle[Writable] to write_stream, and
Handle[ReadWrite] to both. Nothing about it exists at runtime.

Lifecycle:
    open_read / open_write / open_read_write -> Open
    close                                      -> Closed

Author: YSNRFD
Version: 1.0.0
"""

from dataclasses import dataclass, field
from typing import Any, Generic, Optional, TypeVar

from .classifier import (
    ErrorContext,
    EXCLUSIVE_CREATE_OVERRIDES,
    classify_result,
)
from .open_mode import (
    READ_ONLY_FLAG,
    FailIfExists,
    WriteMode,
    permission_mask,
    resolve_flags,
)
from typedio.engine import NativeEngine, get_engine
from typedio.exceptions import FileAccessError, HandleClosedError
from typedio.logger import get_logger


class Readable:
    """Capability marker: the handle may be read."""


class Writable:
    """Capability marker: the handle may be written."""


class ReadWrite(Readable, Writable):
    """Capability marker: the handle may be read and written."""


C = TypeVar('C', covariant=True)

_logger = get_logger('handle')


@dataclass(eq=False)
class Handle(Generic[C]):
    """
    An open file descriptor.
    
    The handle has a single owner, who must close it exactly once.
    Handles are context managers that close on exit.
    
    Example:
        >>> with open_read('/etc/hostname') as handle:
        ...     result = read_stream(handle, 64)
    """
    fd: int
    path: str
    engine: Optional[NativeEngine] = None
    standard: bool = False
    closed: bool = field(default=False, init=False)
    
    @property
    def bound_engine(self) -> NativeEngine:
        """The engine the descriptor belongs to."""
        return self.engine if self.engine is not None else get_engine()
    
    def ensure_open(self, operation: str) -> None:
        """
        Raises:
            HandleClosedError: If the handle has been closed
        """
        if self.closed:
            raise HandleClosedError(self.fd, path=self.path, operation=operation)
    
    def __enter__(self) -> 'Handle[C]':
        return self
    
    def __exit__(self, exc_type, exc, tb) -> None:
        if self.closed:
            return
        if exc_type is None:
            close(self)
            return
        
        # The exception already in flight wins over a failed close
        try:
            close(self)
        except FileAccessError as close_error:
            _logger.warning(
                "Close failed while handling another error",
                fd=self.fd,
                context={'path': self.path, 'code': close_error.code}
            )
    
    def __repr__(self) -> str:
        state = 'closed' if self.closed else 'open'
        return f"Handle(fd={self.fd}, path={self.path!r}, {state})"


# Pre-opened, process-lifetime handles on the default engine
STDIN: Handle[Readable] = Handle(0, '<stdin>', standard=True)
STDOUT: Handle[Writable] = Handle(1, '<stdout>', standard=True)
STDERR: Handle[Writable] = Handle(2, '<stderr>', standard=True)


def open_read(filename: str, engine: Optional[NativeEngine] = None) -> Handle[Readable]:
    """
    Open an existing file for reading.
    
    Args:
        filename: Path to open
        engine: Engine to use (defaults to the process-wide engine)
    
    Returns:
        A readable handle positioned at the start of the file
    
    Raises:
        OpenError: FileDoesNotExist, MissingPermission, IsDirectory or
            TooManyFilesOpen
        CouldNotRead: For any other engine failure
    """
    engine = engine or get_engine()
    result = engine.open(filename, READ_ONLY_FLAG, permission_mask())
    
    if not result.success:
        raise classify_result(result, ErrorContext.READ, path=filename)
    
    _logger.debug("Opened for reading", fd=result.return_value, context={'path': filename})
    return Handle(result.return_value, filename, engine)


def _open_for_write(
    mode: WriteMode,
    filename: str,
    engine: Optional[NativeEngine],
    readable: bool
) -> Handle[Any]:
    engine = engine or get_engine()
    flags = resolve_flags(mode, readable=readable)
    result = engine.open(filename, flags, permission_mask(mode))
    
    if not result.success:
        overrides = EXCLUSIVE_CREATE_OVERRIDES if isinstance(mode, FailIfExists) else None
        raise classify_result(result, ErrorContext.WRITE, path=filename, overrides=overrides)
    
    _logger.debug(
        "Opened for writing",
        fd=result.return_value,
        context={'path': filename, 'flags': flags}
    )
    return Handle(result.return_value, filename, engine)


def open_write(
    mode: WriteMode,
    filename: str,
    engine: Optional[NativeEngine] = None
) -> Handle[Writable]:
    """
    Open a file for writing according to mode.
    
    Raises:
        OpenError: FileDoesNotExist, MissingPermission, IsDirectory or
            TooManyFilesOpen
        FileAlreadyExists: FailIfExists and the file exists
        CouldNotCreateFile: For any other engine failure
    """
    return _open_for_write(mode, filename, engine, readable=False)


def open_read_write(
    mode: WriteMode,
    filename: str,
    engine: Optional[NativeEngine] = None
) -> Handle[ReadWrite]:
    """Open a file for reading and writing according to mode; errors as open_write."""
    return _open_for_write(mode, filename, engine, readable=True)


def close(handle: Handle[Any]) -> None:
    """
    Close a handle.
    
    Closing a standard stream does nothing. The handle counts as closed
    even when the engine reports a failure, since the descriptor may
    already have been released.
    
    Raises:
        HandleClosedError: If the handle was already closed
        OtherError: If the engine reports a failure
    """
    if handle.standard:
        return
    
    handle.ensure_open('close')
    handle.closed = True
    result = handle.bound_engine.close(handle.fd)
    
    if not result.success:
        raise classify_result(result, ErrorContext.MESSAGE, path=handle.path)
    
    _logger.debug("Closed", fd=handle.fd, context={'path': handle.path})
