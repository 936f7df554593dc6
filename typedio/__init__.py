"""
typedio - Typed File Access

A file-access layer over a native I/O engine that turns string-coded
OS errors into a closed exception taxonomy and offers whole-file and
capability-tagged streaming access.
"""

__version__ = "1.0.0"
__author__ = "YSNRFD"

from .exceptions import (
    TypedIOError,
    FileAccessError,
    OpenError,
    FileDoesNotExist,
    MissingPermission,
    IsDirectory,
    TooManyFilesOpen,
    ReadError,
    CouldNotRead,
    WriteError,
    CouldNotCreateFile,
    FileAlreadyExists,
    OtherError,
    HandleClosedError,
    ConfigValidationError,
    BootstrapError,
)
from .core import ConfigLoader, Config, get_config
from .engine import NativeEngine, NativeResult, OSEngine, MemoryEngine, get_engine, set_engine
from .filesystem import (
    WhenExists,
    CreateIfNotExists,
    FailIfExists,
    Readable,
    Writable,
    ReadWrite,
    Handle,
    STDIN,
    STDOUT,
    STDERR,
    EndOfFile,
    ReadBytes,
    END_OF_FILE,
    open_read,
    open_write,
    open_read_write,
    close,
    read_stream,
    write_stream,
    write_all,
    read_file,
    read_whole_file,
    write_file,
    read_text,
    write_text,
    error_to_string,
    messages,
)
from .core.bootstrap import configure

__all__ = [
    # Errors
    'TypedIOError',
    'FileAccessError',
    'OpenError',
    'FileDoesNotExist',
    'MissingPermission',
    'IsDirectory',
    'TooManyFilesOpen',
    'ReadError',
    'CouldNotRead',
    'WriteError',
    'CouldNotCreateFile',
    'FileAlreadyExists',
    'OtherError',
    'HandleClosedError',
    'ConfigValidationError',
    'BootstrapError',
    # Configuration
    'ConfigLoader',
    'Config',
    'get_config',
    'configure',
    # Engines
    'NativeEngine',
    'NativeResult',
    'OSEngine',
    'MemoryEngine',
    'get_engine',
    'set_engine',
    # File access
    'WhenExists',
    'CreateIfNotExists',
    'FailIfExists',
    'Readable',
    'Writable',
    'ReadWrite',
    'Handle',
    'STDIN',
    'STDOUT',
    'STDERR',
    'EndOfFile',
    'ReadBytes',
    'END_OF_FILE',
    'open_read',
    'open_write',
    'open_read_write',
    'close',
    'read_stream',
    'write_stream',
    'write_all',
    'read_file',
    'read_whole_file',
    'write_file',
    'read_text',
    'write_text',
    'error_to_string',
    'messages',
]
