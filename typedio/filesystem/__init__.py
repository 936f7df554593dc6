"""
typedio File Access Module

Provides typed file access over a native engine:
- Error classification
- Open-mode resolution
- Capability-tagged handles
- Streaming reads and writes
- Whole-file reads and writes
"""

from .classifier import (
    ErrorContext,
    UNIVERSAL_CODES,
    FALLBACKS,
    EXCLUSIVE_CREATE_OVERRIDES,
    classify,
    classify_result,
    error_to_string,
    collapse_errors,
)
from .open_mode import (
    READ_ONLY_FLAG,
    WhenExists,
    CreateIfNotExists,
    FailIfExists,
    WriteMode,
    resolve_flags,
    permission_mask,
)
from .handle import (
    Readable,
    Writable,
    ReadWrite,
    Handle,
    STDIN,
    STDOUT,
    STDERR,
    open_read,
    open_write,
    open_read_write,
    close,
)
from .streaming import (
    EndOfFile,
    ReadBytes,
    ReadResult,
    END_OF_FILE,
    read_stream,
    read_to_end,
    write_stream,
    write_all,
)
from .files import (
    read_file,
    read_whole_file,
    write_file,
    read_text,
    write_text,
)
from . import messages

__all__ = [
    # Classifier
    'ErrorContext',
    'UNIVERSAL_CODES',
    'FALLBACKS',
    'EXCLUSIVE_CREATE_OVERRIDES',
    'classify',
    'classify_result',
    'error_to_string',
    'collapse_errors',
    # Open modes
    'READ_ONLY_FLAG',
    'WhenExists',
    'CreateIfNotExists',
    'FailIfExists',
    'WriteMode',
    'resolve_flags',
    'permission_mask',
    # Handles
    'Readable',
    'Writable',
    'ReadWrite',
    'Handle',
    'STDIN',
    'STDOUT',
    'STDERR',
    'open_read',
    'open_write',
    'open_read_write',
    'close',
    # Streaming
    'EndOfFile',
    'ReadBytes',
    'ReadResult',
    'END_OF_FILE',
    'read_stream',
    'read_to_end',
    'write_stream',
    'write_all',
    # Whole files
    'read_file',
    'read_whole_file',
    'write_file',
    'read_text',
    'write_text',
    'messages',
]
