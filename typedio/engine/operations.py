"""
Engine Operation Table

Defines the operations a native engine performs and the open-flag
vocabulary it accepts.

Author: YSNRFD
Version: 1.0.0
"""

import errno
import os
from dataclasses import dataclass
from enum import IntEnum


class EngineOperation(IntEnum):
    """Operation numbers, matching the classic UNIX syscall numbers where one exists."""
    READ = 3
    WRITE = 4
    OPEN = 5
    CLOSE = 6
    READ_WHOLE_FILE = 300


OPERATION_NAMES = {
    EngineOperation.READ: "read",
    EngineOperation.WRITE: "write",
    EngineOperation.OPEN: "open",
    EngineOperation.CLOSE: "close",
    EngineOperation.READ_WHOLE_FILE: "read_whole_file",
}


@dataclass(frozen=True)
class FlagSpec:
    """Decoded meaning of an open-flag string."""
    readable: bool
    writable: bool
    create: bool = False
    truncate: bool = False
    append: bool = False
    exclusive: bool = False
    
    def to_os_flags(self) -> int:
        """Translate to the host's os.O_* bit set."""
        if self.readable and self.writable:
            flags = os.O_RDWR
        elif self.writable:
            flags = os.O_WRONLY
        else:
            flags = os.O_RDONLY
        
        if self.create:
            flags |= os.O_CREAT
        if self.truncate:
            flags |= os.O_TRUNC
        if self.append:
            flags |= os.O_APPEND
        if self.exclusive:
            flags |= os.O_EXCL
        
        return flags | getattr(os, 'O_BINARY', 0) | getattr(os, 'O_CLOEXEC', 0)


FLAG_SPECS = {
    'r': FlagSpec(readable=True, writable=False),
    'r+': FlagSpec(readable=True, writable=True),
    'w': FlagSpec(readable=False, writable=True, create=True, truncate=True),
    'w+': FlagSpec(readable=True, writable=True, create=True, truncate=True),
    'a': FlagSpec(readable=False, writable=True, create=True, append=True),
    'a+': FlagSpec(readable=True, writable=True, create=True, append=True),
    'wx': FlagSpec(readable=False, writable=True, create=True, truncate=True, exclusive=True),
    'wx+': FlagSpec(readable=True, writable=True, create=True, truncate=True, exclusive=True),
}


def parse_flags(flags: str) -> FlagSpec:
    """
    Decode an open-flag string.
    
    Raises:
        OSError: EINVAL for flags outside the vocabulary
    """
    flag_spec = FLAG_SPECS.get(flags)
    if flag_spec is None:
        raise OSError(errno.EINVAL, f"Invalid open flags {flags!r}")
    return flag_spec
