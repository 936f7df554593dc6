"""
Host Operating System Engine

Performs the engine primitives with the host's file descriptor API.
Positional reads and writes use pread/pwrite so they never move the
descriptor's cursor.

Author: YSNRFD
Version: 1.0.0
"""

import os
from typing import Optional

from .base import NativeEngine
from .operations import parse_flags


class OSEngine(NativeEngine):
    """
    Native engine backed by the host file system.
    
    Example:
        >>> engine = OSEngine()
        >>> fd = engine.open('/tmp/out.bin', 'w', 0o644).return_value
        >>> engine.write(fd, b'data').return_value
        4
    """
    
    def __init__(self):
        super().__init__('os')
    
    def _sys_open(self, path: str, flags: str, mode: int) -> int:
        flag_spec = parse_flags(flags)
        return os.open(path, flag_spec.to_os_flags(), mode)
    
    def _sys_read(self, fd: int, length: int, position: Optional[int]) -> bytes:
        if position is None:
            return os.read(fd, length)
        return os.pread(fd, length, position)
    
    def _sys_write(self, fd: int, data: bytes, position: Optional[int]) -> int:
        if position is None:
            return os.write(fd, data)
        return os.pwrite(fd, data, position)
    
    def _sys_close(self, fd: int) -> None:
        os.close(fd)
    
    def _sys_read_whole_file(self, path: str) -> bytes:
        with open(path, 'rb') as f:
            return f.read()
