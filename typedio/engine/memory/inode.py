"""
Inode Module

Inodes of the in-memory engine: file or directory metadata, permission
checks and file content.

Author: YSNRFD
Version: 1.0.0
"""

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class FileType(Enum):
    """Types of files."""
    REGULAR = 1
    DIRECTORY = 2
    STREAM = 3


# Permission bits for the owner; shifted right by 3 for group, by 6 for other
OWNER_READ = 0o400
OWNER_WRITE = 0o200


@dataclass
class Inode:
    """
    Inode - Index Node.
    
    Stores metadata about a file or directory:
    - Type and permissions
    - Owner and group
    - Size and timestamps
    - Content (regular files and streams) or entries (directories)
    """
    
    ino: int
    file_type: FileType
    mode: int = 0o644
    uid: int = 0
    gid: int = 0
    size: int = 0
    
    atime: float = field(default_factory=time.time)
    mtime: float = field(default_factory=time.time)
    ctime: float = field(default_factory=time.time)
    
    _data: bytearray = field(default_factory=bytearray, repr=False)
    _entries: dict[str, int] = field(default_factory=dict, repr=False)
    
    @property
    def is_directory(self) -> bool:
        return self.file_type == FileType.DIRECTORY
    
    @property
    def is_stream(self) -> bool:
        return self.file_type == FileType.STREAM
    
    def _has_bit(self, uid: int, gid: int, owner_bit: int) -> bool:
        # Root bypasses permission bits
        if uid == 0:
            return True
        if uid == self.uid:
            return (self.mode & owner_bit) != 0
        if gid == self.gid:
            return (self.mode & (owner_bit >> 3)) != 0
        return (self.mode & (owner_bit >> 6)) != 0
    
    def can_read(self, uid: int, gid: int) -> bool:
        """Check read permission."""
        return self._has_bit(uid, gid, OWNER_READ)
    
    def can_write(self, uid: int, gid: int) -> bool:
        """Check write permission."""
        return self._has_bit(uid, gid, OWNER_WRITE)
    
    def chmod(self, mode: int) -> None:
        """Change permission mode."""
        self.mode = mode & 0o777
        self.ctime = time.time()
    
    # File operations
    
    def read(self, offset: int = 0, size: int = -1) -> bytes:
        """
        Read data from the file.
        
        Args:
            offset: Byte offset to start reading
            size: Number of bytes to read (-1 for all)
        
        Returns:
            Data read; empty at or past the end of the file
        """
        self.atime = time.time()
        
        if size < 0:
            return bytes(self._data[offset:])
        return bytes(self._data[offset:offset + size])
    
    def write(self, data: bytes, offset: int = 0) -> int:
        """
        Write data to the file, zero-filling any gap past the end.
        
        Returns:
            Number of bytes written
        """
        if offset > len(self._data):
            self._data.extend(bytes(offset - len(self._data)))
        
        self._data[offset:offset + len(data)] = data
        
        self.size = len(self._data)
        self.mtime = time.time()
        self.ctime = self.mtime
        
        return len(data)
    
    def truncate(self, size: int) -> None:
        """Truncate the file to the given size."""
        del self._data[max(size, 0):]
        self.size = len(self._data)
        self.mtime = time.time()
        self.ctime = self.mtime
    
    # Directory operations
    
    def add_entry(self, name: str, ino: int) -> None:
        """Add a directory entry."""
        if not self.is_directory:
            raise ValueError("Not a directory")
        self._entries[name] = ino
        self.mtime = time.time()
    
    def get_entry(self, name: str) -> Optional[int]:
        """Get the inode number for a directory entry."""
        if not self.is_directory:
            return None
        return self._entries.get(name)
