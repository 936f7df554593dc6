"""
In-Memory Engine

A native engine that keeps a small inode file system in process memory
and reports failures with the same POSIX codes as the host engine:
- Hierarchical directory tree with permission bits
- Descriptor table with per-descriptor cursor and open flags
- Descriptor limit (EMFILE) and capacity limit (ENOSPC)
- Pre-opened standard streams on descriptors 0, 1 and 2

Author: YSNRFD
Version: 1.0.0
"""

import errno
import os
import threading
from dataclasses import dataclass
from typing import Optional

from ..base import NativeEngine
from ..operations import FlagSpec, parse_flags
from .inode import Inode, FileType
from .path_resolver import PathResolver


ROOT_INO = 1


@dataclass
class OpenFile:
    """An entry in the descriptor table."""
    fd: int
    ino: int
    path: str
    readable: bool
    writable: bool
    append: bool = False
    offset: int = 0


def _fail(code: int, path: Optional[str] = None) -> OSError:
    if path is None:
        return OSError(code, os.strerror(code))
    return OSError(code, os.strerror(code), path)


class MemoryEngine(NativeEngine):
    """
    Native engine backed by process memory.
    
    Operations run as the configured uid/gid, so permission failures can
    be produced without touching the host. Root (uid 0) bypasses
    permission bits, as on a POSIX host.
    
    Example:
        >>> engine = MemoryEngine()
        >>> engine.mkdir('/tmp')
        >>> fd = engine.open('/tmp/a.txt', 'w', 0o644).return_value
        >>> engine.write(fd, b'hello').return_value
        5
    """
    
    def __init__(
        self,
        max_open_files: int = 1024,
        max_size: int = 100 * 1024 * 1024,
        uid: int = 1000,
        gid: int = 1000
    ):
        super().__init__('memory')
        self.uid = uid
        self.gid = gid
        self._max_open_files = max_open_files
        self._max_size = max_size
        self._total_size = 0
        self._next_ino = ROOT_INO + 1
        self._inodes: dict[int, Inode] = {
            ROOT_INO: Inode(ino=ROOT_INO, file_type=FileType.DIRECTORY, mode=0o777),
        }
        self._open_files: dict[int, OpenFile] = {}
        self._standard_inos: dict[int, int] = {}
        self._fs_lock = threading.RLock()
        self._create_standard_streams()
    
    def _create_standard_streams(self) -> None:
        streams = [
            (0, '<stdin>', True, False),
            (1, '<stdout>', False, True),
            (2, '<stderr>', False, True),
        ]
        for fd, name, readable, writable in streams:
            ino = self._generate_ino()
            self._inodes[ino] = Inode(ino=ino, file_type=FileType.STREAM, mode=0o666)
            self._standard_inos[fd] = ino
            self._open_files[fd] = OpenFile(
                fd=fd, ino=ino, path=name, readable=readable,
                writable=writable, append=writable
            )
    
    def _generate_ino(self) -> int:
        ino = self._next_ino
        self._next_ino += 1
        return ino
    
    def _generate_fd(self) -> int:
        # Lowest free descriptor, as POSIX open() does
        fd = 0
        while fd in self._open_files:
            fd += 1
        return fd
    
    def _lookup(self, path: str) -> Optional[int]:
        """
        Resolve a path to an inode number.
        
        Returns:
            Inode number, or None if the final component does not exist
        
        Raises:
            OSError: ENOENT if an intermediate directory is missing,
                ENOTDIR if one is a regular file
        """
        if not path:
            raise _fail(errno.ENOENT, path)
        
        components = PathResolver.components(path)
        current = ROOT_INO
        
        for index, component in enumerate(components):
            inode = self._inodes[current]
            if not inode.is_directory:
                raise _fail(errno.ENOTDIR, path)
            child = inode.get_entry(component)
            if child is None:
                if index == len(components) - 1:
                    return None
                raise _fail(errno.ENOENT, path)
            current = child
        
        return current
    
    # Setup helpers, not part of the engine primitives
    
    def mkdir(self, path: str, mode: int = 0o755) -> int:
        """Create a directory, including missing parents. Returns its inode number."""
        with self._fs_lock:
            current = ROOT_INO
            for component in PathResolver.components(path):
                parent = self._inodes[current]
                if not parent.is_directory:
                    raise _fail(errno.ENOTDIR, path)
                child = parent.get_entry(component)
                if child is None:
                    child = self._generate_ino()
                    self._inodes[child] = Inode(
                        ino=child, file_type=FileType.DIRECTORY,
                        mode=mode & 0o777, uid=self.uid, gid=self.gid
                    )
                    parent.add_entry(component, child)
                current = child
            return current
    
    def chmod(self, path: str, mode: int) -> None:
        """Change the permission bits of an existing path."""
        with self._fs_lock:
            ino = self._lookup(path)
            if ino is None:
                raise _fail(errno.ENOENT, path)
            self._inodes[ino].chmod(mode)
    
    def exists(self, path: str) -> bool:
        """Check whether a path exists."""
        with self._fs_lock:
            try:
                return self._lookup(path) is not None
            except OSError:
                return False
    
    def contents(self, path: str) -> bytes:
        """Return the content of a regular file, ignoring permissions."""
        with self._fs_lock:
            ino = self._lookup(path)
            if ino is None:
                raise _fail(errno.ENOENT, path)
            return self._inodes[ino].read()
    
    def feed_stdin(self, data: bytes) -> None:
        """Append data for subsequent reads of descriptor 0."""
        with self._fs_lock:
            stdin = self._inodes[self._standard_ino(0)]
            stdin.write(data, stdin.size)
    
    def standard_output(self, fd: int = 1) -> bytes:
        """Everything written so far to descriptor 1 (or 2)."""
        with self._fs_lock:
            return self._inodes[self._standard_ino(fd)].read()
    
    def _standard_ino(self, fd: int) -> int:
        ino = self._standard_inos.get(fd)
        if ino is None:
            raise _fail(errno.EBADF)
        return ino
    
    # Engine primitives
    
    def _sys_open(self, path: str, flags: str, mode: int) -> int:
        flag_spec = parse_flags(flags)
        
        with self._fs_lock:
            # Descriptor exhaustion is reported before any path lookup
            if len(self._open_files) >= self._max_open_files:
                raise _fail(errno.EMFILE)

            ino = self._lookup(path)

            if ino is not None and flag_spec.exclusive:
                raise _fail(errno.EEXIST, path)
            
            if ino is None:
                if not flag_spec.create:
                    raise _fail(errno.ENOENT, path)
                ino = self._create_file(path, mode)
            else:
                self._check_access(self._inodes[ino], flag_spec, path)

            inode = self._inodes[ino]
            if flag_spec.truncate and inode.size:
                self._total_size -= inode.size
                inode.truncate(0)
            
            fd = self._generate_fd()
            self._open_files[fd] = OpenFile(
                fd=fd,
                ino=ino,
                path=PathResolver.normalize(path),
                readable=flag_spec.readable,
                writable=flag_spec.writable,
                append=flag_spec.append,
            )
            return fd
    
    def _create_file(self, path: str, mode: int) -> int:
        parent_path, name = PathResolver.split(path)
        parent = self._inodes[self._lookup(parent_path)]
        
        if not parent.can_write(self.uid, self.gid):
            raise _fail(errno.EACCES, path)
        
        ino = self._generate_ino()
        self._inodes[ino] = Inode(
            ino=ino,
            file_type=FileType.REGULAR,
            mode=mode & 0o777,
            uid=self.uid,
            gid=self.gid
        )
        parent.add_entry(name, ino)
        return ino
    
    def _check_access(self, inode: Inode, flag_spec: FlagSpec, path: str) -> None:
        if inode.is_directory and flag_spec.writable:
            raise _fail(errno.EISDIR, path)
        if flag_spec.readable and not inode.can_read(self.uid, self.gid):
            raise _fail(errno.EACCES, path)
        if flag_spec.writable and not inode.can_write(self.uid, self.gid):
            raise _fail(errno.EACCES, path)
    
    def _descriptor(self, fd: int) -> OpenFile:
        entry = self._open_files.get(fd)
        if entry is None:
            raise _fail(errno.EBADF)
        return entry
    
    def _sys_read(self, fd: int, length: int, position: Optional[int]) -> bytes:
        with self._fs_lock:
            entry = self._descriptor(fd)
            if not entry.readable:
                raise _fail(errno.EBADF)
            
            inode = self._inodes[entry.ino]
            if inode.is_directory:
                raise _fail(errno.EISDIR)
            
            if inode.is_stream:
                # Streams are consumed, not seekable
                if position is not None:
                    raise _fail(errno.ESPIPE)
                data = inode.read(entry.offset, length)
                entry.offset += len(data)
                return data
            
            if position is not None:
                return inode.read(position, length)
            
            data = inode.read(entry.offset, length)
            entry.offset += len(data)
            return data
    
    def _sys_write(self, fd: int, data: bytes, position: Optional[int]) -> int:
        with self._fs_lock:
            entry = self._descriptor(fd)
            if not entry.writable:
                raise _fail(errno.EBADF)
            
            inode = self._inodes[entry.ino]
            if inode.is_stream and position is not None:
                raise _fail(errno.ESPIPE)
            
            if position is not None:
                offset = position
            elif entry.append:
                offset = inode.size
            else:
                offset = entry.offset
            
            growth = max(0, offset + len(data) - inode.size)
            if self._total_size + growth > self._max_size:
                raise _fail(errno.ENOSPC)
            
            written = inode.write(data, offset)
            self._total_size += growth
            
            if position is None:
                entry.offset = offset + written
            
            return written
    
    def _sys_close(self, fd: int) -> None:
        with self._fs_lock:
            self._descriptor(fd)
            del self._open_files[fd]
    
    def _sys_read_whole_file(self, path: str) -> bytes:
        with self._fs_lock:
            ino = self._lookup(path)
            if ino is None:
                raise _fail(errno.ENOENT, path)
            
            inode = self._inodes[ino]
            if inode.is_directory:
                raise _fail(errno.EISDIR, path)
            if not inode.can_read(self.uid, self.gid):
                raise _fail(errno.EACCES, path)
            
            return inode.read()
    
    def get_stats(self) -> dict:
        """Get engine statistics, including file system usage."""
        stats = super().get_stats()
        with self._fs_lock:
            stats.update({
                'total_inodes': len(self._inodes),
                'descriptor_table': len(self._open_files),
                'total_size': self._total_size,
                'max_size': self._max_size,
            })
        return stats
