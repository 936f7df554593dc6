"""
Native Engine Interface

The narrow set of primitives the file-access layer calls, and the
dispatcher that routes every call, logs it and turns OSError into a
failed NativeResult carrying the symbolic errno.

Author: YSNRFD
Version: 1.0.0
"""

import errno
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Optional

from .operations import EngineOperation, OPERATION_NAMES
from typedio.logger import get_logger


@dataclass
class NativeResult:
    """Result of a native engine call."""
    success: bool
    return_value: Any
    error: Optional[str] = None
    code: Optional[str] = None
    
    @classmethod
    def ok(cls, value: Any) -> 'NativeResult':
        return cls(success=True, return_value=value)
    
    @classmethod
    def failure(cls, code: str, message: str) -> 'NativeResult':
        return cls(success=False, return_value=-1, error=message, code=code)
    
    @classmethod
    def from_os_error(cls, exc: OSError) -> 'NativeResult':
        """Build a failure from an OSError, e.g. ('ENOENT', "No such file or directory: '/x'")."""
        code = errno.errorcode.get(exc.errno, 'EIO') if exc.errno else 'EIO'
        message = exc.strerror or str(exc)
        if exc.filename is not None:
            message = f"{message}: {exc.filename!r}"
        return cls.failure(code, message)


class NativeEngine(ABC):
    """
    Base class for native I/O engines.
    
    Subclasses implement the _sys_* primitives and signal failure by
    raising OSError; callers only ever see NativeResult values.
    
    Example:
        >>> engine = OSEngine()
        >>> result = engine.open('/etc/hostname', 'r', 0o644)
        >>> result.success
        True
    """
    
    def __init__(self, name: str):
        self._name = name
        self._logger = get_logger('engine')
        self._lock = threading.Lock()
        self._open_fds: set[int] = set()
        self._call_counts: dict[str, int] = {}
        self._failure_count = 0
        self._bytes_read = 0
        self._bytes_written = 0
        self._handlers: dict[int, Callable[..., Any]] = {
            EngineOperation.OPEN: self._sys_open,
            EngineOperation.READ: self._sys_read,
            EngineOperation.WRITE: self._sys_write,
            EngineOperation.CLOSE: self._sys_close,
            EngineOperation.READ_WHOLE_FILE: self._sys_read_whole_file,
        }
    
    @property
    def name(self) -> str:
        return self._name
    
    def dispatch(self, operation: int, *args: Any) -> NativeResult:
        """
        Dispatch an engine call.
        
        Args:
            operation: EngineOperation number
            *args: Arguments of the primitive
        
        Returns:
            NativeResult
        """
        name = OPERATION_NAMES.get(operation, f"unknown({operation})")
        
        self._logger.debug(
            f"Engine call: {name}",
            context={'engine': self._name, 'args': self._describe_args(args)}
        )
        
        handler = self._handlers.get(operation)
        if handler is None:
            return NativeResult.failure('ENOSYS', f"Unknown engine operation: {operation}")
        
        with self._lock:
            self._call_counts[name] = self._call_counts.get(name, 0) + 1
        
        try:
            value = handler(*args)
        except OSError as e:
            result = NativeResult.from_os_error(e)
            with self._lock:
                self._failure_count += 1
            self._logger.debug(
                f"Engine call failed: {name}",
                context={'code': result.code, 'error': result.error}
            )
            return result
        
        self._record(operation, args, value)
        return NativeResult.ok(value)
    
    def _record(self, operation: int, args: tuple, value: Any) -> None:
        with self._lock:
            if operation == EngineOperation.OPEN:
                self._open_fds.add(value)
            elif operation == EngineOperation.CLOSE:
                self._open_fds.discard(args[0])
            elif operation == EngineOperation.READ:
                self._bytes_read += len(value)
            elif operation == EngineOperation.WRITE:
                self._bytes_written += value
            elif operation == EngineOperation.READ_WHOLE_FILE:
                self._bytes_read += len(value)
    
    @staticmethod
    def _describe_args(args: tuple) -> str:
        parts = []
        for arg in args:
            if isinstance(arg, (bytes, bytearray)):
                parts.append(f"<{len(arg)} bytes>")
            else:
                parts.append(repr(arg))
        return ", ".join(parts)[:80]
    
    # Primitives
    
    def open(self, path: str, flags: str, mode: int) -> NativeResult:
        """open(path, flags, mode) -> fd"""
        return self.dispatch(EngineOperation.OPEN, path, flags, mode)
    
    def read(self, fd: int, length: int, position: Optional[int] = None) -> NativeResult:
        """read(fd, length, position) -> bytes; position None reads at the cursor"""
        return self.dispatch(EngineOperation.READ, fd, length, position)
    
    def write(self, fd: int, data: bytes, position: Optional[int] = None) -> NativeResult:
        """write(fd, data, position) -> byte count; position None writes at the cursor"""
        return self.dispatch(EngineOperation.WRITE, fd, data, position)
    
    def close(self, fd: int) -> NativeResult:
        """close(fd)"""
        return self.dispatch(EngineOperation.CLOSE, fd)
    
    def read_whole_file(self, path: str) -> NativeResult:
        """read_whole_file(path) -> bytes"""
        return self.dispatch(EngineOperation.READ_WHOLE_FILE, path)
    
    def get_stats(self) -> dict[str, Any]:
        """Get engine statistics."""
        with self._lock:
            return {
                'engine': self._name,
                'open_descriptors': len(self._open_fds),
                'calls': dict(self._call_counts),
                'failures': self._failure_count,
                'bytes_read': self._bytes_read,
                'bytes_written': self._bytes_written,
            }
    
    @abstractmethod
    def _sys_open(self, path: str, flags: str, mode: int) -> int:
        pass
    
    @abstractmethod
    def _sys_read(self, fd: int, length: int, position: Optional[int]) -> bytes:
        pass
    
    @abstractmethod
    def _sys_write(self, fd: int, data: bytes, position: Optional[int]) -> int:
        pass
    
    @abstractmethod
    def _sys_close(self, fd: int) -> None:
        pass
    
    @abstractmethod
    def _sys_read_whole_file(self, path: str) -> bytes:
        pass
