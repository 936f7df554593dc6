"""
typedio Logger Module

Logging for the file-access layer, built on the standard logging package:
- One logger per subsystem ('engine', 'handle', 'files', 'config')
- Structured context rendered as {key=value} pairs
- In-memory ring buffer for inspecting recent I/O activity
- Optional file output

Author: YSNRFD
Version: 1.0.0
"""

import logging
import sys
import threading
from datetime import datetime
from enum import IntEnum
from pathlib import Path
from typing import Optional, Any, List


class LogLevel(IntEnum):
    """Log level enumeration with numeric values for comparison."""
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50
    
    @classmethod
    def from_name(cls, name: str) -> 'LogLevel':
        """Look up a level by case-insensitive name."""
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Unknown log level: {name}") from None


class LogFormatter(logging.Formatter):
    """
    Log formatter for typedio.
    
    Output format:
        [2024-01-01 12:00:00.000] DEBUG    [engine] (fd=3) open {path=/tmp/x}
    """
    
    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
    }
    RESET = '\033[0m'
    
    def __init__(self, use_colors: bool = True):
        super().__init__()
        self.use_colors = use_colors and self._supports_color()
    
    @staticmethod
    def _supports_color() -> bool:
        """Check if the terminal supports ANSI colors."""
        if not hasattr(sys.stdout, 'isatty'):
            return False
        return sys.stdout.isatty()
    
    def format(self, record: logging.LogRecord) -> str:
        """Format a log record."""
        timestamp = datetime.fromtimestamp(record.created).strftime(
            '%Y-%m-%d %H:%M:%S.%f'
        )[:-3]
        
        level = record.levelname
        if self.use_colors and level in self.COLORS:
            level_display = f"{self.COLORS[level]}{level:8s}{self.RESET}"
        else:
            level_display = f"{level:8s}"
        
        components = [f"[{timestamp}]", level_display]
        
        if hasattr(record, 'subsystem'):
            components.append(f"[{record.subsystem}]")
        
        if getattr(record, 'fd', None) is not None:
            components.append(f"(fd={record.fd})")
        
        components.append(str(record.getMessage()))
        
        if getattr(record, 'context', None):
            context_str = " ".join(f"{k}={v}" for k, v in record.context.items())
            components.append(f"{{{context_str}}}")
        
        message = " ".join(components)
        
        if record.exc_info:
            message += "\n" + self.formatException(record.exc_info)
        
        return message


class IOLogHandler(logging.Handler):
    """
    Keeps the most recent log records in memory.
    
    Lets callers and tests inspect which engine calls were made and
    how failures were classified without parsing console output.
    """
    
    def __init__(self, max_entries: int = 10000):
        super().__init__()
        self.max_entries = max_entries
        self._log_buffer: List[dict[str, Any]] = []
        self._lock = threading.Lock()
    
    def emit(self, record: logging.LogRecord) -> None:
        """Store log record in buffer."""
        log_entry = {
            'timestamp': record.created,
            'level': record.levelname,
            'message': record.getMessage(),
            'subsystem': getattr(record, 'subsystem', None),
            'fd': getattr(record, 'fd', None),
            'context': getattr(record, 'context', {}),
        }
        
        with self._lock:
            self._log_buffer.append(log_entry)
            if len(self._log_buffer) > self.max_entries:
                self._log_buffer = self._log_buffer[-self.max_entries:]
    
    def get_logs(
        self,
        level: Optional[str] = None,
        subsystem: Optional[str] = None,
        limit: int = 100
    ) -> List[dict[str, Any]]:
        """Retrieve logs with optional filtering."""
        with self._lock:
            logs = self._log_buffer.copy()
        
        if level:
            logs = [l for l in logs if l['level'] == level]
        
        if subsystem:
            logs = [l for l in logs if l['subsystem'] == subsystem]
        
        return logs[-limit:]
    
    def clear(self) -> None:
        """Clear the log buffer."""
        with self._lock:
            self._log_buffer.clear()


class Logger:
    """
    Subsystem logger for typedio.
    
    One instance exists per subsystem name; all of them hang below the
    'typedio' logger so applications can configure the library as a
    whole with the standard logging machinery.
    
    Example:
        >>> log = Logger('engine')
        >>> log.debug("open", fd=3, context={'path': '/tmp/data.bin'})
    """
    
    _instances: dict[str, 'Logger'] = {}
    _lock = threading.Lock()
    _initialized = False
    _buffer_handler: Optional[IOLogHandler] = None
    _installed_handlers: List[logging.Handler] = []
    _global_level: int = LogLevel.INFO
    
    ROOT_NAME = 'typedio'
    
    def __new__(cls, subsystem: str = 'core') -> 'Logger':
        """Get or create a logger for a subsystem."""
        with cls._lock:
            if subsystem not in cls._instances:
                instance = super().__new__(cls)
                instance._subsystem = subsystem
                instance._logger = logging.getLogger(f'{cls.ROOT_NAME}.{subsystem}')
                cls._instances[subsystem] = instance
            return cls._instances[subsystem]
    
    @property
    def subsystem(self) -> str:
        return self._subsystem
    
    @classmethod
    def initialize(
        cls,
        level: int = LogLevel.INFO,
        log_file: Optional[str] = None,
        use_colors: bool = True,
        console_output: bool = True
    ) -> None:
        """
        Install handlers on the 'typedio' logger.
        
        Safe to call more than once; only the first call has an effect
        until shutdown() is called.
        
        Args:
            level: Minimum log level to capture
            log_file: Optional file path for log output
            use_colors: Whether to use ANSI colors in console output
            console_output: Whether to log to stderr
        """
        with cls._lock:
            if cls._initialized:
                return
            
            cls._global_level = level
            root_logger = logging.getLogger(cls.ROOT_NAME)
            root_logger.setLevel(level)
            
            handlers: List[logging.Handler] = []
            
            cls._buffer_handler = IOLogHandler()
            cls._buffer_handler.setLevel(level)
            handlers.append(cls._buffer_handler)
            
            if console_output:
                console_handler = logging.StreamHandler(sys.stderr)
                console_handler.setLevel(level)
                console_handler.setFormatter(LogFormatter(use_colors=use_colors))
                handlers.append(console_handler)
            
            if log_file:
                file_path = Path(log_file)
                file_path.parent.mkdir(parents=True, exist_ok=True)
                file_handler = logging.FileHandler(log_file)
                file_handler.setLevel(level)
                file_handler.setFormatter(LogFormatter(use_colors=False))
                handlers.append(file_handler)
            
            for handler in handlers:
                root_logger.addHandler(handler)
            
            cls._installed_handlers = handlers
            cls._initialized = True
    
    @classmethod
    def shutdown(cls) -> None:
        """Remove and close the handlers installed by initialize()."""
        with cls._lock:
            root_logger = logging.getLogger(cls.ROOT_NAME)
            for handler in cls._installed_handlers:
                root_logger.removeHandler(handler)
                handler.close()
            cls._installed_handlers = []
            cls._buffer_handler = None
            cls._initialized = False
    
    @classmethod
    def get_recent_logs(
        cls,
        level: Optional[str] = None,
        subsystem: Optional[str] = None,
        limit: int = 100
    ) -> List[dict[str, Any]]:
        """Get logs from the in-memory buffer."""
        if cls._buffer_handler is None:
            return []
        return cls._buffer_handler.get_logs(level=level, subsystem=subsystem, limit=limit)
    
    def _log(
        self,
        level: int,
        message: str,
        fd: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        extra = {
            'subsystem': self._subsystem,
            'fd': fd,
            'context': context or {},
        }
        self._logger.log(level, message, extra=extra)
    
    def debug(
        self,
        message: str,
        fd: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        """Log a debug message."""
        self._log(LogLevel.DEBUG, message, fd, context)
    
    def info(
        self,
        message: str,
        fd: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        """Log an info message."""
        self._log(LogLevel.INFO, message, fd, context)
    
    def warning(
        self,
        message: str,
        fd: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        """Log a warning message."""
        self._log(LogLevel.WARNING, message, fd, context)
    
    def error(
        self,
        message: str,
        fd: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        """Log an error message."""
        self._log(LogLevel.ERROR, message, fd, context)


def get_logger(subsystem: str) -> Logger:
    """
    Get a logger for the specified subsystem.
    
    Args:
        subsystem: Name of the subsystem (e.g., 'engine', 'handle', 'files')
    
    Returns:
        Logger instance for the subsystem
    """
    return Logger(subsystem)
