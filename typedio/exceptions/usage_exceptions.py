"""
Usage Exceptions

Errors caused by misuse of the library rather than by the file system.
They sit outside the FileAccessError taxonomy: callers
should fix the code that raised them, not handle them.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional, Any

from .base import TypedIOError


class HandleClosedError(TypedIOError):
    """
    A handle was used or closed after it had already been closed.
    
    Example:
        >>> raise HandleClosedError(fd=3, path="/tmp/data.bin", operation="read")
    """
    
    default_error_code = 5001
    
    def __init__(
        self,
        fd: int,
        path: Optional[str] = None,
        operation: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        ctx["fd"] = fd
        if operation:
            ctx["operation"] = operation
        super().__init__(
            message=f"Handle is closed: {path or fd}",
            context=ctx
        )
        self.fd = fd
        self.path = path
        self.operation = operation


class ConfigValidationError(TypedIOError):
    """Raised when configuration loading or validation fails."""
    
    default_error_code = 5002


class BootstrapError(TypedIOError):
    """
    configure() failed outside configuration validation.
    
    Example:
        >>> raise BootstrapError("Cannot open log file", stage="LOGGING_INIT")
    """
    
    default_error_code = 5003
    
    def __init__(
        self,
        message: str,
        stage: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if stage:
            ctx["stage"] = stage
        super().__init__(message=message, context=ctx)
        self.stage = stage
