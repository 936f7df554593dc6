"""
Base Exception

Root of every exception raised by typedio. Carries a human-readable
message, a numeric error code for programmatic handling, and a free-form
context dictionary that is rendered into the string form.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional, Any


class TypedIOError(Exception):
    """
    Base exception for all typedio errors.
    
    Attributes:
        message: Human-readable error description
        error_code: Numeric error code for programmatic handling
        context: Additional context about the error
    
    Example:
        >>> raise TypedIOError("Engine unavailable", error_code=1001)
    """
    
    default_error_code: int = 1000
    
    def __init__(
        self,
        message: str,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.default_error_code
        self.context = context or {}
    
    def __str__(self) -> str:
        base = f"[Error {self.error_code}] {self.message}"
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base = f"{base} ({context_str})"
        return base
    
    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"error_code={self.error_code})"
        )
