"""
File Access Exceptions

The closed taxonomy of failures reported by the file-access layer.
Every instance is produced by classifying exactly one failed native
engine call, so each one carries the engine's message and the raw
OS code (e.g. 'ENOENT') it was derived from.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional, Any

from .base import TypedIOError


class FileAccessError(TypedIOError):
    """
    Base exception for all classified file access failures.
    
    Attributes:
        message: Message reported by the native engine
        code: Symbolic OS error code reported by the engine (e.g. 'EACCES')
        path: File path associated with the error (if known)
        error_code: Numeric error code for programmatic handling
    """
    
    default_error_code = 4000
    
    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        path: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if code:
            ctx["code"] = code
        if path:
            ctx["path"] = path
        super().__init__(message=message, context=ctx)
        self.code = code
        self.path = path


class OpenError(FileAccessError):
    """A file could not be opened."""
    
    default_error_code = 4100


class FileDoesNotExist(OpenError):
    """
    The file (or one of its parent directories) does not exist.
    
    Example:
        >>> raise FileDoesNotExist("no such file or directory", code="ENOENT")
    """
    
    default_error_code = 4101


class MissingPermission(OpenError):
    """The caller lacks the permission required for the operation."""
    
    default_error_code = 4102


class IsDirectory(OpenError):
    """The path names a directory where a file was expected."""
    
    default_error_code = 4103


class TooManyFilesOpen(OpenError):
    """The process has exhausted its file descriptor table."""
    
    default_error_code = 4104


class ReadError(FileAccessError):
    """Reading from an open file failed."""
    
    default_error_code = 4200


class CouldNotRead(ReadError):
    """Any read failure not covered by the open-related codes."""
    
    default_error_code = 4201


class WriteError(FileAccessError):
    """Creating or writing a file failed."""
    
    default_error_code = 4300


class CouldNotCreateFile(WriteError):
    """Any write failure not covered by the open-related codes."""
    
    default_error_code = 4301


class FileAlreadyExists(WriteError):
    """
    Exclusive creation found an existing file.
    
    Raised instead of an OpenError when a FailIfExists open collides
    with an existing path.
    """
    
    default_error_code = 4302


class OtherError(FileAccessError):
    """
    Catch-all carrying only a message.
    
    Used by the message-string flavor of the API, where structured
    errors are collapsed to their text, and for failures with no
    dedicated variant (e.g. close).
    """
    
    default_error_code = 4900
