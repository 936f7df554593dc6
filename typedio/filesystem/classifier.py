"""
Error Classifier

Maps a raw (code, message) pair reported by a native engine to exactly
one structured error. Four codes mean the same thing wherever they
occur; everything else falls back to a variant chosen by the context
of the failed call.

Author: YSNRFD
Version: 1.0.0
"""

from enum import Enum, auto
from functools import wraps
from typing import Callable, Mapping, Optional, Type, TypeVar

from typedio.engine import NativeResult
from typedio.exceptions import (
    FileAccessError,
    FileDoesNotExist,
    MissingPermission,
    IsDirectory,
    TooManyFilesOpen,
    CouldNotRead,
    CouldNotCreateFile,
    FileAlreadyExists,
    OtherError,
)
from typedio.logger import get_logger


class ErrorContext(Enum):
    """Kind of call that failed; selects the fallback variant."""
    READ = auto()
    WRITE = auto()
    MESSAGE = auto()


ErrorOverrides = Mapping[str, Type[FileAccessError]]

UNIVERSAL_CODES: dict[str, Type[FileAccessError]] = {
    'ENOENT': FileDoesNotExist,
    'EACCES': MissingPermission,
    'EISDIR': IsDirectory,
    'EMFILE': TooManyFilesOpen,
}

FALLBACKS: dict[ErrorContext, Type[FileAccessError]] = {
    ErrorContext.READ: CouldNotRead,
    ErrorContext.WRITE: CouldNotCreateFile,
    ErrorContext.MESSAGE: OtherError,
}

EXCLUSIVE_CREATE_OVERRIDES: ErrorOverrides = {
    'EEXIST': FileAlreadyExists,
}

_logger = get_logger('classifier')


def classify(
    code: Optional[str],
    message: str,
    context: ErrorContext,
    path: Optional[str] = None,
    overrides: Optional[ErrorOverrides] = None
) -> FileAccessError:
    """
    Build the structured error for a raw engine failure.
    
    Overrides are consulted first, then the universal codes, then the
    fallback for the context.
    
    Args:
        code: Symbolic OS error code, e.g. 'ENOENT'
        message: Message reported by the engine
        context: Kind of call that failed
        path: Path involved, if any
        overrides: Call-site specific code -> error class mapping
    
    Returns:
        The structured error (not raised)
    """
    error_cls = None
    if overrides and code is not None:
        error_cls = overrides.get(code)
    if error_cls is None and code is not None:
        error_cls = UNIVERSAL_CODES.get(code)
    if error_cls is None:
        error_cls = FALLBACKS[context]
    return error_cls(message, code=code, path=path)


def classify_result(
    result: NativeResult,
    context: ErrorContext,
    path: Optional[str] = None,
    overrides: Optional[ErrorOverrides] = None
) -> FileAccessError:
    """Classify a failed NativeResult."""
    if result.success:
        raise ValueError("Cannot classify a successful engine result")
    
    error = classify(result.code, result.error or '', context, path=path, overrides=overrides)
    _logger.debug(
        f"Classified {result.code} as {type(error).__name__}",
        context={'context': context.name, 'path': path}
    )
    return error


def error_to_string(error: FileAccessError) -> str:
    """Render a structured error as the engine's message."""
    return error.message


F = TypeVar('F', bound=Callable)


def collapse_errors(func: F) -> F:
    """
    Turn a typed operation into its message-string flavor.
    
    Any FileAccessError raised by func is re-raised as an OtherError
    carrying only error_to_string(error), chained to the original.
    
    Example:
        >>> read = collapse_errors(read_file)
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except OtherError:
            raise
        except FileAccessError as e:
            raise OtherError(error_to_string(e), code=e.code, path=e.path) from e
    
    return wrapper
