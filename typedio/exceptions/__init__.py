"""
typedio Exception Hierarchy

All custom exceptions inherit from TypedIOError. File system failures
form a closed taxonomy below FileAccessError; misuse of the library is
reported through the usage exceptions.

Architecture:
    TypedIOError (Base)
    ├── FileAccessError
    │   ├── OpenError
    │   │   ├── FileDoesNotExist
    │   │   ├── MissingPermission
    │   │   ├── IsDirectory
    │   │   └── TooManyFilesOpen
    │   ├── ReadError
    │   │   └── CouldNotRead
    │   ├── WriteError
    │   │   ├── CouldNotCreateFile
    │   │   └── FileAlreadyExists
    │   └── OtherError
    ├── HandleClosedError
    ├── ConfigValidationError
    └── BootstrapError
"""

from .base import TypedIOError

from .access_exceptions import (
    FileAccessError,
    OpenError,
    FileDoesNotExist,
    MissingPermission,
    IsDirectory,
    TooManyFilesOpen,
    ReadError,
    CouldNotRead,
    WriteError,
    CouldNotCreateFile,
    FileAlreadyExists,
    OtherError,
)

from .usage_exceptions import (
    HandleClosedError,
    ConfigValidationError,
    BootstrapError,
)

__all__ = [
    "TypedIOError",
    # File access taxonomy
    "FileAccessError",
    "OpenError",
    "FileDoesNotExist",
    "MissingPermission",
    "IsDirectory",
    "TooManyFilesOpen",
    "ReadError",
    "CouldNotRead",
    "WriteError",
    "CouldNotCreateFile",
    "FileAlreadyExists",
    "OtherError",
    # Usage errors
    "HandleClosedError",
    "ConfigValidationError",
    "BootstrapError",
]
