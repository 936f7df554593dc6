"""
Open-Mode Resolver

Declarative write intents and their translation to the engine's
open-flag vocabulary.

Author: YSNRFD
Version: 1.0.0
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from typedio.core.config_loader import get_config


READ_ONLY_FLAG = 'r'


class WhenExists(Enum):
    """What to do with existing content when creating-if-not-exists."""
    TRUNCATE = 'truncate'
    APPEND = 'append'


@dataclass(frozen=True)
class CreateIfNotExists:
    """Open for writing, creating the file when it is missing."""
    when_exists: WhenExists = WhenExists.TRUNCATE
    permission_mask: Optional[int] = None


@dataclass(frozen=True)
class FailIfExists:
    """Open for writing only if the file does not exist yet."""
    permission_mask: Optional[int] = None


WriteMode = Union[CreateIfNotExists, FailIfExists]


_WRITE_FLAGS = {
    WhenExists.TRUNCATE: 'w',
    WhenExists.APPEND: 'a',
}


def resolve_flags(mode: WriteMode, readable: bool = False) -> str:
    """
    Map a write mode to an open-flag string.
    
    Example:
        >>> resolve_flags(CreateIfNotExists(WhenExists.APPEND), readable=True)
        'a+'
        >>> resolve_flags(FailIfExists())
        'wx'
    """
    if isinstance(mode, FailIfExists):
        flags = 'wx'
    else:
        flags = _WRITE_FLAGS[mode.when_exists]
    return flags + '+' if readable else flags


def permission_mask(mode: Optional[WriteMode] = None) -> int:
    """Mask to pass to open; the configured default when the mode carries none."""
    if mode is not None and mode.permission_mask is not None:
        return mode.permission_mask
    return get_config().io.default_permission_mask
