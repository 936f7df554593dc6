"""
typedio In-Memory Engine

An inode file system held in process memory that speaks the native
engine interface.
"""

from .inode import Inode, FileType
from .path_resolver import PathResolver
from .memory_engine import MemoryEngine, OpenFile

__all__ = [
    'Inode',
    'FileType',
    'PathResolver',
    'MemoryEngine',
    'OpenFile',
]
