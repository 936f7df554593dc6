"""
typedio Native Engine Module

Provides the native I/O engines:
- Engine interface and call dispatcher
- Host operating system engine
- In-memory engine
- Process-wide default engine
"""

import threading
from typing import Optional

from .operations import EngineOperation, OPERATION_NAMES, FlagSpec, FLAG_SPECS, parse_flags
from .base import NativeEngine, NativeResult
from .os_engine import OSEngine
from .memory import MemoryEngine
from typedio.core.config_loader import Config, get_config


_engine: Optional[NativeEngine] = None
_engine_lock = threading.Lock()


def build_engine(config: Optional[Config] = None) -> NativeEngine:
    """
    Create the engine selected by configuration.
    
    Args:
        config: Configuration to use (defaults to the global one)
    """
    config = config or get_config()
    if config.engine.backend == 'memory':
        return MemoryEngine(
            max_open_files=config.engine.max_open_files,
            max_size=config.engine.max_size,
        )
    return OSEngine()


def get_engine() -> NativeEngine:
    """Get the process-wide default engine, creating it on first use."""
    global _engine
    with _engine_lock:
        if _engine is None:
            _engine = build_engine()
        return _engine


def set_engine(engine: Optional[NativeEngine]) -> Optional[NativeEngine]:
    """
    Replace the process-wide default engine.
    
    Passing None makes the next get_engine() call build a fresh one.
    
    Returns:
        The previous engine, if any
    """
    global _engine
    with _engine_lock:
        previous = _engine
        _engine = engine
        return previous


__all__ = [
    'EngineOperation',
    'OPERATION_NAMES',
    'FlagSpec',
    'FLAG_SPECS',
    'parse_flags',
    'NativeEngine',
    'NativeResult',
    'OSEngine',
    'MemoryEngine',
    'build_engine',
    'get_engine',
    'set_engine',
]
