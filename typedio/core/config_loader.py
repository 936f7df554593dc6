"""
typedio Configuration Loader

Configuration management for the file-access layer:
- JSON configuration file loading
- Validation of I/O and engine settings
- Default value handling
- Runtime configuration updates by dotted key

Author: YSNRFD
Version: 1.0.0
"""

import json
import threading
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Optional

from typedio.exceptions import ConfigValidationError


ENGINE_BACKENDS = ("os", "memory")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class IOConfig:
    """Streaming and whole-file settings."""
    chunk_size: int = 65536
    default_permission_mask: int = 0o644
    encoding: str = "utf-8"


@dataclass
class EngineConfig:
    """Native engine settings."""
    backend: str = "os"
    max_open_files: int = 1024  # memory engine descriptor table size
    max_size: int = 104857600  # memory engine capacity, 100 MB


@dataclass
class LoggingConfig:
    """Logging configuration settings."""
    level: str = "WARNING"
    log_file: Optional[str] = None
    console_output: bool = True


@dataclass
class Config:
    """
    Main configuration container.
    
    Holds all configuration settings for typedio.
    """
    io: IOConfig = field(default_factory=IOConfig)
    engine: EngineConfig = field(default_factory=EngineConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _section(cls: type, data: Any, current: Any) -> Any:
    """Build a section dataclass from data, keeping current values for missing keys."""
    if not isinstance(data, dict):
        raise ConfigValidationError(
            f"{cls.__name__} section must be an object, got {type(data).__name__}"
        )
    known = {f.name for f in fields(cls)}
    unknown = set(data) - known
    if unknown:
        raise ConfigValidationError(
            f"Unknown {cls.__name__} keys: {', '.join(sorted(unknown))}"
        )
    values = {name: data.get(name, getattr(current, name)) for name in known}
    return cls(**values)


def _require_int(key: str, value: Any, minimum: int) -> None:
    # bool is an int subclass but never a valid size
    if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
        raise ConfigValidationError(
            f"{key} must be an integer >= {minimum}, got {value!r}"
        )


def validate_config(config: Config) -> Config:
    """
    Check types and value ranges that the dataclasses cannot express.
    
    Raises:
        ConfigValidationError: On the first invalid value
    """
    _require_int('io.chunk_size', config.io.chunk_size, 1)
    _require_int('io.default_permission_mask', config.io.default_permission_mask, 0)
    if config.io.default_permission_mask > 0o7777:
        raise ConfigValidationError(
            f"io.default_permission_mask out of range: {oct(config.io.default_permission_mask)}"
        )
    if not isinstance(config.io.encoding, str):
        raise ConfigValidationError(f"io.encoding must be a string, got {config.io.encoding!r}")
    try:
        "".encode(config.io.encoding)
    except LookupError:
        raise ConfigValidationError(f"Unknown encoding: {config.io.encoding}") from None
    
    if config.engine.backend not in ENGINE_BACKENDS:
        raise ConfigValidationError(
            f"engine.backend must be one of {ENGINE_BACKENDS}, got {config.engine.backend!r}"
        )
    _require_int('engine.max_open_files', config.engine.max_open_files, 1)
    _require_int('engine.max_size', config.engine.max_size, 1)
    
    if not isinstance(config.logging.level, str) or config.logging.level.upper() not in LOG_LEVELS:
        raise ConfigValidationError(
            f"logging.level must be one of {LOG_LEVELS}, got {config.logging.level!r}"
        )
    if config.logging.log_file is not None and not isinstance(config.logging.log_file, str):
        raise ConfigValidationError(
            f"logging.log_file must be a path string, got {config.logging.log_file!r}"
        )
    if not isinstance(config.logging.console_output, bool):
        raise ConfigValidationError(
            f"logging.console_output must be true or false, got {config.logging.console_output!r}"
        )
    return config


class ConfigLoader:
    """
    Configuration loader and manager.
    
    Example:
        >>> loader = ConfigLoader()
        >>> config = loader.load('typedio.json')
        >>> config.io.chunk_size
        65536
    """
    
    _instance: Optional['ConfigLoader'] = None
    _lock = threading.Lock()
    
    def __new__(cls) -> 'ConfigLoader':
        """Singleton pattern for configuration access."""
        with cls._lock:
            if cls._instance is None:
                cls._instance = super().__new__(cls)
                cls._instance._config = Config()
            return cls._instance
    
    def load(self, config_path: str) -> Config:
        """
        Load configuration from a JSON file.
        
        Args:
            config_path: Path to the configuration file
        
        Returns:
            Config object with loaded settings
        
        Raises:
            ConfigValidationError: If the file cannot be loaded, parsed or validated
        """
        path = Path(config_path)
        
        if not path.exists():
            raise ConfigValidationError(f"Configuration file not found: {config_path}")
        
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigValidationError(f"Invalid JSON in configuration file: {e}")
        except OSError as e:
            raise ConfigValidationError(f"Cannot read configuration file: {e}")
        
        self._config = self.parse(data)
        return self._config
    
    @staticmethod
    def parse(data: dict[str, Any]) -> Config:
        """Parse configuration data into a validated Config object."""
        if not isinstance(data, dict):
            raise ConfigValidationError("Configuration root must be an object")
        
        config = Config()
        sections = {
            'io': IOConfig,
            'engine': EngineConfig,
            'logging': LoggingConfig,
        }
        
        for name, section_cls in sections.items():
            if name in data:
                setattr(config, name, _section(section_cls, data[name], getattr(config, name)))
        
        return validate_config(config)
    
    @property
    def config(self) -> Config:
        """Get the current configuration."""
        return self._config
    
    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by dot-notation key.
        
        Args:
            key: Dot-notation key (e.g., 'io.chunk_size')
            default: Default value if key not found
        """
        obj: Any = self._config
        
        for part in key.split('.'):
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                return default
        
        return obj
    
    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value at runtime.
        
        The change is validated but not persisted to disk.
        """
        parts = key.split('.')
        obj: Any = self._config
        
        for part in parts[:-1]:
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                raise ConfigValidationError(f"Invalid configuration key: {key}")
        
        final_key = parts[-1]
        if not hasattr(obj, final_key):
            raise ConfigValidationError(f"Invalid configuration key: {key}")
        
        previous = getattr(obj, final_key)
        setattr(obj, final_key, value)
        try:
            validate_config(self._config)
        except ConfigValidationError:
            setattr(obj, final_key, previous)
            raise
    
    def reload(self, config_path: str) -> Config:
        """Reload configuration from file."""
        return self.load(config_path)
    
    def reset(self) -> Config:
        """Restore the built-in defaults."""
        self._config = Config()
        return self._config
    
    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        def dataclass_to_dict(obj: Any) -> Any:
            if hasattr(obj, '__dataclass_fields__'):
                return {
                    k: dataclass_to_dict(v)
                    for k, v in obj.__dict__.items()
                }
            elif isinstance(obj, list):
                return [dataclass_to_dict(item) for item in obj]
            return obj
        
        return dataclass_to_dict(self._config)


def get_config() -> Config:
    """
    Get the global configuration instance.
    
    Returns:
        Config object with current settings
    """
    return ConfigLoader().config
