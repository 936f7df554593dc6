"""
typedio Bootstrap

One-call set-up for applications:
- Load configuration
- Initialize logging
- Install the default engine

Author: YSNRFD
Version: 1.0.0
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from typedio.core.config_loader import Config, ConfigLoader
from typedio.engine import NativeEngine, build_engine, set_engine
from typedio.exceptions import BootstrapError, TypedIOError
from typedio.logger import Logger, LogLevel, get_logger


class BootStage(Enum):
    """Set-up stages, in order."""
    CONFIG_LOAD = auto()
    LOGGING_INIT = auto()
    ENGINE_INIT = auto()


@dataclass
class BootResult:
    """Outcome of configure()."""
    config: Config
    engine: NativeEngine


def configure(
    config_path: Optional[str] = None,
    engine: Optional[NativeEngine] = None,
    use_colors: bool = True
) -> BootResult:
    """
    Prepare typedio for use.
    
    Args:
        config_path: JSON configuration file; built-in defaults when None
        engine: Engine to install; built from configuration when None
        use_colors: Whether console logging may use ANSI colors
    
    Returns:
        BootResult with the active configuration and engine
    
    Raises:
        ConfigValidationError: If the configuration cannot be loaded; its
            context names the stage
        BootstrapError: If a later stage fails for another reason
    """
    logger = get_logger('bootstrap')
    stage = BootStage.CONFIG_LOAD
    
    try:
        loader = ConfigLoader()
        config = loader.load(config_path) if config_path else loader.config
        
        stage = BootStage.LOGGING_INIT
        Logger.initialize(
            level=LogLevel.from_name(config.logging.level),
            log_file=config.logging.log_file,
            use_colors=use_colors,
            console_output=config.logging.console_output,
        )
        
        stage = BootStage.ENGINE_INIT
        engine = engine or build_engine(config)
        set_engine(engine)
    except TypedIOError as e:
        e.context['stage'] = stage.name
        logger.error(f"Set-up failed at stage {stage.name}", context={'error': e.message})
        raise
    except (OSError, ValueError) as e:
        logger.error(f"Set-up failed at stage {stage.name}", context={'error': str(e)})
        raise BootstrapError(f"Set-up failed: {e}", stage=stage.name) from e
    
    logger.info(
        "typedio configured",
        context={'engine': engine.name, 'chunk_size': config.io.chunk_size}
    )
    return BootResult(config=config, engine=engine)
