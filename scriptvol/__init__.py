"""
ScriptVol - Archive volume for a scripting runtime

Maps bare script names to files in a host directory, telling script
source and compiled programs apart by their content.
"""

__version__ = "1.0.0"
__author__ = "YSNRFD"

from .config import Config, ConfigLoader, get_config
from .logger import Logger, LogLevel, get_logger
from .persistence import (
    Archive,
    FileCategory,
    FileInfo,
    OperationResult,
    ProgramFile,
    ResultKind,
    Volume,
)

__all__ = [
    'Archive',
    'Config',
    'ConfigLoader',
    'FileCategory',
    'FileInfo',
    'Logger',
    'LogLevel',
    'OperationResult',
    'ProgramFile',
    'ResultKind',
    'Volume',
    'get_config',
    'get_logger',
]
