"""
ScriptVol Exception Hierarchy

Architecture:
    ├── VolumeException
    │   ├── ArchiveIOError
    │   ├── ContentContractError
    │   └── FileNameError
    └── ConfigException
        ├── ConfigLoadError
        └── ConfigValidationError
"""

from .volume_exceptions import (
    VolumeException,
    ArchiveIOError,
    ContentContractError,
    FileNameError,
)

from .config_exceptions import (
    ConfigException,
    ConfigLoadError,
    ConfigValidationError,
)

__all__ = [
    # Volume exceptions
    "VolumeException",
    "ArchiveIOError",
    "ContentContractError",
    "FileNameError",
    # Config exceptions
    "ConfigException",
    "ConfigLoadError",
    "ConfigValidationError",
]
