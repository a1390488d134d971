"""
ScriptVol Persistence Module

Volumes and the helpers they share:
- Content sniffing and categories
- Filename extension handling
- In-memory volume base
- Host-directory archive volume
"""

from .categories import (
    FileCategory,
    TEXT_CATEGORIES,
    KERBOSCRIPT_EXTENSION,
    KOS_MACHINELANGUAGE_EXTENSION,
    KSM_MAGIC,
    identify_category,
)
from .filenames import FilenameUtils
from .program_file import ProgramFile, FileInfo
from .results import OperationResult, ResultKind
from .volume import Volume
from .archive import Archive

__all__ = [
    # Categories
    'FileCategory',
    'TEXT_CATEGORIES',
    'KERBOSCRIPT_EXTENSION',
    'KOS_MACHINELANGUAGE_EXTENSION',
    'KSM_MAGIC',
    'identify_category',
    # Filenames
    'FilenameUtils',
    # Files
    'ProgramFile',
    'FileInfo',
    # Results
    'OperationResult',
    'ResultKind',
    # Volumes
    'Volume',
    'Archive',
]
