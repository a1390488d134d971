"""
Volume Module

Base class for every storage volume. A volume keeps an in-memory table
of program files keyed by logical name; subclasses backed by real
storage override the file operations and use the table as a cache of
what they have loaded or saved.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional, List

from .program_file import ProgramFile, FileInfo
from scriptvol.logger import get_logger


class Volume:
    """
    In-memory volume.

    Attributes:
        name: Display name of the volume
        capacity: Size limit in bytes, or -1 for unlimited
        renameable: Whether the volume's own name may be changed

    Example:
        >>> vol = Volume('scratch', capacity=1024)
        >>> vol.save(ProgramFile('hello', string_content='print 1.'))
        True
        >>> vol.load('hello').string_content
        'print 1.'
    """

    BASE_POWER = 0.04
    UNLIMITED = -1

    def __init__(self, name: str = '', capacity: int = UNLIMITED, renameable: bool = True):
        self._name = name
        self._capacity = capacity
        self._renameable = renameable
        self._files: dict[str, ProgramFile] = {}
        self._logger = get_logger('volume')

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        if not self._renameable:
            raise PermissionError(f"Volume {self._name!r} cannot be renamed")
        self._name = value

    @property
    def renameable(self) -> bool:
        return self._renameable

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def files(self) -> dict[str, ProgramFile]:
        """A snapshot of the in-memory file table."""
        return dict(self._files)

    # In-memory table

    def get(self, name: str) -> Optional[ProgramFile]:
        return self._files.get(name)

    def contains(self, name: str) -> bool:
        return name in self._files

    def add(self, file: ProgramFile) -> None:
        """Insert a file, replacing any entry with the same name."""
        self._files[file.name] = file

    def remove(self, name: str) -> bool:
        """Drop an entry. Returns False if there was none."""
        return self._files.pop(name, None) is not None

    def _rekey(self, name: str, new_name: str) -> bool:
        file = self._files.pop(name, None)
        if file is None:
            return False
        file.name = new_name
        self._files[new_name] = file
        return True

    # Space accounting

    def used_space(self) -> int:
        return sum(f.size for f in self._files.values())

    def free_space(self) -> int:
        """Bytes left, or -1 for an unlimited volume."""
        if self._capacity == self.UNLIMITED:
            return self.UNLIMITED
        return self._capacity - self.used_space()

    def is_room_for(self, file: ProgramFile) -> bool:
        if self._capacity == self.UNLIMITED:
            return True
        existing = self._files.get(file.name)
        reclaimed = existing.size if existing is not None else 0
        return file.size <= self.free_space() + reclaimed

    def required_power(self) -> float:
        return self.BASE_POWER

    # File operations

    def load(self, name: str, timestamp_priority: bool = False) -> Optional[ProgramFile]:
        return self._files.get(name)

    def save(self, file: ProgramFile) -> bool:
        if not self.is_room_for(file):
            self._logger.warning(
                "Not enough room for file",
                context={'volume': self._name, 'name': file.name, 'size': file.size}
            )
            return False
        self.add(file)
        return True

    def delete(self, name: str) -> bool:
        return self.remove(name)

    def rename(self, name: str, new_name: str) -> bool:
        if new_name in self._files:
            return False
        return self._rekey(name, new_name)

    def list_files(self) -> List[FileInfo]:
        return [
            FileInfo.from_program_file(f)
            for _, f in sorted(self._files.items())
        ]
