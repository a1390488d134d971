"""
Program File Module

The in-memory form of a file held by a volume, and the descriptor
returned when listing a volume's contents.

Author: YSNRFD
Version: 1.0.0
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .categories import (
    FileCategory,
    KERBOSCRIPT_EXTENSION,
    KOS_MACHINELANGUAGE_EXTENSION,
)
from .filenames import FilenameUtils


class ProgramFile:
    """
    A file as the runtime sees it.

    Holds either text (``string_content``) or compiled bytes
    (``binary_content``), never both. Assigning one clears the other.
    Assigning bytes makes the file KSM; assigning text keeps a text
    category if the file already had one and otherwise makes it
    KERBOSCRIPT.

    Example:
        >>> f = ProgramFile('boot', string_content='print 1\\n')
        >>> f.category
        <FileCategory.KERBOSCRIPT: 3>
    """

    def __init__(
        self,
        name: str,
        category: Optional[FileCategory] = None,
        string_content: Optional[str] = None,
        binary_content: Optional[bytes] = None
    ):
        if string_content is not None and binary_content is not None:
            raise ValueError("A program file holds text or bytes, not both")

        self.name = name
        self.category = category
        self._string_content: Optional[str] = None
        self._binary_content: Optional[bytes] = None

        if binary_content is not None:
            self.binary_content = binary_content
        else:
            self.string_content = string_content if string_content is not None else ''

    @property
    def string_content(self) -> Optional[str]:
        return self._string_content

    @string_content.setter
    def string_content(self, value: str) -> None:
        self._string_content = value
        self._binary_content = None
        if not isinstance(self.category, FileCategory) or not self.category.is_text:
            self.category = FileCategory.KERBOSCRIPT

    @property
    def binary_content(self) -> Optional[bytes]:
        return self._binary_content

    @binary_content.setter
    def binary_content(self, value: bytes) -> None:
        self._binary_content = bytes(value)
        self._string_content = None
        self.category = FileCategory.KSM

    @property
    def is_binary(self) -> bool:
        return self._binary_content is not None

    @property
    def size(self) -> int:
        """Size of the content in bytes (text counted as UTF-8)."""
        if self._binary_content is not None:
            return len(self._binary_content)
        return len((self._string_content or '').encode('utf-8'))

    @property
    def extension(self) -> str:
        """The extension this file is stored under on a host volume."""
        if self.category is FileCategory.KSM:
            return KOS_MACHINELANGUAGE_EXTENSION
        return KERBOSCRIPT_EXTENSION

    def copy(self) -> 'ProgramFile':
        return ProgramFile(
            self.name,
            category=self.category,
            string_content=self._string_content,
            binary_content=self._binary_content,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProgramFile):
            return NotImplemented
        return (
            self.name == other.name
            and self.category == other.category
            and self._string_content == other._string_content
            and self._binary_content == other._binary_content
        )

    def __repr__(self) -> str:
        return (
            f"ProgramFile(name={self.name!r}, "
            f"category={getattr(self.category, 'name', self.category)}, "
            f"size={self.size})"
        )


@dataclass(frozen=True)
class FileInfo:
    """A volume listing entry."""
    name: str
    extension: str
    size: int
    modified: Optional[float] = None
    created: Optional[float] = None

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> 'FileInfo':
        """Describe a host file."""
        path = Path(path)
        st = path.stat()
        return cls(
            name=FilenameUtils.bare_name(path.name),
            extension=FilenameUtils.splitext(path.name)[1].lstrip('.'),
            size=st.st_size,
            modified=st.st_mtime,
            created=getattr(st, 'st_birthtime', st.st_ctime),
        )

    @classmethod
    def from_program_file(cls, file: ProgramFile) -> 'FileInfo':
        """Describe a file held only in memory."""
        return cls(
            name=FilenameUtils.bare_name(file.name),
            extension=file.extension,
            size=file.size,
        )

    @property
    def filename(self) -> str:
        return f"{self.name}.{self.extension}" if self.extension else self.name
