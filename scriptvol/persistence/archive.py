"""
Archive Volume

A volume backed by a directory on the host. Scripts are addressed by
bare logical names; the archive works out which file on disk a name
means, sniffs what the bytes are, and converts line endings between
the host convention and the runtime's.

On disk a logical name ``boot`` can be ``boot.ks`` (script source),
``boot.ksm`` (compiled program) or both. When both exist the script
wins unless the caller asks for the newer file.

Author: YSNRFD
Version: 1.0.0
"""

import errno
import os
from pathlib import Path, PurePath
from typing import Optional, List, Tuple

from .categories import (
    FileCategory,
    TEXT_CATEGORIES,
    KERBOSCRIPT_EXTENSION,
    KOS_MACHINELANGUAGE_EXTENSION,
    identify_category,
)
from .filenames import FilenameUtils
from .program_file import ProgramFile, FileInfo
from .results import OperationResult
from .volume import Volume
from scriptvol.config import ArchiveConfig, get_config, initialize_logging
from scriptvol.exceptions import ArchiveIOError, ContentContractError
from scriptvol.logger import LogLevel, get_logger


class Archive(Volume):
    """
    Host-directory volume.

    Each ``try_*`` operation returns an ``OperationResult``; the plain
    operations (``load``, ``save``, ``delete``, ``rename``,
    ``list_files``) wrap them and return ``None``/``False``/``[]`` on
    any failure. Nothing is raised to the caller.

    The in-memory table is updated as follows:
    - ``load`` replaces the entry for the name with the file just read.
    - ``save`` upserts the entry only after the bytes are on disk.
    - ``delete`` drops the entry before unlinking the file.
    - ``rename`` moves the entry to the new name if there was one.

    Example:
        >>> archive = Archive(ArchiveConfig(root_path='/tmp/ships'))
        >>> archive.save(ProgramFile('boot', string_content='print 1.\\n'))
        True
        >>> archive.load('boot').string_content
        'print 1.\\n'
    """

    POWER_MULTIPLIER = 5

    def __init__(
        self,
        config: Optional[ArchiveConfig] = None,
        newline: Optional[str] = None
    ):
        """
        Args:
            config: Archive settings; the process-wide configuration is
                used when omitted, and logging is set up from it
            newline: Line ending written to disk for text files;
                defaults to the host's ``os.linesep``
        """
        if config is None:
            initialize_logging()
            config = get_config().archive

        super().__init__(name='Archive', renameable=False)
        self._config = config
        self._root = Path(self._config.root_path)
        self._newline = os.linesep if newline is None else newline
        self._logger = get_logger('archive')

        if self._config.create_on_start:
            try:
                self._ensure_root()
            except OSError as e:
                self._logger.warning(
                    "Could not create archive folder, will retry on save",
                    context={'root': str(self._root), 'error': e}
                )

    @property
    def root(self) -> Path:
        return self._root

    @property
    def newline(self) -> str:
        return self._newline

    def _ensure_root(self) -> None:
        self._root.mkdir(parents=True, exist_ok=True)

    def _host_path(self, name: str) -> Path:
        """
        Map a logical name to a path inside the archive folder.

        Absolute names are taken relative to the folder: ``/tmp/boot``
        means ``<root>/tmp/boot``, never the host's ``/tmp/boot``.
        """
        relative = PurePath(name)
        if relative.anchor:
            relative = relative.relative_to(relative.anchor)
        return self._root / relative

    def is_room_for(self, file: ProgramFile) -> bool:
        return True

    def required_power(self) -> float:
        return self.BASE_POWER * self.POWER_MULTIPLIER

    def resolve(self, name: str, timestamp_priority: bool = False) -> Optional[Path]:
        """
        Find the host file a logical name refers to.

        Args:
            name: Logical name. If it has an extension only that exact
                file is considered.
            timestamp_priority: When both a script and a compiled file
                exist, pick the more recently modified one instead of
                always picking the script. On an exact tie the compiled
                file is picked.

        Returns:
            Path to the file, or None if there is no such file
        """
        if not FilenameUtils.basename(name).strip('.'):
            return None

        path = self._host_path(name)
        if FilenameUtils.has_extension(name):
            return path if path.is_file() else None

        script = Path(FilenameUtils.cooked_filename(str(path), KERBOSCRIPT_EXTENSION, True))
        compiled = Path(FilenameUtils.cooked_filename(str(path), KOS_MACHINELANGUAGE_EXTENSION, True))

        script_exists = script.is_file()
        compiled_exists = compiled.is_file()

        if script_exists and compiled_exists and timestamp_priority:
            if script.stat().st_mtime_ns > compiled.stat().st_mtime_ns:
                return script
            return compiled
        if script_exists:
            return script
        if compiled_exists:
            return compiled
        return None

    def _io_failure(self, name: str, operation: str, exc: Exception) -> OperationResult:
        error = ArchiveIOError(name, operation=operation, reason=str(exc))
        error.__cause__ = exc
        self._logger.exception(
            f"Archive {operation} failed",
            exc=exc,
            context={'name': name, 'root': str(self._root)}
        )
        return OperationResult.failure(error)

    # Loading

    @staticmethod
    def _decode(name: str, body: bytes) -> ProgramFile:
        category = identify_category(body)
        if category is FileCategory.KSM:
            return ProgramFile(name, binary_content=body)

        text = body.decode('utf-8')
        if category.normalizes_line_endings:
            text = text.replace('\r\n', '\n')
        return ProgramFile(name, category=category, string_content=text)

    def try_load(self, name: str, timestamp_priority: bool = False) -> OperationResult[ProgramFile]:
        self._logger.debug("Getting file by name", context={'name': name})
        try:
            path = self.resolve(name, timestamp_priority)
            if path is None:
                return OperationResult.not_found()

            with open(path, 'rb') as infile:
                body = infile.read()

            file = self._decode(name, body)
        except Exception as e:
            return self._io_failure(name, 'load', e)

        self.remove(name)
        self.add(file)
        return OperationResult.success(file)

    def load(self, name: str, timestamp_priority: bool = False) -> Optional[ProgramFile]:
        """Read a file from disk into the table. None if missing or unreadable."""
        return self.try_load(name, timestamp_priority).value

    # Saving

    def _encode(self, file: ProgramFile) -> Tuple[bytes, str]:
        if file.category in TEXT_CATEGORIES:
            text = file.string_content or ''
            if self._newline != '\n':
                text = text.replace('\n', self._newline)
            return text.encode('utf-8'), KERBOSCRIPT_EXTENSION

        if file.category is FileCategory.KSM:
            return bytes(file.binary_content or b''), KOS_MACHINELANGUAGE_EXTENSION

        raise ContentContractError(file.name, category=file.category)

    def try_save(self, file: ProgramFile) -> OperationResult[Path]:
        self._logger.info("Saving file", context={'name': file.name})
        try:
            self._ensure_root()
            body, extension = self._encode(file)
            path = self._host_path(FilenameUtils.cooked_filename(file.name, extension, True))
            with open(path, 'wb') as outfile:
                outfile.write(body)
        except ContentContractError as e:
            self._logger.exception(
                "Refusing to save file with unknown content category",
                exc=e,
                level=LogLevel.CRITICAL,
                context={'name': file.name, 'category': file.category}
            )
            return OperationResult.violation(e)
        except Exception as e:
            return self._io_failure(file.name, 'save', e)

        self.add(file)
        return OperationResult.success(path)

    def save(self, file: ProgramFile) -> bool:
        """Write a file to disk, then record it in the table."""
        return self.try_save(file).ok

    # Directory operations

    def try_delete(self, name: str) -> OperationResult[Path]:
        self._logger.info("Deleting file", context={'name': name})
        try:
            path = self.resolve(name)
            if path is None:
                return OperationResult.not_found()

            # The table entry goes first; a failed unlink leaves the file on disk.
            self.remove(name)
            path.unlink()
        except Exception as e:
            return self._io_failure(name, 'delete', e)

        return OperationResult.success(path)

    def delete(self, name: str) -> bool:
        return self.try_delete(name).ok

    def try_rename(self, name: str, new_name: str) -> OperationResult[Path]:
        self._logger.info("Renaming file", context={'name': name, 'new_name': new_name})
        try:
            source = self.resolve(name)
            if source is None:
                return OperationResult.not_found()

            destination = str(self._host_path(new_name))
            if not FilenameUtils.has_extension(new_name):
                destination += FilenameUtils.splitext(source.name)[1]
            destination = Path(destination)

            if destination.exists():
                raise FileExistsError(errno.EEXIST, "Destination already exists", str(destination))

            source.rename(destination)
        except Exception as e:
            return self._io_failure(name, 'rename', e)

        self._rekey(name, FilenameUtils.bare_name(new_name))
        return OperationResult.success(destination)

    def rename(self, name: str, new_name: str) -> bool:
        """
        Move a file on disk to a new name.

        If ``new_name`` has no extension the source file's extension is
        kept. An in-memory entry under ``name`` is moved to the bare
        destination name (``launch.txt`` is kept as ``launch``).
        """
        return self.try_rename(name, new_name).ok

    def try_list_files(self) -> OperationResult[List[FileInfo]]:
        self._logger.debug("Listing files", context={'root': str(self._root)})
        try:
            paths = sorted(p for p in self._root.iterdir() if p.is_file())
            return OperationResult.success([FileInfo.from_path(p) for p in paths])
        except FileNotFoundError:
            return OperationResult.success([])
        except Exception as e:
            return self._io_failure(str(self._root), 'list', e)

    def list_files(self) -> List[FileInfo]:
        """Describe every file in the archive folder. Empty if it does not exist."""
        return self.try_list_files().value or []
