"""
Filename Utilities

Extension handling for logical file names: splitting, testing and
"cooking" a bare name into a concrete filename.

Author: YSNRFD
Version: 1.0.0
"""

import os
from typing import Tuple

from scriptvol.exceptions import FileNameError


_SEPARATORS = ('/', os.sep) if os.altsep is None else ('/', os.sep, os.altsep)


class FilenameUtils:
    """
    Static helpers for logical file names.

    A name may be a bare script name (``boot``), a name with an
    extension (``boot.ks``) or a host path. Only the last path
    component is ever inspected for an extension, and a leading dot
    does not start one (``.profile`` has no extension).
    """

    @staticmethod
    def basename(path: str) -> str:
        """Get the last component of a path."""
        cut = max(path.rfind(sep) for sep in _SEPARATORS)
        return path[cut + 1:]

    @staticmethod
    def splitext(path: str) -> Tuple[str, str]:
        """
        Split a path into root and extension.

        Args:
            path: Path string

        Returns:
            Tuple of (root, extension); the extension includes the dot
            and is empty when there is none.
        """
        basename = FilenameUtils.basename(path)
        stem = basename.lstrip('.')

        if '.' not in stem:
            return (path, '')

        ext = '.' + stem.rsplit('.', 1)[1]
        if ext == '.':
            return (path, '')

        return (path[:-len(ext)], ext)

    @staticmethod
    def has_extension(path: str) -> bool:
        """Check if the last path component carries an extension."""
        return bool(FilenameUtils.splitext(path)[1])

    @staticmethod
    def bare_name(path: str) -> str:
        """Get the last path component without its extension."""
        return FilenameUtils.splitext(FilenameUtils.basename(path))[0]

    @staticmethod
    def cooked_filename(base: str, extension: str, force: bool = False) -> str:
        """
        Derive a concrete filename from a logical name.

        Args:
            base: Bare name or path
            extension: Extension to apply, with or without a leading dot
            force: If True the result always ends in ``extension``,
                replacing whatever extension ``base`` had. If False the
                extension is only added when ``base`` has none.

        Returns:
            The cooked filename

        Raises:
            FileNameError: If ``base`` or ``extension`` is empty
        """
        extension = extension.lstrip('.')
        if not extension:
            raise FileNameError(base, reason="empty extension")
        if not FilenameUtils.basename(base).strip('.'):
            raise FileNameError(base, reason="empty name")

        root, current = FilenameUtils.splitext(base)
        wanted = '.' + extension

        if not current:
            # A lone trailing dot is an empty extension.
            if base.endswith('.'):
                base = base[:-1]
            return base + wanted
        if not force or current == wanted:
            return base
        return root + wanted
