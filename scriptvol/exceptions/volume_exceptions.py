"""
Volume Exceptions

Exceptions raised inside volume operations. The archive's public
operations never let these escape: they are caught at the operation
boundary and turned into a result kind (see ``persistence.results``).

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional, Any


class VolumeException(Exception):
    """
    Base exception for all volume-related errors.

    Attributes:
        message: Human-readable error description
        path: File path or logical name associated with the error
        error_code: Numeric error code for programmatic handling
        context: Additional context about the error
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.path = path
        self.error_code = error_code or 4000
        self.context = context or {}
        if path:
            self.context["path"] = path

    def __str__(self) -> str:
        base = f"[Error {self.error_code}] {self.message}"
        if self.path:
            base = f"{base} (path={self.path})"
        return base


class ArchiveIOError(VolumeException):
    """
    A host-level read, write, delete or move failed.

    Wraps the underlying ``OSError`` (or decode error) so callers get the
    logical name and operation alongside the original cause.

    Example:
        >>> raise ArchiveIOError("boot", operation="save")
    """

    def __init__(
        self,
        path: str,
        operation: Optional[str] = None,
        reason: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if operation:
            ctx["operation"] = operation
        if reason:
            ctx["reason"] = reason
        super().__init__(
            message=f"Archive I/O failed: {path}",
            path=path,
            error_code=4010,
            context=ctx
        )
        self.operation = operation
        self.reason = reason


class ContentContractError(VolumeException):
    """
    A program file carries content the writer cannot serialize.

    This is a programming error, not an I/O condition: every category
    the volume knows has a serialization path, so reaching this means a
    caller built a file the volume was never meant to hold.
    """

    def __init__(
        self,
        name: str,
        category: Any = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        ctx["category"] = category
        super().__init__(
            message=f"Cannot serialize file content: {name}",
            path=name,
            error_code=4011,
            context=ctx
        )
        self.category = category


class FileNameError(VolumeException):
    """The logical name cannot be turned into a host filename."""

    def __init__(
        self,
        name: str,
        reason: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if reason:
            ctx["reason"] = reason
        super().__init__(
            message=f"Invalid file name: {name!r}",
            path=name or None,
            error_code=4012,
            context=ctx
        )
        self.reason = reason
