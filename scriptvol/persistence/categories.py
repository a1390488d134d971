"""
Content Categories

Sniffs raw file bytes to decide what kind of content a file holds.
The extension on disk is never consulted.

Author: YSNRFD
Version: 1.0.0
"""

from enum import Enum


KERBOSCRIPT_EXTENSION = "ks"
KOS_MACHINELANGUAGE_EXTENSION = "ksm"

# Leading bytes of every compiled program.
KSM_MAGIC = b"k\x03XE"

SNIFF_LENGTH = len(KSM_MAGIC)

_TEXT_CONTROL_BYTES = frozenset(b"\t\n\r")


class FileCategory(Enum):
    """What a file's bytes turned out to be."""
    OTHER = 0
    TOOSHORT = 1
    ASCII = 2
    KERBOSCRIPT = 3
    KSM = 4

    @property
    def is_text(self) -> bool:
        return self in TEXT_CATEGORIES

    @property
    def normalizes_line_endings(self) -> bool:
        return self in (FileCategory.ASCII, FileCategory.KERBOSCRIPT)


# Categories serialized as UTF-8 text with the script extension.
TEXT_CATEGORIES = frozenset({
    FileCategory.ASCII,
    FileCategory.KERBOSCRIPT,
    FileCategory.OTHER,
    FileCategory.TOOSHORT,
})


def _is_printable(byte: int) -> bool:
    return 32 <= byte < 127 or byte in _TEXT_CONTROL_BYTES


def identify_category(data: bytes) -> FileCategory:
    """
    Classify file content from its leading bytes.

    Args:
        data: The file body, or at least its first few bytes

    Returns:
        KSM if the compiled-program signature is present, TOOSHORT if
        there are not enough bytes to tell, KERBOSCRIPT if the leading
        bytes are readable text, OTHER for anything else.
    """
    head = bytes(data[:SNIFF_LENGTH])

    if head == KSM_MAGIC:
        return FileCategory.KSM

    if len(head) < SNIFF_LENGTH:
        return FileCategory.TOOSHORT

    if all(_is_printable(b) for b in head):
        return FileCategory.KERBOSCRIPT

    return FileCategory.OTHER
