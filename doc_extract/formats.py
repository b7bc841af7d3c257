"""
Document format resolution.

Maps file names and MIME types onto the closed set of supported
document kinds.
"""

from enum import Enum
from pathlib import PurePath


class SupportedFormat(str, Enum):
    """Document kinds the reader can extract."""

    PDF = "pdf"
    DOCX = "docx"
    DOC = "doc"
    PPTX = "pptx"
    PPT = "ppt"
    TXT = "txt"


# MIME type -> document kind
_MIME_MAP: dict[str, SupportedFormat] = {
    "application/pdf": SupportedFormat.PDF,
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": SupportedFormat.DOCX,
    "application/msword": SupportedFormat.DOC,
    "application/vnd.openxmlformats-officedocument.presentationml.presentation": SupportedFormat.PPTX,
    "application/vnd.ms-powerpoint": SupportedFormat.PPT,
    "text/plain": SupportedFormat.TXT,
}

_SUPPORTED_VALUES: frozenset[str] = frozenset(f.value for f in SupportedFormat)


def extension_of(name: str | PurePath) -> str:
    """
    Return the lower-cased extension of a file name, without the dot.

    Returns an empty string when the final path component has no extension.
    """
    return PurePath(name).suffix.lower().lstrip(".")


def kind_from_mime_type(mime_type: str | None) -> SupportedFormat | None:
    """Look up the document kind for a MIME type, or None if unknown."""
    if not mime_type:
        return None
    return _MIME_MAP.get(mime_type)


def is_supported(kind: str | None) -> bool:
    """Check whether a kind (or bare extension) is one of the supported formats."""
    if kind is None:
        return False
    value = kind.value if isinstance(kind, SupportedFormat) else kind
    return value in _SUPPORTED_VALUES


def resolve_kind(name: str | PurePath, mime_type: str | None = None) -> SupportedFormat | None:
    """
    Resolve the document kind from a file name, falling back to a MIME type.

    The extension always wins when it is recognized, even if the MIME
    type disagrees.

    Args:
        name: File name or path.
        mime_type: Optional declared media type.

    Returns:
        The resolved kind, or None if neither source is recognized.
    """
    extension = extension_of(name)
    if is_supported(extension):
        return SupportedFormat(extension)
    return kind_from_mime_type(mime_type)


def supported_formats() -> list[str]:
    """Return the supported kinds in declaration order."""
    return [f.value for f in SupportedFormat]
