"""
Base classes for document extraction.

Defines the abstract interface that all extractors must implement,
ensuring consistent result shapes and error classification across
formats and across path and buffer input.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, ClassVar

from doc_extract.config import Settings, get_settings
from doc_extract.errors import DocumentReaderError, ErrorCode
from doc_extract.formats import SupportedFormat
from doc_extract.models import DocumentContent, DocumentMetadata

logger = logging.getLogger(__name__)


def count_words(text: str) -> int:
    """Count maximal runs of non-whitespace characters, treating a BOM as whitespace."""
    return len(text.replace("\ufeff", " ").split())


def build_metadata(text: str, file_name: str, file_size: int | None, **extra: Any) -> dict[str, Any]:
    """
    Build the metadata fields shared by every extraction result.

    Args:
        text: The extracted text.
        file_name: Display name of the source.
        file_size: Size of the source in bytes.
        **extra: Format-specific fields (e.g. pages, info).

    Returns:
        Keyword arguments for a DocumentMetadata (or subclass) constructor.
    """
    return {
        "words": count_words(text),
        "characters": len(text),
        "file_size": file_size,
        "file_name": file_name,
        **extra,
    }


class DocumentExtractor(ABC):
    """
    Abstract base class for document extractors.

    Subclasses implement `_read_path` and `_read_buffer`; the public
    `extract` and `extract_buffer` methods wrap any unclassified failure
    in a DocumentReaderError carrying the subclass's error codes.
    """

    # Class variables: each subclass must override these
    SUPPORTED_FORMATS: ClassVar[tuple[SupportedFormat, ...]] = ()
    LABEL: ClassVar[str] = "document"
    PATH_ERROR_CODE: ClassVar[ErrorCode] = ErrorCode.READ_ERROR
    BUFFER_ERROR_CODE: ClassVar[ErrorCode] = ErrorCode.BUFFER_READ_ERROR

    def __init__(self, settings: Settings | None = None):
        """
        Initialize the extractor.

        Args:
            settings: Configuration settings. Uses global settings if not provided.
        """
        self._settings = settings or get_settings()

    @classmethod
    def supports(cls, kind: SupportedFormat | str) -> bool:
        """
        Check if this extractor handles the given document kind.

        Args:
            kind: A SupportedFormat or bare extension such as "pdf".

        Returns:
            True if this extractor can handle the format.
        """
        value = kind.value if isinstance(kind, SupportedFormat) else str(kind).lower()
        return any(f.value == value for f in cls.SUPPORTED_FORMATS)

    def extract(self, file_path: Path | str, file_size: int | None = None) -> DocumentContent:
        """
        Extract text content from a document on disk.

        Args:
            file_path: Path to the document file.
            file_size: Known size in bytes; read from the filesystem if omitted.

        Returns:
            DocumentContent (or a format-specific subclass).

        Raises:
            DocumentReaderError: With the extractor's path error code.
        """
        path = Path(file_path)
        try:
            return self._read_path(path, file_size)
        except DocumentReaderError:
            raise
        except Exception as e:
            self._log("Error reading %s %s: %s", self.LABEL, path, e)
            raise DocumentReaderError(
                f"Failed to read {self.LABEL}: {e}", self.PATH_ERROR_CODE, cause=e
            ) from e

    def extract_buffer(
        self,
        buffer: bytes,
        file_name: str,
        kind: SupportedFormat | None = None,
    ) -> DocumentContent:
        """
        Extract text content from an in-memory document.

        Args:
            buffer: Raw document bytes.
            file_name: Display name of the document.
            kind: Resolved document kind, for extractors serving several formats.

        Returns:
            DocumentContent (or a format-specific subclass).

        Raises:
            DocumentReaderError: With the extractor's buffer error code.
        """
        try:
            return self._read_buffer(bytes(buffer), file_name, kind)
        except DocumentReaderError:
            raise
        except Exception as e:
            self._log("Error reading %s from buffer %s: %s", self.LABEL, file_name, e)
            raise DocumentReaderError(
                f"Failed to read {self.LABEL} from buffer: {e}", self.BUFFER_ERROR_CODE, cause=e
            ) from e

    @abstractmethod
    def _read_path(self, file_path: Path, file_size: int | None) -> DocumentContent:
        """Read a document from disk. Exceptions are classified by `extract`."""
        ...

    @abstractmethod
    def _read_buffer(
        self, buffer: bytes, file_name: str, kind: SupportedFormat | None
    ) -> DocumentContent:
        """Read a document from memory. Exceptions are classified by `extract_buffer`."""
        ...

    def _create_result(self, text: str, file_name: str, file_size: int | None) -> DocumentContent:
        """
        Create a plain DocumentContent from extracted text.

        Args:
            text: The extracted text content.
            file_name: Display name of the source.
            file_size: Size of the source in bytes.

        Returns:
            DocumentContent instance.
        """
        return DocumentContent(
            text=text,
            metadata=DocumentMetadata(**build_metadata(text, file_name, file_size)),
        )

    @staticmethod
    def _size_on_disk(file_path: Path, file_size: int | None) -> int:
        """Return the known size, or the stat size when none was given."""
        return file_size if file_size is not None else file_path.stat().st_size

    def _log(self, message: str, *args: Any) -> None:
        if self._settings.debug:
            logger.warning(message, *args)
