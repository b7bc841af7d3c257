"""
Document reader - the public entry point.

Validates inputs, resolves the document kind, dispatches to the
matching extractor and classifies failures. Batch reads fan out over
a thread pool and fail as a whole on the first failed input.
"""

import logging
import os
import stat
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path
from typing import Any, Callable, Sequence

from doc_extract.config import Settings, get_settings
from doc_extract.errors import DocumentReaderError, ErrorCode
from doc_extract.extractors.base import DocumentExtractor
from doc_extract.extractors.factory import build_extractors
from doc_extract.formats import (
    SupportedFormat,
    extension_of,
    is_supported,
    resolve_kind,
    supported_formats,
)
from doc_extract.models import BufferInput, DocumentContent, DocxContent, PdfContent

logger = logging.getLogger(__name__)


class DocumentReader:
    """
    Reads documents from disk or memory into DocumentContent records.

    Classified errors raised by validation or extractors propagate
    unchanged; anything else is wrapped at this boundary.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        debug: bool | None = None,
        staging_dir: Path | str | None = None,
    ):
        """
        Initialize the reader.

        Args:
            settings: Configuration settings. Uses global settings if not provided.
            debug: Override `settings.debug`.
            staging_dir: Override `settings.staging_dir`.
        """
        base = settings or get_settings()
        updates: dict[str, Any] = {}
        if debug is not None:
            updates["debug"] = debug
        if staging_dir is not None:
            updates["staging_dir"] = Path(staging_dir)
        self._settings = base.model_copy(update=updates) if updates else base
        self._extractors = build_extractors(self._settings)

    @property
    def settings(self) -> Settings:
        return self._settings

    # ==========================================================================
    # Single documents
    # ==========================================================================

    def read_document(self, file_path: Path | str) -> DocumentContent:
        """
        Read any supported document from disk.

        Args:
            file_path: Path to the document.

        Returns:
            DocumentContent (PdfContent or DocxContent for those formats).

        Raises:
            DocumentReaderError: Classified by the failing step, or READ_ERROR.
        """
        path = Path(file_path)
        try:
            self.validate_file(path)
            kind = resolve_kind(path)
            if kind is None:
                raise DocumentReaderError(
                    f"Unsupported file format: {extension_of(path)}", ErrorCode.UNSUPPORTED_FORMAT
                )
            file_size = path.stat().st_size
            return self._extractor_for(kind).extract(path, file_size)
        except DocumentReaderError:
            raise
        except Exception as e:
            self._log("Error reading document %s: %s", path, e)
            raise DocumentReaderError(
                f"Failed to read document: {e}", ErrorCode.READ_ERROR, cause=e
            ) from e

    def read_document_from_buffer(
        self,
        buffer: bytes,
        file_name: str,
        mime_type: str | None = None,
    ) -> DocumentContent:
        """
        Read any supported document from memory.

        The kind is resolved from the file name's extension, falling back
        to the MIME type.

        Args:
            buffer: Raw document bytes.
            file_name: Display name of the document.
            mime_type: Optional declared media type.

        Returns:
            DocumentContent (PdfContent or DocxContent for those formats).

        Raises:
            DocumentReaderError: UNSUPPORTED_BUFFER_FORMAT, an extractor code,
                or BUFFER_READ_ERROR.
        """
        try:
            kind = resolve_kind(file_name, mime_type)
            if kind is None:
                declared = extension_of(file_name) or mime_type or ""
                raise DocumentReaderError(
                    f"Unsupported format for buffer reading: {declared}",
                    ErrorCode.UNSUPPORTED_BUFFER_FORMAT,
                )
            return self._extractor_for(kind).extract_buffer(buffer, file_name, kind)
        except DocumentReaderError:
            raise
        except Exception as e:
            self._log("Error reading document from buffer %s: %s", file_name, e)
            raise DocumentReaderError(
                f"Failed to read document from buffer: {e}", ErrorCode.BUFFER_READ_ERROR, cause=e
            ) from e

    def read_pdf(self, file_path: Path | str, file_size: int | None = None) -> PdfContent:
        """Read a PDF file from disk."""
        return self._extractors[SupportedFormat.PDF].extract(file_path, file_size)  # type: ignore[return-value]

    def read_docx(self, file_path: Path | str, file_size: int | None = None) -> DocxContent:
        """Read a DOCX file from disk, including its HTML rendering."""
        return self._extractors[SupportedFormat.DOCX].extract(file_path, file_size)  # type: ignore[return-value]

    def read_powerpoint(self, file_path: Path | str, file_size: int | None = None) -> DocumentContent:
        """Read a .ppt or .pptx file from disk."""
        return self._extractors[SupportedFormat.PPTX].extract(file_path, file_size)

    # ==========================================================================
    # Batches
    # ==========================================================================

    def read_multiple_documents(self, file_paths: Sequence[Path | str]) -> list[DocumentContent]:
        """
        Read several documents from disk concurrently.

        All reads run to completion. If any failed, the whole batch fails
        with an error naming the first failed path; no partial results are
        returned.

        Args:
            file_paths: Paths to read.

        Returns:
            Results in input order.

        Raises:
            DocumentReaderError: MULTI_READ_ERROR wrapping the first failure.
        """
        paths = list(file_paths)
        futures = self._run_all(self.read_document, [(path,) for path in paths])

        for path, future in zip(paths, futures):
            error = future.exception()
            if error is not None:
                self._log("Failed to read document %s: %s", path, error)
                raise DocumentReaderError(
                    f"Failed to read document {path}: {_message_of(error)}",
                    ErrorCode.MULTI_READ_ERROR,
                    cause=error,
                ) from error

        return [future.result() for future in futures]

    def read_multiple_from_buffers(self, items: Sequence[BufferInput]) -> list[DocumentContent]:
        """
        Read several in-memory documents concurrently.

        Same all-or-nothing semantics as `read_multiple_documents`.

        Args:
            items: Buffers with their display names and optional MIME types.

        Returns:
            Results in input order.

        Raises:
            DocumentReaderError: MULTI_BUFFER_READ_ERROR wrapping the first failure.
        """
        inputs = list(items)
        futures = self._run_all(
            self.read_document_from_buffer,
            [(item.buffer, item.file_name, item.mime_type) for item in inputs],
        )

        for item, future in zip(inputs, futures):
            error = future.exception()
            if error is not None:
                self._log("Failed to read buffer %s: %s", item.file_name, error)
                raise DocumentReaderError(
                    f"Failed to read buffer {item.file_name}: {_message_of(error)}",
                    ErrorCode.MULTI_BUFFER_READ_ERROR,
                    cause=error,
                ) from error

        return [future.result() for future in futures]

    # ==========================================================================
    # Queries
    # ==========================================================================

    def is_format_supported(self, file_path: Path | str) -> bool:
        """Check whether the path's extension is a supported format."""
        return is_supported(extension_of(file_path))

    def is_format_supported_by_name(self, file_name: str) -> bool:
        """Check whether a display name's extension is a supported format."""
        return is_supported(extension_of(file_name))

    def get_supported_formats(self) -> list[str]:
        """Return the supported format extensions."""
        return supported_formats()

    def validate_file(self, file_path: Path | str) -> None:
        """
        Validate that a path is a readable, regular file of a supported format.

        Args:
            file_path: Path to validate.

        Raises:
            DocumentReaderError: VALIDATION_ERROR if the path cannot be accessed,
                INVALID_FILE_PATH if it is not a regular file,
                UNSUPPORTED_FORMAT if its extension is not supported.
        """
        path = Path(file_path)
        try:
            if not os.access(path, os.R_OK):
                reason = "permission denied" if path.exists() else "no such file or directory"
                raise DocumentReaderError(
                    f"File validation failed: {reason}: '{path}'", ErrorCode.VALIDATION_ERROR
                )
            stats = path.stat()
        except DocumentReaderError:
            raise
        except OSError as e:
            raise DocumentReaderError(
                f"File validation failed: {e}", ErrorCode.VALIDATION_ERROR, cause=e
            ) from e

        if not stat.S_ISREG(stats.st_mode):
            raise DocumentReaderError("Path is not a file", ErrorCode.INVALID_FILE_PATH)

        if not self.is_format_supported(path):
            raise DocumentReaderError(
                f"Unsupported file format. Supported formats: {', '.join(supported_formats())}",
                ErrorCode.UNSUPPORTED_FORMAT,
            )

    # ==========================================================================
    # Helpers
    # ==========================================================================

    def _extractor_for(self, kind: SupportedFormat) -> DocumentExtractor:
        return self._extractors[kind]

    def _run_all(self, func: Callable[..., DocumentContent], calls: list[tuple]) -> list[Future]:
        """Submit every call to a thread pool and wait for all of them to settle."""
        if not calls:
            return []
        with ThreadPoolExecutor(max_workers=self._settings.max_workers) as executor:
            futures = [executor.submit(func, *args) for args in calls]
        return futures

    def _log(self, message: str, *args: Any) -> None:
        if self._settings.debug:
            logger.warning(message, *args)


def _message_of(error: BaseException) -> str:
    if isinstance(error, DocumentReaderError):
        return error.message
    return str(error)


# ==============================================================================
# Convenience functions
# ==============================================================================


def read_document(file_path: Path | str) -> DocumentContent:
    """Read a document from disk with a default reader."""
    return DocumentReader().read_document(file_path)


def read_document_from_buffer(
    buffer: bytes,
    file_name: str,
    mime_type: str | None = None,
) -> DocumentContent:
    """Read a document from memory with a default reader."""
    return DocumentReader().read_document_from_buffer(buffer, file_name, mime_type)
