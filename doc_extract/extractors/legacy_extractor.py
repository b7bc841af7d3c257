"""
Extractor for legacy Office and presentation formats (.doc, .ppt, .pptx).

The underlying tools need a real file, so buffers are staged to disk
first and removed afterwards.
"""

from pathlib import Path
from typing import ClassVar

from doc_extract.config import Settings
from doc_extract.errors import ErrorCode
from doc_extract.extractors import legacy_tools
from doc_extract.extractors.base import DocumentExtractor
from doc_extract.extractors.legacy_tools import STAGED_OPTIONS, LegacyOptions
from doc_extract.formats import SupportedFormat
from doc_extract.models import DocumentContent
from doc_extract.staging import StagingArea


class LegacyExtractor(DocumentExtractor):
    """
    Extracts text from Word 97-2003 documents and PowerPoint presentations.

    Path input is handed to the tool directly and may yield an empty
    result. Buffer input is staged, and an empty result is an error.
    """

    SUPPORTED_FORMATS: ClassVar[tuple[SupportedFormat, ...]] = (
        SupportedFormat.DOC,
        SupportedFormat.PPT,
        SupportedFormat.PPTX,
    )
    LABEL: ClassVar[str] = "document"
    PATH_ERROR_CODE: ClassVar[ErrorCode] = ErrorCode.TEXTRACT_READ_ERROR
    BUFFER_ERROR_CODE: ClassVar[ErrorCode] = ErrorCode.TEXTRACT_BUFFER_READ_ERROR

    def __init__(self, settings: Settings | None = None, staging: StagingArea | None = None):
        """
        Initialize the extractor.

        Args:
            settings: Configuration settings. Uses global settings if not provided.
            staging: Staging area for buffers. Built from settings if not provided.
        """
        super().__init__(settings)
        self._staging = staging or StagingArea(
            self._settings.staging_dir, debug=self._settings.debug
        )

    def _read_path(self, file_path: Path, file_size: int | None) -> DocumentContent:
        text = legacy_tools.extract_text(
            file_path, LegacyOptions(), timeout=self._settings.legacy_timeout_seconds
        )
        return self._create_result(
            text or "", file_path.name, self._size_on_disk(file_path, file_size)
        )

    def _read_buffer(
        self, buffer: bytes, file_name: str, kind: SupportedFormat | None
    ) -> DocumentContent:
        extension = kind.value if kind is not None else None
        with self._staging.stage(buffer, file_name, extension) as staged_path:
            text = legacy_tools.extract_text(
                staged_path, STAGED_OPTIONS, timeout=self._settings.legacy_timeout_seconds
            )

        if not text:
            raise ValueError("No text content could be extracted from the file")

        return self._create_result(text, file_name, len(buffer))
