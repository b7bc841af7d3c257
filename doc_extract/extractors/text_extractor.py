"""
Plain text document extractor.

Decodes .txt files as UTF-8, keeping the content verbatim.
"""

from pathlib import Path
from typing import ClassVar

from doc_extract.errors import ErrorCode
from doc_extract.extractors.base import DocumentExtractor
from doc_extract.formats import SupportedFormat
from doc_extract.models import DocumentContent


class TextExtractor(DocumentExtractor):
    """
    Extracts text from plain text files.

    Invalid UTF-8 sequences are replaced rather than rejected, and an
    empty file is a valid, empty result.
    """

    SUPPORTED_FORMATS: ClassVar[tuple[SupportedFormat, ...]] = (SupportedFormat.TXT,)
    LABEL: ClassVar[str] = "text file"
    PATH_ERROR_CODE: ClassVar[ErrorCode] = ErrorCode.TEXT_READ_ERROR
    BUFFER_ERROR_CODE: ClassVar[ErrorCode] = ErrorCode.TEXT_BUFFER_READ_ERROR

    ENCODING: ClassVar[str] = "utf-8"

    def _read_path(self, file_path: Path, file_size: int | None) -> DocumentContent:
        data = file_path.read_bytes()
        size = file_size if file_size is not None else len(data)
        return self._create_result(self._decode(data), file_path.name, size)

    def _read_buffer(
        self, buffer: bytes, file_name: str, kind: SupportedFormat | None
    ) -> DocumentContent:
        return self._create_result(self._decode(buffer), file_name, len(buffer))

    def _decode(self, data: bytes) -> str:
        return data.decode(self.ENCODING, errors="replace")
