"""
Microsoft Word document extractor using mammoth.

Extracts raw text and an HTML rendering from .docx files.
Legacy .doc files are handled by the legacy-format extractor.
"""

import io
from pathlib import Path
from typing import Any, ClassVar, Iterable

import mammoth

from doc_extract.errors import ErrorCode
from doc_extract.extractors.base import DocumentExtractor, build_metadata
from doc_extract.formats import SupportedFormat
from doc_extract.models import DocumentMetadata, DocxContent


class DocxExtractor(DocumentExtractor):
    """
    Extracts text content from Word documents (.docx).

    Runs two mammoth conversions over the same bytes:
    - raw text, which becomes the result text
    - HTML, kept alongside it
    Diagnostics from both conversions are concatenated.
    """

    SUPPORTED_FORMATS: ClassVar[tuple[SupportedFormat, ...]] = (SupportedFormat.DOCX,)
    LABEL: ClassVar[str] = "DOCX"
    PATH_ERROR_CODE: ClassVar[ErrorCode] = ErrorCode.DOCX_READ_ERROR
    BUFFER_ERROR_CODE: ClassVar[ErrorCode] = ErrorCode.DOCX_BUFFER_READ_ERROR

    def _read_path(self, file_path: Path, file_size: int | None) -> DocxContent:
        data = file_path.read_bytes()
        size = file_size if file_size is not None else len(data)
        return self._convert(data, file_path.name, size)

    def _read_buffer(
        self, buffer: bytes, file_name: str, kind: SupportedFormat | None
    ) -> DocxContent:
        return self._convert(buffer, file_name, len(buffer))

    def _convert(self, data: bytes, file_name: str, file_size: int) -> DocxContent:
        """
        Convert DOCX bytes to text and HTML.

        Args:
            data: Raw .docx bytes.
            file_name: Display name of the source.
            file_size: Size of the source in bytes.

        Returns:
            DocxContent with text, html and messages.
        """
        # Each conversion gets its own stream; mammoth reads the zip from the start
        text_result = mammoth.extract_raw_text(io.BytesIO(data))
        html_result = mammoth.convert_to_html(io.BytesIO(data))

        text = text_result.value
        messages = self._messages(text_result.messages) + self._messages(html_result.messages)

        return DocxContent(
            text=text,
            html=html_result.value,
            messages=messages,
            metadata=DocumentMetadata(**build_metadata(text, file_name, file_size)),
        )

    @staticmethod
    def _messages(messages: Iterable[Any]) -> tuple[dict[str, Any], ...]:
        """Convert mammoth messages to plain dictionaries."""
        return tuple(
            {"type": getattr(m, "type", "info"), "message": getattr(m, "message", str(m))}
            for m in messages
        )
