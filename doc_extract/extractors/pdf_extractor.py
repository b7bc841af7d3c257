"""
PDF document extractor using PyMuPDF.

Opens the PDF from its byte stream, so path and buffer input share
one code path.
"""

import threading
from pathlib import Path
from typing import ClassVar

import fitz  # PyMuPDF

from doc_extract.errors import ErrorCode
from doc_extract.extractors.base import DocumentExtractor, build_metadata
from doc_extract.formats import SupportedFormat
from doc_extract.models import PdfContent, PdfMetadata

# PyMuPDF does not support concurrent use from several threads
_FITZ_LOCK = threading.Lock()


class PDFExtractor(DocumentExtractor):
    """
    Extracts text content from PDF files.

    Captures the page count and the document information dictionary
    reported by PyMuPDF alongside the text.
    """

    SUPPORTED_FORMATS: ClassVar[tuple[SupportedFormat, ...]] = (SupportedFormat.PDF,)
    LABEL: ClassVar[str] = "PDF"
    PATH_ERROR_CODE: ClassVar[ErrorCode] = ErrorCode.PDF_READ_ERROR
    BUFFER_ERROR_CODE: ClassVar[ErrorCode] = ErrorCode.PDF_BUFFER_READ_ERROR

    PAGE_SEPARATOR: ClassVar[str] = "\n\n"

    def _read_path(self, file_path: Path, file_size: int | None) -> PdfContent:
        data = file_path.read_bytes()
        size = file_size if file_size is not None else len(data)
        return self._parse(data, file_path.name, size)

    def _read_buffer(
        self, buffer: bytes, file_name: str, kind: SupportedFormat | None
    ) -> PdfContent:
        return self._parse(buffer, file_name, len(buffer))

    def _parse(self, data: bytes, file_name: str, file_size: int) -> PdfContent:
        """
        Parse PDF bytes into a PdfContent.

        Args:
            data: Raw PDF bytes.
            file_name: Display name of the source.
            file_size: Size of the source in bytes.

        Returns:
            PdfContent with text, page count and document info.
        """
        with _FITZ_LOCK, fitz.open(stream=data, filetype="pdf") as doc:
            page_count = doc.page_count
            text = self.PAGE_SEPARATOR.join(page.get_text("text") for page in doc)
            info = dict(doc.metadata or {})

        return PdfContent(
            text=text,
            metadata=PdfMetadata(
                **build_metadata(text, file_name, file_size, pages=page_count, info=info)
            ),
        )
