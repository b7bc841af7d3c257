"""
doc-extract - text and statistics from office documents.

Reads PDF, DOCX, DOC, PPTX, PPT and TXT documents from a file path or an
in-memory buffer and returns a uniform content-plus-metadata record.
"""

from doc_extract.config import Settings, get_settings
from doc_extract.errors import DocumentReaderError, ErrorCode
from doc_extract.formats import SupportedFormat
from doc_extract.models import (
    BufferInput,
    DocumentContent,
    DocumentMetadata,
    DocxContent,
    PdfContent,
    PdfMetadata,
)
from doc_extract.reader import DocumentReader, read_document, read_document_from_buffer

__version__ = "1.0.4"

__all__ = [
    "BufferInput",
    "DocumentContent",
    "DocumentMetadata",
    "DocumentReader",
    "DocumentReaderError",
    "DocxContent",
    "ErrorCode",
    "PdfContent",
    "PdfMetadata",
    "Settings",
    "SupportedFormat",
    "get_settings",
    "read_document",
    "read_document_from_buffer",
]
