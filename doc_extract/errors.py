"""
Error types for document reading.

Every failure surfaced by the reader is a DocumentReaderError carrying
one of the ErrorCode classifications below.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Classification codes attached to DocumentReaderError."""

    # Validation and format resolution
    UNSUPPORTED_FORMAT = "UNSUPPORTED_FORMAT"
    UNSUPPORTED_BUFFER_FORMAT = "UNSUPPORTED_BUFFER_FORMAT"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_FILE_PATH = "INVALID_FILE_PATH"

    # Orchestrator boundaries
    READ_ERROR = "READ_ERROR"
    BUFFER_READ_ERROR = "BUFFER_READ_ERROR"
    MULTI_READ_ERROR = "MULTI_READ_ERROR"
    MULTI_BUFFER_READ_ERROR = "MULTI_BUFFER_READ_ERROR"

    # Extractors
    PDF_READ_ERROR = "PDF_READ_ERROR"
    PDF_BUFFER_READ_ERROR = "PDF_BUFFER_READ_ERROR"
    DOCX_READ_ERROR = "DOCX_READ_ERROR"
    DOCX_BUFFER_READ_ERROR = "DOCX_BUFFER_READ_ERROR"
    TEXT_READ_ERROR = "TEXT_READ_ERROR"
    TEXT_BUFFER_READ_ERROR = "TEXT_BUFFER_READ_ERROR"
    TEXTRACT_READ_ERROR = "TEXTRACT_READ_ERROR"
    TEXTRACT_BUFFER_READ_ERROR = "TEXTRACT_BUFFER_READ_ERROR"


class DocumentReaderError(Exception):
    """
    Raised when a document cannot be validated or read.

    Carries a human-readable message, a classification code and,
    when wrapping another exception, the original cause.
    """

    def __init__(self, message: str, code: ErrorCode, cause: Exception | None = None):
        self.message = message
        self.code = code
        self.cause = cause
        super().__init__(message)

    def __repr__(self) -> str:
        return f"DocumentReaderError(code={self.code.value!r}, message={self.message!r})"
