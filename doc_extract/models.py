"""
Pydantic models for extracted document content.

These models define the result records produced by every extractor:
- Plain content with word/character statistics
- PDF content with page count and document info
- DOCX content with an HTML rendering and conversion diagnostics

All models are frozen; a result is produced once per extraction call.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# ==============================================================================
# Metadata Models
# ==============================================================================


class DocumentMetadata(BaseModel):
    """
    Statistics and identity of an extracted document.

    `words` and `characters` are always derived from the extracted text.
    `pages` is only populated for PDF documents.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    pages: int | None = Field(
        default=None,
        ge=0,
        description="Number of pages (PDF only)",
    )

    words: int | None = Field(
        default=None,
        ge=0,
        description="Number of whitespace-delimited words in the text",
    )

    characters: int | None = Field(
        default=None,
        ge=0,
        description="Number of characters in the text",
    )

    file_size: int | None = Field(
        default=None,
        ge=0,
        description="Size of the source in bytes",
    )

    file_name: str | None = Field(
        default=None,
        description="Display name of the source document",
    )


class PdfMetadata(DocumentMetadata):
    """Metadata for PDF documents, with a mandatory page count."""

    pages: int = Field(
        ...,
        ge=0,
        description="Number of pages in the PDF",
    )

    info: dict[str, Any] = Field(
        default_factory=dict,
        description="Document information reported by the PDF library",
    )


# ==============================================================================
# Content Models
# ==============================================================================


class DocumentContent(BaseModel):
    """
    Result of extracting text from a document.

    `text` is never None; an empty string is a valid result.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    text: str = Field(
        ...,
        description="Extracted text content",
    )

    metadata: DocumentMetadata = Field(
        default_factory=DocumentMetadata,
        description="Statistics about the extracted document",
    )


class PdfContent(DocumentContent):
    """Extraction result for PDF documents."""

    metadata: PdfMetadata = Field(
        ...,
        description="PDF statistics including page count and document info",
    )


class DocxContent(DocumentContent):
    """
    Extraction result for DOCX documents.

    Carries the HTML rendering of the document alongside the raw text,
    and the diagnostics reported by both conversions.
    """

    html: str | None = Field(
        default=None,
        description="HTML rendering of the document",
    )

    messages: tuple[dict[str, Any], ...] = Field(
        default=(),
        description="Conversion diagnostics, each with at least 'type' and 'message'",
    )


# ==============================================================================
# Input Models
# ==============================================================================


class BufferInput(BaseModel):
    """An in-memory document submitted for batch reading."""

    model_config = ConfigDict(frozen=True, strict=True)

    buffer: bytes = Field(
        ...,
        description="Raw document bytes",
    )

    file_name: str = Field(
        ...,
        min_length=1,
        description="Display name of the document, used for format detection",
    )

    mime_type: str | None = Field(
        default=None,
        description="Optional declared media type",
    )
