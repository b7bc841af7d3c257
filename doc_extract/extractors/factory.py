"""
Extractor factory module.

Provides factory functions to select the appropriate extractor for a
document kind, and to build one shared extractor per kind for a reader.
"""

from doc_extract.config import Settings
from doc_extract.errors import DocumentReaderError, ErrorCode
from doc_extract.extractors.base import DocumentExtractor
from doc_extract.extractors.docx_extractor import DocxExtractor
from doc_extract.extractors.legacy_extractor import LegacyExtractor
from doc_extract.extractors.pdf_extractor import PDFExtractor
from doc_extract.extractors.text_extractor import TextExtractor
from doc_extract.formats import SupportedFormat

# Registry of all available extractors
_EXTRACTORS: tuple[type[DocumentExtractor], ...] = (
    PDFExtractor,
    DocxExtractor,
    TextExtractor,
    LegacyExtractor,
)


def get_extractor_class(kind: SupportedFormat | str) -> type[DocumentExtractor]:
    """
    Find the extractor class handling a document kind.

    Args:
        kind: Document kind or bare extension.

    Returns:
        The DocumentExtractor subclass for the kind.

    Raises:
        DocumentReaderError: If no extractor handles the kind.
    """
    for extractor_cls in _EXTRACTORS:
        if extractor_cls.supports(kind):
            return extractor_cls

    value = kind.value if isinstance(kind, SupportedFormat) else kind
    raise DocumentReaderError(f"Unsupported file format: {value}", ErrorCode.UNSUPPORTED_FORMAT)


def create_extractor(kind: SupportedFormat | str, settings: Settings | None = None) -> DocumentExtractor:
    """
    Create the appropriate extractor for a document kind.

    Args:
        kind: Document kind or bare extension.
        settings: Configuration settings passed to the extractor.

    Returns:
        An instance of the appropriate DocumentExtractor subclass.

    Raises:
        DocumentReaderError: If the kind is not supported.
    """
    return get_extractor_class(kind)(settings)


def build_extractors(settings: Settings | None = None) -> dict[SupportedFormat, DocumentExtractor]:
    """
    Build one extractor per document kind.

    Kinds served by the same extractor class share a single instance.

    Args:
        settings: Configuration settings passed to every extractor.

    Returns:
        Mapping of every SupportedFormat to its extractor.
    """
    instances: dict[type[DocumentExtractor], DocumentExtractor] = {}
    extractors: dict[SupportedFormat, DocumentExtractor] = {}

    for kind in SupportedFormat:
        extractor_cls = get_extractor_class(kind)
        if extractor_cls not in instances:
            instances[extractor_cls] = extractor_cls(settings)
        extractors[kind] = instances[extractor_cls]

    return extractors
