"""
Document Extraction Module.

Provides one extractor per family of document formats:
- PDF (.pdf)
- Word (.docx)
- Plain text (.txt)
- Legacy Word and PowerPoint (.doc, .ppt, .pptx)
"""

from doc_extract.extractors.base import DocumentExtractor, count_words
from doc_extract.extractors.docx_extractor import DocxExtractor
from doc_extract.extractors.factory import build_extractors, create_extractor
from doc_extract.extractors.legacy_extractor import LegacyExtractor
from doc_extract.extractors.pdf_extractor import PDFExtractor
from doc_extract.extractors.text_extractor import TextExtractor

__all__ = [
    "DocumentExtractor",
    "DocxExtractor",
    "LegacyExtractor",
    "PDFExtractor",
    "TextExtractor",
    "build_extractors",
    "count_words",
    "create_extractor",
]
