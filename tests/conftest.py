"""
Pytest configuration and fixtures.

Provides common test fixtures for all test modules. Sample PDF, DOCX and
PPTX documents are generated on the fly with PyMuPDF, python-docx and
python-pptx, so no binary fixtures are checked in.
"""

import io
import tempfile
from pathlib import Path
from typing import Generator

import fitz  # PyMuPDF
import pytest
from docx import Document
from pptx import Presentation
from pptx.util import Inches

from doc_extract.config import Settings
from doc_extract.reader import DocumentReader


# ==============================================================================
# Directory Fixtures
# ==============================================================================


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def staging_dir(temp_dir: Path) -> Path:
    """Staging directory isolated per test."""
    return temp_dir / "staging"


# ==============================================================================
# Settings Fixtures
# ==============================================================================


@pytest.fixture
def test_settings(staging_dir: Path) -> Settings:
    """Create test settings with an isolated staging directory."""
    return Settings(
        debug=False,
        staging_dir=staging_dir,
        max_workers=4,
        legacy_timeout_seconds=5.0,
    )


@pytest.fixture
def reader(test_settings: Settings) -> DocumentReader:
    """Document reader using the test settings."""
    return DocumentReader(test_settings)


# ==============================================================================
# Sample Content Fixtures
# ==============================================================================


@pytest.fixture
def sample_text() -> str:
    """Sample plain text content."""
    return "Meeting notes\n\nThe budget was approved.\nNext review in March.\n"


@pytest.fixture
def sample_pdf_bytes() -> bytes:
    """A two-page PDF with a title in its document info."""
    doc = fitz.open()
    first = doc.new_page()
    first.insert_text((72, 72), "Hello PDF world")
    second = doc.new_page()
    second.insert_text((72, 72), "Second page")
    doc.set_metadata({"title": "Sample Report"})
    data = doc.tobytes()
    doc.close()
    return data


@pytest.fixture
def sample_docx_bytes() -> bytes:
    """A DOCX document with a heading and one paragraph."""
    document = Document()
    document.add_heading("Project Plan", level=1)
    document.add_paragraph("The launch is scheduled for spring.")
    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()


@pytest.fixture
def sample_pptx_bytes() -> bytes:
    """A one-slide presentation with a title and a text box."""
    presentation = Presentation()
    slide = presentation.slides.add_slide(presentation.slide_layouts[5])  # Title Only
    slide.shapes.title.text = "Quarterly Review"
    textbox = slide.shapes.add_textbox(Inches(1), Inches(2), Inches(6), Inches(1))
    textbox.text_frame.text = "Revenue grew"
    buffer = io.BytesIO()
    presentation.save(buffer)
    return buffer.getvalue()


# ==============================================================================
# File Fixtures
# ==============================================================================


@pytest.fixture
def sample_txt_file(temp_dir: Path, sample_text: str) -> Path:
    """Create a sample text file."""
    file_path = temp_dir / "notes.txt"
    file_path.write_text(sample_text, encoding="utf-8")
    return file_path


@pytest.fixture
def empty_txt_file(temp_dir: Path) -> Path:
    """Create an empty text file."""
    file_path = temp_dir / "empty.txt"
    file_path.write_bytes(b"")
    return file_path


@pytest.fixture
def sample_pdf_file(temp_dir: Path, sample_pdf_bytes: bytes) -> Path:
    """Create a sample PDF file."""
    file_path = temp_dir / "report.pdf"
    file_path.write_bytes(sample_pdf_bytes)
    return file_path


@pytest.fixture
def sample_docx_file(temp_dir: Path, sample_docx_bytes: bytes) -> Path:
    """Create a sample DOCX file."""
    file_path = temp_dir / "plan.docx"
    file_path.write_bytes(sample_docx_bytes)
    return file_path


@pytest.fixture
def sample_pptx_file(temp_dir: Path, sample_pptx_bytes: bytes) -> Path:
    """Create a sample PPTX file."""
    file_path = temp_dir / "review.pptx"
    file_path.write_bytes(sample_pptx_bytes)
    return file_path
