"""
Unit tests for format resolution.

Covers extension parsing, the MIME lookup table and the precedence
between the two.
"""

from pathlib import Path

import pytest

from doc_extract.formats import (
    SupportedFormat,
    extension_of,
    is_supported,
    kind_from_mime_type,
    resolve_kind,
    supported_formats,
)


class TestExtensionOf:
    """Tests for extension_of."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("report.pdf", "pdf"),
            ("REPORT.PDF", "pdf"),
            ("archive.tar.gz", "gz"),
            ("/some/dir.with.dots/notes.TXT", "txt"),
            ("README", ""),
            (".bashrc", ""),
            ("", ""),
        ],
    )
    def test_extension_of(self, name: str, expected: str) -> None:
        """Test lower-cased extension after the last dot."""
        assert extension_of(name) == expected

    def test_extension_of_path(self) -> None:
        """Test that Path objects are accepted."""
        assert extension_of(Path("slides.Pptx")) == "pptx"


class TestKindFromMimeType:
    """Tests for the MIME lookup table."""

    @pytest.mark.parametrize(
        "mime_type, expected",
        [
            ("application/pdf", SupportedFormat.PDF),
            (
                "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
                SupportedFormat.DOCX,
            ),
            ("application/msword", SupportedFormat.DOC),
            (
                "application/vnd.openxmlformats-officedocument.presentationml.presentation",
                SupportedFormat.PPTX,
            ),
            ("application/vnd.ms-powerpoint", SupportedFormat.PPT),
            ("text/plain", SupportedFormat.TXT),
        ],
    )
    def test_known_mime_types(self, mime_type: str, expected: SupportedFormat) -> None:
        """Test every entry of the lookup table."""
        assert kind_from_mime_type(mime_type) == expected

    def test_unknown_mime_type(self) -> None:
        """Test that unknown MIME types resolve to None."""
        assert kind_from_mime_type("image/png") is None
        assert kind_from_mime_type(None) is None
        assert kind_from_mime_type("") is None


class TestResolveKind:
    """Tests for resolve_kind."""

    def test_case_insensitive_extension(self) -> None:
        """Test that upper- and lower-case extensions resolve identically."""
        assert resolve_kind("A.PDF") == resolve_kind("a.pdf") == SupportedFormat.PDF

    def test_extension_wins_over_mime(self) -> None:
        """Test that a recognized extension beats a disagreeing MIME type."""
        assert resolve_kind("report.pdf", "text/plain") == SupportedFormat.PDF

    def test_mime_fallback_without_extension(self) -> None:
        """Test fallback to MIME type when the name has no extension."""
        assert resolve_kind("upload", "application/msword") == SupportedFormat.DOC

    def test_mime_fallback_with_unknown_extension(self) -> None:
        """Test fallback to MIME type when the extension is not recognized."""
        assert resolve_kind("scan.bin", "application/pdf") == SupportedFormat.PDF

    def test_unresolvable(self) -> None:
        """Test that unknown extension and MIME type resolve to None."""
        assert resolve_kind("image.png") is None
        assert resolve_kind("upload", "image/png") is None


class TestSupportedFormats:
    """Tests for the supported set."""

    def test_supported_formats(self) -> None:
        """Test the six supported kinds in declaration order."""
        assert supported_formats() == ["pdf", "docx", "doc", "pptx", "ppt", "txt"]

    @pytest.mark.parametrize("kind", ["pdf", "docx", "doc", "pptx", "ppt", "txt"])
    def test_is_supported(self, kind: str) -> None:
        """Test membership for every supported kind."""
        assert is_supported(kind)
        assert is_supported(SupportedFormat(kind))

    @pytest.mark.parametrize("kind", ["", "xlsx", "PDF", "md", None])
    def test_is_not_supported(self, kind: str | None) -> None:
        """Test that anything else is not supported."""
        assert not is_supported(kind)
