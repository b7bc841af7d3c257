"""
Text extraction for legacy and presentation formats.

Wraps the tools that only accept a filesystem path:
- .pptx via python-pptx
- .doc via the `antiword` command line tool
- .ppt via the `catppt` command line tool (from catdoc)
"""

import re
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable

_LINE_BREAKS = re.compile(r"\n+")
_HORIZONTAL_SPACE = re.compile(r"[ \t\f\v]+")
_SPACE_AROUND_BREAK = re.compile(r" ?\n ?")


@dataclass(frozen=True)
class LegacyOptions:
    """Options to control post-processing of extracted text.

    Attributes:
        preserve_line_breaks: Keep line breaks exactly as the tool emitted them.
        preserve_only_multiple_line_breaks: When line breaks are not preserved,
            keep runs of two or more as a blank line and turn single breaks
            into spaces. Without it every break becomes a space.
    """

    preserve_line_breaks: bool = False
    preserve_only_multiple_line_breaks: bool = False


# Options used when extracting a staged buffer
STAGED_OPTIONS = LegacyOptions(
    preserve_line_breaks=True,
    preserve_only_multiple_line_breaks=True,
)


def extract_text(
    path: Path,
    options: LegacyOptions = LegacyOptions(),
    timeout: float | None = None,
) -> str:
    """Extract text from a .doc, .ppt or .pptx file.

    Args:
        path: Path to the file; its extension selects the tool.
        options: Line-break handling for the extracted text.
        timeout: Seconds to wait for external tools.

    Returns:
        The normalized text, possibly empty.

    Raises:
        RuntimeError: If the tool is missing or fails.
        ValueError: If the extension is not a legacy format.
    """
    suffix = path.suffix.lower()
    if suffix == ".pptx":
        raw_text = _extract_pptx_text(path)
    elif suffix == ".doc":
        raw_text = _run_tool("antiword", ["-m", "UTF-8.txt", str(path)], timeout)
    elif suffix == ".ppt":
        raw_text = _run_tool("catppt", ["-d", "utf-8", str(path)], timeout)
    else:
        raise ValueError(f"Unsupported legacy file type: {suffix or path.name}")

    return normalize_text(raw_text, options)


def normalize_text(text: str, options: LegacyOptions = LegacyOptions()) -> str:
    """Apply line-break handling and collapse horizontal whitespace."""
    text = text.replace("\r\n", "\n").replace("\r", "\n")

    if not options.preserve_line_breaks:
        if options.preserve_only_multiple_line_breaks:
            text = _LINE_BREAKS.sub(lambda m: "\n\n" if len(m.group()) > 1 else " ", text)
        else:
            text = _LINE_BREAKS.sub(" ", text)

    text = _HORIZONTAL_SPACE.sub(" ", text)
    text = _SPACE_AROUND_BREAK.sub("\n", text)
    return text.strip()


def _run_tool(tool: str, args: list[str], timeout: float | None) -> str:
    executable = shutil.which(tool)
    if not executable:
        raise RuntimeError(
            f"Reading this file requires '{tool}' to be installed and on PATH."
        )
    try:
        result = subprocess.run(
            [executable, *args],
            check=True,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
        )
        return result.stdout
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        raise RuntimeError(f"{tool} failed with exit code {e.returncode}: {stderr}") from e
    except subprocess.TimeoutExpired as e:
        raise RuntimeError(f"{tool} timed out after {timeout} seconds") from e


def _extract_pptx_text(path: Path) -> str:
    from pptx import Presentation

    presentation = Presentation(str(path))
    slides: list[str] = []
    for slide in presentation.slides:
        parts = [part for part in _shape_texts(slide.shapes) if part.strip()]
        if parts:
            slides.append("\n".join(parts))
    # python-pptx reports soft line breaks as vertical tabs
    return "\n\n".join(slides).replace("\x0b", "\n")


def _shape_texts(shapes: Iterable[Any]) -> Iterable[str]:
    for shape in shapes:
        if getattr(shape, "has_text_frame", False):
            yield shape.text_frame.text
        if getattr(shape, "has_table", False):
            for row in shape.table.rows:
                cells = [cell.text.strip() for cell in row.cells]
                if any(cells):
                    yield " | ".join(cells)
        # Group shapes
        if hasattr(shape, "shapes"):
            yield from _shape_texts(shape.shapes)
