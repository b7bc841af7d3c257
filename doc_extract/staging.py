"""
Staging area for in-memory documents.

Some extraction tools only accept a filesystem path. The staging area
writes a buffer to a uniquely named file, hands out its path and
removes the file afterwards, whether extraction succeeded or not.
"""

import logging
from contextlib import contextmanager
from pathlib import Path, PurePath
from typing import Iterator
from uuid import uuid4

logger = logging.getLogger(__name__)

# File-name length limit, in bytes, on common filesystems
MAX_NAME_BYTES = 255


class StagingArea:
    """
    A directory holding short-lived staging files.

    Every staged file name starts with a random identifier, so concurrent
    callers submitting the same display name never collide.
    """

    def __init__(self, directory: Path | str, debug: bool = False):
        """
        Initialize the staging area.

        Args:
            directory: Directory for staged files; created on first use.
            debug: Log cleanup failures.
        """
        self._directory = Path(directory)
        self._debug = debug

    @staticmethod
    def staged_name(file_name: str, extension: str | None = None) -> str:
        """
        Build a unique staging file name for a display name.

        Args:
            file_name: Caller-supplied display name; only its final component is used.
            extension: Extension (without dot) the staged file must end with.

        Returns:
            A file name of the form "<hex id>-<display name>", with the
            display name's stem shortened to fit within MAX_NAME_BYTES.
        """
        base = PurePath(file_name).name or "document"
        if extension and PurePath(base).suffix.lower() != f".{extension.lower()}":
            base = f"{base}.{extension}"
        prefix = f"{uuid4().hex}-"
        return prefix + _fit_name(base, MAX_NAME_BYTES - len(prefix))

    @contextmanager
    def stage(self, buffer: bytes, file_name: str, extension: str | None = None) -> Iterator[Path]:
        """
        Write a buffer to a staging file for the duration of the block.

        Args:
            buffer: Bytes to write.
            file_name: Display name of the document.
            extension: Extension the staged file must end with.

        Yields:
            Path to the staged file.
        """
        self._directory.mkdir(parents=True, exist_ok=True)
        staged_path = self._directory / self.staged_name(file_name, extension)

        try:
            staged_path.write_bytes(buffer)
            yield staged_path
        finally:
            self._remove(staged_path)

    def _remove(self, staged_path: Path) -> None:
        try:
            staged_path.unlink(missing_ok=True)
        except OSError as e:
            if self._debug:
                logger.warning("Failed to delete staging file %s: %s", staged_path, e)


def _fit_name(name: str, limit: int) -> str:
    """Shorten a file name's stem until its UTF-8 encoding fits in `limit` bytes."""
    if len(name.encode("utf-8")) <= limit:
        return name

    suffix = PurePath(name).suffix
    stem = name[: len(name) - len(suffix)] if suffix else name
    room = limit - len(suffix.encode("utf-8"))
    if room < 1:
        # The suffix alone is too long to keep
        stem, suffix, room = name, "", limit

    return stem.encode("utf-8")[:room].decode("utf-8", errors="ignore") + suffix
