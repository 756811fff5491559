"""Chunked file copier — streams bytes from a source file to a destination file."""

from __future__ import annotations

import enum
import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_BUFFER_SIZE = 1024


class ErrorKind(enum.Enum):
    """Categories of failure a copy can end with."""
    MISSING_ARGUMENTS = "missing_arguments"
    SOURCE_OPEN_FAILED = "source_open_failed"
    DEST_OPEN_FAILED = "dest_open_failed"
    READ_FAILED = "read_failed"
    WRITE_FAILED = "write_failed"


class CopyError(Exception):
    """A copy that could not be completed.

    Attributes:
        kind: Which stage of the copy failed.
        path: The file involved, when there is one.
    """

    def __init__(self, kind: ErrorKind, message: str, path: str | Path | None = None):
        super().__init__(message)
        self.kind = kind
        self.path = path


@dataclass
class CopyResult:
    """Outcome of a successful copy."""
    bytes_copied: int
    chunks: int


def _is_same_file(source_path: Path, dest_path: Path) -> bool:
    if not dest_path.exists():
        return False
    try:
        return os.path.samefile(source_path, dest_path)
    except OSError:
        return False


def copy_file(
    source_path: str | Path,
    dest_path: str | Path,
    buffer_size: int = DEFAULT_BUFFER_SIZE,
) -> CopyResult:
    """Copy the bytes of ``source_path`` into ``dest_path``.

    The destination is created, or truncated if it already exists. Data moves
    through a single transfer buffer of ``buffer_size`` bytes; each non-empty
    read is written out in full before the next read. A read returning zero
    bytes ends the copy and is never written.

    Args:
        source_path: File to read.
        dest_path: File to create or overwrite.
        buffer_size: Capacity of the transfer buffer in bytes.

    Returns:
        A CopyResult with the total byte count and number of read/write cycles.

    Raises:
        CopyError: If either file cannot be opened, or a read or write fails
            mid-transfer. A failed transfer leaves the partial destination.
        ValueError: If buffer_size is not a positive integer.
    """
    if not isinstance(buffer_size, int) or isinstance(buffer_size, bool) or buffer_size <= 0:
        raise ValueError(f"buffer_size must be a positive integer, got {buffer_size!r}")

    source_path = Path(source_path)
    dest_path = Path(dest_path)
    logger.info("Copying %s to %s", source_path, dest_path)

    try:
        source = open(source_path, "rb")
    except OSError as e:
        raise CopyError(
            ErrorKind.SOURCE_OPEN_FAILED,
            f"Cannot open source '{source_path}': {e.strerror or e}",
            source_path,
        ) from e

    with source:
        logger.info("Source is open for reading")

        if _is_same_file(source_path, dest_path):
            raise CopyError(
                ErrorKind.DEST_OPEN_FAILED,
                f"'{source_path}' and '{dest_path}' are the same file",
                dest_path,
            )

        try:
            # Unbuffered, so every write reaches the OS before the next read
            dest = open(dest_path, "wb", buffering=0)
        except OSError as e:
            raise CopyError(
                ErrorKind.DEST_OPEN_FAILED,
                f"Cannot open destination '{dest_path}': {e.strerror or e}",
                dest_path,
            ) from e

        with dest:
            logger.info("Destination is open for writing")
            result = _transfer(source, dest, source_path, dest_path, buffer_size)

    logger.info("Successfully copied %d bytes in %d chunks", result.bytes_copied, result.chunks)
    return result


def _transfer(source, dest, source_path: Path, dest_path: Path, buffer_size: int) -> CopyResult:
    """Move every byte from ``source`` to ``dest`` through one reused buffer."""
    buffer = bytearray(buffer_size)
    view = memoryview(buffer)
    logger.debug("Allocated %d-byte transfer buffer", buffer_size)

    total = 0
    chunks = 0
    while True:
        try:
            read = source.readinto(buffer)
        except OSError as e:
            raise CopyError(
                ErrorKind.READ_FAILED,
                f"Read from '{source_path}' failed after {total} bytes: {e.strerror or e}",
                source_path,
            ) from e

        if not read:
            break
        logger.info("Read %d bytes", read)

        try:
            written = dest.write(view[:read])
        except OSError as e:
            raise CopyError(
                ErrorKind.WRITE_FAILED,
                f"Write to '{dest_path}' failed after {total} bytes: {e.strerror or e}",
                dest_path,
            ) from e

        if written is not None and written != read:
            raise CopyError(
                ErrorKind.WRITE_FAILED,
                f"Short write to '{dest_path}': wrote {written} of {read} bytes",
                dest_path,
            )
        logger.info("Wrote %d bytes", read)

        total += read
        chunks += 1

    return CopyResult(bytes_copied=total, chunks=chunks)
