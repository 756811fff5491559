"""bytecopy: copy a file's bytes to another file in fixed-size chunks."""

from __future__ import annotations

from .copier import DEFAULT_BUFFER_SIZE, CopyError, CopyResult, ErrorKind, copy_file

__all__ = [
    "DEFAULT_BUFFER_SIZE",
    "CopyError",
    "CopyResult",
    "ErrorKind",
    "copy_file",
]
