"""Error types raised by the transcoder and filename helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Union


class TranscodeError(RuntimeError):
    """Base class for every failure of a transcode run.

    Carries the file the failure is about (``path``) and the underlying cause,
    which is usually an ``OSError`` but may be a plain reason string.
    """

    phase = "Transcode failed for"

    def __init__(self, path: Union[str, os.PathLike, None], cause: Union[BaseException, str, None] = None):
        self.path: Optional[Path] = Path(path) if path is not None else None
        self.cause = cause
        super().__init__(self._format())

    @property
    def reason(self) -> str:
        cause = self.cause
        if isinstance(cause, OSError) and cause.strerror:
            return cause.strerror
        if cause is None:
            return "unknown error"
        return str(cause)

    def _format(self) -> str:
        target = f"'{self.path}'" if self.path is not None else "<stream>"
        return f"{self.phase} {target}: {self.reason}"


class OpenError(TranscodeError):
    """Source missing, unreadable, not a regular file, or its size is unavailable."""

    phase = "Couldn't open input file"


class CreateError(TranscodeError):
    """Destination cannot be created or would overwrite the source."""

    phase = "Couldn't create output file"


class ReadError(TranscodeError):
    phase = "Failed to read input file"


class WriteError(TranscodeError):
    phase = "Failed to write output file"


class InvalidNameError(TranscodeError):
    phase = "Cannot derive an output name from"


__all__ = [
    "CreateError",
    "InvalidNameError",
    "OpenError",
    "ReadError",
    "TranscodeError",
    "WriteError",
]
