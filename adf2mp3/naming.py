"""Output filename helpers."""

import os
from pathlib import Path
from typing import Optional

from .errors import InvalidNameError
from .paths import PathLike, paths_equal

OUTPUT_EXTENSION = ".mp3"
# Inserted before the extension when the default name would collide with the input.
COLLISION_TAG = "decoded"


def _strip_extension(name: str) -> str:
    # A leading dot marks a hidden file, not an extension.
    head, dot, _ = name[1:].rpartition(".")
    if not dot:
        return name
    return name[0] + head


def default_output_name(input_path: PathLike) -> str:
    """Replace the final extension of ``input_path`` with ``.mp3``.

    Only the last suffix is dropped (``archive.v1.adf`` -> ``archive.v1.mp3``,
    ``song.`` -> ``song.mp3``); a name without a suffix simply gains one. The
    directory part is kept.
    """
    raw = os.fspath(input_path)
    if not raw:
        raise InvalidNameError(raw, "input path is empty")
    seps = (os.sep, os.altsep) if os.altsep else (os.sep,)
    if raw.endswith(seps):
        raise InvalidNameError(raw, "path names a directory, not a file")
    path = Path(raw)
    if path.name in ("", ".", ".."):
        raise InvalidNameError(raw, "path has no file name")
    if path.is_dir():
        raise InvalidNameError(raw, "path names a directory, not a file")
    return str(path.with_name(_strip_extension(path.name) + OUTPUT_EXTENSION))


def resolve_output_path(input_path: PathLike, output: Optional[PathLike] = None) -> Path:
    """Pick the destination for ``input_path``.

    An explicit ``output`` is returned as given; ``transcode`` refuses it if it
    names the input. The default name never collides with the input.
    """
    src = Path(os.fspath(input_path))
    if output:
        return Path(os.fspath(output))
    candidate = Path(default_output_name(src))
    if paths_equal(candidate, src):
        candidate = src.with_name(f"{_strip_extension(src.name)}.{COLLISION_TAG}{OUTPUT_EXTENSION}")
    return candidate


__all__ = ["default_output_name", "resolve_output_path"]
