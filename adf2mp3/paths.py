"""Path helpers shared by the transcoder and output name resolution."""

import os
from pathlib import Path
from typing import Union

PathLike = Union[str, os.PathLike]


def normalize_path(path_like: PathLike) -> Path:
    path = Path(os.fspath(path_like)).expanduser()
    try:
        return path.resolve(strict=False)
    except OSError:
        return path


def paths_equal(a: PathLike, b: PathLike) -> bool:
    """True when ``a`` and ``b`` name the same file, existing or not."""
    try:
        if os.path.exists(a) and os.path.exists(b):
            return os.path.samefile(a, b)
    except OSError:
        pass
    return normalize_path(a) == normalize_path(b)


__all__ = ["PathLike", "normalize_path", "paths_equal"]
