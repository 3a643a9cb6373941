# ADF -> MP3 TRANSCODER ->

import os
import stat
import warnings
from pathlib import Path
from typing import BinaryIO, Optional, Union

import numpy as np

from .errors import CreateError, OpenError, ReadError, WriteError
from .paths import PathLike, paths_equal

# GTA Vice City ADF files are MP3 files with every byte XORed with this constant
# (0x22). XOR is its own inverse, so the same pass also re-encodes MP3 -> ADF.
GTA_MAGIC = 34

# Bytes moved per loop iteration; only bounds memory, never changes output.
CHUNK_SIZE = 8192

def _ensure_regular_file(path: Path, info: os.stat_result) -> None:
    if stat.S_ISDIR(info.st_mode):
        raise OpenError(path, "is a directory")
    if not stat.S_ISREG(info.st_mode):
        raise OpenError(path, "not a regular file")


def _resolve_chunk_size(chunk_size: Optional[int]) -> int:
    if chunk_size is None:
        return CHUNK_SIZE
    return max(1, int(chunk_size))


def xor_chunk_inplace(buf: Union[bytearray, memoryview], length: Optional[int] = None) -> None:
    """XOR the first ``length`` bytes of a writable buffer with ``GTA_MAGIC``."""
    n = len(buf) if length is None else length
    if n <= 0:
        return
    arr = np.frombuffer(memoryview(buf)[:n], dtype=np.uint8)
    np.bitwise_xor(arr, GTA_MAGIC, out=arr)


def xor_bytes(data: Union[bytes, bytearray, memoryview]) -> bytes:
    """Return ``data`` with the ADF transform applied to every byte."""
    out = bytearray(data)
    xor_chunk_inplace(out)
    return bytes(out)


def transcode_stream(
    source: BinaryIO,
    dest: BinaryIO,
    length: int,
    *,
    chunk_size: Optional[int] = None,
    source_name: Optional[PathLike] = None,
    dest_name: Optional[PathLike] = None,
) -> int:
    """Move exactly ``length`` bytes from ``source`` to ``dest`` through the transform.

    ``source`` must support ``readinto``. A read that comes back short before
    ``length`` bytes were consumed is treated as fatal rather than retried, since
    it means the input was truncated or changed underneath us.

    Returns the number of bytes written.
    """
    chunk = _resolve_chunk_size(chunk_size)
    buf = bytearray(min(chunk, length) if length > 0 else 0)
    view = memoryview(buf)
    processed = 0
    while processed != length:
        take = min(chunk, length - processed)
        window = view[:take]
        try:
            got = source.readinto(window)
        except OSError as exc:
            raise ReadError(source_name, exc) from exc
        got = got or 0
        if got != take:
            raise ReadError(
                source_name,
                f"short read at offset {processed}: expected {take} bytes, got {got}",
            )

        xor_chunk_inplace(window)

        try:
            written = dest.write(window)
        except OSError as exc:
            raise WriteError(dest_name, exc) from exc
        if written is not None and written != take:
            raise WriteError(
                dest_name,
                f"short write at offset {processed}: expected {take} bytes, wrote {written}",
            )
        processed += take
    try:
        dest.flush()
    except OSError as exc:
        raise WriteError(dest_name, exc) from exc
    return processed


def transcode(input_path: PathLike, output_path: PathLike, *, chunk_size: Optional[int] = None) -> int:
    """Decode ``input_path`` into ``output_path`` and return the byte count.

    The destination is created (or truncated) only once the source has been
    opened and sized, so a missing input never leaves an output file behind.
    A failure after that point may leave a partially written destination.

    Raises:
        OpenError: source missing, unreadable, or not a regular file.
        CreateError: destination cannot be created, or is the source itself.
        ReadError / WriteError: I/O failure in the middle of the copy.
    """
    src = Path(os.fspath(input_path))
    dst = Path(os.fspath(output_path))

    # Checked on the path first: opening a FIFO for reading would block.
    try:
        _ensure_regular_file(src, os.stat(src))
    except OSError as exc:
        raise OpenError(src, exc) from exc

    try:
        source = open(src, "rb")
    except OSError as exc:
        raise OpenError(src, exc) from exc

    with source:
        try:
            info = os.fstat(source.fileno())
        except OSError as exc:
            raise OpenError(src, exc) from exc
        _ensure_regular_file(src, info)
        if paths_equal(src, dst):
            raise CreateError(dst, "refusing to overwrite the input file; choose a different output path")
        length = info.st_size
        if length == 0:
            warnings.warn(f"{src} is empty; writing an empty output file", RuntimeWarning, stacklevel=2)

        try:
            dest = open(dst, "wb")
        except OSError as exc:
            raise CreateError(dst, exc) from exc

        with dest:
            return transcode_stream(
                source,
                dest,
                length,
                chunk_size=chunk_size,
                source_name=src,
                dest_name=dst,
            )


__all__ = [
    "CHUNK_SIZE",
    "GTA_MAGIC",
    "transcode",
    "transcode_stream",
    "xor_bytes",
    "xor_chunk_inplace",
]
