"""
ADF2MP3 - GTA Vice City ADF to MP3 converter

The game's radio stations ship as ``.adf`` files: plain MP3 streams with every
byte XORed with 34. This package reverses that in a single chunked pass.
"""

from .errors import (
    CreateError,
    InvalidNameError,
    OpenError,
    ReadError,
    TranscodeError,
    WriteError,
)
from .naming import default_output_name, resolve_output_path
from .transcoder import (
    CHUNK_SIZE,
    GTA_MAGIC,
    transcode,
    transcode_stream,
    xor_bytes,
    xor_chunk_inplace,
)
from .version import __version__

__all__ = [
    "CHUNK_SIZE",
    "CreateError",
    "GTA_MAGIC",
    "InvalidNameError",
    "OpenError",
    "ReadError",
    "TranscodeError",
    "WriteError",
    "__version__",
    "default_output_name",
    "resolve_output_path",
    "transcode",
    "transcode_stream",
    "xor_bytes",
    "xor_chunk_inplace",
]
