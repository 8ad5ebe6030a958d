"""Read, detect and convert character encodings of files."""

from .errors import EncodingKitError, ResourceNotFoundError, UnsupportedEncodingError
from .files import (
    convert,
    convert_streaming,
    detect,
    detect_encoding,
    detect_stream,
    read_bytes,
    read_lines,
    read_text,
    read_text_detected,
    transcode,
)
from .resources import ResourceLocator, resolve_path
from .rules import DEFAULT_ENCODING, UNKNOWN_ENCODING

__all__ = [
    "DEFAULT_ENCODING",
    "UNKNOWN_ENCODING",
    "EncodingKitError",
    "ResourceNotFoundError",
    "UnsupportedEncodingError",
    "ResourceLocator",
    "resolve_path",
    "read_text",
    "read_bytes",
    "read_lines",
    "read_text_detected",
    "detect",
    "detect_stream",
    "detect_encoding",
    "transcode",
    "convert",
    "convert_streaming",
]
