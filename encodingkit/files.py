"""
File access and encoding conversion.

Responsibilities:
- resolve a path or resource name and read it as text or bytes
- detect the probable encoding of a file or binary stream
- convert a file between encodings, in memory or streaming

Every encoding argument is validated before any file is opened. Text is read
and written with newline="" so line terminators pass through unchanged.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import BinaryIO, Iterator, Optional, Tuple

from charset_normalizer import from_bytes

from .charsets import codec_name, display_name
from .config import get_settings
from .models import ConversionReport, DetectionResult
from .resources import PathLike, ResourceLocator, resolve_path
from .rules import (
    BOM_CONSUMING_CODECS,
    BYTE_ORDER_MARKS,
    DETECTION_CHUNK_SIZE,
    UNKNOWN_ENCODING,
)

logger = logging.getLogger(__name__)


def read_text(path: PathLike, encoding: str, locator: Optional[ResourceLocator] = None) -> str:
    """
    Read a whole file as text.

    A byte-order mark is kept as a leading U+FEFF unless the codec itself
    consumes it ("UTF-16" does, "UTF-8" does not). Malformed input raises
    UnicodeDecodeError.
    """
    codec = codec_name(encoding)
    resolved = resolve_path(path, locator)
    with open(resolved, "r", encoding=codec, newline="") as fp:
        return fp.read()


def read_bytes(path: PathLike, locator: Optional[ResourceLocator] = None) -> bytes:
    resolved = resolve_path(path, locator)
    with open(resolved, "rb") as fp:
        return fp.read()


def read_lines(
    path: PathLike, encoding: str, locator: Optional[ResourceLocator] = None
) -> Iterator[str]:
    """Lines of a file without their terminators. Resolution errors raise immediately."""
    codec = codec_name(encoding)
    resolved = resolve_path(path, locator)
    return _iter_lines(resolved, codec)


def _iter_lines(path: Path, codec: str) -> Iterator[str]:
    with open(path, "r", encoding=codec) as fp:
        for line in fp:
            yield line[:-1] if line.endswith("\n") else line


def _sniff_bom(head: bytes) -> Optional[str]:
    for mark, name in BYTE_ORDER_MARKS:
        if head.startswith(mark):
            return name
    return None


def detect_stream(fp: BinaryIO, sample_limit: Optional[int] = None) -> DetectionResult:
    """
    Guess the encoding of a binary stream.

    Reads DETECTION_CHUNK_SIZE chunks. A byte-order mark in the first chunk
    decides immediately; otherwise chunks are sampled up to sample_limit
    bytes and handed to charset-normalizer. An inconclusive sample yields
    encoding=None, never an exception.
    """
    if sample_limit is None:
        sample_limit = get_settings().detection_sample_limit
    if sample_limit <= 0:
        raise ValueError(f"sample_limit must be positive, got {sample_limit}")

    sample = bytearray()
    truncated = False
    while len(sample) < sample_limit:
        chunk = fp.read(min(DETECTION_CHUNK_SIZE, sample_limit - len(sample)))
        if not chunk:
            break
        if not sample:
            bom_encoding = _sniff_bom(chunk)
            if bom_encoding is not None:
                logger.debug("Byte-order mark found: %s", bom_encoding)
                return DetectionResult(encoding=bom_encoding, bom=True, bytes_sampled=len(chunk))
        sample.extend(chunk)
        if len(sample) >= sample_limit:
            truncated = bool(fp.read(1))
            break

    logger.debug("Sampled %d bytes for detection (truncated=%s)", len(sample), truncated)

    match = from_bytes(bytes(sample)).best()
    if match is None:
        logger.warning("No confident encoding guess for %d sampled bytes", len(sample))
        return DetectionResult(
            encoding=UNKNOWN_ENCODING,
            bytes_sampled=len(sample),
            truncated=truncated,
        )

    return DetectionResult(
        encoding=display_name(match.encoding),
        chaos=match.chaos,
        coherence=match.coherence,
        bytes_sampled=len(sample),
        truncated=truncated,
    )


def detect(path: PathLike, locator: Optional[ResourceLocator] = None) -> DetectionResult:
    resolved = resolve_path(path, locator)
    with open(resolved, "rb") as fp:
        result = detect_stream(fp)
    logger.debug("Detected %s for %s", result.encoding, resolved)
    return result


def detect_encoding(path: PathLike, locator: Optional[ResourceLocator] = None) -> Optional[str]:
    """Best-guess encoding name of a file, or None when detection is inconclusive."""
    return detect(path, locator).encoding


def read_text_detected(
    path: PathLike, fallback: str, locator: Optional[ResourceLocator] = None
) -> Tuple[str, str]:
    """
    Read a file under its detected encoding.

    fallback is used when detection is inconclusive. Returns the text and
    the name of the encoding actually used. A byte-order mark is consumed.
    """
    fallback_codec = codec_name(fallback)
    resolved = resolve_path(path, locator)

    with open(resolved, "rb") as fp:
        result = detect_stream(fp)

    if result.encoding is None:
        logger.info("Falling back to %s for %s", fallback, resolved)
        used, codec = display_name(fallback), fallback_codec
    elif result.bom:
        used, codec = result.encoding, BOM_CONSUMING_CODECS[result.encoding]
    else:
        used, codec = result.encoding, codec_name(result.encoding)

    with open(resolved, "r", encoding=codec, newline="") as fp:
        return fp.read(), used


def transcode(data: bytes, from_encoding: str, to_encoding: str) -> bytes:
    """Re-encode an in-memory byte string."""
    source_codec = codec_name(from_encoding)
    target_codec = codec_name(to_encoding)
    return data.decode(source_codec).encode(target_codec)


def convert(
    input_path: PathLike,
    output_path: PathLike,
    from_encoding: str,
    to_encoding: str,
    locator: Optional[ResourceLocator] = None,
) -> ConversionReport:
    """
    Convert a file by loading it fully into memory.

    The input is resolved like any read; output_path is a plain filesystem
    path that is created or truncated. The input may be the output file.
    """
    source_codec = codec_name(from_encoding)
    target_codec = codec_name(to_encoding)
    source = resolve_path(input_path, locator)

    with open(source, "r", encoding=source_codec, newline="") as reader:
        text = reader.read()

    data = text.encode(target_codec)
    with open(output_path, "wb") as writer:
        writer.write(data)

    logger.info(
        "Converted %s (%s) to %s (%s): %d characters",
        source, from_encoding, output_path, to_encoding, len(text),
    )
    return ConversionReport(
        input_path=str(source),
        output_path=str(output_path),
        from_encoding=display_name(from_encoding),
        to_encoding=display_name(to_encoding),
        characters=len(text),
        bytes_written=len(data),
    )


def convert_streaming(
    input_path: PathLike,
    output_path: PathLike,
    from_encoding: str,
    to_encoding: str,
    locator: Optional[ResourceLocator] = None,
    buffer_size: Optional[int] = None,
) -> ConversionReport:
    """
    Convert a file through incremental decoder/encoder streams.

    Memory use is bounded by buffer_size characters. The output is the same
    as convert() produces, line terminators included. An interrupted
    conversion leaves a partial output file behind.
    """
    source_codec = codec_name(from_encoding)
    target_codec = codec_name(to_encoding)
    source = resolve_path(input_path, locator)
    target = Path(output_path)
    if buffer_size is None:
        buffer_size = get_settings().stream_buffer_size
    if buffer_size <= 0:
        raise ValueError(f"buffer_size must be positive, got {buffer_size}")

    if target.exists() and os.path.samefile(source, target):
        raise ValueError(f"Cannot stream {source} onto itself; use convert()")

    characters = 0
    with open(source, "r", encoding=source_codec, newline="") as reader, \
            open(target, "w", encoding=target_codec, newline="") as writer:
        while True:
            block = reader.read(buffer_size)
            if not block:
                break
            writer.write(block)
            characters += len(block)

    bytes_written = target.stat().st_size
    logger.info(
        "Streamed %s (%s) to %s (%s): %d characters",
        source, from_encoding, target, to_encoding, characters,
    )
    return ConversionReport(
        input_path=str(source),
        output_path=str(target),
        from_encoding=display_name(from_encoding),
        to_encoding=display_name(to_encoding),
        characters=characters,
        bytes_written=bytes_written,
        streamed=True,
    )
