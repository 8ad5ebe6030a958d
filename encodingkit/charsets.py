"""
Codec lookup and naming.

Encoding names are validated against Python's codec registry at the point a
codec is requested, so an unknown name fails before any file is touched.
Names handed back to callers use the common registry spelling
("UTF-8", "UTF-16BE", "windows-1252", "Big5", ...).
"""

from __future__ import annotations

import codecs

from .errors import UnsupportedEncodingError

# Keyed by CodecInfo.name, which is already normalized by the registry.
_DISPLAY_NAMES = {
    "utf-8": "UTF-8",
    "utf-8-sig": "UTF-8",
    "utf-16": "UTF-16",
    "utf-16-be": "UTF-16BE",
    "utf-16-le": "UTF-16LE",
    "utf-32": "UTF-32",
    "utf-32-be": "UTF-32BE",
    "utf-32-le": "UTF-32LE",
    "ascii": "US-ASCII",
    "big5": "Big5",
    "big5hkscs": "Big5-HKSCS",
    "shift_jis": "Shift_JIS",
    "cp932": "windows-31j",
    "euc_jp": "EUC-JP",
    "euc_kr": "EUC-KR",
    "iso2022_jp": "ISO-2022-JP",
    "gb2312": "GB2312",
    "gbk": "GBK",
    "gb18030": "GB18030",
    "koi8-r": "KOI8-R",
    "koi8-u": "KOI8-U",
    "mac-roman": "x-MacRoman",
}


def lookup_codec(encoding: str) -> codecs.CodecInfo:
    """
    Return the registry entry for a text encoding.

    Raises UnsupportedEncodingError for unknown names and for codecs that
    are not text encodings (e.g. "base64").
    """
    try:
        info = codecs.lookup(encoding)
    except (LookupError, TypeError):
        raise UnsupportedEncodingError(encoding) from None
    if not getattr(info, "_is_text_encoding", True):
        raise UnsupportedEncodingError(encoding)
    return info


def codec_name(encoding: str) -> str:
    """Python codec name for an encoding, suitable for open()/decode()."""
    return lookup_codec(encoding).name


def display_name(encoding: str) -> str:
    """Common registry spelling of an encoding name."""
    name = lookup_codec(encoding).name
    if name in _DISPLAY_NAMES:
        return _DISPLAY_NAMES[name]
    if name.startswith("cp125"):
        return "windows-" + name[2:]
    if name.startswith("iso8859-"):
        return "ISO-8859-" + name[len("iso8859-"):]
    return name

