"""
Fixed encoding rules.

Callers pass an encoding explicitly; DEFAULT_ENCODING is the named value to
pass when UTF-8 is wanted. Nothing in the library falls back to it silently.
"""

import codecs

DEFAULT_ENCODING = "UTF-8"

# Detection result when the detector has no confident guess.
UNKNOWN_ENCODING = None

DETECTION_CHUNK_SIZE = 4096

# Longest marks first: the UTF-32 LE mark starts with the UTF-16 LE mark.
BYTE_ORDER_MARKS = (
    (codecs.BOM_UTF32_LE, "UTF-32LE"),
    (codecs.BOM_UTF32_BE, "UTF-32BE"),
    (codecs.BOM_UTF8, "UTF-8"),
    (codecs.BOM_UTF16_LE, "UTF-16LE"),
    (codecs.BOM_UTF16_BE, "UTF-16BE"),
)

# Codecs that consume the mark on decode, keyed by the display name above.
BOM_CONSUMING_CODECS = {
    "UTF-32LE": "utf-32",
    "UTF-32BE": "utf-32",
    "UTF-8": "utf-8-sig",
    "UTF-16LE": "utf-16",
    "UTF-16BE": "utf-16",
}
