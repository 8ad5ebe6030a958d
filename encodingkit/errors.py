"""Exceptions raised by encodingkit"""


class EncodingKitError(Exception):
    """Base exception for all encodingkit errors"""
    pass


class ResourceNotFoundError(EncodingKitError, FileNotFoundError):
    """A path resolved to no existing regular file"""
    def __init__(self, path):
        super().__init__(f"File not found: {path}")
        self.path = str(path)


class UnsupportedEncodingError(EncodingKitError, LookupError):
    """A codec name is not in the codec registry"""
    def __init__(self, encoding):
        super().__init__(f"Unsupported encoding: {encoding!r}")
        self.encoding = encoding
