from enum import Enum


class FailureKind(Enum):
    SCAN = "SCAN"
    PARSE = "PARSE"
    HASH = "HASH"
    WRITE = "WRITE"
    CONFIG = "CONFIG"


class CSPHeadersError(Exception):
    """
    Base failure for the header generation pipeline.
    `kind` lets the host tell scan, parse, hash and write failures apart
    without inspecting the message.
    """

    kind = None

    def __init__(self, message, path=None):
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self):
        if self.path:
            return f"{self.message} ({self.path})"
        return self.message


class ScanError(CSPHeadersError):
    """Unreadable directory during page discovery."""
    kind = FailureKind.SCAN


class ParseError(CSPHeadersError):
    """Page could not be read or turned into a tag tree."""
    kind = FailureKind.PARSE


class HashError(CSPHeadersError):
    """Inline tag with no text content to digest."""
    kind = FailureKind.HASH


class WriteError(CSPHeadersError):
    """Header file could not be appended to."""
    kind = FailureKind.WRITE


class ConfigError(CSPHeadersError):
    kind = FailureKind.CONFIG
