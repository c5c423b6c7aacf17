"""
Exceptions raised by the share codec.

All of them derive from ValueError so callers that only care about
"bad input" can keep catching that.
"""


class ShareError(ValueError):
    """Base class for share encoding and decoding failures."""


class ValidationError(ShareError):
    """A parameter violated its invariant (threshold, index, count, size)."""


class ShareTooLargeError(ValidationError):
    """Share data does not fit in the 16-bit length prefix."""


class FormatError(ShareError):
    """A share mnemonic is structurally malformed."""


class VersionError(FormatError):
    """The leading word is not the format's version word."""


class ChecksumError(ShareError):
    """The share parsed correctly but its CRC32 does not match its contents."""

    def __init__(self, message: str, expected: int, actual: int):
        super().__init__(message)
        self.expected = expected
        self.actual = actual
