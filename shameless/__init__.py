"""
Shameless - Shamir39 share mnemonics.

Encodes a secret-share fragment together with its threshold and share
index as a line of BIP39 words, with a length prefix and CRC32 so that
typos are caught on decode.

Example usage:
    from shameless import create_share, parse_share

    mnemonic = create_share(b"\\xab\\xcd\\xef\\x12\\x34", threshold=3, index=0)
    threshold, index, data = parse_share(str(mnemonic))
"""

# Share encoding/decoding
from shameless.codec import (
    CHECKSUM_SIZE,
    CONTINUATION_BIT,
    LENGTH_PREFIX_SIZE,
    MAX_SHARE_SIZE,
    VERSION_WORD,
    OneWordParameters,
    ParameterBlock,
    ShareMnemonic,
    TwoWordParameters,
    checksum,
    create_share,
    create_share_payload,
    decode,
    decode_parameters,
    decode_share_data,
    encode,
    encode_parameters,
    encode_share_data,
    pack_parameters,
    parameter_word_count,
    parse_share,
    parse_share_payload,
    unpack_parameters,
)

# Validated parameters
from shameless.domain import ShareCount, ShareIndex, SplitConfig, Threshold

# Errors
from shameless.errors import (
    ChecksumError,
    FormatError,
    ShareError,
    ShareTooLargeError,
    ValidationError,
    VersionError,
)

# Share sets
from shameless.shares import ParsedShare, ShareSet, inspect_shares

# Wordlist
from shameless.wordlist import BITS_PER_WORD, WORD_COUNT, code_to_word, get_wordlist, word_to_code

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Shares
    "create_share",
    "parse_share",
    "encode",
    "decode",
    "ShareMnemonic",
    "VERSION_WORD",
    "MAX_SHARE_SIZE",
    # Parameter block
    "pack_parameters",
    "unpack_parameters",
    "encode_parameters",
    "decode_parameters",
    "parameter_word_count",
    "ParameterBlock",
    "OneWordParameters",
    "TwoWordParameters",
    "CONTINUATION_BIT",
    # Payload
    "encode_share_data",
    "decode_share_data",
    "create_share_payload",
    "parse_share_payload",
    "checksum",
    "LENGTH_PREFIX_SIZE",
    "CHECKSUM_SIZE",
    # Validated parameters
    "Threshold",
    "ShareIndex",
    "ShareCount",
    "SplitConfig",
    # Share sets
    "inspect_shares",
    "ParsedShare",
    "ShareSet",
    # Errors
    "ShareError",
    "ValidationError",
    "ShareTooLargeError",
    "FormatError",
    "VersionError",
    "ChecksumError",
    # Wordlist
    "get_wordlist",
    "word_to_code",
    "code_to_word",
    "WORD_COUNT",
    "BITS_PER_WORD",
]
