"""
Shamir39 share encoding.

A share is a single line of BIP39 words:

    shameless <param-word> [<param-word>] <data-word>+

- The version word identifies the format.
- One or two parameter words carry the threshold (M) and share index (O).
  Each word is 1 continuation bit + 5 bits of M + 5 bits of O.
- The data words carry length(2) || share bytes || crc32(4), big-endian,
  packed 11 bits per word with zero padding at the front.

Example:
    from shameless.codec import create_share, parse_share

    mnemonic = create_share(b"\\xde\\xad\\xbe\\xef", threshold=3, index=0)
    threshold, index, data = parse_share(str(mnemonic))
"""

import zlib
from typing import NamedTuple, Union

from shameless.domain import MAX_BYTE, ShareIndex, Threshold
from shameless.errors import ChecksumError, FormatError, ShareTooLargeError, VersionError
from shameless.utils import bits_to_bytes, bits_to_int, bytes_to_bits, int_to_bits, scrubbed
from shameless.wordlist import BITS_PER_WORD, code_to_word, word_to_code

VERSION_WORD = "shameless"

MAX_SHARE_SIZE = 0xFFFF  # length prefix is a u16
LENGTH_PREFIX_SIZE = 2
CHECKSUM_SIZE = 4
FRAME_OVERHEAD = LENGTH_PREFIX_SIZE + CHECKSUM_SIZE

# Parameter word layout: [continuation:1][M:5][O:5]
PARAM_FIELD_BITS = 5
PARAM_FIELD_MASK = (1 << PARAM_FIELD_BITS) - 1
PARAM_SINGLE_LIMIT = 1 << PARAM_FIELD_BITS  # both values below 32 fit one word
CONTINUATION_BIT = 1 << (2 * PARAM_FIELD_BITS)


class ShareMnemonic:
    """
    An encoded share line.

    The text lives in a private buffer that wipe() zeroes; this happens
    automatically when used as a context manager or garbage collected.
    """

    __slots__ = ("_buffer",)

    def __init__(self, text: str):
        self._buffer = bytearray(text.encode("ascii"))

    def __str__(self) -> str:
        return self._buffer.decode("ascii")

    def __repr__(self) -> str:
        return f"ShareMnemonic(<{len(self.words())} words>)"

    def __eq__(self, other) -> bool:
        if isinstance(other, ShareMnemonic):
            return self._buffer == other._buffer
        if isinstance(other, str):
            return str(self) == other
        return NotImplemented

    __hash__ = None

    def words(self) -> list[str]:
        return str(self).split()

    def wipe(self) -> None:
        buffer = getattr(self, "_buffer", None)
        if buffer is not None:
            buffer[:] = bytes(len(buffer))

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.wipe()

    def __del__(self):
        self.wipe()


# ============================================================================
# Parameter block
# ============================================================================


class OneWordParameters(NamedTuple):
    """Threshold and index both below 32: one word, continuation bit clear."""

    code: int

    def codes(self) -> list[int]:
        return [self.code]


class TwoWordParameters(NamedTuple):
    """High 5 bits of each value in the first word, low 5 bits in the second."""

    high: int  # continuation bit set
    low: int  # continuation bit clear

    def codes(self) -> list[int]:
        return [self.high, self.low]


ParameterBlock = Union[OneWordParameters, TwoWordParameters]


def _fields(code: int) -> tuple[int, int]:
    """Split a parameter word code into its (M, O) 5-bit fields."""
    return (code >> PARAM_FIELD_BITS) & PARAM_FIELD_MASK, code & PARAM_FIELD_MASK


def _pack_fields(m: int, o: int) -> int:
    return ((m & PARAM_FIELD_MASK) << PARAM_FIELD_BITS) | (o & PARAM_FIELD_MASK)


def pack_parameters(threshold, index) -> ParameterBlock:
    """Choose the shortest parameter block for (threshold, index)."""
    m = int(Threshold(threshold))
    o = int(ShareIndex(index))

    if m < PARAM_SINGLE_LIMIT and o < PARAM_SINGLE_LIMIT:
        return OneWordParameters(_pack_fields(m, o))

    high = CONTINUATION_BIT | _pack_fields(m >> PARAM_FIELD_BITS, o >> PARAM_FIELD_BITS)
    return TwoWordParameters(high, _pack_fields(m, o))


def unpack_parameters(block: ParameterBlock) -> tuple[Threshold, ShareIndex]:
    """
    Recover (threshold, index) from a parameter block.

    Raises:
        FormatError: If the continuation bits are malformed or a value exceeds 255
        ValidationError: If a value violates the Threshold/ShareIndex invariants
    """
    if isinstance(block, TwoWordParameters):
        if block.low & CONTINUATION_BIT:
            raise FormatError("Second parameter word has continuation bit set")
        m_high, o_high = _fields(block.high)
        m_low, o_low = _fields(block.low)
        m = (m_high << PARAM_FIELD_BITS) | m_low
        o = (o_high << PARAM_FIELD_BITS) | o_low
    else:
        m, o = _fields(block.code)

    if m > MAX_BYTE:
        raise FormatError(f"Threshold value {m} exceeds {MAX_BYTE}")
    if o > MAX_BYTE:
        raise FormatError(f"Share index {o} exceeds {MAX_BYTE}")

    return Threshold(m), ShareIndex(o)


def parameter_word_count(first_word: str) -> int:
    """Number of parameter words implied by the first parameter word."""
    return 2 if word_to_code(first_word) & CONTINUATION_BIT else 1


def encode_parameters(threshold, index) -> list[str]:
    """Encode (threshold, index) as one or two words."""
    return [code_to_word(code) for code in pack_parameters(threshold, index).codes()]


def decode_parameters(words: list[str]) -> tuple[Threshold, ShareIndex]:
    """Decode parameter words back into (threshold, index)."""
    if not words:
        raise FormatError("No parameter words provided")

    first = word_to_code(words[0])
    if first & CONTINUATION_BIT:
        if len(words) < 2:
            raise FormatError("Continuation bit set but only one parameter word provided")
        block = TwoWordParameters(first, word_to_code(words[1]))
    else:
        block = OneWordParameters(first)

    return unpack_parameters(block)


# ============================================================================
# Payload words
# ============================================================================


def encode_share_data(data: bytes) -> list[str]:
    """
    Pack bytes into words, 11 bits per word.

    Zero bits are prepended so the stream length is a multiple of 11.
    """
    if not data:
        return []

    data_bits = bytes_to_bits(data)
    padding = (BITS_PER_WORD - len(data_bits) % BITS_PER_WORD) % BITS_PER_WORD
    bits = [0] * padding + data_bits

    with scrubbed(data_bits, bits):
        return [
            code_to_word(bits_to_int(bits[i : i + BITS_PER_WORD]))
            for i in range(0, len(bits), BITS_PER_WORD)
        ]


def decode_share_data(words: list[str], expected_bytes: int) -> bytearray:
    """
    Unpack words into expected_bytes bytes.

    The word stream does not record its own length, so the caller says
    how many bytes to keep; everything before them is padding.

    Raises:
        FormatError: If a word is unknown, the words hold too few bits,
            or a padding bit is set
    """
    total_bits = len(words) * BITS_PER_WORD
    expected_bits = expected_bytes * 8

    if total_bits < expected_bits:
        raise FormatError(
            f"Not enough bits: got {total_bits}, expected at least {expected_bits}"
        )

    bits = []
    with scrubbed(bits):
        for word in words:
            bits.extend(int_to_bits(word_to_code(word), BITS_PER_WORD))
        padding = total_bits - expected_bits
        if any(bits[:padding]):
            raise FormatError(f"Non-zero padding bits in the first {padding} bits")
        with scrubbed(bits[padding:]) as payload_bits:
            return bits_to_bytes(payload_bits)


# ============================================================================
# Framed payload
# ============================================================================


def checksum(data: bytes) -> int:
    """CRC-32/ISO-HDLC of data (the zip/ethernet CRC-32)."""
    return zlib.crc32(data) & 0xFFFFFFFF


def create_share_payload(data: bytes) -> bytearray:
    """
    Frame share data as length(2) || data || crc32(4), big-endian.

    Raises:
        ShareTooLargeError: If data is longer than 65535 bytes
    """
    if len(data) > MAX_SHARE_SIZE:
        raise ShareTooLargeError(
            f"Share data too large: {len(data)} bytes (max {MAX_SHARE_SIZE})"
        )

    end = LENGTH_PREFIX_SIZE + len(data)
    framed = bytearray(end + CHECKSUM_SIZE)
    framed[:LENGTH_PREFIX_SIZE] = len(data).to_bytes(LENGTH_PREFIX_SIZE, "big")
    framed[LENGTH_PREFIX_SIZE:end] = data
    framed[end:] = checksum(data).to_bytes(CHECKSUM_SIZE, "big")
    return framed


def _frames_exactly(buffer: bytearray, offset: int = 0) -> bool:
    """Whether the length field at offset accounts for every remaining byte."""
    length = int.from_bytes(buffer[offset : offset + LENGTH_PREFIX_SIZE], "big")
    return len(buffer) - offset == FRAME_OVERHEAD + length


def _strip_alignment_bytes(buffer: bytearray) -> None:
    """
    Drop leading zero bytes left over from word padding.

    Decoding guesses the framed length from the word count, which can
    overshoot by one byte; that extra byte is padding and always zero.
    A buffer that already frames exactly is never touched, so an empty
    share (all six bytes zero) survives.
    """
    while (
        len(buffer) >= FRAME_OVERHEAD
        and buffer[0] == 0
        and not _frames_exactly(buffer)
        and (buffer[1] == 0 or _frames_exactly(buffer, 1))
    ):
        del buffer[0]


def parse_share_payload(buffer) -> bytes:
    """
    Unframe a decoded buffer and verify its checksum.

    Trailing bytes after the checksum are ignored.

    Raises:
        FormatError: If the buffer is too short for its length field
        ChecksumError: If the stored CRC32 does not match the share data
    """
    with scrubbed(bytearray(buffer)) as framed:
        _strip_alignment_bytes(framed)

        if len(framed) < FRAME_OVERHEAD:
            raise FormatError(
                "Encoded data too short: need at least 6 bytes (length + checksum), "
                f"got {len(framed)}"
            )

        length = int.from_bytes(framed[:LENGTH_PREFIX_SIZE], "big")
        end = LENGTH_PREFIX_SIZE + length
        if len(framed) < end + CHECKSUM_SIZE:
            raise FormatError(
                f"Encoded data size mismatch: expected at least {end + CHECKSUM_SIZE} bytes "
                f"(2 + {length} + 4), got {len(framed)}"
            )

        with memoryview(framed) as view:
            share_data = bytes(view[LENGTH_PREFIX_SIZE:end])

        expected = checksum(share_data)
        actual = int.from_bytes(framed[end : end + CHECKSUM_SIZE], "big")
        if expected != actual:
            raise ChecksumError(
                f"Checksum verification failed: expected 0x{expected:08x}, got 0x{actual:08x}",
                expected,
                actual,
            )

        return share_data


# ============================================================================
# Shares
# ============================================================================


def create_share(data: bytes, threshold, index) -> ShareMnemonic:
    """
    Encode share bytes with their threshold and index as a share mnemonic.

    Args:
        data: Share fragment (at most 65535 bytes)
        threshold: Threshold or int in 2..255
        index: ShareIndex or int in 0..254

    Returns:
        ShareMnemonic: "shameless <param words> <data words>"
    """
    with scrubbed(create_share_payload(data)) as framed:
        words = [VERSION_WORD]
        words.extend(encode_parameters(threshold, index))
        words.extend(encode_share_data(framed))
        return ShareMnemonic(" ".join(words))


def parse_share(mnemonic) -> tuple[Threshold, ShareIndex, bytes]:
    """
    Decode a share mnemonic (str or ShareMnemonic).

    Words are split on whitespace and compared case-insensitively.

    Returns:
        Tuple of (threshold, index, share data)
    """
    words = [word.lower() for word in str(mnemonic).split()]

    if not words:
        raise FormatError("Empty mnemonic")

    if words[0] != VERSION_WORD:
        raise VersionError(
            f"Invalid version word: expected '{VERSION_WORD}', got '{words[0]}'"
        )

    if len(words) < 2:
        raise FormatError("Mnemonic too short: need at least version + parameters")

    param_count = parameter_word_count(words[1])
    if len(words) < 1 + param_count:
        raise FormatError("Mnemonic too short for parameter words")

    threshold, index = decode_parameters(words[1 : 1 + param_count])

    data_words = words[1 + param_count :]
    if not data_words:
        raise FormatError("No share data words found")

    # Upper bound on the framed length; see _strip_alignment_bytes
    max_bytes = len(data_words) * BITS_PER_WORD // 8

    with scrubbed(decode_share_data(data_words, max_bytes)) as framed:
        share_data = parse_share_payload(framed)

    return threshold, index, share_data


encode = create_share
decode = parse_share
