"""
Shared bit-stream and buffer utilities for the share codec.
"""

from contextlib import contextmanager

# Bit conversion utilities


def bytes_to_bits(data: bytes) -> list[int]:
    """Convert bytes to list of bits, most significant bit first."""
    bits = []
    for byte in data:
        for i in range(7, -1, -1):
            bits.append((byte >> i) & 1)
    return bits


def bits_to_bytes(bits: list[int]) -> bytearray:
    """
    Convert list of bits to bytes.

    The bit count must be a multiple of 8; callers strip alignment
    padding before regrouping.
    """
    if len(bits) % 8 != 0:
        raise ValueError(f"Bit count {len(bits)} is not a multiple of 8")

    result = bytearray()
    for i in range(0, len(bits), 8):
        byte = 0
        for j in range(8):
            byte = (byte << 1) | bits[i + j]
        result.append(byte)
    return result


def bits_to_int(bits: list[int]) -> int:
    """Convert list of bits to integer."""
    value = 0
    for bit in bits:
        value = (value << 1) | bit
    return value


def int_to_bits(value: int, num_bits: int) -> list[int]:
    """Convert integer to list of bits."""
    bits = []
    for i in range(num_bits - 1, -1, -1):
        bits.append((value >> i) & 1)
    return bits


# Scrubbing utilities


def scrub(buffer) -> None:
    """Overwrite a mutable buffer (bytearray or list of bits) with zeros in place."""
    if isinstance(buffer, bytearray):
        buffer[:] = bytes(len(buffer))
    else:
        buffer[:] = [0] * len(buffer)


@contextmanager
def scrubbed(*buffers):
    """
    Zero the given buffers when the block exits, on success or error.

    Yields the buffer itself when given one, otherwise the tuple.

    Usage:
        with scrubbed(bytearray(secret)) as buf:
            ...
    """
    try:
        yield buffers[0] if len(buffers) == 1 else buffers
    finally:
        for buffer in buffers:
            scrub(buffer)
