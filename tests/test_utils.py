#!/usr/bin/env python3
"""
Tests for bit and buffer utilities (shameless.utils).

Run with: python -m pytest tests/test_utils.py -v
"""

import unittest

from shameless.utils import (
    bits_to_bytes,
    bits_to_int,
    bytes_to_bits,
    int_to_bits,
    scrub,
    scrubbed,
)


class TestBitConversions(unittest.TestCase):
    """Tests for bit conversion utilities."""

    def test_bytes_to_bits(self):
        """Test converting bytes to bits."""
        self.assertEqual(bytes_to_bits(b"\x00"), [0, 0, 0, 0, 0, 0, 0, 0])
        self.assertEqual(bytes_to_bits(b"\xff"), [1, 1, 1, 1, 1, 1, 1, 1])
        self.assertEqual(bytes_to_bits(b"\x80"), [1, 0, 0, 0, 0, 0, 0, 0])
        self.assertEqual(bytes_to_bits(b"\x01"), [0, 0, 0, 0, 0, 0, 0, 1])

        self.assertEqual(
            bytes_to_bits(b"\xab\xcd"), [1, 0, 1, 0, 1, 0, 1, 1, 1, 1, 0, 0, 1, 1, 0, 1]
        )

    def test_bits_to_bytes(self):
        """Test converting bits to bytes."""
        self.assertEqual(bits_to_bytes([0, 0, 0, 0, 0, 0, 0, 0]), b"\x00")
        self.assertEqual(bits_to_bytes([1, 1, 1, 1, 1, 1, 1, 1]), b"\xff")
        self.assertEqual(bits_to_bytes([1, 0, 1, 0, 1, 0, 1, 1]), b"\xab")
        self.assertEqual(bits_to_bytes([]), b"")

    def test_bits_to_bytes_rejects_partial_byte(self):
        """Leftover bits are an error rather than silently padded."""
        with self.assertRaises(ValueError):
            bits_to_bytes([1, 0, 1, 0])

    def test_bits_to_bytes_is_mutable(self):
        self.assertIsInstance(bits_to_bytes([0] * 8), bytearray)

    def test_bits_to_int(self):
        """Test converting bits to integer."""
        self.assertEqual(bits_to_int([0]), 0)
        self.assertEqual(bits_to_int([1]), 1)
        self.assertEqual(bits_to_int([1, 0]), 2)
        self.assertEqual(bits_to_int([1, 0, 1, 0]), 10)
        self.assertEqual(bits_to_int([1] * 11), 2047)

    def test_int_to_bits(self):
        """Test converting integer to bits."""
        self.assertEqual(int_to_bits(0, 4), [0, 0, 0, 0])
        self.assertEqual(int_to_bits(10, 4), [1, 0, 1, 0])
        self.assertEqual(int_to_bits(1024, 11), [1] + [0] * 10)

    def test_roundtrip(self):
        """Test bytes -> bits -> bytes roundtrip."""
        original = b"\xde\xad\xbe\xef"
        self.assertEqual(bits_to_bytes(bytes_to_bits(original)), original)


class TestScrubbing(unittest.TestCase):
    """Tests for buffer scrubbing."""

    def test_scrub_bytearray(self):
        buf = bytearray(b"secret")
        scrub(buf)
        self.assertEqual(buf, bytearray(6))

    def test_scrub_bit_list(self):
        bits = [1, 0, 1, 1]
        scrub(bits)
        self.assertEqual(bits, [0, 0, 0, 0])

    def test_scrubbed_single_buffer(self):
        buf = bytearray(b"\x01\x02")
        with scrubbed(buf) as inner:
            self.assertIs(inner, buf)
            self.assertEqual(inner, b"\x01\x02")
        self.assertEqual(buf, b"\x00\x00")

    def test_scrubbed_multiple_buffers(self):
        a, b = bytearray(b"\xff"), [1, 1]
        with scrubbed(a, b) as (x, y):
            self.assertIs(x, a)
            self.assertIs(y, b)
        self.assertEqual(a, b"\x00")
        self.assertEqual(b, [0, 0])

    def test_scrubbed_on_error(self):
        buf = bytearray(b"secret")
        with self.assertRaises(RuntimeError):
            with scrubbed(buf):
                raise RuntimeError("boom")
        self.assertEqual(buf, bytearray(6))


if __name__ == "__main__":
    unittest.main()
