"""
Tests for share set inspection (shameless.shares).
"""

import pytest

from shameless.codec import create_share
from shameless.errors import ChecksumError, FormatError, VersionError
from shameless.shares import ParsedShare, ShareSet, inspect_shares
from shameless.wordlist import code_to_word, word_to_code

SHARE_DATA = bytes(range(1, 21))


def make_shares(threshold: int, count: int) -> list[str]:
    return [str(create_share(SHARE_DATA + bytes([i]), threshold, i)) for i in range(count)]


class TestInspectShares:
    def test_sufficient(self):
        share_set = inspect_shares(make_shares(3, 5)[:3])
        assert share_set.threshold == 3
        assert share_set.indexes == [0, 1, 2]
        assert share_set.missing == 0
        assert share_set.is_sufficient

    def test_more_than_threshold(self):
        share_set = inspect_shares(make_shares(2, 4))
        assert share_set.is_sufficient
        assert len(share_set.shares) == 4

    def test_insufficient(self):
        share_set = inspect_shares(make_shares(3, 5)[:2])
        assert share_set.missing == 1
        assert not share_set.is_sufficient

    def test_parsed_share_contents(self):
        share = inspect_shares(make_shares(2, 2)).shares[1]
        assert share == ParsedShare(2, 1, SHARE_DATA + b"\x01")

    def test_accepts_share_mnemonics(self):
        mnemonics = [create_share(b"abc", 2, 0), create_share(b"def", 2, 1)]
        assert inspect_shares(mnemonics).is_sufficient

    def test_accepts_generator(self):
        share_set = inspect_shares(share for share in make_shares(2, 2))
        assert share_set.is_sufficient

    def test_empty(self):
        with pytest.raises(FormatError, match="No shares provided"):
            inspect_shares([])

    def test_inconsistent_threshold(self):
        first = str(create_share(bytes(20), 2, 0))
        second = str(create_share(bytes(20), 3, 1))
        with pytest.raises(FormatError, match="Share #2 has inconsistent threshold: expected 2, got 3"):
            inspect_shares([first, second])

    def test_duplicate_index(self):
        first = str(create_share(b"one", 2, 4))
        second = str(create_share(b"two", 2, 4))
        with pytest.raises(FormatError, match="Share #2 duplicates share index 4"):
            inspect_shares([first, second])

    def test_parse_failure_names_share(self):
        shares = make_shares(2, 2)
        shares.append("invalid word word word")
        with pytest.raises(VersionError, match="Failed to parse share #3: Invalid version word"):
            inspect_shares(shares)

    def test_checksum_failure_keeps_values(self):
        words = make_shares(2, 1)[0].split()
        words[-1] = code_to_word(word_to_code(words[-1]) ^ 1)
        with pytest.raises(ChecksumError, match="Failed to parse share #1: Checksum") as exc:
            inspect_shares([" ".join(words)])
        assert exc.value.expected != exc.value.actual


class TestShareSet:
    def test_missing_never_negative(self):
        share_set = ShareSet(2, [ParsedShare(2, i, b"") for i in range(5)])
        assert share_set.missing == 0

    def test_empty_set(self):
        share_set = ShareSet(3)
        assert share_set.missing == 3
        assert not share_set.is_sufficient
