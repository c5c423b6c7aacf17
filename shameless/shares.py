"""
Checks over a set of share mnemonics before reconstruction.

The reconstruction algebra lives elsewhere; this only parses every share
and makes sure the set is consistent and large enough.
"""

from dataclasses import dataclass, field

from shameless.codec import parse_share
from shameless.domain import ShareIndex, Threshold
from shameless.errors import ChecksumError, FormatError, ShareError


@dataclass
class ParsedShare:
    """One decoded share."""

    threshold: Threshold
    index: ShareIndex
    data: bytes


@dataclass
class ShareSet:
    """Decoded shares that agree on their threshold."""

    threshold: Threshold
    shares: list[ParsedShare] = field(default_factory=list)

    @property
    def missing(self) -> int:
        """How many more shares are needed to reach the threshold."""
        return max(0, self.threshold - len(self.shares))

    @property
    def is_sufficient(self) -> bool:
        return self.missing == 0

    @property
    def indexes(self) -> list[ShareIndex]:
        return [share.index for share in self.shares]


def inspect_shares(mnemonics) -> ShareSet:
    """
    Parse share mnemonics and check they belong together.

    Args:
        mnemonics: Iterable of share lines (str or ShareMnemonic)

    Returns:
        ShareSet with every parsed share, in input order

    Raises:
        FormatError: If no shares are given, thresholds disagree or an index repeats
        ShareError: If a share fails to parse (message names the share number)
    """
    shares: list[ParsedShare] = []

    for number, mnemonic in enumerate(mnemonics, start=1):
        try:
            threshold, index, data = parse_share(mnemonic)
        except ChecksumError as e:
            raise ChecksumError(
                f"Failed to parse share #{number}: {e}", e.expected, e.actual
            ) from e
        except ShareError as e:
            raise type(e)(f"Failed to parse share #{number}: {e}") from e

        if shares and threshold != shares[0].threshold:
            raise FormatError(
                f"Share #{number} has inconsistent threshold: "
                f"expected {shares[0].threshold}, got {threshold}"
            )
        if any(share.index == index for share in shares):
            raise FormatError(f"Share #{number} duplicates share index {index}")

        shares.append(ParsedShare(threshold, index, data))

    if not shares:
        raise FormatError("No shares provided")

    return ShareSet(shares[0].threshold, shares)
