#!/usr/bin/env python3
"""
Shameless - Shamir39 share mnemonics

Encode a share fragment with its threshold and index as BIP39 words,
decode it back, or check a set of shares before reconstruction.

Usage:
    python -m shameless.cli encode -t 3 -x 0 --hex -i share.hex
    python -m shameless.cli decode -i share.txt -o share.bin
    python -m shameless.cli inspect -i shares.txt
"""

import argparse
import binascii
import sys

from shameless.codec import create_share, parse_share
from shameless.domain import ShareIndex, SplitConfig, Threshold
from shameless.errors import ShareError, ValidationError
from shameless.shares import inspect_shares
from shameless.utils import scrubbed


def _read_input(path: str | None, binary: bool):
    if path:
        with open(path, "rb" if binary else "r") as f:
            return f.read()
    return sys.stdin.buffer.read() if binary else sys.stdin.read()


def _write_output(path: str | None, data: bytes) -> None:
    if path:
        with open(path, "wb") as f:
            f.write(data)
    else:
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()


def run_encode(args) -> int:
    threshold = Threshold(args.threshold)
    index = ShareIndex(args.index)

    if args.shares is not None:
        config = SplitConfig(threshold, args.shares)
        if not config.accepts_index(index):
            raise ValidationError(
                f"Share index {index} is outside a split of {config.share_count} shares"
            )

    raw = _read_input(args.input, binary=not args.hex)
    if args.hex:
        try:
            raw = binascii.unhexlify("".join(raw.split()))
        except binascii.Error as e:
            raise ValidationError(f"Invalid hex input: {e}") from e

    with scrubbed(bytearray(raw)) as data:
        if args.verbose:
            print(
                f"Encoding {len(data)} bytes (threshold: {threshold}, index: {index})",
                file=sys.stderr,
            )
        with create_share(bytes(data), threshold, index) as mnemonic:
            print(mnemonic)
    return 0


def run_decode(args) -> int:
    text = _read_input(args.input, binary=False)
    threshold, index, data = parse_share(text)

    print(f"Threshold: {threshold}, index: {index}, {len(data)} bytes", file=sys.stderr)

    if args.hex:
        _write_output(args.output, binascii.hexlify(data) + b"\n")
    else:
        _write_output(args.output, data)
    return 0


def run_inspect(args) -> int:
    text = _read_input(args.input, binary=False)
    lines = [line.strip() for line in text.splitlines() if line.strip()]

    if args.verbose:
        print(f"Parsing {len(lines)} share(s)...", file=sys.stderr)

    share_set = inspect_shares(lines)
    for number, share in enumerate(share_set.shares, start=1):
        print(
            f"Share #{number}: threshold {share.threshold}, index {share.index}, "
            f"{len(share.data)} bytes"
        )

    if not share_set.is_sufficient:
        print(
            f"Insufficient shares: need at least {share_set.threshold}, "
            f"but only {len(share_set.shares)} provided",
            file=sys.stderr,
        )
        return 1

    print(f"Shares are sufficient for reconstruction (threshold: {share_set.threshold})")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shameless",
        description="Shameless - Shamir39 share mnemonics",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Encode a hex share fragment (threshold 3, first share of 5):
    echo deadbeef | shameless encode -t 3 -x 0 --shares 5 --hex

  Decode a share back to hex:
    shameless decode -i share.txt --hex

  Check shares before combining (one per line):
    shameless inspect -i shares.txt
        """,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")

    subparsers = parser.add_subparsers(dest="command", required=True)

    enc = subparsers.add_parser("encode", help="Encode share bytes as a mnemonic")
    enc.add_argument("-t", "--threshold", type=int, required=True, help="Threshold (2-255)")
    enc.add_argument("-x", "--index", type=int, required=True, help="Share index (0-254)")
    enc.add_argument("--shares", type=int, help="Total shares in the split (validates -t/-x)")
    enc.add_argument("-i", "--input", help="Input file (default: stdin)")
    enc.add_argument("--hex", action="store_true", help="Input is hex text")
    enc.set_defaults(func=run_encode)

    dec = subparsers.add_parser("decode", help="Decode a mnemonic into share bytes")
    dec.add_argument("-i", "--input", help="Input file (default: stdin)")
    dec.add_argument("-o", "--output", help="Output file (default: stdout)")
    dec.add_argument("--hex", action="store_true", help="Write hex text")
    dec.set_defaults(func=run_decode)

    ins = subparsers.add_parser("inspect", help="Check a set of shares")
    ins.add_argument("-i", "--input", help="Input file, one share per line (default: stdin)")
    ins.set_defaults(func=run_inspect)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        return args.func(args)
    except ShareError as e:
        parser.exit(1, f"Error: {e}\n")


if __name__ == "__main__":
    sys.exit(main())
