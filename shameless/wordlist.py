"""
BIP39 English wordlist lookups.

Each of the 2048 words stands for one 11-bit code. The word -> code
table is built on first use and never modified afterwards.
"""

from functools import lru_cache

from mnemonic import Mnemonic

from shameless.errors import FormatError

WORD_COUNT = 2048
BITS_PER_WORD = 11
WORD_MASK = WORD_COUNT - 1


@lru_cache(maxsize=None)
def get_wordlist() -> tuple[str, ...]:
    """Return the BIP39 English wordlist, index == code."""
    words = tuple(Mnemonic("english").wordlist)
    if len(words) != WORD_COUNT or len(set(words)) != WORD_COUNT:
        raise RuntimeError(f"BIP39 wordlist must contain {WORD_COUNT} unique words")
    return words


@lru_cache(maxsize=None)
def _word_codes() -> dict[str, int]:
    return {word: code for code, word in enumerate(get_wordlist())}


def word_to_code(word: str) -> int:
    """
    Look up the 11-bit code for a word (case-insensitive).

    Raises:
        FormatError: If the word is not in the wordlist
    """
    code = _word_codes().get(word.lower())
    if code is None:
        raise FormatError(f"Word '{word}' not found in BIP39 wordlist")
    return code


def code_to_word(code: int) -> str:
    """Look up the word for an 11-bit code."""
    if not 0 <= code <= WORD_MASK:
        raise ValueError(f"Word index {code} out of range (must be 0-{WORD_MASK})")
    return get_wordlist()[code]
