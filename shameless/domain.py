"""
Validated integer types used by the share codec.

Each type is an immutable int subclass: construction enforces the
invariant, and afterwards the value behaves like a plain int.
"""

from dataclasses import dataclass

from shameless.errors import ValidationError

MAX_BYTE = 255


def _require_int(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{name} must be an integer (got {value!r})")
    return int(value)


class Threshold(int):
    """Minimum number of shares needed to reconstruct the secret (2-255)."""

    def __new__(cls, value):
        value = _require_int("Threshold", value)
        # A threshold of 1 would let any single share recover the secret
        if value < 2:
            raise ValidationError(f"Threshold must be at least 2 (got {value})")
        if value > MAX_BYTE:
            raise ValidationError(f"Threshold must be at most {MAX_BYTE} (got {value})")
        return super().__new__(cls, value)

    def __repr__(self):
        return f"Threshold({int(self)})"


class ShareIndex(int):
    """Ordinal position of a share among its siblings (0-254)."""

    def __new__(cls, value):
        value = _require_int("Share index", value)
        if value == MAX_BYTE:
            raise ValidationError("Share index 255 is reserved for GF256 operations")
        if not 0 <= value < MAX_BYTE:
            raise ValidationError(f"Share index must be between 0 and 254 (got {value})")
        return super().__new__(cls, value)

    def __repr__(self):
        return f"ShareIndex({int(self)})"


class ShareCount(int):
    """Total number of shares to create (1-254)."""

    def __new__(cls, value):
        value = _require_int("Share count", value)
        if value < 1:
            raise ValidationError("Share count must be at least 1")
        if value >= MAX_BYTE:
            raise ValidationError("Share count maximum is 254 due to GF256 limitations")
        return super().__new__(cls, value)

    def __repr__(self):
        return f"ShareCount({int(self)})"


@dataclass(frozen=True)
class SplitConfig:
    """A threshold together with the number of shares it applies to."""

    threshold: Threshold
    share_count: ShareCount

    def __post_init__(self):
        # Coerce plain ints; frozen dataclasses need object.__setattr__
        object.__setattr__(self, "threshold", Threshold(self.threshold))
        object.__setattr__(self, "share_count", ShareCount(self.share_count))
        if self.threshold > self.share_count:
            raise ValidationError(
                f"Threshold ({self.threshold}) cannot exceed share count ({self.share_count})"
            )

    def accepts_index(self, index) -> bool:
        """Whether a share index falls inside this split."""
        return int(index) < self.share_count
