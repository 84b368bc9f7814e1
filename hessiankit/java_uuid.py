"""java.util.UUID as two signed 64-bit halves."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


def _uuid_digits(arg: int, digits: int) -> str:
    hi = 1 << (digits * 4)
    return format(hi | (arg & (hi - 1)), "x")[1:]


@dataclass
class JavaUUID:
    """A ``java.util.UUID`` made of its most and least significant bits."""

    java_class_name: ClassVar[str] = "java.util.UUID"

    most_sig_bits: int = 0
    least_sig_bits: int = 0

    def __str__(self) -> str:
        """Return the canonical ``8-4-4-4-12`` lower-case hex form."""
        return "-".join(
            (
                _uuid_digits(self.most_sig_bits >> 32, 8),
                _uuid_digits(self.most_sig_bits >> 16, 4),
                _uuid_digits(self.most_sig_bits, 4),
                _uuid_digits(self.least_sig_bits >> 48, 4),
                _uuid_digits(self.least_sig_bits, 12),
            )
        )