"""
Generic check-digit (DV) engine.

An identifier type is described as data: a tuple of passes, each one building
an operand from the body (and the digits already computed), weighting it, and
reducing the sum through a remainder rule. ``compute_check_digits`` runs the
passes in order and concatenates their output.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from brvalidators.core.utils import sum_elements_by_multipliers


@dataclass(frozen=True)
class RemainderRule:
    """Maps a weighted sum to a digit string.

    remainder = total % modulus
    raw = complement - remainder (or just remainder when complement is None)
    the exception table is checked after that, then the value is zero-padded
    to ``width``.
    """

    modulus: int
    complement: Optional[int] = None
    # (raw, digit) pairs
    exceptions: tuple[tuple[int, int], ...] = ()
    width: int = 1

    def apply(self, total: int) -> str:
        remainder = total % self.modulus
        raw = remainder if self.complement is None else self.complement - remainder
        return str(dict(self.exceptions).get(raw, raw)).zfill(self.width)


@dataclass(frozen=True)
class DigitPass:
    # (body, digits computed so far) -> operand
    operand: Callable[[str, str], str]
    weights: Sequence[int]
    rule: RemainderRule


# 11 - remainder, keeping only the units digit (11 -> 1, 10 -> 0)
NUP17_RULE = RemainderRule(modulus=11, complement=11, exceptions=((11, 1), (10, 0)))

# plain remainder, 10 -> 0
REMAINDER_RULE = RemainderRule(modulus=11, exceptions=((10, 0),))

# 11 - remainder, anything above 9 -> 0
TAXPAYER_RULE = RemainderRule(modulus=11, complement=11, exceptions=((10, 0), (11, 0)))

# ISO 7064 MOD 97-10
MOD97_RULE = RemainderRule(modulus=97, complement=98, width=2)


def descending(start: int, stop: int = 2) -> tuple[int, ...]:
    return tuple(range(start, stop - 1, -1))


def ascending(start: int, stop: int) -> tuple[int, ...]:
    return tuple(range(start, stop + 1))


def powers_of_ten(length: int, modulus: int) -> tuple[int, ...]:
    """Positional weights (10^k mod modulus, most significant first) so that a
    weighted sum is congruent to the operand read as a decimal number."""
    return tuple(pow(10, k, modulus) for k in range(length - 1, -1, -1))


def compute_check_digits(body: str, passes: Sequence[DigitPass]) -> str:
    digits = ""
    for digit_pass in passes:
        operand = digit_pass.operand(body, digits)
        total = sum_elements_by_multipliers(operand, digit_pass.weights)
        digits += digit_pass.rule.apply(total)
    return digits
