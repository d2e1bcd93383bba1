"""
String helpers shared by every identifier module: digit cleaning, weighted sums,
mask templates and random digits.
"""

import random
import re
from functools import lru_cache
from typing import Optional, Sequence, Union

from brvalidators.config import get_settings
from brvalidators.core.exceptions import (
    EmptyValueError,
    InvalidLengthError,
    InvalidValueError,
)

MASK_PLACEHOLDER = "0"

_NON_DIGITS_RE = re.compile(r"[^0-9]")


def only_digits(value: Union[str, int, None]) -> str:
    if value is None:
        return ""
    return _NON_DIGITS_RE.sub("", str(value))


def clear_value(
    value: Union[str, int, None],
    length: int,
    *,
    reject_empty: bool = False,
    reject_higher_length: bool = False,
    fill_zeros_at_left: bool = False,
    trim_at_right: bool = False,
    reject_equal_sequence: bool = False,
) -> str:
    """Strip non-digits and coerce the result to exactly ``length`` digits or raise."""
    digits = only_digits(value)

    if reject_empty and not digits:
        raise EmptyValueError()

    if reject_higher_length and len(digits) > length:
        raise InvalidLengthError(
            f"Esperados no máximo {length} dígitos, recebidos: {len(digits)}",
            details={"expected": length, "received": len(digits)},
        )

    if trim_at_right:
        digits = digits[:length]

    if fill_zeros_at_left:
        digits = digits.zfill(length)

    if reject_equal_sequence and is_repeated(digits):
        raise InvalidValueError("Sequência de dígitos iguais")

    if len(digits) != length:
        raise InvalidLengthError(
            f"Esperados {length} dígitos, recebidos: {len(digits)}",
            details={"expected": length, "received": len(digits)},
        )

    return digits


def sum_elements_by_multipliers(value: str, multipliers: Sequence[int]) -> int:
    """Positional sum of digit[i] * multiplier[i]."""
    if len(value) != len(multipliers):
        raise InvalidLengthError(
            f"{len(value)} dígitos para {len(multipliers)} multiplicadores",
        )
    return sum(int(digit) * weight for digit, weight in zip(value, multipliers))


def apply_mask(value: Union[str, int], template: str) -> str:
    """Overlay digits on a template where each '0' is a slot and everything else is literal."""
    slots = template.count(MASK_PLACEHOLDER)
    digits = iter(
        clear_value(
            value,
            slots,
            reject_empty=True,
            reject_higher_length=True,
            fill_zeros_at_left=True,
        )
    )
    return "".join(next(digits) if ch == MASK_PLACEHOLDER else ch for ch in template)


@lru_cache()
def get_random() -> random.Random:
    """Process-wide random source, seeded from settings when FAKE_SEED is set."""
    return random.Random(get_settings().FAKE_SEED)


def fake_number(length: int, rng: Optional[random.Random] = None) -> str:
    rng = rng or get_random()
    return "".join(str(rng.randint(0, 9)) for _ in range(length))


def is_repeated(value: str) -> bool:
    return bool(value) and value == value[0] * len(value)
