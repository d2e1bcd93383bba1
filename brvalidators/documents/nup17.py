"""
NUP17: Número Unificado de Protocolo of the Brazilian federal government.

Layout (17 digits):

    23037 . 001462 / 2021 - 65
    |       |        |      +-- check digits
    |       |        +--------- year
    |       +------------------ sequential number (restarts yearly per body)
    +-------------------------- issuing body code

Both check digits are mod 11 over the reversed body: the first with weights
2..16, the second with DV1 prepended and weights 2..17. The result is
11 - remainder, keeping only the units digit (10 -> 0, 11 -> 1).

Source: Portaria Interministerial nº 11, de 25 de novembro de 2019.
"""

import logging
import random
from typing import Optional, Union

from brvalidators.core.check_digit import (
    NUP17_RULE,
    DigitPass,
    ascending,
    compute_check_digits,
)
from brvalidators.core.exceptions import DocumentError, InvalidDVError
from brvalidators.core.utils import apply_mask, clear_value, fake_number

logger = logging.getLogger(__name__)

LENGTH = 17
BODY_LENGTH = 15
MASK = "00000.000000/0000-00"

PASSES = (
    DigitPass(lambda body, _: body[::-1], ascending(2, 16), NUP17_RULE),
    DigitPass(lambda body, dvs: dvs + body[::-1], ascending(2, 17), NUP17_RULE),
)


def dv(value: Union[str, int]) -> str:
    """Compute the two check digits for a 15-digit body (extra digits are ignored)."""
    body = clear_value(value, BODY_LENGTH, reject_empty=True, trim_at_right=True)
    return compute_check_digits(body, PASSES)


def mask(value: Union[str, int]) -> str:
    """Format as MASK, zero-filling short input."""
    return apply_mask(value, MASK)


def fake(with_mask: bool = False, rng: Optional[random.Random] = None) -> str:
    """Generate a valid number, masked when ``with_mask`` is set."""
    body = fake_number(BODY_LENGTH, rng)
    nup = f"{body}{dv(body)}"
    logger.debug("Generated NUP17 %s", nup)
    return mask(nup) if with_mask else nup


def validate_or_fail(value: Union[str, int]) -> bool:
    """Return True or raise the DocumentError describing why the value is invalid."""
    nup = clear_value(value, LENGTH, reject_empty=True, reject_higher_length=True)
    if dv(nup) != nup[BODY_LENGTH:]:
        raise InvalidDVError(details={"value": nup})
    return True


def validate(value: Union[str, int]) -> bool:
    """Non-raising variant of validate_or_fail."""
    try:
        return validate_or_fail(value)
    except DocumentError as e:
        logger.debug("NUP17 rejected %r: %s", value, e.code)
        return False


is_nup17 = validate
