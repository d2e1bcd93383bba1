"""
Número de processo judicial (CNJ Resolução 65/2008), 20 digits:

    NNNNNNN-DD.AAAA.J.TR.OOOO
    |       |  |    | |  +-- origin unit
    |       |  |    | +----- court (tribunal) within the segment
    |       |  |    +------- judiciary segment, never 0
    |       |  +------------ filing year
    |       +--------------- check digits
    +----------------------- sequential number

The check digits are ISO 7064 MOD 97-10 over the other 18 digits:
DD = 98 - (NNNNNNN AAAA J TR OOOO 00 mod 97).
"""

import logging
import random
from datetime import date
from typing import Optional, Union

from brvalidators.config import get_settings
from brvalidators.core.check_digit import (
    MOD97_RULE,
    DigitPass,
    compute_check_digits,
    powers_of_ten,
)
from brvalidators.core.exceptions import DocumentError, InvalidDVError, InvalidValueError
from brvalidators.core.utils import apply_mask, clear_value, fake_number, get_random

logger = logging.getLogger(__name__)

LENGTH = 20
BODY_LENGTH = 18
MASK = "0000000-00.0000.0.00.0000"

# Check digits sit right after the sequential number
DV_START = 7
DV_END = 9

# Position of J inside the 18-digit body (NNNNNNN AAAA J TR OOOO)
SEGMENT_INDEX = 11

PASSES = (
    DigitPass(lambda body, _: body + "00", powers_of_ten(BODY_LENGTH + 2, 97), MOD97_RULE),
)


def dv(value: Union[str, int]) -> str:
    """Check digits for an 18-digit body (sequence, year, J, TR, origin)."""
    body = clear_value(
        value,
        BODY_LENGTH,
        reject_empty=True,
        fill_zeros_at_left=True,
        trim_at_right=True,
    )
    return compute_check_digits(body, PASSES)


def mask(value: Union[str, int]) -> str:
    """Format as MASK, zero-filling short input."""
    return apply_mask(value, MASK)


def _get_sub_court(court: Optional[str] = None, rng: Optional[random.Random] = None) -> str:
    """Two-digit court code for generated numbers; zero or blank codes become '01'."""
    if court is None:
        court = fake_number(2, rng)
    if not court.strip("0"):
        return "01"
    return court


def fake(with_mask: bool = False, rng: Optional[random.Random] = None) -> str:
    """Generate a valid number, masked when ``with_mask`` is set."""
    rng = rng or get_random()
    sequence = fake_number(7, rng)
    year = date.today().year - rng.randrange(get_settings().FAKE_YEAR_SPAN)
    segment = rng.randint(1, 9)
    court = _get_sub_court(rng=rng)
    origin = fake_number(4, rng)

    body = f"{sequence}{year:04d}{segment}{court}{origin}"
    process = f"{body[:DV_START]}{dv(body)}{body[DV_START:]}"
    logger.debug("Generated judicial process %s", process)
    return mask(process) if with_mask else process


def validate_or_fail(value: Union[str, int]) -> bool:
    """Return True or raise the DocumentError describing why the value is invalid."""
    process = clear_value(
        value,
        LENGTH,
        reject_empty=True,
        reject_higher_length=True,
        fill_zeros_at_left=True,
        reject_equal_sequence=True,
    )
    body = process[:DV_START] + process[DV_END:]

    if body[SEGMENT_INDEX] == "0":
        raise InvalidValueError(
            "Segmento do Poder Judiciário não pode ser 0",
            details={"value": process},
        )

    if dv(body) != process[DV_START:DV_END]:
        raise InvalidDVError(details={"value": process})
    return True


def validate(value: Union[str, int]) -> bool:
    """Non-raising variant of validate_or_fail."""
    try:
        return validate_or_fail(value)
    except DocumentError as e:
        logger.debug("Judicial process rejected %r: %s", value, e.code)
        return False


is_judicial_process = validate
