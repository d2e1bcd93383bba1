"""
Título de eleitor (electoral title), 12 digits:

    1023 8501 06 71
    |         |  +-- check digits
    |         +----- federation unit code (01 = SP ... 27 = TO, 28 = abroad)
    +--------------- sequential number

DV1 is the remainder of the first 8 digits weighted 2..9, divided by 11.
DV2 is the remainder of the UF code followed by DV1 weighted 7, 8, 9. A
remainder of 10 becomes 0 in both cases.

Source: http://clubes.obmep.org.br/blog/a-matematica-nos-documentos-titulo-de-eleitor/
"""

import logging
import random
from typing import Optional, Union

from brvalidators.core.check_digit import (
    REMAINDER_RULE,
    DigitPass,
    ascending,
    compute_check_digits,
)
from brvalidators.core.exceptions import DocumentError, InvalidDVError
from brvalidators.core.utils import apply_mask, clear_value, fake_number, get_random

logger = logging.getLogger(__name__)

LENGTH = 12
BODY_LENGTH = 10
MASK = "0000.0000.0000"

# Federation unit codes issued inside Brazil
UF_CODES = range(1, 28)

PASSES = (
    DigitPass(lambda body, _: body[:8], ascending(2, 9), REMAINDER_RULE),
    DigitPass(lambda body, dvs: body[8:10] + dvs, (7, 8, 9), REMAINDER_RULE),
)


def dv(value: Union[str, int]) -> str:
    titulo = clear_value(
        value,
        BODY_LENGTH,
        reject_empty=True,
        fill_zeros_at_left=True,
        trim_at_right=True,
    )
    return compute_check_digits(titulo, PASSES)


def mask(value: Union[str, int]) -> str:
    """Format as MASK, zero-filling short input."""
    return apply_mask(value, MASK)


def fake(with_mask: bool = False, rng: Optional[random.Random] = None) -> str:
    """Generate a valid number, masked when ``with_mask`` is set."""
    rng = rng or get_random()
    body = fake_number(8, rng) + f"{rng.choice(UF_CODES):02d}"
    titulo = f"{body}{dv(body)}"
    logger.debug("Generated título de eleitor %s", titulo)
    return mask(titulo) if with_mask else titulo


def validate_or_fail(value: Union[str, int]) -> bool:
    """Return True or raise the DocumentError describing why the value is invalid."""
    titulo = clear_value(
        value,
        LENGTH,
        reject_empty=True,
        reject_higher_length=True,
        fill_zeros_at_left=True,
        reject_equal_sequence=True,
    )
    if dv(titulo) != titulo[BODY_LENGTH:]:
        raise InvalidDVError(details={"value": titulo})
    return True


def validate(value: Union[str, int]) -> bool:
    """Non-raising variant of validate_or_fail."""
    try:
        return validate_or_fail(value)
    except DocumentError as e:
        logger.debug("Título de eleitor rejected %r: %s", value, e.code)
        return False


is_titulo_eleitor = validate
