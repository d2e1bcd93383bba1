"""
CPF (Cadastro de Pessoas Físicas), 11 digits: 529.982.247-25.

DV1 weights the first 9 digits 10..2, DV2 weights the first 10 (DV1 included)
11..2. Each is 11 - (sum mod 11), with 10 and 11 becoming 0.
"""

import logging
import random
from typing import Optional, Union

from brvalidators.core.check_digit import (
    TAXPAYER_RULE,
    DigitPass,
    compute_check_digits,
    descending,
)
from brvalidators.core.exceptions import DocumentError, InvalidDVError
from brvalidators.core.utils import apply_mask, clear_value, fake_number, get_random, is_repeated

logger = logging.getLogger(__name__)

LENGTH = 11
BODY_LENGTH = 9
MASK = "000.000.000-00"

PASSES = (
    DigitPass(lambda body, _: body, descending(10), TAXPAYER_RULE),
    DigitPass(lambda body, dvs: body + dvs, descending(11), TAXPAYER_RULE),
)


def dv(value: Union[str, int]) -> str:
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


def fake(with_mask: bool = False, rng: Optional[random.Random] = None) -> str:
    """Generate a valid number, masked when ``with_mask`` is set."""
    rng = rng or get_random()
    body = fake_number(BODY_LENGTH, rng)
    while is_repeated(body):
        body = fake_number(BODY_LENGTH, rng)
    cpf = f"{body}{dv(body)}"
    logger.debug("Generated CPF %s", cpf)
    return mask(cpf) if with_mask else cpf


def validate_or_fail(value: Union[str, int]) -> bool:
    """Return True or raise the DocumentError describing why the value is invalid."""
    cpf = clear_value(
        value,
        LENGTH,
        reject_empty=True,
        reject_higher_length=True,
        fill_zeros_at_left=True,
        reject_equal_sequence=True,
    )
    if dv(cpf) != cpf[BODY_LENGTH:]:
        raise InvalidDVError(details={"value": cpf})
    return True


def validate(value: Union[str, int]) -> bool:
    """Non-raising variant of validate_or_fail."""
    try:
        return validate_or_fail(value)
    except DocumentError as e:
        logger.debug("CPF rejected %r: %s", value, e.code)
        return False


is_cpf = validate
