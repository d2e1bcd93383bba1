"""
CNPJ (Cadastro Nacional da Pessoa Jurídica), 14 digits: 11.222.333/0001-81.

Same mod 11 scheme as CPF with cyclic weights: 5..2 then 9..2 for DV1,
6..2 then 9..2 for DV2.
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

LENGTH = 14
BODY_LENGTH = 12
MASK = "00.000.000/0000-00"

PASSES = (
    DigitPass(lambda body, _: body, descending(5) + descending(9), TAXPAYER_RULE),
    DigitPass(lambda body, dvs: body + dvs, descending(6) + descending(9), TAXPAYER_RULE),
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
    cnpj = f"{body}{dv(body)}"
    logger.debug("Generated CNPJ %s", cnpj)
    return mask(cnpj) if with_mask else cnpj


def validate_or_fail(value: Union[str, int]) -> bool:
    """Return True or raise the DocumentError describing why the value is invalid."""
    cnpj = clear_value(
        value,
        LENGTH,
        reject_empty=True,
        reject_higher_length=True,
        fill_zeros_at_left=True,
        reject_equal_sequence=True,
    )
    if dv(cnpj) != cnpj[BODY_LENGTH:]:
        raise InvalidDVError(details={"value": cnpj})
    return True


def validate(value: Union[str, int]) -> bool:
    """Non-raising variant of validate_or_fail."""
    try:
        return validate_or_fail(value)
    except DocumentError as e:
        logger.debug("CNPJ rejected %r: %s", value, e.code)
        return False


is_cnpj = validate
