"""
Pydantic adapters for the identifier modules.

Usable as ``field_validator("field", mode="before")(validate_cpf)`` or through
the ``Annotated`` aliases at the bottom. Blank input becomes ``None``; valid
input is returned as bare digits; anything else raises the DocumentError
(a ValueError, so pydantic reports it as a field error).
"""

from types import ModuleType
from typing import Annotated, Callable, Optional, Union

from pydantic import BeforeValidator

from brvalidators.core.exceptions import InvalidLengthError
from brvalidators.core.utils import clear_value, only_digits
from brvalidators.documents import cnpj, cpf, judicial_process, nup17, titulo_eleitor


def _field_validator(document: ModuleType) -> Callable[[Optional[str]], Optional[str]]:
    def validator(value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        v = str(value).strip()
        if not v:
            return None
        document.validate_or_fail(v)
        return clear_value(v, document.LENGTH, fill_zeros_at_left=True)

    validator.__name__ = f"validate_{document.__name__.rsplit('.', 1)[-1]}"
    validator.__doc__ = f"Validate {document.__name__} (with or without mask), returning its digits."
    return validator


validate_nup17 = _field_validator(nup17)
validate_titulo_eleitor = _field_validator(titulo_eleitor)
validate_judicial_process = _field_validator(judicial_process)
validate_cpf = _field_validator(cpf)
validate_cnpj = _field_validator(cnpj)


def validate_client_document(value: Union[str, int, None]) -> Optional[str]:
    """Auto-detect and validate as CPF (11 digits) or CNPJ (14 digits)."""
    if value is None:
        return None
    v = str(value).strip()
    if not v:
        return None

    digits = only_digits(v)
    if len(digits) == cpf.LENGTH:
        return validate_cpf(v)
    elif len(digits) == cnpj.LENGTH:
        return validate_cnpj(v)
    else:
        raise InvalidLengthError(
            f"Documento deve ser CPF (11 dígitos) ou CNPJ (14 dígitos), "
            f"recebido: {len(digits)} dígitos"
        )


NUP17 = Annotated[Optional[str], BeforeValidator(validate_nup17)]
TituloEleitor = Annotated[Optional[str], BeforeValidator(validate_titulo_eleitor)]
JudicialProcess = Annotated[Optional[str], BeforeValidator(validate_judicial_process)]
CPF = Annotated[Optional[str], BeforeValidator(validate_cpf)]
CNPJ = Annotated[Optional[str], BeforeValidator(validate_cnpj)]
ClientDocument = Annotated[Optional[str], BeforeValidator(validate_client_document)]
