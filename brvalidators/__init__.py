"""
Check-digit validators for Brazilian government identifiers.

Each module under ``brvalidators.documents`` exposes ``dv``, ``mask``, ``fake``,
``validate`` and ``validate_or_fail``.
"""

import logging
from types import ModuleType
from typing import Union

from brvalidators.core.exceptions import (
    AppError,
    DocumentError,
    EmptyValueError,
    ErrorKind,
    InvalidDVError,
    InvalidLengthError,
    InvalidValueError,
)
from brvalidators.documents import cnpj, cpf, judicial_process, nup17, titulo_eleitor

logging.getLogger(__name__).addHandler(logging.NullHandler())

DOCUMENTS: dict[str, ModuleType] = {
    "nup17": nup17,
    "titulo_eleitor": titulo_eleitor,
    "judicial_process": judicial_process,
    "cpf": cpf,
    "cnpj": cnpj,
}


def get_document(kind: str) -> ModuleType:
    document = DOCUMENTS.get((kind or "").strip().lower())
    if document is None:
        raise InvalidValueError(
            f"Tipo de documento desconhecido: '{kind}'",
            details={"available": sorted(DOCUMENTS)},
        )
    return document


def validate_document(kind: str, value: Union[str, int]) -> bool:
    """Dispatch to the validator registered under ``kind``."""
    return get_document(kind).validate(value)


__all__ = [
    "AppError",
    "DOCUMENTS",
    "DocumentError",
    "EmptyValueError",
    "ErrorKind",
    "InvalidDVError",
    "InvalidLengthError",
    "InvalidValueError",
    "cnpj",
    "cpf",
    "get_document",
    "judicial_process",
    "nup17",
    "titulo_eleitor",
    "validate_document",
]
