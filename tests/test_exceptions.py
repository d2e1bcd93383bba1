"""Tests for structured exception classes."""

import pytest

from brvalidators.core.exceptions import (
    AppError,
    DocumentError,
    EmptyValueError,
    ErrorKind,
    InvalidDVError,
    InvalidLengthError,
    InvalidValueError,
)
from brvalidators.documents import judicial_process, nup17


def test_base_app_error():
    err = AppError("test", details=[1, 2, 3])
    d = err.to_dict()
    assert d["error"]["code"] == "INTERNAL_ERROR"
    assert d["error"]["details"] == [1, 2, 3]


@pytest.mark.parametrize(
    "cls,kind",
    [
        (EmptyValueError, ErrorKind.EMPTY_VALUE),
        (InvalidLengthError, ErrorKind.INVALID_LENGTH),
        (InvalidValueError, ErrorKind.INVALID_VALUE),
        (InvalidDVError, ErrorKind.INVALID_DV),
    ],
)
def test_kind_and_code(cls, kind):
    err = cls()
    assert err.kind is kind
    assert err.code == kind.value
    assert isinstance(err, DocumentError)
    assert isinstance(err, ValueError)
    assert err.to_dict()["error"]["code"] == kind.value


def test_default_and_custom_message():
    assert InvalidDVError().message == "Dígito verificador inválido"
    assert str(InvalidValueError("Outro motivo")) == "Outro motivo"


def test_details_omitted_when_none():
    assert "details" not in EmptyValueError().to_dict()["error"]


def test_validate_or_fail_surfaces_kind():
    with pytest.raises(DocumentError) as exc:
        nup17.validate_or_fail("23037001380202112")
    assert exc.value.kind is ErrorKind.INVALID_DV
    assert exc.value.details == {"value": "23037001380202112"}


def test_zero_segment_kind():
    with pytest.raises(DocumentError) as exc:
        judicial_process.validate_or_fail("08002732820160058400")
    assert exc.value.kind is ErrorKind.INVALID_VALUE


@pytest.mark.parametrize("module", [nup17, judicial_process])
def test_empty_kind(module):
    with pytest.raises(DocumentError) as exc:
        module.validate_or_fail("")
    assert exc.value.kind is ErrorKind.EMPTY_VALUE
