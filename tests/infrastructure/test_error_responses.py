import pytest

from catalog.application.dto.base import BaseResponse
from catalog.domain.base.errors import CatalogErrors, GeneralErrors
from catalog.domain.base.result import ErrorKind
from catalog.domain.shared.measure_type import MeasureTypeErrors
from catalog.infrastructure.error import ErrorResponse, status_for_kind
from catalog.infrastructure.exceptions import ConfigurationError
from catalog.infrastructure.persistence.exceptions import StorageError


@pytest.mark.parametrize("kind,status", [
    (ErrorKind.VALUE_REQUIRED, 400),
    (ErrorKind.VALUE_INVALID, 400),
    (ErrorKind.UNKNOWN_MEASURE_TYPE, 400),
    (ErrorKind.INCORRECT_COMMAND, 400),
    (ErrorKind.ALREADY_ARCHIVED, 409),
    (ErrorKind.ALREADY_UNARCHIVED, 409),
    (ErrorKind.UNIQUE_VIOLATION, 409),
    (ErrorKind.NOT_FOUND, 404),
])
def test_status_by_kind(kind, status):
    assert status_for_kind(kind) == status
    assert status_for_kind(kind.value) == status


def test_unknown_kind_is_server_error():
    assert status_for_kind(None) == 500
    assert status_for_kind("storage") == 500


def test_from_error():
    response = ErrorResponse.from_error(MeasureTypeErrors.unknown_type())

    assert response.to_dict() == {
        "error_code": "unknown.measure.type",
        "message": "Possible values for MeasureType: weight,liquid",
        "kind": "unknown_measure_type",
        "http_status": 400,
        "details": {},
    }


def test_from_failed_handler_response():
    failed = BaseResponse.failure(CatalogErrors.same_name_and_measure_type_exists("Item", "Apple", "weight"))

    response = ErrorResponse.from_response(failed)

    assert response.error_code == "item.unique.violation"
    assert response.kind == "unique_violation"
    assert response.http_status == 409


def test_from_exception():
    assert ErrorResponse.from_exception(StorageError("locked")).error_code == "storage.error"
    assert ErrorResponse.from_exception(ConfigurationError("bad")).error_code == "configuration.error"
    assert ErrorResponse.from_exception(RuntimeError("x")).http_status == 500


def test_general_error_messages():
    assert GeneralErrors.value_is_required("name").message == "Value is required for name"
    assert GeneralErrors.value_is_too_long(6, "abcdefg").code == "value.is.too.long"
    assert GeneralErrors.incorrect_command().kind == ErrorKind.INCORRECT_COMMAND
