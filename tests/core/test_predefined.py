# tests/core/test_predefined.py
"""
Predefined error tests - the fixed sentinel set and HTTP status mapping
"""

import pytest

import errorchain as errors
from errorchain import (
    ERR_BAD_REQUEST,
    ERR_CONFLICT,
    ERR_FORBIDDEN_ACTION,
    ERR_INTERNAL_SERVER_ERROR,
    ERR_NOT_FOUND,
    ERR_PAYMENT_ERROR,
    ERR_PRECONDITION_FAILED,
    ERR_REGISTRATION_REQUIRED,
    ERR_UNAUTHORIZED,
    ERR_VALIDATION,
    PREDEFINED_ERRORS,
    STATUS_CODES,
    http_status,
    is_predefined,
)


def test_ten_distinct_sentinels():
    assert len(PREDEFINED_ERRORS) == 10
    assert len({id(e) for e in PREDEFINED_ERRORS}) == 10


def test_sentinels_are_plain_errors():
    for sentinel in PREDEFINED_ERRORS:
        assert isinstance(sentinel, errors.Error)
        assert sentinel.unwrap() is None
        assert sentinel.stack is None
        assert str(sentinel) == sentinel.description


@pytest.mark.parametrize(
    "sentinel, message, status",
    [
        (ERR_BAD_REQUEST, "bad request", 400),
        (ERR_UNAUTHORIZED, "user unauthorized", 401),
        (ERR_REGISTRATION_REQUIRED, "registration required", 401),
        (ERR_PAYMENT_ERROR, "payment error", 402),
        (ERR_FORBIDDEN_ACTION, "forbidden", 403),
        (ERR_NOT_FOUND, "entity not found", 404),
        (ERR_CONFLICT, "conflict request", 409),
        (ERR_PRECONDITION_FAILED, "precondition failed", 412),
        (ERR_VALIDATION, "validation failed", 422),
        (ERR_INTERNAL_SERVER_ERROR, "internal server error", 500),
    ],
)
def test_sentinel_messages_and_status(sentinel, message, status):
    assert str(sentinel) == message
    assert STATUS_CODES[sentinel] == status
    assert http_status(sentinel) == status


def test_status_codes_read_only():
    with pytest.raises(TypeError):
        STATUS_CODES[ERR_NOT_FOUND] = 410


def test_equal_message_is_not_a_sentinel():
    lookalike = errors.new("entity not found")

    assert not is_predefined(lookalike)
    assert not errors.is_(lookalike, ERR_NOT_FOUND)
    assert http_status(lookalike) is None


def test_http_status_through_wrappers():
    err = errors.wrap(
        errors.wrapf_with_custom_err(ValueError("dup key"), ERR_CONFLICT, "saving user"),
        "handling signup",
    )

    assert http_status(err) == 409


def test_http_status_for_foreign_chain():
    err = errors.errorf("gateway: %w", ERR_INTERNAL_SERVER_ERROR)

    assert http_status(err) == 500


def test_http_status_default():
    assert http_status(None) is None
    assert http_status(ValueError("x"), default=500) == 500
