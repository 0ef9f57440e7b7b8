"""Tests for error construction."""

import pytest

from serverpilot import (
    DEFAULT_ERROR_MESSAGES,
    AuthenticationError,
    BadRequestError,
    ConflictError,
    ForbiddenError,
    InternalServerError,
    NotFoundError,
    PaymentRequiredError,
    ServerPilotError,
    ServiceError,
    error_from_response,
)


@pytest.mark.parametrize(
    "status_code, error_class",
    [
        (400, BadRequestError),
        (401, AuthenticationError),
        (402, PaymentRequiredError),
        (403, ForbiddenError),
        (404, NotFoundError),
        (409, ConflictError),
        (500, InternalServerError),
    ],
)
def test_default_messages(status_code, error_class):
    error = error_from_response(status_code, None)

    assert type(error) is error_class
    assert isinstance(error, ServiceError)
    assert error.code == status_code
    assert error.message == DEFAULT_ERROR_MESSAGES[status_code]


@pytest.mark.parametrize("status_code", [405, 422, 429, 502, 503])
def test_unlisted_status(status_code):
    error = error_from_response(status_code, {"detail": "nope"})

    assert type(error) is ServiceError
    assert error.code == status_code
    assert error.message == "Unknown error."
    assert error.response_body == {"detail": "nope"}


def test_service_message_wins():
    body = {"error": {"message": "Name already taken"}}
    error = error_from_response(409, body)

    assert isinstance(error, ConflictError)
    assert error.message == "Name already taken"
    assert error.details == {"status_code": 409, "response": body}


@pytest.mark.parametrize(
    "body",
    [
        None,
        [],
        "error",
        {"error": "message"},
        {"error": {"code": 12}},
        {"error": {"message": None}},
        {"message": "top-level message is not the service format"},
    ],
)
def test_malformed_bodies_fall_back_to_default(body):
    error = error_from_response(400, body)

    assert error.message == DEFAULT_ERROR_MESSAGES[400]


def test_str_and_repr():
    error = NotFoundError()

    assert isinstance(error, ServerPilotError)
    assert str(error) == "You requested a resource that does not exist."
    assert repr(error) == "NotFoundError(code=404, message='You requested a resource that does not exist.')"
