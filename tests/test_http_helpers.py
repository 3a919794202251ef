"""
test_http_helpers.py — Tests for controllers/helpers.py and controllers/errors.py

Called by: pytest
Depends on: app/controllers/helpers.py, app/controllers/errors.py
"""

from app.controllers import (
    InvalidParamError,
    MissingParamError,
    ServerError,
    bad_request,
    server_error,
    success_request,
)


def _raised(exc: Exception) -> Exception:
    """Return ``exc`` after raising it so it carries a traceback."""
    try:
        raise exc
    except Exception as e:
        return e


# ── Envelopes ───────────────────────────────────────────────────────


def test_bad_request_wraps_error():
    error = MissingParamError("name")
    response = bad_request(error)
    assert response.status_code == 400
    assert response.body is error


def test_success_request_wraps_body():
    response = success_request({"id": "1"})
    assert response.status_code == 200
    assert response.body == {"id": "1"}


def test_server_error_carries_trace_of_cause():
    response = server_error(_raised(ValueError("bad thing")))
    assert response.status_code == 500
    assert isinstance(response.body, ServerError)
    assert "Traceback" in response.body.stack
    assert "ValueError: bad thing" in response.body.stack


def test_server_error_without_traceback():
    response = server_error(KeyError("k"))
    assert "KeyError" in response.body.stack


def test_helpers_are_pure():
    error = InvalidParamError("email")
    assert bad_request(error) == bad_request(error)
    assert success_request({"a": 1}) == success_request({"a": 1})


# ── Error descriptors ───────────────────────────────────────────────


def test_error_messages():
    assert MissingParamError("name").message == "Missing param: name"
    assert InvalidParamError("email").message == "Invalid param: email"
    assert ServerError("trace").message == "Internal server error"


def test_error_names():
    assert MissingParamError("x").name == "MissingParamError"
    assert ServerError().name == "ServerError"


def test_equality_by_type_and_message():
    assert MissingParamError("name") == MissingParamError("name")
    assert MissingParamError("name") != MissingParamError("email")
    assert MissingParamError("email") != InvalidParamError("email")


def test_server_error_equality_includes_stack():
    assert ServerError("any") == ServerError("any")
    assert ServerError("any") != ServerError("other")
