import base64
import json
from unittest.mock import MagicMock

import pytest

import src.utils.http as http
from src.wishes.errors import WishNotFoundError, WishStoreError, WishValidationError


# ================================================================
# json_response() / empty_response()
# ================================================================
def test_json_response_basic():
    resp = http.json_response(200, {"hello": "world"})

    assert resp["statusCode"] == 200
    assert json.loads(resp["body"]) == {"hello": "world"}

    # Default CORS headers must be present
    for key, value in http.DEFAULT_HEADERS.items():
        assert resp["headers"][key] == value


def test_default_cors_headers():
    assert http.DEFAULT_HEADERS["Access-Control-Allow-Origin"] == "*"
    assert http.DEFAULT_HEADERS["Access-Control-Allow-Credentials"] == "true"
    assert "PATCH" in http.DEFAULT_HEADERS["Access-Control-Allow-Methods"]
    assert "OPTIONS" in http.DEFAULT_HEADERS["Access-Control-Allow-Methods"]


def test_json_response_merges_custom_headers():
    resp = http.json_response(201, {"ok": True}, headers={"X-Test": "123"})

    assert resp["headers"]["X-Test"] == "123"
    assert resp["headers"]["Content-Type"] == "application/json"


def test_json_response_accepts_list():
    resp = http.json_response(200, [{"id": "1"}])

    assert json.loads(resp["body"]) == [{"id": "1"}]


def test_json_response_does_not_share_header_dict():
    resp = http.json_response(200, {}, headers={"Allow": "GET"})

    assert "Allow" not in http.DEFAULT_HEADERS
    assert resp["headers"] is not http.DEFAULT_HEADERS


def test_empty_response():
    resp = http.empty_response(204)

    assert resp["statusCode"] == 204
    assert resp["body"] == ""
    assert resp["headers"]["Access-Control-Allow-Origin"] == "*"


# ================================================================
# error_response() / wish_error_response() / method_not_allowed()
# ================================================================
def test_error_response_basic():
    resp = http.error_response(400, "Bad request")

    assert resp["statusCode"] == 400
    assert json.loads(resp["body"]) == {"error": "Bad request"}


def test_error_response_with_detail_and_code():
    resp = http.error_response(500, "Internal server error", error_code="X", detail="boom")

    assert json.loads(resp["body"]) == {
        "error": "Internal server error",
        "message": "boom",
        "error_code": "X",
    }


def test_wish_error_response_validation():
    resp = http.wish_error_response(WishValidationError("Invalid wish ID"))

    assert resp["statusCode"] == 400
    assert json.loads(resp["body"]) == {
        "error": "Invalid wish ID",
        "error_code": "INVALID_REQUEST",
    }


def test_wish_error_response_not_found():
    resp = http.wish_error_response(WishNotFoundError("999"))

    assert resp["statusCode"] == 404
    assert json.loads(resp["body"]) == {
        "error": "Wish not found",
        "message": "Wish not found",
        "error_code": "NOT_FOUND",
    }


def test_wish_error_response_store_error():
    resp = http.wish_error_response(WishStoreError("bad document"))

    assert resp["statusCode"] == 500
    body = json.loads(resp["body"])
    assert body["error"] == "Internal server error"
    assert body["message"] == "bad document"


def test_method_not_allowed():
    resp = http.method_not_allowed("POST", ("GET", "PUT", "PATCH", "DELETE"))

    assert resp["statusCode"] == 405
    assert resp["headers"]["Allow"] == "GET,PUT,PATCH,DELETE"
    assert json.loads(resp["body"])["error"] == "Method POST not allowed"


# ================================================================
# parse_json_object_body()
# ================================================================
def test_parse_body_from_string():
    assert http.parse_json_object_body({"body": '{"price": 1}'}) == {"price": 1}


def test_parse_body_passes_dict_through():
    assert http.parse_json_object_body({"body": {"price": 1}}) == {"price": 1}


def test_parse_body_base64():
    encoded = base64.b64encode(b'{"title": "x"}').decode("ascii")

    body = http.parse_json_object_body({"body": encoded, "isBase64Encoded": True})

    assert body == {"title": "x"}


@pytest.mark.parametrize(
    "event",
    [
        {},
        {"body": None},
        {"body": ""},
        {"body": "   "},
        {"body": "{oops"},
        {"body": "[1, 2]"},
        {"body": '"text"'},
        {"body": "!!notbase64!!", "isBase64Encoded": True},
        {"body": '{"price": NaN}'},
        {"body": '{"price": Infinity}'},
        {"body": '{"price": -Infinity}'},
    ],
)
def test_parse_body_rejects_non_objects(event):
    with pytest.raises(WishValidationError, match="Invalid request body"):
        http.parse_json_object_body(event)


# ================================================================
# translate_exceptions()
# ================================================================
def test_translate_exceptions_success():
    @http.translate_exceptions
    def handler(event, context):
        return http.json_response(200, {"ok": True})

    resp = handler({}, None)

    assert resp["statusCode"] == 200
    assert json.loads(resp["body"]) == {"ok": True}


def test_translate_exceptions_turns_exception_into_500():
    @http.translate_exceptions
    def handler(event, context):
        raise RuntimeError("boom")

    resp = handler({}, None)

    assert resp["statusCode"] == 500
    assert json.loads(resp["body"]) == {
        "error": "Internal server error",
        "message": "boom",
        "error_code": "INTERNAL_ERROR",
    }


def test_translate_exceptions_maps_typed_errors():
    @http.translate_exceptions
    def handler(event, context):
        raise WishNotFoundError("abc")

    resp = handler({}, None)

    assert resp["statusCode"] == 404


def test_translate_exceptions_logs(monkeypatch):
    mock_log = MagicMock()
    monkeypatch.setattr(http, "logger", mock_log)

    @http.translate_exceptions
    def handler(event, context):
        raise ValueError("fail")

    handler({}, None)

    assert mock_log.exception.called
    msg = mock_log.exception.call_args[0][0]
    assert "handler" in msg and "fail" in msg


def test_json_response_refuses_nan():
    with pytest.raises(ValueError):
        http.json_response(200, {"price": float("nan")})


def test_reject_json_constant():
    with pytest.raises(ValueError, match="NaN"):
        http.reject_json_constant("NaN")
