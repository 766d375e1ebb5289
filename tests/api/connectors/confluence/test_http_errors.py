"""Testes de extração de mensagem e classificação de status."""

from __future__ import annotations

import httpx

from api.connectors.confluence.http_errors import (
    classify_status_error,
    extract_error_message,
    is_not_found,
)
from utils.errors import AuthenticationError, HttpStatusError, NetworkError


def test_message_field_wins() -> None:
    response = httpx.Response(400, json={"message": "Title is required", "detail": "x"})
    assert extract_error_message(response) == "Title is required"


def test_nested_error_object() -> None:
    response = httpx.Response(409, json={"error": {"message": "Conflict on title"}})
    assert extract_error_message(response) == "Conflict on title"


def test_errors_list_title() -> None:
    response = httpx.Response(
        400,
        json={"errors": [{"status": 400, "title": "Invalid space id"}]},
    )
    assert extract_error_message(response) == "Invalid space id"


def test_fallback_to_status_line() -> None:
    response = httpx.Response(500, content=b"<html></html>")
    assert extract_error_message(response) == "HTTP 500: Internal Server Error"


def test_classify_auth_failures() -> None:
    assert isinstance(classify_status_error("no", 401, "/pages"), AuthenticationError)
    assert isinstance(classify_status_error("no", 403, "/pages"), AuthenticationError)
    error = classify_status_error("gone", 404, "/pages/1")
    assert type(error) is HttpStatusError
    assert error.endpoint == "/pages/1"


def test_is_not_found() -> None:
    assert is_not_found(HttpStatusError("x", 404)) is True
    assert is_not_found(HttpStatusError("x", 500)) is False
    assert is_not_found(NetworkError("x")) is False
