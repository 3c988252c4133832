from __future__ import annotations

import hashlib
import hmac

import pytest

from water_switch.infrastructure.gateways.tuya_signing import (
    EMPTY_BODY_SHA256,
    build_headers,
    build_string_to_sign,
    compute_signature,
    hash_body,
    normalize_path,
    serialize_body,
)

SIGN_INPUT = {
    "client_id": "client-id",
    "secret": "client-secret",
    "method": "POST",
    "path": "/v1.0/iot-03/devices/dev-1/commands",
    "body": b'{"commands":[{"code":"switch_1","value":true}]}',
    "timestamp": "1704450000000",
    "nonce": "5f1c9e",
    "access_token": "tok",
}


def test_empty_body_hash_is_sha256_of_nothing() -> None:
    assert (
        EMPTY_BODY_SHA256
        == "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )
    assert hash_body(None) == EMPTY_BODY_SHA256
    assert hash_body(b"") == EMPTY_BODY_SHA256


def test_serialize_body_is_compact_utf8() -> None:
    assert serialize_body(None) is None
    assert serialize_body({"name": "Dušan", "n": [1, 2]}) == (
        '{"name":"Dušan","n":[1,2]}'.encode("utf-8")
    )


def test_normalize_path_sorts_query_tokens() -> None:
    path = "/v1.0/devices/d/logs?type=7&start_time=1&size=100&end_time=2"

    normalized = normalize_path(path)

    assert normalized == "/v1.0/devices/d/logs?end_time=2&size=100&start_time=1&type=7"
    assert normalize_path(normalized) == normalized
    assert normalize_path("/v1.0/token") == "/v1.0/token"


def test_string_to_sign_layout() -> None:
    assert build_string_to_sign("get", None, "/v1.0/token?grant_type=1") == (
        "GET\n" + EMPTY_BODY_SHA256 + "\n\n/v1.0/token?grant_type=1"
    )


def test_signature_is_uppercase_hmac_over_full_input() -> None:
    body = SIGN_INPUT["body"]
    string_to_sign = "\n".join(
        ["POST", hashlib.sha256(body).hexdigest(), "", SIGN_INPUT["path"]]
    )
    message = "client-id" + "tok" + "1704450000000" + "5f1c9e" + string_to_sign
    expected = (
        hmac.new(b"client-secret", message.encode("utf-8"), hashlib.sha256)
        .hexdigest()
        .upper()
    )

    assert compute_signature(**SIGN_INPUT) == expected


def test_signature_is_deterministic() -> None:
    assert compute_signature(**SIGN_INPUT) == compute_signature(**SIGN_INPUT)


@pytest.mark.parametrize(
    ("field", "value"),
    [
        ("client_id", "other-id"),
        ("secret", "other-secret"),
        ("method", "PUT"),
        ("path", "/v1.0/iot-03/devices/dev-2/commands"),
        ("body", b"{}"),
        ("timestamp", "1704450000001"),
        ("nonce", "5f1c9f"),
        ("access_token", ""),
    ],
)
def test_signature_changes_with_any_input(field, value) -> None:
    changed = dict(SIGN_INPUT, **{field: value})

    assert compute_signature(**changed) != compute_signature(**SIGN_INPUT)


def test_headers_carry_signature_fields() -> None:
    headers = build_headers(
        client_id="client-id", signature="ABC", timestamp="1", nonce="n"
    )

    assert headers == {
        "client_id": "client-id",
        "access_token": "",
        "sign": "ABC",
        "t": "1",
        "nonce": "n",
        "sign_method": "HMAC-SHA256",
        "Content-Type": "application/json",
    }
