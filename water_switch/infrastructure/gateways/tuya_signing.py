"""
Tuya request signing (HMAC-SHA256).

Pure functions building the ``sign`` header the cloud API expects. The
string-to-sign is::

    METHOD \\n SHA256(body) \\n <empty> \\n path?sorted-query

and the signed input is ``client_id + access_token + t + nonce +
string_to_sign``. The access token is empty for the token-grant call.
"""

from __future__ import annotations

import hashlib
import hmac
import json
from typing import Any, Dict, Optional

EMPTY_BODY_SHA256 = hashlib.sha256(b"").hexdigest()
SIGN_METHOD = "HMAC-SHA256"


def serialize_body(body: Optional[Any]) -> Optional[bytes]:
    """Compact JSON encoding; the same bytes are hashed and sent."""
    if body is None:
        return None
    return json.dumps(body, separators=(",", ":"), ensure_ascii=False).encode(
        "utf-8"
    )


def hash_body(body: Optional[bytes]) -> str:
    if not body:
        return EMPTY_BODY_SHA256
    return hashlib.sha256(body).hexdigest()


def normalize_path(path: str) -> str:
    """Sort query parameters as whole ``key=value`` tokens."""
    base, separator, query = path.partition("?")
    if not separator:
        return path
    return f"{base}?{'&'.join(sorted(query.split('&')))}"


def build_string_to_sign(method: str, body: Optional[bytes], path: str) -> str:
    return "\n".join([method.upper(), hash_body(body), "", normalize_path(path)])


def compute_signature(
    *,
    client_id: str,
    secret: str,
    method: str,
    path: str,
    body: Optional[bytes],
    timestamp: str,
    nonce: str,
    access_token: str = "",
) -> str:
    """Upper-case hex HMAC-SHA256 over the full signature input."""
    message = (
        client_id
        + access_token
        + timestamp
        + nonce
        + build_string_to_sign(method, body, path)
    )
    return (
        hmac.new(secret.encode("utf-8"), message.encode("utf-8"), hashlib.sha256)
        .hexdigest()
        .upper()
    )


def build_headers(
    *,
    client_id: str,
    signature: str,
    timestamp: str,
    nonce: str,
    access_token: str = "",
) -> Dict[str, str]:
    return {
        "client_id": client_id,
        "access_token": access_token,
        "sign": signature,
        "t": timestamp,
        "nonce": nonce,
        "sign_method": SIGN_METHOD,
        "Content-Type": "application/json",
    }
