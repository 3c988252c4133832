"""
Infrastructure Gateway - Tuya Cloud Client

Signed HTTP client for the Tuya OpenAPI. Handles access-token acquisition and
caching, request signing and the single delayed retry the platform needs on
its transient error code.
"""

from __future__ import annotations

import asyncio
import time
from typing import Any, Callable, Dict, Optional
from uuid import uuid4

import httpx

from water_switch.domain.entities.access_token import AccessToken
from water_switch.domain.entities.errors import (
    CloudPlatformError,
    CloudTransportError,
)
from water_switch.domain.gateways.cloud_api import ICloudApiClient
from water_switch.infrastructure.gateways.tuya_signing import (
    build_headers,
    compute_signature,
    normalize_path,
    serialize_body,
)
from water_switch.shared import get_logger

logger = get_logger(__name__)


class TuyaCloudClient(ICloudApiClient):
    """HTTP client for the Tuya cloud API."""

    TOKEN_PATH = "/v1.0/token?grant_type=1"
    TRANSIENT_ERROR_CODE = 501
    MAX_TRANSIENT_RETRIES = 1
    RETRY_DELAY_SECONDS = 1.0

    def __init__(
        self,
        base_url: str,
        access_id: str,
        access_secret: str,
        timeout: float = 30.0,
        clock: Callable[[], float] = time.time,
    ):
        """
        Initialize the Tuya cloud client.

        Args:
            base_url: Regional OpenAPI endpoint (e.g. "https://openapi.tuyaeu.com")
            access_id: Cloud project client id
            access_secret: Cloud project secret used as HMAC key
            timeout: Request timeout in seconds
            clock: Source of epoch seconds, used for timestamps and token expiry
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._access_id = access_id
        self._access_secret = access_secret
        self._clock = clock

        self._token: Optional[AccessToken] = None
        self._refresh_task: Optional[asyncio.Future[AccessToken]] = None

    async def get(self, path: str) -> Any:
        return await self._request("GET", path)

    async def post(self, path: str, body: Any) -> Any:
        return await self._request("POST", path, body)

    async def put(self, path: str, body: Optional[Any] = None) -> Any:
        return await self._request("PUT", path, body)

    async def delete(self, path: str) -> Any:
        return await self._request("DELETE", path)

    async def _get_access_token(self) -> str:
        """Return the cached token, refreshing it once it has expired.

        Concurrent callers that find the token expired share one in-flight
        grant request.
        """
        token = self._token
        if token is not None and token.is_valid(self._clock()):
            return token.value

        if self._refresh_task is None or self._refresh_task.done():
            self._refresh_task = asyncio.ensure_future(self._refresh_token())
            self._refresh_task.add_done_callback(self._clear_refresh_task)
        refreshed = await asyncio.shield(self._refresh_task)
        return refreshed.value

    def _clear_refresh_task(self, task: asyncio.Future[AccessToken]) -> None:
        if self._refresh_task is task:
            self._refresh_task = None
        # retrieve the error even when every waiter was cancelled
        if not task.cancelled():
            task.exception()

    async def _refresh_token(self) -> AccessToken:
        logger.info("tuya.token.refresh_started")
        result = await self._request("GET", self.TOKEN_PATH, token_request=True)

        if not isinstance(result, dict) or not result.get("access_token"):
            raise CloudPlatformError(None, "Token grant returned no access_token")

        token = AccessToken.issued(
            value=result["access_token"],
            expire_time=int(result.get("expire_time") or 0),
            now=self._clock(),
        )
        self._token = token
        logger.info(
            "tuya.token.refreshed",
            expire_time=result.get("expire_time"),
        )
        return token

    async def _request(
        self,
        method: str,
        path: str,
        body: Optional[Any] = None,
        *,
        token_request: bool = False,
    ) -> Any:
        """
        Sign and send a request, retrying once on the transient error code.

        Every attempt is signed afresh (new timestamp and nonce).

        Raises:
            CloudTransportError: If the platform cannot be reached
            CloudPlatformError: If the envelope reports ``success=false``
        """
        signed_path = normalize_path(path)
        payload = serialize_body(body)

        retries = 0
        while True:
            access_token = "" if token_request else await self._get_access_token()
            envelope = await self._send(method, signed_path, payload, access_token)

            if envelope.get("success"):
                return envelope.get("result")

            code = envelope.get("code")
            msg = envelope.get("msg") or str(envelope)

            if self._is_transient(code) and retries < self.MAX_TRANSIENT_RETRIES:
                retries += 1
                logger.warning(
                    "tuya.request.transient_error",
                    method=method,
                    path=signed_path,
                    code=code,
                    retry=retries,
                )
                await asyncio.sleep(self.RETRY_DELAY_SECONDS)
                continue

            logger.error(
                "tuya.request.platform_error",
                method=method,
                path=signed_path,
                code=code,
                msg=msg,
            )
            raise CloudPlatformError(
                code, msg, details={"method": method, "path": signed_path}
            )

    async def _send(
        self,
        method: str,
        signed_path: str,
        payload: Optional[bytes],
        access_token: str,
    ) -> Dict[str, Any]:
        timestamp = str(int(self._clock() * 1000))
        nonce = uuid4().hex
        signature = compute_signature(
            client_id=self._access_id,
            secret=self._access_secret,
            method=method,
            path=signed_path,
            body=payload,
            timestamp=timestamp,
            nonce=nonce,
            access_token=access_token,
        )
        headers = build_headers(
            client_id=self._access_id,
            signature=signature,
            timestamp=timestamp,
            nonce=nonce,
            access_token=access_token,
        )
        url = f"{self.base_url}{signed_path}"

        logger.debug("tuya.request.sent", method=method, path=signed_path)

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.request(
                    method, url, headers=headers, content=payload
                )
        except httpx.RequestError as e:
            logger.error(
                "tuya.request.transport_error",
                method=method,
                url=url,
                error=str(e),
            )
            raise CloudTransportError(
                f"Tuya request failed for {url}: {e}", url=url
            ) from e

        try:
            data = response.json()
        except ValueError as e:
            raise CloudTransportError(
                f"Tuya returned a non-JSON response "
                f"(HTTP {response.status_code}) for {url}",
                url=url,
                details={"status_code": response.status_code},
            ) from e

        if not isinstance(data, dict):
            raise CloudTransportError(
                f"Tuya returned an unexpected payload for {url}", url=url
            )
        return data

    @classmethod
    def _is_transient(cls, code: Any) -> bool:
        try:
            return int(code) == cls.TRANSIENT_ERROR_CODE
        except (TypeError, ValueError):
            return False
