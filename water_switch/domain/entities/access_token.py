"""Domain entity for the cached platform access token."""

from __future__ import annotations

from dataclasses import dataclass

TOKEN_SAFETY_MARGIN_SECONDS = 60


@dataclass(frozen=True, slots=True)
class AccessToken:
    """Bearer token with an absolute expiry (epoch seconds)."""

    value: str
    expires_at: float

    @classmethod
    def issued(cls, value: str, expire_time: int, now: float) -> AccessToken:
        """Build a token from a grant response, keeping the safety margin."""
        return cls(
            value=value,
            expires_at=now + (expire_time - TOKEN_SAFETY_MARGIN_SECONDS),
        )

    def is_valid(self, now: float) -> bool:
        return bool(self.value) and now < self.expires_at
