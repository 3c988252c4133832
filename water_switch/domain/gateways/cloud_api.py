"""
Cloud API Client Interface - Domain Layer

This module defines the interface for authenticated calls to the IoT cloud.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class ICloudApiClient(ABC):
    """Interface for a signed, token-managing cloud API client."""

    @abstractmethod
    async def get(self, path: str) -> Any:
        """
        Issue a signed GET request.

        Args:
            path: Request path, optionally with a query string

        Returns:
            The ``result`` payload of a successful envelope

        Raises:
            CloudApiError: If the platform cannot be reached or rejects the call
        """
        pass

    @abstractmethod
    async def post(self, path: str, body: Any) -> Any:
        """Issue a signed POST request with a JSON body."""
        pass

    @abstractmethod
    async def put(self, path: str, body: Optional[Any] = None) -> Any:
        """Issue a signed PUT request with an optional JSON body."""
        pass

    @abstractmethod
    async def delete(self, path: str) -> Any:
        """Issue a signed DELETE request."""
        pass
