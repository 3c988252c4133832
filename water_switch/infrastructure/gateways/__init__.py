"""
Gateways Package - Infrastructure Layer

This package contains concrete implementations of the gateway
interfaces defined in the domain layer. These implementations
handle the details of external service communications.
"""

from .tuya_client import TuyaCloudClient
from .tuya_device_gateway import TuyaDeviceGateway

__all__ = ["TuyaCloudClient", "TuyaDeviceGateway"]
