"""
Gateways Package - Domain Layer

This package contains interfaces defining gateway contracts
for external service communications. Specific implementations
are provided by the infrastructure layer.
"""

from .cloud_api import ICloudApiClient
from .device_gateway import IDeviceGateway

__all__ = ["ICloudApiClient", "IDeviceGateway"]
