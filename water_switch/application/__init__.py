"""
Application Layer Package

This package contains the application-specific business rules
and use cases. It orchestrates the flow of data between the device
gateway and the callers of the service.
"""

# Re-export submodules
from water_switch.application import dtos, use_cases

__all__ = ["dtos", "use_cases"]
