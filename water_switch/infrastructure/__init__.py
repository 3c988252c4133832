"""
Infrastructure Layer Package

This package contains implementations of interfaces defined in the
domain layer, dealing with external concerns such as the cloud API
and background polling.
"""

from water_switch.infrastructure import gateways, services

__all__ = ["gateways", "services"]
