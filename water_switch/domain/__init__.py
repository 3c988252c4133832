"""
Domain Layer Package

This package contains the core rules of the application: entities, gateway
contracts and the pure schedule/history logic, with no dependency on
external frameworks or infrastructure concerns.
"""

from water_switch.domain import entities, gateways, ports, services

__all__ = ["entities", "gateways", "ports", "services"]
