"""
Water Switch Root Module

Remote monitoring and scheduling of a smart water-heater relay exposed
through the Tuya IoT cloud.

Layer Structure:
- Domain: Entities, gateway contracts and pure schedule/history logic
- Application: Use cases and DTOs for the consumer-facing operations
- Infrastructure: Signed cloud client, device gateway and status monitor
- Shared: Cross-cutting concerns and shared utilities
- Main: Composition root and configuration
"""

__version__ = "1.0.0"
