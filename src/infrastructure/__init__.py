"""
Infrastructure layer - External adapters.

This layer contains:
- Observability (structlog configuration, correlation IDs)
- Stub implementations of application ports

IMPORT RULES:
- CAN import from: domain, application
- Implements ports defined in application layer
"""

__all__: list[str] = []
