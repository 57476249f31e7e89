"""
Application layer - Use cases and orchestration.

This layer contains:
- Request parameter parsing and filter composition
- The notification event query service
- Port definitions (abstract interfaces for infrastructure)

IMPORT RULES:
- CAN import from: domain
- CANNOT import from: infrastructure, api
"""

__all__: list[str] = []
