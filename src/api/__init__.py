"""
API layer - FastAPI routes and HTTP concerns.

This layer contains:
- FastAPI route definitions
- Response models
- Response shaping adapters
- HTTP middleware

IMPORT RULES:
- CAN import from: application, domain
- Uses dependency injection for infrastructure adapters
"""

__all__: list[str] = []
