"""
API routes for the notification events API.

Available routers:
- notification_event: GET {base}/events and GET {base}/events/{event_id}
"""

from src.api.routes.notification_event import router as notification_event_router

__all__: list[str] = ["notification_event_router"]
