"""Notification event API routes.

FastAPI router for reading notification events.

Routes (relative to the configured base URI):
- GET /events/{event_id}: a single event; 404 if it does not exist
- GET /events: events by id, id list, or query parameter filters

Query parameters for GET /events:
    event_id=id
    event_id_list=id1,id2,id3 (other filters ignored if any id is given)
    from_index=20
    max_items=10
    sort_order=asc|desc
    sort_field=event_source.severity
    last_updated_time_ms=from_time..to_time (range)
    created_time_ms=from_time..to_time (range)
    event_source.reference_id=abc,xyz (keyword)
    event_source.severity=info,high (keyword)
    event_source.tags=test,tags (text)
    event_source.title=sample title (text)
    status_list.config_id=abc,xyz (keyword)
    status_list.config_type=slack,chime (keyword)
    status_list.config_name=sample (text)
    status_list.delivery_status.status_code=400,503 (keyword)
    status_list.delivery_status.status_text=bad,request (text)
    status_list.email_recipient_status.recipient=abc,xyz (text)
    status_list.email_recipient_status.delivery_status.status_code=400,503 (keyword)
    status_list.email_recipient_status.delivery_status.status_text=bad,request (text)
    query=search all keyword and text fields above
    text_query=search the text fields above

Parameters are read untyped so malformed paging numbers can fall back
to defaults instead of failing validation. Repeated keys: first wins.
"""

from fastapi import APIRouter, Depends, HTTPException, Path, Request

from src.api.adapters.notification_event import NotificationEventShaper
from src.api.dependencies.notification_event import (
    get_notification_event_query_service,
)
from src.api.models.notification_event import (
    NotificationEventErrorResponse,
    NotificationEventsListResponse,
)
from src.application.services.event_query_params import first_value_params
from src.application.services.notification_event_query_service import (
    NotificationEventQueryService,
)
from src.config.events_config import DEFAULT_BASE_URI
from src.domain.errors.event_query import (
    EventNotFoundError,
    EventQueryExecutionError,
    InvalidArgumentError,
)

ERROR_TYPE_BASE = "https://notifications.local/errors"

_ERROR_RESPONSES: dict[int | str, dict[str, object]] = {
    400: {"model": NotificationEventErrorResponse, "description": "Invalid argument"},
    500: {"model": NotificationEventErrorResponse, "description": "Query execution failed"},
}


def _problem(request: Request, status: int, kind: str, title: str, reason: str) -> HTTPException:
    return HTTPException(
        status_code=status,
        detail={
            "type": f"{ERROR_TYPE_BASE}/{kind}",
            "title": title,
            "status": status,
            "detail": reason,
            "instance": str(request.url),
        },
    )


def _invalid_argument(request: Request, exc: InvalidArgumentError) -> HTTPException:
    return _problem(request, 400, "invalid-argument", "Invalid Argument", exc.reason)


def _execution_failure(request: Request, exc: EventQueryExecutionError) -> HTTPException:
    return _problem(request, 500, "execution-failure", "Execution Failure", exc.reason)


def create_notification_event_router(base_uri: str = DEFAULT_BASE_URI) -> APIRouter:
    """Create the notification event router mounted under base_uri.

    Args:
        base_uri: Path prefix, e.g. "/_plugins/_notifications".

    Returns:
        APIRouter exposing GET {base_uri}/events and GET {base_uri}/events/{event_id}.
    """
    router = APIRouter(
        prefix=f"{base_uri.rstrip('/')}/events",
        tags=["notification-events"],
    )

    @router.get(
        "/{event_id}",
        response_model=NotificationEventsListResponse,
        name="notifications_event",
        responses={
            **_ERROR_RESPONSES,
            404: {
                "model": NotificationEventErrorResponse,
                "description": "Event not found",
            },
        },
        summary="Get a notification event",
    )
    async def get_notification_event(
        request: Request,
        event_id: str = Path(description="Notification event identifier"),
        service: NotificationEventQueryService = Depends(
            get_notification_event_query_service
        ),
    ) -> NotificationEventsListResponse:
        """Get a single notification event by id.

        The response uses the same envelope as the listing route.

        Raises:
            HTTPException 400: If sort_order is malformed.
            HTTPException 404: If no event has this id.
            HTTPException 500: If the query engine fails.
        """
        params = first_value_params(request.query_params.multi_items())
        try:
            result = await service.get_event(event_id, params)
        except InvalidArgumentError as exc:
            raise _invalid_argument(request, exc) from exc
        except EventNotFoundError as exc:
            raise _problem(request, 404, "not-found", "Not Found", exc.reason) from exc
        except EventQueryExecutionError as exc:
            raise _execution_failure(request, exc) from exc
        return NotificationEventShaper.shape_single(result.events)

    @router.get(
        "",
        response_model=NotificationEventsListResponse,
        name="notifications_events",
        responses=_ERROR_RESPONSES,
        summary="List notification events",
    )
    async def get_notification_events(
        request: Request,
        service: NotificationEventQueryService = Depends(
            get_notification_event_query_service
        ),
    ) -> NotificationEventsListResponse:
        """Get notification events by id, id list, or filters.

        Ids that do not exist are left out of the envelope; the request
        still succeeds.

        Raises:
            HTTPException 400: If sort_order is malformed.
            HTTPException 500: If the query engine fails.
        """
        params = first_value_params(request.query_params.multi_items())
        try:
            result = await service.get_events(params)
        except InvalidArgumentError as exc:
            raise _invalid_argument(request, exc) from exc
        except EventQueryExecutionError as exc:
            raise _execution_failure(request, exc) from exc
        return NotificationEventShaper.shape_list(
            result.events,
            total_hits=result.total_hits,
            start_index=result.start_index,
        )

    return router


router = create_notification_event_router()
