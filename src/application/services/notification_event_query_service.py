"""Notification event query service.

Runs the request pipeline for "get notification events":

    NotificationEventQueryService
      ├─ parse_query_params()        # identifiers, paging, sort, raw filters
      ├─ compose_filters()           # typed matchers, macro expansion
      ├─ build_query_descriptor()    # identifier precedence
      └─ engine.execute()            # external, the only await

Shaping the result into a response envelope happens at the API edge.

Error policy:
- InvalidArgumentError from parsing propagates before the engine is called
- engine failures surface as EventQueryExecutionError; no retries here
- get_event raises EventNotFoundError when the id does not exist
"""

from __future__ import annotations

from collections.abc import Mapping

from structlog import get_logger

from src.application.ports.notification_event_query import (
    NotificationEventQueryProtocol,
    NotificationEventQueryResult,
)
from src.application.services.event_filter_composer import compose_filters
from src.application.services.event_query_params import (
    EVENT_ID_LIST_TAG,
    EVENT_ID_TAG,
    FROM_INDEX_TAG,
    MAX_ITEMS_TAG,
    parse_query_params,
)
from src.domain.errors.event_query import (
    EventNotFoundError,
    EventQueryExecutionError,
)
from src.domain.models.event_query import (
    DEFAULT_MAX_ITEMS,
    QueryDescriptor,
    build_query_descriptor,
)
from src.domain.models.field_registry import EVENT_FIELD_REGISTRY, FieldRegistry

logger = get_logger()

# Request keys that must not narrow a single-id lookup
_SINGLE_EVENT_IGNORED_PARAMS = frozenset({EVENT_ID_LIST_TAG, FROM_INDEX_TAG, MAX_ITEMS_TAG})


class NotificationEventQueryService:
    """Turns request parameters into queries and executes them.

    Stateless between calls; one instance is shared by all requests.

    Usage:
        service = NotificationEventQueryService(engine=engine)
        result = await service.get_events({"event_source.severity": "high"})
        event_page = await service.get_event("evt-1")
    """

    def __init__(
        self,
        engine: NotificationEventQueryProtocol,
        default_max_items: int = DEFAULT_MAX_ITEMS,
        registry: FieldRegistry = EVENT_FIELD_REGISTRY,
    ) -> None:
        """Initialize the service.

        Args:
            engine: Port that executes query descriptors.
            default_max_items: Page size when max_items is missing or malformed.
            registry: Catalog of filterable fields.
        """
        self._engine = engine
        self._default_max_items = default_max_items
        self._registry = registry

    def build_descriptor(self, params: Mapping[str, str]) -> QueryDescriptor:
        """Translate request parameters into a QueryDescriptor.

        Pure: performs no I/O.

        Raises:
            InvalidArgumentError: If sort_order is malformed.
        """
        parsed = parse_query_params(params, self._default_max_items, self._registry)
        composed = compose_filters(parsed.raw_filters, self._registry)
        return build_query_descriptor(
            parsed.identifier_set,
            parsed.pagination,
            parsed.sort_spec,
            composed,
        )

    async def get_events(
        self, params: Mapping[str, str]
    ) -> NotificationEventQueryResult:
        """Get notification events by id, id list, or filters.

        Ids that do not exist are simply absent from the result.

        Args:
            params: Request parameters, one value per key.

        Returns:
            The page of matching records and the total hit count.

        Raises:
            InvalidArgumentError: If sort_order is malformed.
            EventQueryExecutionError: If the engine fails.
        """
        descriptor = self.build_descriptor(params)
        sort_spec = descriptor.sort_spec
        logger.info(
            "notification_events_query",
            event_ids=sorted(descriptor.identifier_set),
            from_index=descriptor.pagination.from_index,
            max_items=descriptor.pagination.max_items,
            sort_field=sort_spec.field if sort_spec else None,
            sort_order=(
                sort_spec.order.value if sort_spec and sort_spec.order else None
            ),
            filters=sorted(descriptor.composed_filter.field_names()),
        )
        return await self._execute(descriptor)

    async def get_event(
        self,
        event_id: str,
        params: Mapping[str, str] | None = None,
    ) -> NotificationEventQueryResult:
        """Get a single notification event by id.

        Args:
            event_id: The event identifier; replaces any event_id or
                event_id_list in params.
            params: Other request parameters. Filters and paging are
                ignored so the lookup always uses the default window.

        Returns:
            Result holding the single record.

        Raises:
            InvalidArgumentError: If sort_order is malformed.
            EventNotFoundError: If no event has this id.
            EventQueryExecutionError: If the engine fails.
        """
        merged = {
            key: value
            for key, value in (params or {}).items()
            if key not in _SINGLE_EVENT_IGNORED_PARAMS
        }
        merged[EVENT_ID_TAG] = event_id
        result = await self.get_events(merged)
        if not any(event.event_id == event_id for event in result.events):
            logger.info("notification_event_not_found", event_id=event_id)
            raise EventNotFoundError(event_id)
        return result

    async def _execute(self, descriptor: QueryDescriptor) -> NotificationEventQueryResult:
        try:
            result = await self._engine.execute(descriptor)
        except EventQueryExecutionError as exc:
            logger.error("notification_events_query_failed", reason=str(exc))
            raise
        except Exception as exc:
            logger.exception(
                "notification_events_query_failed",
                error_type=type(exc).__name__,
            )
            raise EventQueryExecutionError(
                f"Notification event query failed: {exc}"
            ) from exc

        logger.debug(
            "notification_events_query_completed",
            returned=len(result.events),
            total_hits=result.total_hits,
        )
        return result
