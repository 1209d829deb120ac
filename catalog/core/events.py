"""Entity change notifications published by services after each write."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

logger = logging.getLogger(__name__)


class EntityEventType(str, Enum):
    INSERTED = "inserted"
    UPDATED = "updated"
    DELETED = "deleted"


@dataclass(frozen=True)
class EntityEvent:
    event_type: EntityEventType
    entity: Any

    @property
    def entity_name(self) -> str:
        return type(self.entity).__name__


EventConsumer = Callable[[EntityEvent], Union[Awaitable[None], None]]


class EventPublisher:
    """Delivers entity events to subscribed consumers, in subscription order.

    Consumers may be plain or async callables. Errors raised by a consumer
    propagate to whoever published the event.
    """

    def __init__(self) -> None:
        self._consumers: list[EventConsumer] = []

    def subscribe(self, consumer: EventConsumer) -> None:
        if consumer not in self._consumers:
            self._consumers.append(consumer)

    def unsubscribe(self, consumer: EventConsumer) -> None:
        if consumer in self._consumers:
            self._consumers.remove(consumer)

    async def publish(self, event_type: EntityEventType, entity: Any) -> None:
        event = EntityEvent(event_type, entity)
        for consumer in list(self._consumers):
            result = consumer(event)
            if inspect.isawaitable(result):
                await result

    async def entity_inserted(self, entity: Any) -> None:
        await self.publish(EntityEventType.INSERTED, entity)

    async def entity_updated(self, entity: Any) -> None:
        await self.publish(EntityEventType.UPDATED, entity)

    async def entity_deleted(self, entity: Any) -> None:
        await self.publish(EntityEventType.DELETED, entity)


def log_entity_event(event: EntityEvent) -> None:
    """Consumer that writes one log line per entity change."""
    logger.info(
        "%s %s (id=%s)",
        event.entity_name,
        event.event_type.value,
        getattr(event.entity, "id", None),
    )
