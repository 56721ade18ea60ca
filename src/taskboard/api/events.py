"""Event manager for Server-Sent Events (SSE)."""

from __future__ import annotations

import asyncio
import json
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import TYPE_CHECKING, Any
from uuid import uuid4

from taskboard.board.serialization import board_to_record

if TYPE_CHECKING:
    from taskboard.board import Board


class EventType(str, Enum):
    """Types of events that can be emitted."""

    NOTIFICATION = "notification"
    BOARD_UPDATED = "board_updated"
    HEARTBEAT = "heartbeat"


class NotificationVariant(str, Enum):
    """How a notification should be presented."""

    DEFAULT = "default"
    DESTRUCTIVE = "destructive"


def _running_loop() -> asyncio.AbstractEventLoop | None:
    try:
        return asyncio.get_running_loop()
    except RuntimeError:
        return None


def _timestamp() -> str:
    return datetime.now(UTC).isoformat().replace("+00:00", "Z")


@dataclass
class Event:
    """An event to be sent via SSE."""

    event_type: EventType
    data: dict[str, Any]

    def to_sse(self) -> str:
        """Convert to SSE format."""
        return f"event: {self.event_type.value}\ndata: {json.dumps(self.data)}\n\n"


@dataclass
class Subscriber:
    """A subscriber to the event stream."""

    id: str
    queue: asyncio.Queue[Event]
    event_types: frozenset[EventType] | None = None  # None means all types
    loop: asyncio.AbstractEventLoop | None = None  # loop the queue is read from

    @classmethod
    def create(cls, event_types: frozenset[EventType] | None = None) -> Subscriber:
        """Create a new subscriber."""
        return cls(
            id=str(uuid4()),
            queue=asyncio.Queue(),
            event_types=event_types,
            loop=_running_loop(),
        )

    def deliver(self, event: Event) -> None:
        """Queue an event from any thread."""
        if self.loop is None or self.loop is _running_loop():
            self.queue.put_nowait(event)
        elif not self.loop.is_closed():
            self.loop.call_soon_threadsafe(self.queue.put_nowait, event)

    def wants(self, event: Event) -> bool:
        """Whether this subscriber receives the event."""
        return (
            event.event_type == EventType.HEARTBEAT
            or self.event_types is None
            or event.event_type in self.event_types
        )


@dataclass
class EventManager:
    """Manager for SSE events."""

    _subscribers: dict[str, Subscriber] = field(default_factory=dict)
    _heartbeat_interval: int = 30  # seconds

    def subscribe(self, event_types: frozenset[EventType] | None = None) -> Subscriber:
        """Subscribe a client to events.

        Args:
            event_types: Optional set of event types to receive. None means all.

        Returns:
            Subscriber instance for receiving events.
        """
        subscriber = Subscriber.create(event_types)
        self._subscribers[subscriber.id] = subscriber
        return subscriber

    def unsubscribe(self, subscriber_id: str) -> None:
        """Unsubscribe a client from events."""
        self._subscribers.pop(subscriber_id, None)

    async def emit(self, event: Event) -> None:
        """Emit an event to all matching subscribers."""
        for subscriber in list(self._subscribers.values()):
            if subscriber.wants(event):
                await subscriber.queue.put(event)

    def emit_sync(self, event: Event) -> None:
        """Emit an event without awaiting.

        Safe to call from the threadpool that runs sync route handlers.
        """
        for subscriber in list(self._subscribers.values()):
            if subscriber.wants(event):
                subscriber.deliver(event)

    @property
    def subscriber_count(self) -> int:
        """Get the number of active subscribers."""
        return len(self._subscribers)

    # Convenience methods for emitting specific event types

    def emit_notification(self, message: str, destructive: bool = False) -> None:
        """Emit a user-facing notification."""
        variant = NotificationVariant.DESTRUCTIVE if destructive else NotificationVariant.DEFAULT
        event = Event(
            event_type=EventType.NOTIFICATION,
            data={
                "message": message,
                "variant": variant.value,
                "timestamp": _timestamp(),
            },
        )
        self.emit_sync(event)

    def emit_board_updated(self, board: Board) -> None:
        """Emit the full board after a change."""
        event = Event(
            event_type=EventType.BOARD_UPDATED,
            data={"board": board_to_record(board).model_dump()},
        )
        self.emit_sync(event)

    def create_heartbeat_event(self) -> Event:
        """Create a heartbeat event."""
        return Event(event_type=EventType.HEARTBEAT, data={"timestamp": _timestamp()})
