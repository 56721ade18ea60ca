"""Server-Sent Events (SSE) endpoint."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import StreamingResponse

from taskboard.api.dependencies import get_event_manager
from taskboard.api.events import EventManager, EventType

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

EventManagerDep = Annotated[EventManager, Depends(get_event_manager)]

router = APIRouter(prefix="/events", tags=["events"])


def _parse_types(types: str | None) -> frozenset[EventType] | None:
    if not types:
        return None
    try:
        return frozenset(EventType(name.strip()) for name in types.split(",") if name.strip())
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e


@router.get("/stream")
async def event_stream(
    event_manager: EventManagerDep,
    types: str | None = Query(
        default=None, description="Comma-separated event types, e.g. 'notification'"
    ),
) -> StreamingResponse:
    """Subscribe to Server-Sent Events stream.

    Notifications and board updates are sent as they happen. A heartbeat is
    sent every 30 seconds to keep the connection alive.
    """
    em = event_manager
    subscriber = em.subscribe(_parse_types(types))

    async def generate() -> AsyncGenerator[str, None]:
        try:
            while True:
                try:
                    event = await asyncio.wait_for(
                        subscriber.queue.get(),
                        timeout=em._heartbeat_interval,
                    )
                    yield event.to_sse()
                except TimeoutError:
                    yield em.create_heartbeat_event().to_sse()
        finally:
            em.unsubscribe(subscriber.id)

    return StreamingResponse(
        generate(),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",  # Disable nginx buffering
        },
    )
