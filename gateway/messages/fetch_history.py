"""fetch-history: return the session's conversation log in order."""

from __future__ import annotations

from ..state import Session
from .requests import FetchHistoryRequest
from .generation import GenerationPipeline


async def handle_fetch_history(
    pipeline: GenerationPipeline,
    session: Session,
    request: FetchHistoryRequest,
) -> None:
    history = [entry.to_payload() for entry in session.history.snapshot()]
    await session.connection.send_event(
        request.capability.response_event,
        {"request_id": request.request_id, "history": history},
    )


__all__ = ["handle_fetch_history"]
