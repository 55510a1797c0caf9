"""send-text: text completion with an optional image attachment."""

from __future__ import annotations

import logging

from ..config import HISTORY_CONTEXT_MAX_ENTRIES
from ..state import Session, TextContent, MultimodalContent
from ..providers import TextCompletionRequest
from .requests import SendTextRequest
from .generation import GenerationPipeline
from .validators import validate_send_text

logger = logging.getLogger(__name__)


async def handle_send_text(
    pipeline: GenerationPipeline,
    session: Session,
    request: SendTextRequest,
) -> None:
    validated = validate_send_text(request)
    # Context is the conversation before this turn
    context = session.history.recent(HISTORY_CONTEXT_MAX_ENTRIES)

    if validated.asset is not None:
        if validated.asset.inline:
            logger.info("send-text inline asset media_type=%s bytes=%d", validated.asset.media_type, validated.asset.size)
        user_content = MultimodalContent(text=validated.prompt, url=validated.asset.url)
    else:
        user_content = TextContent(text=validated.prompt)

    completion = TextCompletionRequest(
        user_id=session.connection_id,
        prompt=validated.prompt,
        asset_url=validated.asset.url if validated.asset is not None else None,
        context=context,
    )
    await pipeline.run(
        session,
        request,
        user_content=user_content,
        call=lambda: pipeline.provider.complete_text(completion),
        to_content=lambda text: TextContent(text=text),
    )


__all__ = ["handle_send_text"]
