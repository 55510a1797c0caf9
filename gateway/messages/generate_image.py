"""generate-image: text-to-image generation."""

from __future__ import annotations

from ..state import Session, TextContent, AssetContent
from ..providers import ImageGenerationRequest
from .requests import GenerateImageRequest
from .generation import GenerationPipeline
from .validators import validate_generate_image


async def handle_generate_image(
    pipeline: GenerationPipeline,
    session: Session,
    request: GenerateImageRequest,
) -> None:
    prompt = validate_generate_image(request)
    generation = ImageGenerationRequest(user_id=session.connection_id, prompt=prompt)
    await pipeline.run(
        session,
        request,
        user_content=TextContent(text=prompt),
        call=lambda: pipeline.provider.generate_image(generation),
        to_content=lambda image: AssetContent(url=image.url),
    )


__all__ = ["handle_generate_image"]
