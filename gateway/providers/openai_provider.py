"""OpenAI-backed generation provider.

Wraps ``openai.AsyncOpenAI`` for chat completions, image generation and
text-to-speech. SDK and transport failures are re-raised as ProviderError so
the dispatch layer never sees SDK-specific exception types.
"""

from __future__ import annotations

import logging
from typing import Any

from openai import AsyncOpenAI, OpenAIError

from ..config import (
    CHAT_MODEL,
    IMAGE_SIZE,
    IMAGE_MODEL,
    CHAT_MAX_OUT,
    SPEECH_MODEL,
    SPEECH_VOICE,
    SPEECH_FORMAT,
    OPENAI_ORG_ID,
    OPENAI_API_KEY,
    OPENAI_BASE_URL,
    CHAT_SYSTEM_PROMPT,
    PROVIDER_TIMEOUT_S,
)
from ..errors import ProviderError
from ..state import Role, HistoryEntry, TextContent, AssetContent, MultimodalContent
from .base import GenerationProvider
from .types import (
    GeneratedImage,
    SynthesizedAudio,
    TextCompletionRequest,
    ImageGenerationRequest,
    SpeechSynthesisRequest,
)

logger = logging.getLogger(__name__)

_SPEECH_MEDIA_TYPES: dict[str, str] = {
    "mp3": "audio/mpeg",
    "opus": "audio/ogg",
    "aac": "audio/aac",
    "flac": "audio/flac",
    "wav": "audio/wav",
    "pcm": "audio/pcm",
}


def _user_parts(text: str | None, url: str | None) -> str | list[dict[str, Any]]:
    if url is None:
        return text or ""
    parts: list[dict[str, Any]] = []
    if text:
        parts.append({"type": "text", "text": text})
    parts.append({"type": "image_url", "image_url": {"url": url}})
    return parts


def _context_message(entry: HistoryEntry) -> dict[str, Any] | None:
    """Convert one history entry to a chat message, or None to skip it."""
    content = entry.content
    if entry.role is Role.USER:
        if isinstance(content, TextContent):
            return {"role": "user", "content": content.text}
        if isinstance(content, MultimodalContent):
            return {"role": "user", "content": _user_parts(content.text, content.url)}
        if isinstance(content, AssetContent):
            return {"role": "user", "content": _user_parts(None, content.url)}
        return None

    if isinstance(content, TextContent):
        return {"role": "assistant", "content": content.text}
    # Inline generated images are too large to replay as text
    if isinstance(content, AssetContent) and not content.url.startswith("data:"):
        return {"role": "assistant", "content": f"[generated image] {content.url}"}
    return None


def build_chat_messages(
    request: TextCompletionRequest,
    *,
    system_prompt: str = CHAT_SYSTEM_PROMPT,
) -> list[dict[str, Any]]:
    """Build the chat.completions message list for a text request."""
    messages: list[dict[str, Any]] = []
    if system_prompt:
        messages.append({"role": "system", "content": system_prompt})
    for entry in request.context:
        message = _context_message(entry)
        if message is not None:
            messages.append(message)
    messages.append({"role": "user", "content": _user_parts(request.prompt, request.asset_url)})
    return messages


class OpenAIProvider(GenerationProvider):
    """Generation provider backed by the OpenAI API.

    The SDK client is created on first use so the app can start (and serve
    health checks) before credentials are configured.
    """

    name = "openai"

    def __init__(
        self,
        *,
        api_key: str | None = OPENAI_API_KEY,
        organization: str | None = OPENAI_ORG_ID,
        base_url: str | None = OPENAI_BASE_URL,
        timeout_s: float = PROVIDER_TIMEOUT_S,
        client: AsyncOpenAI | None = None,
    ) -> None:
        self._api_key = api_key
        self._organization = organization
        self._base_url = base_url
        self._timeout_s = timeout_s
        self._client = client

    def _get_client(self) -> AsyncOpenAI:
        if self._client is None:
            if not self._api_key:
                raise ProviderError("OPENAI_API_KEY is not configured")
            self._client = AsyncOpenAI(
                api_key=self._api_key,
                organization=self._organization,
                base_url=self._base_url,
                timeout=self._timeout_s,
            )
        return self._client

    async def complete_text(self, request: TextCompletionRequest) -> str:
        client = self._get_client()
        try:
            response = await client.chat.completions.create(
                model=CHAT_MODEL,
                messages=build_chat_messages(request),
                max_tokens=CHAT_MAX_OUT,
                user=request.user_id,
            )
        except OpenAIError as exc:
            raise ProviderError(f"chat completion failed: {exc}") from exc

        if not response.choices:
            raise ProviderError("chat completion returned no choices")
        text = response.choices[0].message.content or ""
        if not text.strip():
            raise ProviderError("chat completion returned empty content")
        return text

    async def generate_image(self, request: ImageGenerationRequest) -> GeneratedImage:
        client = self._get_client()
        try:
            response = await client.images.generate(
                model=IMAGE_MODEL,
                prompt=request.prompt,
                n=1,
                size=IMAGE_SIZE,
                user=request.user_id,
            )
        except OpenAIError as exc:
            raise ProviderError(f"image generation failed: {exc}") from exc

        if not response.data:
            raise ProviderError("image generation returned no data")
        image = response.data[0]
        if image.url:
            return GeneratedImage(url=image.url)
        if image.b64_json:
            return GeneratedImage(url=f"data:image/png;base64,{image.b64_json}")
        raise ProviderError("image generation returned neither url nor b64_json")

    async def synthesize_speech(self, request: SpeechSynthesisRequest) -> SynthesizedAudio:
        client = self._get_client()
        try:
            response = await client.audio.speech.create(
                model=SPEECH_MODEL,
                voice=SPEECH_VOICE,
                input=request.text,
                response_format=SPEECH_FORMAT,
            )
        except OpenAIError as exc:
            raise ProviderError(f"speech synthesis failed: {exc}") from exc

        audio = response.content
        if not audio:
            raise ProviderError("speech synthesis returned no audio")
        media_type = _SPEECH_MEDIA_TYPES.get(SPEECH_FORMAT, "application/octet-stream")
        return SynthesizedAudio(audio=audio, media_type=media_type)

    async def shutdown(self) -> None:
        if self._client is None:
            return
        client, self._client = self._client, None
        try:
            await client.close()
        except Exception:  # noqa: BLE001
            logger.debug("provider client close failed", exc_info=True)


__all__ = ["OpenAIProvider", "build_chat_messages"]
