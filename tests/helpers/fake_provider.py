"""Scriptable GenerationProvider for dispatch tests.

Replies are deterministic. ``gates`` maps a prompt/text to an asyncio.Event
the call waits on, which lets a test choose the order in which concurrent
requests complete. ``failure`` makes every call raise.
"""

from __future__ import annotations

import asyncio
from typing import Any

from gateway.providers import (
    GeneratedImage,
    SynthesizedAudio,
    GenerationProvider,
    TextCompletionRequest,
    ImageGenerationRequest,
    SpeechSynthesisRequest,
)


class FakeProvider(GenerationProvider):
    name = "fake"

    def __init__(self, *, delay_s: float = 0.0, failure: BaseException | None = None) -> None:
        self.delay_s = delay_s
        self.failure = failure
        self.gates: dict[str, asyncio.Event] = {}
        self.calls: list[tuple[str, Any]] = []
        self.shutdown_called = False

    async def _respond(self, kind: str, key: str, request: Any, value: Any) -> Any:
        self.calls.append((kind, request))
        gate = self.gates.get(key)
        if gate is not None:
            await gate.wait()
        if self.delay_s:
            await asyncio.sleep(self.delay_s)
        if self.failure is not None:
            raise self.failure
        return value

    async def complete_text(self, request: TextCompletionRequest) -> str:
        return await self._respond("text", request.prompt, request, f"reply to {request.prompt}")

    async def generate_image(self, request: ImageGenerationRequest) -> GeneratedImage:
        image = GeneratedImage(url=f"https://images.example/{len(self.calls) + 1}.png")
        return await self._respond("image", request.prompt, request, image)

    async def synthesize_speech(self, request: SpeechSynthesisRequest) -> SynthesizedAudio:
        audio = SynthesizedAudio(audio=b"ID3" + request.text.encode("utf-8"), media_type="audio/mpeg")
        return await self._respond("speech", request.text, request, audio)

    async def shutdown(self) -> None:
        self.shutdown_called = True
