"""Abstract base class for generation providers.

Provides a unified interface over the backend that performs text
completion, image generation and speech synthesis. Implementations must
raise ProviderError (or a subclass) for any backend failure.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from .types import (
    GeneratedImage,
    SynthesizedAudio,
    TextCompletionRequest,
    ImageGenerationRequest,
    SpeechSynthesisRequest,
)


class GenerationProvider(ABC):
    """Asynchronous generation backend used by the dispatch router."""

    name: str = "provider"

    @abstractmethod
    async def complete_text(self, request: TextCompletionRequest) -> str:
        """Return the completion text for a (possibly multimodal) prompt."""

    @abstractmethod
    async def generate_image(self, request: ImageGenerationRequest) -> GeneratedImage:
        """Return a reference to an image generated from the prompt."""

    @abstractmethod
    async def synthesize_speech(self, request: SpeechSynthesisRequest) -> SynthesizedAudio:
        """Return synthesized audio for the given text."""

    async def shutdown(self) -> None:
        """Release client resources. Safe to call more than once."""
        return None


__all__ = ["GenerationProvider"]
