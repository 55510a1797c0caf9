"""Generation provider interface and implementations."""

from .base import GenerationProvider
from .openai_provider import OpenAIProvider, build_chat_messages
from .types import (
    GeneratedImage,
    SynthesizedAudio,
    TextCompletionRequest,
    ImageGenerationRequest,
    SpeechSynthesisRequest,
)

__all__ = [
    "GenerationProvider",
    "OpenAIProvider",
    "build_chat_messages",
    "TextCompletionRequest",
    "ImageGenerationRequest",
    "SpeechSynthesisRequest",
    "GeneratedImage",
    "SynthesizedAudio",
]
