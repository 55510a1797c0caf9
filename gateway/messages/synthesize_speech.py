"""synthesize-speech: text-to-speech, defaulting to the last history entry.

The resolved text is recorded as the user entry whether it was sent
explicitly or repeated from history, so the exchange reads the same either
way when the history is replayed.
"""

from __future__ import annotations

from ..state import Session, TextContent, AudioContent
from ..providers import SynthesizedAudio, SpeechSynthesisRequest
from .requests import SynthesizeSpeechRequest
from .generation import GenerationPipeline
from .validators import validate_synthesize_speech


def _audio_content(audio: SynthesizedAudio) -> AudioContent:
    return AudioContent(audio=audio.to_base64(), media_type=audio.media_type)


async def handle_synthesize_speech(
    pipeline: GenerationPipeline,
    session: Session,
    request: SynthesizeSpeechRequest,
) -> None:
    text = validate_synthesize_speech(request, session.history.last_entry())
    synthesis = SpeechSynthesisRequest(user_id=session.connection_id, text=text)
    await pipeline.run(
        session,
        request,
        user_content=TextContent(text=text),
        call=lambda: pipeline.provider.synthesize_speech(synthesis),
        to_content=_audio_content,
    )


__all__ = ["handle_synthesize_speech"]
