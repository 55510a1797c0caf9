"""Generation provider credentials and model selection."""

import os


OPENAI_API_KEY = os.getenv("OPENAI_API_KEY") or os.getenv("OPEN_AI_API_KEY")
OPENAI_ORG_ID = os.getenv("OPENAI_ORG_ID") or os.getenv("OPEN_AI_ORG_ID")
OPENAI_BASE_URL = os.getenv("OPENAI_BASE_URL") or None

# Text completion
CHAT_MODEL = os.getenv("CHAT_MODEL", "gpt-4o")
CHAT_MAX_OUT = int(os.getenv("CHAT_MAX_OUT", "512"))
CHAT_SYSTEM_PROMPT = os.getenv("CHAT_SYSTEM_PROMPT", "")

# Image generation
IMAGE_MODEL = os.getenv("IMAGE_MODEL", "dall-e-3")
IMAGE_SIZE = os.getenv("IMAGE_SIZE", "1024x1024")

# Speech synthesis
SPEECH_MODEL = os.getenv("SPEECH_MODEL", "tts-1")
SPEECH_VOICE = os.getenv("SPEECH_VOICE", "alloy")
SPEECH_FORMAT = os.getenv("SPEECH_FORMAT", "mp3")  # 'mp3' | 'opus' | 'aac' | 'flac' | 'wav'

__all__ = [
    "OPENAI_API_KEY",
    "OPENAI_ORG_ID",
    "OPENAI_BASE_URL",
    "CHAT_MODEL",
    "CHAT_MAX_OUT",
    "CHAT_SYSTEM_PROMPT",
    "IMAGE_MODEL",
    "IMAGE_SIZE",
    "SPEECH_MODEL",
    "SPEECH_VOICE",
    "SPEECH_FORMAT",
]
