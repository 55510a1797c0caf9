"""Unit tests for rebuilding chat context from session history."""

from __future__ import annotations

from gateway.state import HistoryEntry, TextContent, AssetContent, AudioContent, MultimodalContent
from gateway.providers import TextCompletionRequest, build_chat_messages


def test_prompt_only() -> None:
    request = TextCompletionRequest(user_id="u", prompt="hello")
    assert build_chat_messages(request, system_prompt="") == [{"role": "user", "content": "hello"}]


def test_system_prompt_is_first() -> None:
    request = TextCompletionRequest(user_id="u", prompt="hello")
    messages = build_chat_messages(request, system_prompt="be brief")
    assert messages[0] == {"role": "system", "content": "be brief"}


def test_prompt_with_asset_uses_image_part() -> None:
    request = TextCompletionRequest(user_id="u", prompt="what", asset_url="https://a/cat.png")
    [message] = build_chat_messages(request, system_prompt="")
    assert message["content"] == [
        {"type": "text", "text": "what"},
        {"type": "image_url", "image_url": {"url": "https://a/cat.png"}},
    ]


def test_context_conversion() -> None:
    context = (
        HistoryEntry.user(TextContent(text="hi")),
        HistoryEntry.assistant(TextContent(text="hello")),
        HistoryEntry.user(MultimodalContent(text="look", url="https://a/dog.png")),
        HistoryEntry.assistant(AssetContent(url="https://images.example/1.png")),
        HistoryEntry.assistant(AssetContent(url="data:image/png;base64,AAAA")),
        HistoryEntry.assistant(AudioContent(audio="SUQz", media_type="audio/mpeg")),
    )
    request = TextCompletionRequest(user_id="u", prompt="next", context=context)

    messages = build_chat_messages(request, system_prompt="")

    assert [m["role"] for m in messages] == ["user", "assistant", "user", "assistant", "user"]
    assert messages[2]["content"][1]["image_url"]["url"] == "https://a/dog.png"
    assert messages[3]["content"] == "[generated image] https://images.example/1.png"
    assert messages[-1] == {"role": "user", "content": "next"}
