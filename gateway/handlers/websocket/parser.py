"""Inbound frame decoding for the WebSocket handler.

A frame is either the plain-text end sentinel or a JSON object naming its
kind in ``type`` (older clients send ``event``). The returned dict always
has a lowercase ``type`` and, when present, a string ``request_id``.
"""

from __future__ import annotations

from typing import Any

import orjson

from ...config.websocket import WS_END_SENTINEL


def _decode_object(text: str) -> dict[str, Any]:
    try:
        data = orjson.loads(text)
    except orjson.JSONDecodeError as exc:
        raise ValueError("Message must be valid JSON or a sentinel string.") from exc
    if not isinstance(data, dict):
        raise ValueError("Message must be a JSON object.")
    return data


def _message_type(data: dict[str, Any]) -> str:
    for key in ("type", "event"):
        value = data.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip().lower()
    if data.get("end") is True:
        return "end"
    raise ValueError("Missing 'type' in message.")


def parse_client_message(raw: str) -> dict[str, Any]:
    """Decode one inbound frame.

    Raises:
        ValueError: If the frame is empty, not a JSON object, or untyped.
    """
    text = (raw or "").strip()
    if not text:
        raise ValueError("Empty message.")
    if text == WS_END_SENTINEL:
        return {"type": "end"}

    data = _decode_object(text)
    data["type"] = _message_type(data)
    request_id = data.get("request_id")
    if request_id is not None:
        data["request_id"] = str(request_id)
    return data


__all__ = ["parse_client_message"]
