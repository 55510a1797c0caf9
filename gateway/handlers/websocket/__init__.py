"""WebSocket transport helpers.

The connection entry point lives in ``manager.py`` and is imported from
there directly; it depends on the message router, which in turn uses the
error helpers exported here.
"""

from .errors import send_error, build_error_payload
from .helpers import safe_send_json, safe_send_text
from .parser import parse_client_message
from .lifecycle import WebSocketLifecycle
from .connection import WebSocketConnection
from .disconnects import is_expected_disconnect

__all__ = [
    "send_error",
    "build_error_payload",
    "safe_send_json",
    "safe_send_text",
    "parse_client_message",
    "WebSocketLifecycle",
    "WebSocketConnection",
    "is_expected_disconnect",
]
