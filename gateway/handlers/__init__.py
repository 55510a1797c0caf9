"""Connection and request handlers.

connection.py:
    Transport-neutral Connection handle; sessions are keyed by its identity.

session/:
    Bounded session registry and connect/disconnect lifecycle.

websocket/:
    WebSocket transport: parsing, safe sends, idle watchdog, error frames
    and the main connection handler (manager.py).

upload.py:
    HTTP image upload handler.
"""
