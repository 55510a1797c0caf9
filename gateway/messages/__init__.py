"""Client request handling for the gateway.

capabilities.py:
    Capability names, legacy aliases and response event types.

requests.py:
    Typed request variants built from parsed client frames.

validators.py:
    Pure input checks shared by the websocket handlers and upload endpoint.

generation.py:
    The provider-call pipeline shared by every generating capability.

send_text.py, generate_image.py, synthesize_speech.py, fetch_history.py:
    One handler per capability.

router.py:
    The Dispatcher that looks up the session and selects the handler.
"""
