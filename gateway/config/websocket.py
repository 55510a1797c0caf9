"""WebSocket-specific runtime configuration values.

Timeouts:
    WS_IDLE_TIMEOUT_S: Close connections after this many seconds of inactivity.
        This prevents abandoned connections from holding a session slot.

    WS_WATCHDOG_TICK_S: How often the idle watchdog checks activity.

Close Codes (RFC 6455):
    1000: Normal closure (client requested)
    4000: Application-defined (idle timeout)
    4001: Application-defined (evicted to make room for a newer session)

Sentinel Values:
    A plain string that can be sent instead of JSON to end the session.
"""

from __future__ import annotations

import os

# ============================================================================
# Timeout Configuration
# ============================================================================

WS_IDLE_TIMEOUT_S = float(os.getenv("WS_IDLE_TIMEOUT_S", "600"))  # 10 minutes
WS_WATCHDOG_TICK_S = float(os.getenv("WS_WATCHDOG_TICK_S", "5"))  # Check every 5s

# ============================================================================
# WebSocket Close Codes
# ============================================================================

WS_CLOSE_CLIENT_REQUEST_CODE = int(os.getenv("WS_CLOSE_CLIENT_REQUEST_CODE", "1000"))  # Normal
WS_CLOSE_IDLE_CODE = int(os.getenv("WS_CLOSE_IDLE_CODE", "4000"))
WS_CLOSE_IDLE_REASON = os.getenv("WS_CLOSE_IDLE_REASON", "idle_timeout")
WS_CLOSE_EVICTED_CODE = int(os.getenv("WS_CLOSE_EVICTED_CODE", "4001"))
WS_CLOSE_EVICTED_REASON = os.getenv("WS_CLOSE_EVICTED_REASON", "evicted")

# ============================================================================
# Sentinel Values
# ============================================================================

WS_END_SENTINEL = os.getenv("WS_END_SENTINEL", "__END__")  # Close session

__all__ = [
    "WS_IDLE_TIMEOUT_S",
    "WS_WATCHDOG_TICK_S",
    "WS_CLOSE_CLIENT_REQUEST_CODE",
    "WS_CLOSE_IDLE_CODE",
    "WS_CLOSE_IDLE_REASON",
    "WS_CLOSE_EVICTED_CODE",
    "WS_CLOSE_EVICTED_REASON",
    "WS_END_SENTINEL",
]
