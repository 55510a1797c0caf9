"""Timeouts configuration.

Values are sourced from environment variables with sensible defaults.
"""

import os


# Hard bound on each generation provider call; expiry counts as provider failure
PROVIDER_TIMEOUT_S = float(os.getenv("PROVIDER_TIMEOUT_S", "60"))


__all__ = [
    "PROVIDER_TIMEOUT_S",
]
