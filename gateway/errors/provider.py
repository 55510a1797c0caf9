"""Generation provider exceptions.

Provider adapters wrap SDK and transport failures in ProviderError so the
dispatch layer can treat every backend failure uniformly.
"""


class ProviderError(Exception):
    """Raised when the generation provider fails to produce a result."""


class ProviderTimeoutError(ProviderError):
    """Raised when a provider call exceeds its time budget."""


__all__ = ["ProviderError", "ProviderTimeoutError"]
