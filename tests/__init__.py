"""Test suite for the realtime generation gateway.

Unit tests live under unit/<domain>/ without a ``test_`` prefix and are
collected by the hook in conftest.py. Shared fakes are in helpers/.
"""
