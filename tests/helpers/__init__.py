"""Fakes and fixtures shared by the unit tests."""
