"""Pytest configuration shared by the test suite."""

from hypothesis import settings

settings.register_profile("default", max_examples=200, deadline=None)
settings.load_profile("default")
