"""Shared test helpers."""

from .fake_dbapi import FakeConnection, FakeCursor

__all__ = ["FakeConnection", "FakeCursor"]
