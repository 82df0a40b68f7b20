"""Testing utilities for gamesuite."""

from .factory import StatsFactory, WordFactory
from .fixtures import app_fixture, suite_app
from .test_client import ScriptedIO, TestMessage

__all__ = [
    "ScriptedIO",
    "StatsFactory",
    "TestMessage",
    "WordFactory",
    "app_fixture",
    "suite_app",
]
