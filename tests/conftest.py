"""Test configuration and fixtures for the user directory."""

from tests.fixtures import *  # noqa: F401,F403
