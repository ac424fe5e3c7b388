"""Shared pytest fixtures for feature showcase tests.

Provides config objects and a recording driver registry so driver tests can
check ordering and fault propagation without running the real examples.
"""

import logging

import pytest

from feature_showcase.config import CounterConfig, ShowcaseConfig


@pytest.fixture
def fast_counter_config():
    """Counter settings small enough for quick tests, with no resource delay."""
    return CounterConfig(
        workers=4,
        increments_per_worker=250,
        resource_users=["User 1", "User 2"],
        resource_hold_seconds=0.0,
    )


@pytest.fixture
def sample_config(fast_counter_config):
    """ShowcaseConfig wrapping the fast counter settings."""
    return ShowcaseConfig(counter=fast_counter_config, log_level="debug")


@pytest.fixture
def call_log():
    """List that recording examples append their names to."""
    return []


@pytest.fixture
def make_example(call_log):
    """Factory for (name, runner) pairs that record and print their name."""

    def factory(name, error=None):
        def runner():
            call_log.append(name)
            print(f"<{name}>")
            if error is not None:
                raise error
        return (name, runner)

    return factory


@pytest.fixture
def clean_logger():
    """Yield a fresh logger name and strip its handlers afterwards."""
    names = []

    def factory(name):
        names.append(name)
        return name

    yield factory

    for name in names:
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
