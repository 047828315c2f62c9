"""Pytest configuration and fixtures for Whisker tests."""

import pytest

from whisker import Data, Environment, Partial


@pytest.fixture
def env():
    """Create a basic Whisker Environment."""
    return Environment()


@pytest.fixture
def shallow_env():
    """Environment that allows only a few levels of partial/lambda nesting."""
    return Environment(max_depth=3)


@pytest.fixture
def partials():
    """Data object holding a few partials, usable as the outer scope."""
    return Data(
        {
            "header": Partial(lambda: "<h1>{{title}}</h1>"),
            "item": Partial(lambda: "<li>{{name}}</li>"),
            "broken": Partial(lambda: "{{#open}}never closed"),
        }
    )
