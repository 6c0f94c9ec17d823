"""Shared fixtures: the five-route site used across the routing tests."""

import pytest

from wren.routing.dispatch import Dispatcher
from wren.routing.registry import PathRegistry

SITE_ROUTES = [
    ("/", "home"),
    ("/login", "login"),
    ("/signup", "signup"),
    ("/post/:id", "post"),
    ("/calendar/:year/:month", "calendar"),
]


@pytest.fixture
def registry() -> PathRegistry:
    return PathRegistry(SITE_ROUTES)


@pytest.fixture
def dispatcher(registry: PathRegistry) -> Dispatcher:
    return Dispatcher(registry)
