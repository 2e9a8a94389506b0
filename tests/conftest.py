"""Shared test fixtures."""

import pytest

from app.providers import DIContainer

from .fakes import FakeNotifier


@pytest.fixture
def notifier() -> FakeNotifier:
    return FakeNotifier()


@pytest.fixture
def container(notifier: FakeNotifier) -> DIContainer:
    return DIContainer(notifier=notifier, command="/planbot")
