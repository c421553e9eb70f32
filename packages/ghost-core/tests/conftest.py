from __future__ import annotations

from collections.abc import AsyncIterator

import pytest
from core_fakes import FakeProvider, ManualScheduler

from ghost.core.coordinator import SuggestionCoordinator
from ghost.core.settings import CoordinatorSettings


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def coordinator_settings() -> CoordinatorSettings:
    return CoordinatorSettings(debounce_seconds=0.5, min_input_chars=3)


@pytest.fixture
async def coordinator(provider, scheduler, coordinator_settings) -> AsyncIterator[SuggestionCoordinator]:
    coord = SuggestionCoordinator(provider, coordinator_settings, scheduler=scheduler)
    yield coord
    coord.close()
