"""
Shared test fixtures for pytest
"""

import pytest

from conceptify.board import Board, PlacementEngine, SessionStore
from conceptify.config import AppConfig
from tests.fakes import FakeCache, FakeClock, FakeScheduler


@pytest.fixture
def engine():
    return PlacementEngine(grid_size=50, pack_types={"vmPack"}, default_template="ubuntu")


@pytest.fixture
def board():
    return Board(AppConfig())


@pytest.fixture
def cache():
    return FakeCache()


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(cache, scheduler, clock):
    return SessionStore(
        cache, scheduler, storage_key="conceptify:state", ttl_ms=600_000, clock=clock, grid_size=50
    )
