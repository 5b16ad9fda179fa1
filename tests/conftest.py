"""
Pytest configuration for test discovery and imports.

Provides fixtures for testing including:
- Temporary database paths
- Seeded random sources
- A generated league and a freshly created player
"""

import sys
from pathlib import Path
import pytest
import tempfile
import os


# Determine paths
project_root = Path(__file__).parent.parent
src_path = project_root / "src"

if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from hoops_career.config import SimulationSettings
from hoops_career.player.player_factory import create_initial_player
from hoops_career.shared.random_source import create_random_source
from hoops_career.simulation.turn_engine import CareerTurnEngine
from hoops_career.team_management.teams import LeagueWorld


TEST_WORLD_SEED = 42


# ============================================================================
# DATABASE FIXTURES
# ============================================================================

@pytest.fixture
def test_db_path():
    """
    Create temporary database path for testing.

    Yields:
        Path to temporary database file

    Cleanup:
        Removes the database and its WAL side files after the test
    """
    fd, path = tempfile.mkstemp(suffix='.db')
    os.close(fd)
    os.unlink(path)

    yield path

    for suffix in ('', '-wal', '-shm'):
        try:
            os.unlink(path + suffix)
        except FileNotFoundError:
            pass


# ============================================================================
# SIMULATION FIXTURES
# ============================================================================

@pytest.fixture
def rng():
    """Seeded random source."""
    return create_random_source(1234)


@pytest.fixture(scope="session")
def league_world():
    """League generated from a fixed seed (read-only, shared)."""
    return LeagueWorld.from_seed(TEST_WORLD_SEED)


@pytest.fixture
def new_player(league_world):
    """A fresh High School freshman with no legacy points."""
    return create_initial_player(
        0,
        league_world,
        create_random_source(7),
        name='Test Player',
        position='Point Guard',
        world_seed=TEST_WORLD_SEED,
    )


@pytest.fixture
def engine(league_world):
    return CareerTurnEngine(league_world)


@pytest.fixture
def quiet_days(monkeypatch):
    """Turn off random injuries and contextual events."""
    monkeypatch.setattr(SimulationSettings, 'INJURY_CHANCE', 0.0)
    monkeypatch.setattr(SimulationSettings, 'CONTEXTUAL_EVENT_CHANCE', 0.0)
