"""
Pytest configuration and shared fixtures for the hanoi test suite.
"""

import sys
import tempfile
from pathlib import Path

import pytest
import yaml

# Ensure project root is on PYTHONPATH so 'hanoi' can be imported
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from hanoi.core.engine import HanoiEngine  # noqa: E402
from hanoi.interfaces.pegs import Peg  # noqa: E402
from hanoi.utils.config_loader import clear_config_cache  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_config_cache():
    """Make every test start from a cold config cache."""
    clear_config_cache()
    yield
    clear_config_cache()


@pytest.fixture
def temp_yaml_file():
    """
    Fixture that provides a temporary YAML file.

    Yields:
        Path: Path to the temporary YAML file
    """
    with tempfile.NamedTemporaryFile(
        mode="w",
        suffix=".yaml",
        delete=False,
    ) as f:
        temp_path = Path(f.name)

    yield temp_path

    # Cleanup
    if temp_path.exists():
        temp_path.unlink()


@pytest.fixture
def valid_engine_config_dict():
    """
    Fixture providing a complete valid engine configuration dictionary.
    """
    return {
        "limits": {"min_rings": 1, "max_rings": 63},
    }


@pytest.fixture
def temp_config_yaml_file(temp_yaml_file, valid_engine_config_dict):
    """
    Fixture that creates a temporary YAML file with valid configuration.

    Yields:
        Path: Path to the temporary YAML file with valid configuration
    """
    with open(temp_yaml_file, "w", encoding="utf-8") as f:
        yaml.dump(valid_engine_config_dict, f)

    yield temp_yaml_file


@pytest.fixture
def three_ring_engine():
    return HanoiEngine(3)


def _replay(rings_count: int, steps: int) -> HanoiEngine:
    engine = HanoiEngine(rings_count)
    for _ in range(steps):
        engine.next()
    return engine


def _assert_invariants(engine: HanoiEngine) -> None:
    pegs = engine.snapshot()
    assert sum(len(rings) for rings in pegs.values()) == engine.rings_count
    assert sorted(r for rings in pegs.values() for r in rings) == list(range(engine.rings_count))
    for rings in pegs.values():
        assert all(lower > upper for lower, upper in zip(rings, rings[1:]))
    assert 0 <= engine.current_step <= engine.total_steps
    assert (engine.current_step == 0) == (not pegs[Peg.BUFFER] and not pegs[Peg.TO])
    assert (engine.current_step == engine.total_steps) == (
        not pegs[Peg.BUFFER] and not pegs[Peg.FROM]
    )


@pytest.fixture
def replay():
    """Callable building an engine advanced ``steps`` times with next()."""
    return _replay


@pytest.fixture
def check_invariants():
    """Callable asserting the structural invariants of an engine."""
    return _assert_invariants
