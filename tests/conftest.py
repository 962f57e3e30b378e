"""Pytest fixtures for all tests."""

import json
import sys

import pytest

from config import SimulationConfig
from internal.logging import LogLevel, StructuredLogger
from simulation.entities import ParticleState


@pytest.fixture
def particle():
    """Particle from the worked impulse example."""
    return ParticleState(mass=1.0, charge=2.0, position=[0, 1, 2], velocity=[0, 1, 2])


@pytest.fixture
def sim_config():
    """Create test simulation config."""
    return SimulationConfig(
        mass=2.0,
        charge=-1.0,
        position=(1.0, 1.0, 1.0),
        velocity=(1.0, 0.0, -1.0),
        force=(2.0, 4.0, 0.0),
        dt=0.5,
        steps=4,
    )


@pytest.fixture
def config_file(tmp_path):
    """Write a config.json into tmp_path pointing logs at tmp_path."""
    def write(simulation=None, level="DEBUG"):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({
            "simulation": simulation or {},
            "logging": {
                "level": level,
                "file": str(tmp_path / "logs" / "trajectory.log"),
                "crash_file": str(tmp_path / "logs" / "crash.log"),
            },
        }))
        return path
    return write


@pytest.fixture(autouse=True)
def reset_logger():
    """Restore the default process logger after each test."""
    yield
    StructuredLogger.configure(min_level=LogLevel.INFO)


@pytest.fixture(autouse=True)
def restore_crash_handler():
    """Undo crash handler changes made by simulator.main."""
    from utils import crash
    original_hook, original_path = sys.excepthook, crash._crash_log
    yield
    sys.excepthook = original_hook
    crash.configure(original_path)
