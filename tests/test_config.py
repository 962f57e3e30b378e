"""Unit tests for configuration loading."""

import pytest
from config import (
    Config,
    SimulationConfig,
    LoggingConfig,
    load_config,
)


class TestSimulationConfig:
    """Tests for SimulationConfig class."""

    def test_default_values(self):
        """Defaults reproduce the worked impulse example."""
        config = SimulationConfig()
        assert config.mass == 1.0
        assert config.charge == 2.0
        assert config.position == (0.0, 1.0, 2.0)
        assert config.velocity == (0.0, 1.0, 2.0)
        assert config.force == (0.0, 1.0, 2.0)
        assert config.dt == 1.0
        assert config.steps == 1

    def test_custom_values(self):
        """SimulationConfig accepts custom values and stores vectors as tuples."""
        config = SimulationConfig(mass=3.0, position=[1, 2, 3], force=[0, 0, -9.81], steps=10)
        assert config.mass == 3.0
        assert config.position == (1, 2, 3)
        assert config.force == (0, 0, -9.81)
        assert config.steps == 10


class TestLoggingConfig:
    """Tests for LoggingConfig class."""

    def test_default_values(self):
        """LoggingConfig has sensible defaults."""
        config = LoggingConfig()
        assert config.level == "INFO"
        assert config.file == "logs/trajectory.log"
        assert config.crash_file == "logs/crash.log"

    def test_custom_values(self):
        """LoggingConfig accepts custom values."""
        config = LoggingConfig(
            level="DEBUG",
            file="/var/log/trajectory.log",
            crash_file="/var/log/crash.log"
        )
        assert config.level == "DEBUG"
        assert config.file == "/var/log/trajectory.log"
        assert config.crash_file == "/var/log/crash.log"


class TestConfig:
    """Tests for main Config class."""

    def test_default_config(self):
        """Config creates default sub-configs."""
        config = Config()
        assert isinstance(config.simulation, SimulationConfig)
        assert isinstance(config.logging, LoggingConfig)

    def test_from_dict(self):
        """Config.from_dict parses dictionary."""
        data = {
            "simulation": {"mass": 2.5, "dt": 0.1, "steps": 5},
            "logging": {"level": "DEBUG"}
        }
        config = Config.from_dict(data)
        assert config.simulation.mass == 2.5
        assert config.simulation.dt == 0.1
        assert config.simulation.steps == 5
        assert config.logging.level == "DEBUG"

    def test_from_dict_partial(self):
        """Config.from_dict handles partial data."""
        config = Config.from_dict({"simulation": {"steps": 7}})
        assert config.simulation.steps == 7
        assert config.simulation.mass == 1.0  # Default
        assert config.logging.level == "INFO"  # Default

    def test_from_dict_unknown_key(self):
        """Unknown keys are rejected."""
        with pytest.raises(TypeError):
            Config.from_dict({"simulation": {"radius": 0.5}})


class TestLoadConfig:
    """Tests for load_config function."""

    def test_load_config_returns_config(self):
        """load_config returns Config object."""
        config = load_config()
        assert isinstance(config, Config)

    def test_load_config_reads_file(self):
        """load_config reads from config.json."""
        config = load_config()
        assert config.simulation.steps == 3
        assert config.simulation.force == (0.0, 1.0, 2.0)

    def test_load_config_custom_path(self, config_file):
        """load_config reads an explicit path."""
        path = config_file({"mass": 5.0}, level="WARN")
        config = load_config(path)
        assert config.simulation.mass == 5.0
        assert config.logging.level == "WARN"

    def test_load_config_missing_file(self, tmp_path):
        """load_config returns defaults for missing file."""
        config = load_config(tmp_path / "nonexistent.json")
        assert isinstance(config, Config)
        assert config.simulation.steps == 1  # Default
