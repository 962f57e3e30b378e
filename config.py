import json
from pathlib import Path

_DEFAULT_CONFIG = Path(__file__).parent / "config.json"


class SimulationConfig:
    __slots__ = ("mass", "charge", "position", "velocity", "force", "dt", "steps")

    def __init__(self, mass=1.0, charge=2.0, position=(0.0, 1.0, 2.0), velocity=(0.0, 1.0, 2.0),
                 force=(0.0, 1.0, 2.0), dt=1.0, steps=1):
        self.mass = mass
        self.charge = charge
        self.position = tuple(position)
        self.velocity = tuple(velocity)
        self.force = tuple(force)
        self.dt = dt
        self.steps = steps


class LoggingConfig:
    __slots__ = ("level", "file", "crash_file")

    def __init__(self, level="INFO", file="logs/trajectory.log", crash_file="logs/crash.log"):
        self.level = level
        self.file = file
        self.crash_file = crash_file


class Config:
    __slots__ = ("simulation", "logging")

    def __init__(self, simulation=None, logging=None):
        self.simulation = simulation or SimulationConfig()
        self.logging = logging or LoggingConfig()

    @classmethod
    def from_dict(cls, d):
        return cls(
            SimulationConfig(**d.get("simulation", {})),
            LoggingConfig(**d.get("logging", {})),
        )


def load_config(path=None):
    config_path = Path(path) if path else _DEFAULT_CONFIG

    if not config_path.exists():
        return Config()

    with open(config_path) as file:
        return Config.from_dict(json.load(file))
