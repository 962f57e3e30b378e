from utils.ksuid import generate_ksuid
from utils.timestamp import format_timestamp


class ParticleSnapshot:
    __slots__ = ("id", "timestamp", "step", "mass", "charge", "position", "velocity")

    def __init__(self, step, mass, charge, position, velocity, id=None, timestamp=None):
        self.id = id or generate_ksuid()
        self.timestamp = timestamp or format_timestamp()
        self.step = step
        self.mass = mass
        self.charge = charge
        self.position = tuple(position)
        self.velocity = tuple(velocity)

    def to_dict(self):
        return {
            "id": self.id,
            "timestamp": self.timestamp,
            "step": self.step,
            "mass": self.mass,
            "charge": self.charge,
            "position": list(self.position),
            "velocity": list(self.velocity),
        }
