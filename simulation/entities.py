"""Particle with mass, charge, position and velocity, updated by impulses."""

from core.errors import DivisionByZeroError, InvalidArgumentError
from simulation.state import ParticleSnapshot

AXES = 3


def as_vector3(values, name):
    """Copy `values` into a list of 3 floats, or raise InvalidArgumentError."""
    try:
        vector = [float(component) for component in values]
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"{name} must be a sequence of {AXES} numbers", argument=name,
                                   cause=exc) from exc
    if len(vector) != AXES:
        raise InvalidArgumentError(f"{name} must have {AXES} components, got {len(vector)}", argument=name,
                                   context={"length": len(vector)})
    return vector


class ParticleState:
    """A point charge in 3D.

    Mass can be reassigned at any time. Charge is fixed at construction.
    Position and velocity change only through apply_impulse().
    """

    __slots__ = ("_mass", "_charge", "_position", "_velocity")

    def __init__(self, mass, charge, position, velocity):
        position = as_vector3(position, "position")
        velocity = as_vector3(velocity, "velocity")
        self._mass = float(mass)
        self._charge = float(charge)
        self._position = position
        self._velocity = velocity

    def get_mass(self):
        return self._mass

    def set_mass(self, new_mass):
        self._mass = float(new_mass)

    def get_charge(self):
        return self._charge

    def get_position(self):
        return tuple(self._position)

    def get_velocity(self):
        return tuple(self._velocity)

    mass = property(get_mass, set_mass)
    charge = property(get_charge)
    position = property(get_position)
    velocity = property(get_velocity)

    def apply_impulse(self, force, dt):
        """Apply `force` for a step of length `dt`.

        Per axis: v' = v + dt / m * f, then x = (v' + v) * dt / 2.
        The previous position is replaced, not accumulated.
        """
        force = as_vector3(force, "force")
        if self._mass == 0:
            raise DivisionByZeroError("cannot apply impulse to a particle with zero mass",
                                      mass=self._mass, context={"dt": dt})
        for i in range(AXES):
            new_velocity = self._velocity[i] + dt / self._mass * force[i]
            self._position[i] = (new_velocity + self._velocity[i]) * dt / 2
            self._velocity[i] = new_velocity

    def to_state(self, step=0):
        """Create immutable snapshot for logging and output."""
        return ParticleSnapshot(step, self._mass, self._charge, tuple(self._position), tuple(self._velocity))

    def __repr__(self):
        return (f"ParticleState(mass={self._mass!r}, charge={self._charge!r}, "
                f"position={tuple(self._position)!r}, velocity={tuple(self._velocity)!r})")
