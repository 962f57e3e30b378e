"""Replays a constant impulse against a single particle."""

from core.errors import InvalidArgumentError
from internal.logging import get_logger
from simulation.entities import ParticleState


def build_particle(config):
    return ParticleState(config.mass, config.charge, config.position, config.velocity)


def run_impulses(particle, force, dt, steps):
    """Apply the same impulse `steps` times.

    Returns snapshots for step 0 (initial state) through `steps`.
    """
    if steps < 0:
        raise InvalidArgumentError(f"steps must be >= 0, got {steps}", argument="steps")
    log = get_logger()
    snapshots = [particle.to_state(0)]
    for step in range(1, steps + 1):
        particle.apply_impulse(force, dt)
        snapshot = particle.to_state(step)
        log.debug("impulse", step=step, position=snapshot.position, velocity=snapshot.velocity)
        snapshots.append(snapshot)
    return snapshots
