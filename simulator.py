"""Particle impulse scenario - Entry Point."""

import sys

from config import load_config
from internal.logging import FileLogger, StructuredLogger, get_logger, parse_level
from simulation.run import build_particle, run_impulses
from utils.crash import configure as configure_crash, install_crash_handler


def main(config_path=None):
    config = load_config(config_path)
    configure_crash(config.logging.crash_file)
    install_crash_handler()
    StructuredLogger.configure(min_level=parse_level(config.logging.level))
    log = get_logger()

    sim = config.simulation
    particle = build_particle(sim)
    log.info("scenario start", mass=particle.mass, charge=particle.charge, dt=sim.dt, steps=sim.steps)

    try:
        snapshots = run_impulses(particle, sim.force, sim.dt, sim.steps)
    except Exception as exc:
        log.error("scenario failed", error=exc)
        raise

    with FileLogger(config.logging.file) as trajectory:
        for snapshot in snapshots:
            trajectory.log("state", snapshot.to_dict())

    final = snapshots[-1]
    log.info("scenario done", position=final.position, velocity=final.velocity,
             written=trajectory.written, file=config.logging.file)
    return final


if __name__ == "__main__":
    main(sys.argv[1] if len(sys.argv) > 1 else None)
