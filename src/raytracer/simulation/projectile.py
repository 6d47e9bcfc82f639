"""Projectile physics built on the tuple algebra.

A projectile has a position (Point) and a velocity (Vector); the environment
applies constant gravity and wind. Each tick moves the projectile by its
velocity, then updates the velocity:

    position' = position + velocity
    velocity' = velocity + gravity + wind

``tick`` is pure, so a simulation is fully determined by its starting state.

Example:
    >>> from src.raytracer.core.tuples import Point, Vector
    >>> from src.raytracer.simulation.projectile import Environment, Projectile, simulate
    >>> env = Environment(gravity=Vector(0, -0.1, 0), wind=Vector(-0.01, 0, 0))
    >>> start = Projectile(position=Point(0, 1, 0), velocity=Vector(1, 1, 0).normalize())
    >>> steps = list(simulate(env, start))
    >>> steps[-1].position.y < 0
    True
"""

from collections.abc import Generator
from dataclasses import dataclass

from src.raytracer.core.tuples import Point, Vector


@dataclass(frozen=True)
class Projectile:
    """A moving body.

    Attributes:
        position: Current location.
        velocity: Displacement applied on the next tick.
    """

    position: Point
    velocity: Vector


@dataclass(frozen=True)
class Environment:
    """Constant forces acting on every projectile.

    Attributes:
        gravity: Velocity change per tick due to gravity.
        wind: Velocity change per tick due to wind.
    """

    gravity: Vector
    wind: Vector


def tick(environment: Environment, projectile: Projectile) -> Projectile:
    """Advance a projectile by one time step.

    Args:
        environment: The forces to apply.
        projectile: The current state.

    Returns:
        The next state. The input is not modified.
    """
    position = projectile.position + projectile.velocity
    velocity = projectile.velocity + environment.gravity + environment.wind
    return Projectile(position=position, velocity=velocity)


def simulate(
    environment: Environment,
    projectile: Projectile,
    max_ticks: int | None = None,
) -> Generator[Projectile, None, None]:
    """Yield successive projectile states until it leaves the first quadrant.

    The starting state is not yielded. Iteration stops after the first state
    whose x or y is negative (that state is still yielded), or after
    max_ticks states.

    Args:
        environment: The forces to apply.
        projectile: The starting state.
        max_ticks: Optional upper bound on the number of ticks.

    Yields:
        Each new Projectile state in order.
    """
    count = 0
    current = projectile
    while max_ticks is None or count < max_ticks:
        current = tick(environment, current)
        count += 1
        yield current
        if current.position.x < 0.0 or current.position.y < 0.0:
            return
