"""Tests for the projectile simulation.

This module tests the simulation/projectile module including:
- Single tick updates
- Closed-form agreement over a fixed number of ticks
- Determinism across runs
- Termination when the projectile leaves the first quadrant
"""

import pytest


@pytest.fixture
def launch():
    """The standard launch: 10.5 units along (1, 1, 0) from (0, 1, 0)."""
    from src.raytracer.core.tuples import Point, Vector
    from src.raytracer.simulation.projectile import Environment, Projectile

    projectile = Projectile(
        position=Point(0, 1, 0),
        velocity=Vector(1, 1, 0).normalize() * 10.5,
    )
    environment = Environment(
        gravity=Vector(0, -0.1, 0),
        wind=Vector(-0.02, 0, 0),
    )
    return environment, projectile


class TestTick:
    """Test a single update step."""

    def test_single_tick(self, launch):
        """Test position moves by velocity and velocity by the forces."""
        from src.raytracer.core.tuples import Point, Vector
        from src.raytracer.simulation.projectile import tick

        environment, projectile = launch
        speed = 10.5 / 2**0.5

        result = tick(environment, projectile)

        assert result.position == Point(speed, 1 + speed, 0)
        assert result.velocity == Vector(speed - 0.02, speed - 0.1, 0)

    def test_tick_keeps_types(self, launch):
        """Test that position stays a Point and velocity a Vector."""
        from src.raytracer.core.tuples import Point, Vector
        from src.raytracer.simulation.projectile import tick

        environment, projectile = launch
        result = tick(environment, projectile)

        assert isinstance(result.position, Point)
        assert isinstance(result.velocity, Vector)

    def test_tick_does_not_modify_input(self, launch):
        """Test that the previous state is left intact."""
        from src.raytracer.core.tuples import Point
        from src.raytracer.simulation.projectile import tick

        environment, projectile = launch
        tick(environment, projectile)

        assert projectile.position == Point(0, 1, 0)


class TestSimulate:
    """Test multi-step simulation."""

    def test_matches_closed_form(self, launch):
        """Test n ticks against p0 + n*v0 + n(n-1)/2 * (gravity + wind)."""
        from src.raytracer.simulation.projectile import simulate

        environment, projectile = launch
        acceleration = environment.gravity + environment.wind

        states = list(simulate(environment, projectile, max_ticks=10))
        assert len(states) == 10

        for n, state in enumerate(states, start=1):
            expected_position = (
                projectile.position
                + projectile.velocity * n
                + acceleration * (n * (n - 1) / 2)
            )
            expected_velocity = projectile.velocity + acceleration * n
            assert state.position == expected_position
            assert state.velocity == expected_velocity

    def test_deterministic(self, launch):
        """Test that two runs produce the same sequence."""
        from src.raytracer.simulation.projectile import simulate

        environment, projectile = launch
        first = list(simulate(environment, projectile, max_ticks=50))
        second = list(simulate(environment, projectile, max_ticks=50))

        assert len(first) == len(second) == 50
        for a, b in zip(first, second):
            assert a.position == b.position
            assert a.velocity == b.velocity

    def test_stops_after_leaving_first_quadrant(self, launch):
        """Test that only the final state is outside the first quadrant."""
        from src.raytracer.simulation.projectile import simulate

        environment, projectile = launch
        states = list(simulate(environment, projectile))

        assert states[-1].position.y < 0.0
        for state in states[:-1]:
            assert state.position.x >= 0.0
            assert state.position.y >= 0.0

    def test_max_ticks_zero(self, launch):
        """Test that no states are produced for max_ticks=0."""
        from src.raytracer.simulation.projectile import simulate

        environment, projectile = launch
        assert list(simulate(environment, projectile, max_ticks=0)) == []


class TestProjectileExample:
    """Test the example script end to end."""

    def test_plot_projectile_writes_ppm(self, tmp_path):
        """Test that the script writes a wrapped PPM with the trail plotted."""
        from examples.projectile import plot_projectile

        output = plot_projectile(
            width=300,
            height=200,
            output_path=str(tmp_path / "arc.ppm"),
            quiet=True,
        )

        lines = output.read_text().splitlines()
        assert lines[:3] == ["P3", "300 200", "255"]
        assert all(len(line) <= 70 for line in lines)
        # Early positions fall inside the canvas
        assert "255 204 153" in " ".join(lines[3:])
