"""Smoke tests for the example scripts.

Tests cover:
- Clock face hour marks
- Projectile trajectory plotting
- Sphere silhouette rendering from the command line
"""

from src.raycaster.core.colour import BLACK, RED, WHITE


class TestClock:
    """Test the clock face example."""

    def test_cardinal_hours(self):
        """Test 12, 3, 6 and 9 land on the expected pixels."""
        from examples.clock import draw_clock

        canvas = draw_clock(800)

        assert canvas.pixel_at(400, 100) == WHITE  # 12
        assert canvas.pixel_at(700, 400) == WHITE  # 3
        assert canvas.pixel_at(400, 700) == WHITE  # 6
        assert canvas.pixel_at(100, 400) == WHITE  # 9
        assert canvas.pixel_at(400, 400) == BLACK

    def test_twelve_marks(self):
        """Test exactly twelve pixels are drawn."""
        from examples.clock import draw_clock

        pixels = draw_clock(80).to_numpy()
        assert int((pixels.sum(axis=2) > 0).sum()) == 12

    def test_main_writes_file(self, tmp_path):
        """Test the command line entry point saves a PPM."""
        from examples.clock import main

        output = tmp_path / "clock.ppm"
        assert main(["--size", "40", "--output", str(output), "--quiet"]) == 0
        assert output.read_text().startswith("P3\n40 40\n255\n")


class TestProjectile:
    """Test the projectile example."""

    def test_projectile_lands(self):
        """Test the simulation terminates with the projectile on the ground."""
        from examples.projectile import Environment, Projectile, simulate
        from src.raycaster.core.tuples import point, vector

        start = Projectile(position=point(0, 1, 0), velocity=vector(1, 1, 0).normalize())
        environment = Environment(gravity=vector(0, -0.1, 0), wind=vector(-0.01, 0, 0))

        canvas, ticks = simulate(start, environment, width=20, height=10)

        assert 0 < ticks < 100
        assert int((canvas.to_numpy()[..., 0] > 0).sum()) > 0

    def test_tick(self):
        """Test one tick applies velocity, gravity and wind."""
        from examples.projectile import Environment, Projectile, tick
        from src.raycaster.core.tuples import point, vector

        p = tick(
            Environment(gravity=vector(0, -1, 0), wind=vector(1, 0, 0)),
            Projectile(position=point(0, 0, 0), velocity=vector(1, 1, 0)),
        )

        assert p.position == point(1, 1, 0)
        assert p.velocity == vector(2, 0, 0)


class TestRenderSphere:
    """Test the sphere silhouette example."""

    def test_render_sphere(self, tmp_path):
        """Test a small parallel render is saved."""
        from examples.render_sphere import render_sphere
        from src.raycaster.preview.canvas import PPM_MAX_LINE_LENGTH

        path = render_sphere(pixels=20, threads=4, output_path=str(tmp_path / "s.ppm"), quiet=True)

        lines = path.read_text().splitlines()
        assert lines[:3] == ["P3", "20 20", "255"]
        assert all(len(line) <= PPM_MAX_LINE_LENGTH for line in lines)

    def test_main_reports_errors(self, tmp_path, capsys):
        """Test invalid options return a non-zero exit code."""
        from examples.render_sphere import main

        assert main(["--pixels", "0", "--output", str(tmp_path / "s.ppm"), "--quiet"]) == 1
        assert "Error" in capsys.readouterr().err

    def test_main_renders_center_hit(self, tmp_path):
        """Test the default sphere covers the center pixel."""
        from examples.render_sphere import main

        output = tmp_path / "s.ppm"
        assert main(["--pixels", "10", "--output", str(output), "--quiet"]) == 0
        # Skip the 4 header tokens; pixel (5, 5) starts at token (5 * 10 + 5) * 3
        channels = output.read_text().split()[4:]
        start = (5 * 10 + 5) * 3
        assert channels[start : start + 3] == [str(int(RED.red * 255)), "0", "0"]
        assert channels[:3] == ["0", "0", "0"]
