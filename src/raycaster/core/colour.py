"""RGB colour value type.

Channels are unconstrained while doing arithmetic; they may exceed 1.0 or go
negative. Clamping into the 0-255 range only happens on canvas export.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.raycaster.core.numeric import approx_equal

# Maximum channel value written to a P3 image
MAX_CHANNEL_VALUE = 255


@dataclass(frozen=True, eq=False)
class Colour:
    """An RGB colour with float channels nominally in [0, 1].

    Attributes:
        red: Red channel.
        green: Green channel.
        blue: Blue channel.
    """

    red: float
    green: float
    blue: float

    def __add__(self, other: Colour) -> Colour:
        if not isinstance(other, Colour):
            return NotImplemented
        return Colour(self.red + other.red, self.green + other.green, self.blue + other.blue)

    def __sub__(self, other: Colour) -> Colour:
        if not isinstance(other, Colour):
            return NotImplemented
        return Colour(self.red - other.red, self.green - other.green, self.blue - other.blue)

    def __mul__(self, other: Colour | float) -> Colour:
        # Colour * Colour is the Hadamard (per-channel) product
        if isinstance(other, Colour):
            return Colour(self.red * other.red, self.green * other.green, self.blue * other.blue)
        if isinstance(other, (int, float)):
            return Colour(self.red * other, self.green * other, self.blue * other)
        return NotImplemented

    def __rmul__(self, other: float) -> Colour:
        if isinstance(other, (int, float)):
            return self * other
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Colour):
            return NotImplemented
        return (
            approx_equal(self.red, other.red)
            and approx_equal(self.green, other.green)
            and approx_equal(self.blue, other.blue)
        )

    __hash__ = None  # type: ignore[assignment]


def colour(red: float, green: float, blue: float) -> Colour:
    """Create a colour from three channel values."""
    return Colour(float(red), float(green), float(blue))


BLACK = Colour(0.0, 0.0, 0.0)
WHITE = Colour(1.0, 1.0, 1.0)
RED = Colour(1.0, 0.0, 0.0)
