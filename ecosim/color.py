"""Color value type and conversion helpers.

Design Note:
    These are pure functions with no simulation dependencies.
    They can be tested in isolation and used by any module.
"""

from dataclasses import dataclass
from typing import Tuple


def _channel(value: float) -> int:
    return max(0, min(255, int(value)))


@dataclass(frozen=True)
class Color:
    """An RGBA color with 0-255 integer channels and a 0.0-1.0 alpha."""

    r: int
    g: int
    b: int
    a: float = 1.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "r", _channel(self.r))
        object.__setattr__(self, "g", _channel(self.g))
        object.__setattr__(self, "b", _channel(self.b))
        object.__setattr__(self, "a", round(max(0.0, min(1.0, float(self.a))), 3))

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def to_css(self) -> str:
        """Format as a CSS ``rgba(...)`` string for the renderer."""
        return f"rgba({self.r}, {self.g}, {self.b}, {self.a})"

    def blend(self, target: Tuple[int, int, int], strength: float) -> "Color":
        """Mix toward *target* by *strength* (0.0 keeps self, 1.0 is target)."""
        strength = max(0.0, min(1.0, strength))
        r, g, b = (
            int(channel * (1.0 - strength) + other * strength)
            for channel, other in zip(self.rgb, target)
        )
        return Color(r, g, b, self.a)


def hue_to_rgb(hue: float, saturation: float = 0.3) -> Tuple[int, int, int]:
    """Convert a hue value (0.0-1.0) to an RGB color tuple.

    Uses a simplified HSL-to-RGB conversion with configurable saturation.
    Low saturation blends toward white for pastel colors.

    Example:
        >>> hue_to_rgb(0.0, saturation=1.0)
        (255, 0, 0)
    """
    hue_degrees = (hue % 1.0) * 360

    # 6-sector color wheel
    if hue_degrees < 60:
        r, g, b = 255, int(hue_degrees / 60 * 255), 0
    elif hue_degrees < 120:
        r, g, b = int((120 - hue_degrees) / 60 * 255), 255, 0
    elif hue_degrees < 180:
        r, g, b = 0, 255, int((hue_degrees - 120) / 60 * 255)
    elif hue_degrees < 240:
        r, g, b = 0, int((240 - hue_degrees) / 60 * 255), 255
    elif hue_degrees < 300:
        r, g, b = int((hue_degrees - 240) / 60 * 255), 0, 255
    else:
        r, g, b = 255, 0, int((360 - hue_degrees) / 60 * 255)

    r = int(r * saturation + 255 * (1 - saturation))
    g = int(g * saturation + 255 * (1 - saturation))
    b = int(b * saturation + 255 * (1 - saturation))

    return (r, g, b)


# Saturation for archetypes without a dedicated color rule
GENERIC_COLOR_SATURATION = 0.6
