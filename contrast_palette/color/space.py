"""
Color space: HSL → RGB, hex parse/format, and WCAG relative luminance.
All generation happens in HSL; everything downstream (contrast, output) works on RGB.
"""
import math
import re
from dataclasses import dataclass

_HEX_RE = re.compile(r"^#?([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})$", re.IGNORECASE)

# sRGB linearization breakpoint and channel weights (WCAG 2.x)
_LINEAR_BREAKPOINT = 0.03928
_LUMINANCE_WEIGHTS = (0.2126, 0.7152, 0.0722)


@dataclass(frozen=True)
class Color:
    """RGB color, channels 0–255."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            v = getattr(self, name)
            if not isinstance(v, int) or not 0 <= v <= 255:
                raise ValueError(f"Channel {name}={v!r} must be an int in 0..255")

    @property
    def hex(self) -> str:
        return color_to_hex(self)

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def __str__(self) -> str:
        return self.hex


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def _clamp_channel(v: int) -> int:
    return max(0, min(255, v))


def hsl_to_color(h: float, s: float, l: float) -> Color:
    """
    HSL → RGB. h in degrees (reduced mod 360), s and l in percent (0–100).
    Channels rounded half-up and clamped to 0–255.
    """
    h = h % 360
    light = l / 100.0
    a = s * min(light, 1 - light) / 100.0

    def channel(n: int) -> int:
        k = (n + h / 30.0) % 12
        c = light - a * max(min(k - 3, 9 - k, 1), -1)
        return _clamp_channel(_round_half_up(255 * c))

    return Color(channel(0), channel(8), channel(4))


def parse_hex(text) -> Color | None:
    """
    Parse '#rrggbb' or 'rrggbb' (any case). Returns None if malformed, never raises.
    """
    if not isinstance(text, str):
        return None
    m = _HEX_RE.match(text.strip())
    if not m:
        return None
    return Color(*(int(part, 16) for part in m.groups()))


# Boundary name used by adapters (copy/export)
hex_to_color = parse_hex


def color_to_hex(color: Color) -> str:
    """Canonical '#rrggbb', lowercase, zero-padded."""
    return "#{:02x}{:02x}{:02x}".format(color.r, color.g, color.b)


def _linearize(v: int) -> float:
    c = v / 255.0
    if c <= _LINEAR_BREAKPOINT:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(color: Color) -> float:
    """WCAG relative luminance in [0, 1]."""
    wr, wg, wb = _LUMINANCE_WEIGHTS
    return wr * _linearize(color.r) + wg * _linearize(color.g) + wb * _linearize(color.b)

