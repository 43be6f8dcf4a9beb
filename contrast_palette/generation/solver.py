"""
Lightness search: walk a hue/saturation's lightness away from a fixed color until the
contrast target is met, or the iteration cap or lightness bounds stop the walk.
Unreachable targets are not errors; the result carries the achieved ratio.
"""
from ..color import Color, contrast_ratio, hsl_to_color, parse_hex, relative_luminance
from .schema import SolvedColor

LIGHTNESS_STEP = 2
MIN_LIGHTNESS = 2
MAX_LIGHTNESS = 98
MAX_ITERATIONS = 100

# Fixed colors darker than this push the search toward lighter candidates
_DARK_FIXED_LUMINANCE = 0.5


def search_direction(fixed: Color) -> int:
    """+1 (lighten) against a dark fixed color, -1 (darken) against a light one."""
    return 1 if relative_luminance(fixed) < _DARK_FIXED_LUMINANCE else -1


def solve_lightness(
    fixed: Color | str,
    hue: float,
    saturation: float,
    start_lightness: float,
    target_ratio: float,
) -> SolvedColor:
    """
    Find a lightness L in [2, 98] such that contrast(fixed, hsl(hue, saturation, L))
    >= target_ratio, stepping 2 points per iteration from start_lightness.
    Returns the last color evaluated; check `.met` before relying on the ratio.
    """
    fixed_color = fixed if isinstance(fixed, Color) else parse_hex(fixed)
    if fixed_color is None:
        raise ValueError(f"Cannot solve against unparseable color {fixed!r}")
    if target_ratio < 1:
        raise ValueError(f"target_ratio must be >= 1, got {target_ratio}")
    if not 0 <= saturation <= 100:
        raise ValueError(f"saturation must be in 0..100, got {saturation}")

    step = LIGHTNESS_STEP * search_direction(fixed_color)
    lightness = max(MIN_LIGHTNESS, min(MAX_LIGHTNESS, start_lightness))
    color = hsl_to_color(hue, saturation, lightness)
    ratio = contrast_ratio(fixed_color, color)
    iterations = 0

    while ratio < target_ratio and iterations < MAX_ITERATIONS:
        nxt = lightness + step
        at_bound = nxt > MAX_LIGHTNESS or nxt < MIN_LIGHTNESS
        nxt = max(MIN_LIGHTNESS, min(MAX_LIGHTNESS, nxt))
        if nxt == lightness:
            break
        lightness = nxt
        color = hsl_to_color(hue, saturation, lightness)
        ratio = contrast_ratio(fixed_color, color)
        iterations += 1
        if at_bound:
            break

    return SolvedColor(
        color=color,
        hue=hue,
        saturation=saturation,
        lightness=lightness,
        ratio=ratio,
        target=target_ratio,
        iterations=iterations,
    )
