# Palette generation: schema, lightness solver, generator

from .schema import (
    ROLE_INFO,
    ROLE_SHORT_LABELS,
    ROLES,
    GenerationConfig,
    Palette,
    SolvedColor,
    ThemeMode,
)
from .solver import (
    MAX_ITERATIONS,
    MAX_LIGHTNESS,
    MIN_LIGHTNESS,
    search_direction,
    solve_lightness,
)
from .generator import PaletteGenerator, generate_palette, on_brand_color, resolve_theme

__all__ = [
    "ROLE_INFO",
    "ROLE_SHORT_LABELS",
    "ROLES",
    "GenerationConfig",
    "Palette",
    "SolvedColor",
    "ThemeMode",
    "MAX_ITERATIONS",
    "MAX_LIGHTNESS",
    "MIN_LIGHTNESS",
    "search_direction",
    "solve_lightness",
    "PaletteGenerator",
    "generate_palette",
    "on_brand_color",
    "resolve_theme",
]
