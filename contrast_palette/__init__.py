"""contrast-palette: role-based UI palettes that meet WCAG contrast targets."""

from .color import (
    Color,
    ComplianceStandard,
    ContrastMatrix,
    color_to_hex,
    contrast_matrix,
    contrast_ratio,
    hex_to_color,
    hsl_to_color,
    relative_luminance,
)
from .generation import (
    GenerationConfig,
    Palette,
    PaletteGenerator,
    SolvedColor,
    ThemeMode,
    generate_palette,
    solve_lightness,
)

__all__ = [
    "Color",
    "ComplianceStandard",
    "ContrastMatrix",
    "color_to_hex",
    "contrast_matrix",
    "contrast_ratio",
    "hex_to_color",
    "hsl_to_color",
    "relative_luminance",
    "GenerationConfig",
    "Palette",
    "PaletteGenerator",
    "SolvedColor",
    "ThemeMode",
    "generate_palette",
    "solve_lightness",
]
