# Color space conversions and WCAG contrast

from .space import (
    BLACK,
    WHITE,
    Color,
    color_to_hex,
    hex_to_color,
    hsl_to_color,
    parse_hex,
    relative_luminance,
)
from .contrast import (
    RATIO_AA,
    RATIO_AAA,
    RATIO_UI_COMPONENT,
    ComplianceStandard,
    ContrastMatrix,
    MatrixCell,
    contrast_matrix,
    contrast_ratio,
    display_ratio,
    swatch_text_color,
)

__all__ = [
    "BLACK",
    "WHITE",
    "Color",
    "color_to_hex",
    "hex_to_color",
    "hsl_to_color",
    "parse_hex",
    "relative_luminance",
    "RATIO_AA",
    "RATIO_AAA",
    "RATIO_UI_COMPONENT",
    "ComplianceStandard",
    "ContrastMatrix",
    "MatrixCell",
    "contrast_matrix",
    "contrast_ratio",
    "display_ratio",
    "swatch_text_color",
]
