"""
Schema for one generation: what the caller asks for (GenerationConfig) and what comes
back (Palette, with the solver result for every searched role).
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ..color import Color, ComplianceStandard, color_to_hex

# Role order is also matrix row/column order
ROLES: tuple[str, ...] = ("background", "surface", "text", "brand", "accent")

# (label, description) shown next to each swatch
ROLE_INFO: dict[str, tuple[str, str]] = {
    "background": ("Background", "Page Base"),
    "surface": ("Surface", "Cards / Panels"),
    "text": ("Text", "Headings / Body"),
    "brand": ("Brand", "Primary Actions"),
    "accent": ("Accent", "Highlights / Data"),
}

# Short headers for the contrast matrix
ROLE_SHORT_LABELS: dict[str, str] = {
    "background": "Bg",
    "surface": "Surf",
    "text": "Text",
    "brand": "Brand",
    "accent": "Acc",
}


class ThemeMode(str, Enum):
    LIGHT = "light"
    DARK = "dark"
    RANDOM = "random"


@dataclass(frozen=True)
class GenerationConfig:
    """Inputs of one generation. seed=None means a fresh secure random source."""

    standard: ComplianceStandard = ComplianceStandard.AA
    theme: ThemeMode = ThemeMode.RANDOM
    seed: int | None = None


@dataclass(frozen=True)
class SolvedColor:
    """Result of a lightness search. `met` is False when the target was out of reach."""

    color: Color
    hue: float
    saturation: float
    lightness: float
    ratio: float
    target: float
    iterations: int

    @property
    def met(self) -> bool:
        return self.ratio >= self.target

    @property
    def hex(self) -> str:
        return color_to_hex(self.color)


@dataclass(frozen=True)
class Palette:
    """
    Five role colors plus on_brand (black or white for text on the brand color).
    `theme` is the resolved theme (never RANDOM). `solved` holds the search result for
    text, brand and accent.
    """

    background: Color
    surface: Color
    text: Color
    brand: Color
    accent: Color
    on_brand: Color
    standard: ComplianceStandard
    theme: ThemeMode
    solved: dict[str, SolvedColor] = field(default_factory=dict, compare=False)

    @property
    def is_dark(self) -> bool:
        return self.theme is ThemeMode.DARK

    def role_names(self) -> tuple[str, ...]:
        return ROLES

    def color_for(self, role: str) -> Color:
        if role not in ROLES and role != "on_brand":
            raise KeyError(role)
        return getattr(self, role)

    def roles(self) -> dict[str, Color]:
        return {role: getattr(self, role) for role in ROLES}

    def shortfalls(self) -> dict[str, SolvedColor]:
        """Searched roles whose contrast target was not reached."""
        return {role: s for role, s in self.solved.items() if not s.met}

    @property
    def compliant(self) -> bool:
        return not self.shortfalls()

    def to_dict(self) -> dict[str, Any]:
        """Hex strings for adapters (render, copy, export)."""
        d: dict[str, Any] = {role: color_to_hex(c) for role, c in self.roles().items()}
        d["on_brand"] = color_to_hex(self.on_brand)
        d["standard"] = self.standard.value
        d["theme"] = self.theme.value
        return d
