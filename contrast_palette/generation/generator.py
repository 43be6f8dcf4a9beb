"""
Palette generator: random hue/saturation seeds per role → lightness search for the roles
that carry text or UI → one immutable Palette. No retries; regenerating is up to the caller.
"""
import logging

from ..color import (
    BLACK,
    RATIO_UI_COMPONENT,
    WHITE,
    Color,
    ComplianceStandard,
    hsl_to_color,
    relative_luminance,
)
from ..random_utils import RandomSource, coin_flip, floored_uniform, source_for_seed
from ..workflow_utils import log_structured
from .schema import GenerationConfig, Palette, SolvedColor, ThemeMode
from .solver import solve_lightness

logger = logging.getLogger(__name__)

# Background: near-neutral tone
BG_SATURATION_RANGE = (5, 25)
BG_LIGHTNESS_DARK = (5, 15)
BG_LIGHTNESS_LIGHT = (90, 98)
SURFACE_LIGHTNESS_OFFSET = 5

# Text: complementary to background, barely tinted
TEXT_HUE_OFFSET = 180
TEXT_SATURATION = 10
TEXT_START_LIGHTNESS = {True: 90, False: 10}

BRAND_SATURATION_RANGE = (50, 90)
BRAND_START_LIGHTNESS = {True: 60, False: 40}

# Accent: triadic to brand
ACCENT_HUE_OFFSET = 120
ACCENT_SATURATION_RANGE = (50, 80)
ACCENT_START_LIGHTNESS = {True: 70, False: 40}

# Brand lighter than this gets black text
_ON_BRAND_LUMINANCE = 0.5


def resolve_theme(theme: ThemeMode, rng: RandomSource) -> bool:
    """True for dark. RANDOM consumes one draw; LIGHT/DARK consume none."""
    if theme is ThemeMode.DARK:
        return True
    if theme is ThemeMode.LIGHT:
        return False
    return coin_flip(rng)


def on_brand_color(brand: Color) -> Color:
    """White on dark brand colors, black on light ones. Not a contrast guarantee."""
    return WHITE if relative_luminance(brand) < _ON_BRAND_LUMINANCE else BLACK


class PaletteGenerator:
    """
    Generates palettes from an injected random source. Holds no state besides the source,
    so one generator per thread. config.seed is only read by from_config().
    """

    def __init__(self, rng: RandomSource | None = None):
        self.rng = rng if rng is not None else source_for_seed(None)

    @classmethod
    def from_config(cls, config: GenerationConfig) -> "PaletteGenerator":
        """Seeded generator when config.seed is set, secure source otherwise."""
        return cls(source_for_seed(config.seed))

    def _hue(self) -> int:
        return floored_uniform(self.rng, 0, 360)

    def generate(self, config: GenerationConfig | None = None) -> Palette:
        config = config or GenerationConfig()
        standard = ComplianceStandard(config.standard)
        is_dark = resolve_theme(ThemeMode(config.theme), self.rng)

        bg_hue = self._hue()
        bg_sat = floored_uniform(self.rng, *BG_SATURATION_RANGE)
        bg_lum = floored_uniform(self.rng, *(BG_LIGHTNESS_DARK if is_dark else BG_LIGHTNESS_LIGHT))
        background = hsl_to_color(bg_hue, bg_sat, bg_lum)

        surf_lum = bg_lum + SURFACE_LIGHTNESS_OFFSET if is_dark else bg_lum - SURFACE_LIGHTNESS_OFFSET
        surface = hsl_to_color(bg_hue, bg_sat, surf_lum)

        text = solve_lightness(
            background,
            (bg_hue + TEXT_HUE_OFFSET) % 360,
            TEXT_SATURATION,
            TEXT_START_LIGHTNESS[is_dark],
            standard.threshold,
        )

        brand_hue = self._hue()
        brand_sat = floored_uniform(self.rng, *BRAND_SATURATION_RANGE)
        brand = solve_lightness(
            background,
            brand_hue,
            brand_sat,
            BRAND_START_LIGHTNESS[is_dark],
            RATIO_UI_COMPONENT,
        )

        accent_sat = floored_uniform(self.rng, *ACCENT_SATURATION_RANGE)
        accent = solve_lightness(
            background,
            (brand_hue + ACCENT_HUE_OFFSET) % 360,
            accent_sat,
            ACCENT_START_LIGHTNESS[is_dark],
            RATIO_UI_COMPONENT,
        )

        solved: dict[str, SolvedColor] = {"text": text, "brand": brand, "accent": accent}
        palette = Palette(
            background=background,
            surface=surface,
            text=text.color,
            brand=brand.color,
            accent=accent.color,
            on_brand=on_brand_color(brand.color),
            standard=standard,
            theme=ThemeMode.DARK if is_dark else ThemeMode.LIGHT,
            solved=solved,
        )
        for role, s in palette.shortfalls().items():
            log_structured(
                "warning",
                event="palette_shortfall",
                role=role,
                color=s.hex,
                background=palette.to_dict()["background"],
                ratio=round(s.ratio, 2),
                target=s.target,
                lightness=s.lightness,
            )
        logger.debug("Generated palette %s", palette.to_dict())
        return palette


def generate_palette(
    standard: ComplianceStandard = ComplianceStandard.AA,
    theme: ThemeMode = ThemeMode.RANDOM,
    rng: RandomSource | None = None,
) -> Palette:
    """One palette for (standard, theme). Pass rng for reproducible output."""
    return PaletteGenerator(rng).generate(GenerationConfig(standard=standard, theme=theme))
