#!/usr/bin/env python3
"""
CLI: Generate one accessible UI palette and print it with its contrast matrix.
Usage:
  python scripts/generate_palette.py
  python scripts/generate_palette.py --standard AAA --theme dark
  python scripts/generate_palette.py --seed 7 --json
  python scripts/generate_palette.py --require-pass --max-attempts 20
"""
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import argparse
import json
import logging

from contrast_palette.color import color_to_hex, contrast_matrix, display_ratio, swatch_text_color
from contrast_palette.config import (
    ConfigError,
    load_config,
    parse_standard,
    parse_theme,
    resolve_generation_config,
)
from contrast_palette.generation import ROLE_INFO, ROLE_SHORT_LABELS, GenerationConfig, PaletteGenerator
from contrast_palette.workflow_utils import setup_logging

logger = logging.getLogger(__name__)


def _format_palette(palette) -> list[str]:
    lines = [f"Palette ({palette.standard.value}, {palette.theme.value})"]
    for role, color in palette.roles().items():
        label, desc = ROLE_INFO[role]
        label_on = color_to_hex(swatch_text_color(color))
        lines.append(f"  {label:<11} {color_to_hex(color)}  {desc:<18} label {label_on}")
    lines.append(f"  {'On brand':<11} {color_to_hex(palette.on_brand)}")
    for role, s in palette.solved.items():
        mark = "ok" if s.met else "SHORT"
        lines.append(f"  {role} vs background: {s.ratio:.2f} (target {s.target}) {mark}")
    return lines


def _format_matrix(matrix) -> list[str]:
    labels = [ROLE_SHORT_LABELS[r] for r in matrix.roles]
    lines = [f"Contrast matrix (pass >= {matrix.threshold})", "      " + "".join(f"{l:>11}" for l in labels)]
    for row, row_label in zip(matrix.roles, labels):
        cells = []
        for col in matrix.roles:
            r = matrix.ratio(row, col)
            if r is None:
                cells.append(f"{'-':>11}")
            else:
                mark = "PASS" if matrix.passes(row, col) else "FAIL"
                cells.append(f"{display_ratio(r):>6.2f} {mark}")
        lines.append(f"{row_label:>6}" + "".join(cells))
    return lines


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Generate a role-based UI palette that meets WCAG contrast targets."
    )
    parser.add_argument(
        "--standard",
        type=str,
        default=None,
        help="AA (4.5:1) or AAA (7:1). Default: from config.",
    )
    parser.add_argument(
        "--theme",
        type=str,
        default=None,
        help="light, dark or random. Default: from config.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Optional random seed for reproducibility.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config YAML (default: config/default.yaml).",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print palette and matrix as JSON.",
    )
    parser.add_argument(
        "--require-pass",
        action="store_true",
        help="Regenerate the whole palette until text, brand and accent meet their targets.",
    )
    parser.add_argument(
        "--max-attempts",
        type=int,
        default=10,
        help="Max palettes to try with --require-pass (default: 10).",
    )
    args = parser.parse_args()

    try:
        config = load_config(args.config)
        setup_logging((config.get("logging") or {}).get("level", "INFO"))
        gen_config = resolve_generation_config(config)
        gen_config = GenerationConfig(
            standard=parse_standard(args.standard) if args.standard else gen_config.standard,
            theme=parse_theme(args.theme) if args.theme else gen_config.theme,
            seed=args.seed if args.seed is not None else gen_config.seed,
        )
    except ConfigError as e:
        print(f"Config error: {e}", file=sys.stderr)
        return 2

    generator = PaletteGenerator.from_config(gen_config)
    attempts = max(1, args.max_attempts) if args.require_pass else 1
    palette = generator.generate(gen_config)
    for attempt in range(2, attempts + 1):
        if palette.compliant:
            break
        logger.info("Attempt %s: %s missed target — regenerating", attempt - 1, ", ".join(palette.shortfalls()))
        palette = generator.generate(gen_config)

    matrix = contrast_matrix(palette, palette.standard)
    if args.json:
        print(json.dumps({"palette": palette.to_dict(), "matrix": matrix.to_dict()}, indent=2))
    else:
        print("\n".join(_format_palette(palette)))
        print()
        print("\n".join(_format_matrix(matrix)))

    if args.require_pass and not palette.compliant:
        print(f"No compliant palette after {attempts} attempts.", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
