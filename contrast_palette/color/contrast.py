"""
WCAG 2.x contrast: pairwise ratio, compliance thresholds, and the role × role matrix
that adapters render as a pass/fail table.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Iterator

import numpy as np

from .space import BLACK, WHITE, Color, parse_hex, relative_luminance

if TYPE_CHECKING:
    from ..generation.schema import Palette

RATIO_AA = 4.5
RATIO_AAA = 7.0
RATIO_UI_COMPONENT = 3.0  # UI components / graphics

# Swatch labels switch to black once white drops to this ratio or below
_SWATCH_LABEL_MIN_RATIO = 2.0


class ComplianceStandard(str, Enum):
    AA = "AA"
    AAA = "AAA"

    @property
    def threshold(self) -> float:
        return RATIO_AA if self is ComplianceStandard.AA else RATIO_AAA


def display_ratio(ratio: float) -> float:
    """Ratio rounded to 2 decimals, the precision shown to users and judged against thresholds."""
    return round(ratio, 2)


def _as_color(value: Color | str | None) -> Color | None:
    if isinstance(value, Color):
        return value
    return parse_hex(value)


def _ratio_from_luminance(la: float, lb: float) -> float:
    brightest = max(la, lb)
    darkest = min(la, lb)
    return (brightest + 0.05) / (darkest + 0.05)


def contrast_ratio(a: Color | str | None, b: Color | str | None) -> float:
    """
    WCAG contrast ratio in [1, 21]. Accepts Color or hex text.
    Returns 0.0 if either side cannot be parsed (incomparable, not an error).
    """
    ca = _as_color(a)
    cb = _as_color(b)
    if ca is None or cb is None:
        return 0.0
    return _ratio_from_luminance(relative_luminance(ca), relative_luminance(cb))


def swatch_text_color(color: Color | str) -> Color:
    """Label color drawn over a swatch: white unless white is too faint against it."""
    return WHITE if contrast_ratio(color, WHITE) > _SWATCH_LABEL_MIN_RATIO else BLACK


@dataclass(frozen=True)
class MatrixCell:
    row: str
    col: str
    ratio: float
    passes: bool


class ContrastMatrix:
    """
    Read-only table of contrast ratios between palette roles.
    Diagonal is undefined (NaN in `ratios`, None from the accessors).
    """

    def __init__(
        self,
        roles: tuple[str, ...],
        ratios: np.ndarray,
        standard: ComplianceStandard,
    ):
        if ratios.shape != (len(roles), len(roles)):
            raise ValueError(f"ratios shape {ratios.shape} does not match {len(roles)} roles")
        arr = np.array(ratios, dtype=np.float64, copy=True)
        arr.setflags(write=False)
        self._roles = tuple(roles)
        self._index = {role: i for i, role in enumerate(self._roles)}
        self._ratios = arr
        self._standard = standard

    @property
    def roles(self) -> tuple[str, ...]:
        return self._roles

    @property
    def ratios(self) -> np.ndarray:
        return self._ratios

    @property
    def standard(self) -> ComplianceStandard:
        return self._standard

    @property
    def threshold(self) -> float:
        return self._standard.threshold

    def _meets(self, ratio: float) -> bool:
        # Judged on the ratio as displayed, so "4.50" never shows as failing
        return display_ratio(ratio) >= self.threshold

    def ratio(self, row: str, col: str) -> float | None:
        i, j = self._index[row], self._index[col]
        if i == j:
            return None
        return float(self._ratios[i, j])

    def passes(self, row: str, col: str) -> bool | None:
        r = self.ratio(row, col)
        if r is None:
            return None
        return self._meets(r)

    def cells(self) -> Iterator[MatrixCell]:
        """Off-diagonal cells in row-major order."""
        for row in self._roles:
            for col in self._roles:
                if row == col:
                    continue
                r = self.ratio(row, col)
                yield MatrixCell(row, col, r, self._meets(r))

    def failing_pairs(self) -> list[tuple[str, str]]:
        """Unordered role pairs below the active threshold."""
        out = []
        n = len(self._roles)
        for i in range(n):
            for j in range(i + 1, n):
                if not self._meets(float(self._ratios[i, j])):
                    out.append((self._roles[i], self._roles[j]))
        return out

    def to_dict(self) -> dict[str, Any]:
        """JSON-safe form. Ratios rounded to 2 decimals, diagonal as None."""
        rows: dict[str, dict[str, Any]] = {}
        for row in self._roles:
            rows[row] = {}
            for col in self._roles:
                r = self.ratio(row, col)
                rows[row][col] = None if r is None else {
                    "ratio": display_ratio(r),
                    "pass": self._meets(r),
                }
        return {
            "standard": self._standard.value,
            "threshold": self.threshold,
            "roles": list(self._roles),
            "cells": rows,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ContrastMatrix):
            return NotImplemented
        return (
            self._roles == other._roles
            and self._standard == other._standard
            and np.array_equal(self._ratios, other._ratios, equal_nan=True)
        )

    def __repr__(self) -> str:
        return f"ContrastMatrix(standard={self._standard.value}, roles={self._roles})"


def contrast_matrix(palette: Palette, standard: ComplianceStandard) -> ContrastMatrix:
    """
    Ratios between every pair of the palette's five roles. Recomputed on every call.
    """
    roles = palette.role_names()
    lum = np.array([relative_luminance(palette.color_for(role)) for role in roles], dtype=np.float64)
    hi = np.maximum.outer(lum, lum)
    lo = np.minimum.outer(lum, lum)
    ratios = (hi + 0.05) / (lo + 0.05)
    np.fill_diagonal(ratios, np.nan)
    return ContrastMatrix(roles, ratios, ComplianceStandard(standard))
