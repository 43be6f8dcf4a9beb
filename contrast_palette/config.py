"""
Load and expose app config (YAML), parse the standard/theme values, and hold the
process-wide current settings that a UI overwrites on each toggle.
"""
import logging
import threading
from pathlib import Path
from typing import Any

import yaml

from .color import ComplianceStandard
from .generation.schema import GenerationConfig, ThemeMode

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Configuration value rejected at load/set time."""
    def __init__(self, message: str, key: str = "", value: Any = None):
        super().__init__(message)
        self.key = key
        self.value = value


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _defaults() -> dict[str, Any]:
    return {
        "palette": {
            "standard": "AA",
            "theme": "random",
            "seed": None,
        },
        "logging": {"level": "INFO"},
    }


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load config from YAML. Path is optional; defaults to config/default.yaml."""
    if config_path is None:
        config_path = _project_root() / "config" / "default.yaml"
    path = Path(config_path)
    if not path.exists():
        return _defaults()
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}", key=str(path)) from e
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must be a mapping, got {type(data).__name__}", key=str(path))
    merged = _defaults()
    for section, values in data.items():
        if isinstance(values, dict) and isinstance(merged.get(section), dict):
            merged[section] = {**merged[section], **values}
        else:
            merged[section] = values
    return merged


def parse_standard(value: Any) -> ComplianceStandard:
    """'AA' / 'AAA' (any case). Anything else is rejected."""
    if isinstance(value, ComplianceStandard):
        return value
    if isinstance(value, str):
        try:
            return ComplianceStandard(value.strip().upper())
        except ValueError:
            pass
    raise ConfigError(
        f"Unknown compliance standard {value!r} (expected AA or AAA)",
        key="standard",
        value=value,
    )


def parse_theme(value: Any) -> ThemeMode:
    """
    'light' / 'dark' / 'random' (any case). None and unrecognized values resolve to
    RANDOM: a coin flip per generation is the documented fallback, not an error.
    """
    if isinstance(value, ThemeMode):
        return value
    if isinstance(value, str):
        try:
            return ThemeMode(value.strip().lower())
        except ValueError:
            pass
    if value is not None:
        logger.info("Unrecognized theme %r — using random", value)
    return ThemeMode.RANDOM


def parse_seed(value: Any) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise ConfigError(f"Seed must be an integer, got {value!r}", key="seed", value=value)
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Seed must be an integer, got {value!r}", key="seed", value=value) from e


def resolve_generation_config(config: dict[str, Any]) -> GenerationConfig:
    """Palette section of the loaded config → GenerationConfig."""
    p = config.get("palette") or {}
    return GenerationConfig(
        standard=parse_standard(p.get("standard", "AA")),
        theme=parse_theme(p.get("theme")),
        seed=parse_seed(p.get("seed")),
    )


class PaletteSettings:
    """
    Current standard and theme, shared by whoever drives generation (e.g. UI toggles).
    Set calls overwrite; snapshot() hands out an immutable GenerationConfig.
    """

    def __init__(
        self,
        standard: ComplianceStandard = ComplianceStandard.AA,
        theme: ThemeMode = ThemeMode.RANDOM,
        seed: int | None = None,
    ):
        self._lock = threading.Lock()
        self._standard = parse_standard(standard)
        self._theme = parse_theme(theme)
        self._seed = parse_seed(seed)

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "PaletteSettings":
        gc = resolve_generation_config(config)
        return cls(gc.standard, gc.theme, gc.seed)

    def set_standard(self, value: Any) -> ComplianceStandard:
        standard = parse_standard(value)
        with self._lock:
            self._standard = standard
        return standard

    def set_theme(self, value: Any) -> ThemeMode:
        theme = parse_theme(value)
        with self._lock:
            self._theme = theme
        return theme

    def snapshot(self) -> GenerationConfig:
        with self._lock:
            return GenerationConfig(standard=self._standard, theme=self._theme, seed=self._seed)
