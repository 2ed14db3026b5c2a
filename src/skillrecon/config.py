from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

try:  # Python <3.11 fallback
    import tomllib  # type: ignore
except ModuleNotFoundError:  # pragma: no cover - fallback path
    import tomli as tomllib  # type: ignore

import yaml

from skillrecon.frameworks import GENERAL, FrameworkScale, build_scales, validate_scales
from skillrecon.charts import RADAR_LIMIT


DEFAULT_TOP_N = 10
DEFAULT_FRAMEWORK = GENERAL


def _pyproject_settings(project_root: Path) -> Dict[str, Any]:
    pyproject_path = project_root / "pyproject.toml"
    if not pyproject_path.exists():
        return {}

    with pyproject_path.open("rb") as f:
        data = tomllib.load(f)
    return _as_table(data.get("tool", {}).get("skillrecon"), "[tool.skillrecon]")


def _as_table(obj: Any, ctx: str) -> Dict[str, Any]:
    if obj is None:
        return {}
    if not isinstance(obj, dict):
        raise ValueError(f"{ctx} must be a mapping/object")
    return obj


def _parse_toml(path: Path) -> Any:
    with path.open("rb") as f:
        return tomllib.load(f)


_OVERRIDE_PARSERS = {
    ".json": lambda p: json.loads(p.read_text(encoding="utf-8")),
    ".yaml": lambda p: yaml.safe_load(p.read_text(encoding="utf-8")),
    ".yml": lambda p: yaml.safe_load(p.read_text(encoding="utf-8")),
    ".toml": _parse_toml,
}


def _override_settings(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Config override not found: {path}")

    parser = _OVERRIDE_PARSERS.get(path.suffix.lower())
    if parser is None:
        raise ValueError(f"Unsupported config override format: {path}")
    return _as_table(parser(path), f"config override {path.name}")


def _framework_levels(raw: Any, ctx: str) -> Dict[str, int]:
    """``frameworks`` table -> {name: max_level}; names stripped, levels must be ints."""
    levels: Dict[str, int] = {}
    for name, level in _as_table(raw, f"{ctx} frameworks").items():
        if isinstance(level, bool) or not isinstance(level, int):
            raise ValueError(f"{ctx} frameworks.{name}: max level must be an int, got {type(level).__name__}")
        levels[str(name).strip()] = level
    return levels


def _split_settings(settings: Mapping[str, Any], ctx: str) -> Tuple[Dict[str, Any], Dict[str, int]]:
    top = {k: v for k, v in settings.items() if k != "frameworks"}
    return top, _framework_levels(settings.get("frameworks"), ctx)


@dataclass(frozen=True)
class EngineConfig:
    # framework -> max level; merged over the built-in scales
    frameworks: Mapping[str, Any] = field(default_factory=dict)
    default_framework: str = DEFAULT_FRAMEWORK
    top_n: int = DEFAULT_TOP_N
    radar_limit: int = RADAR_LIMIT
    include_general: bool = True

    @property
    def scales(self) -> Dict[str, FrameworkScale]:
        return build_scales(self.frameworks)

    def validate(self, *, strict: bool = True) -> Dict[str, str]:
        issues: Dict[str, str] = {}

        for idx, msg in enumerate(validate_scales(self.frameworks, strict=False)):
            issues[f"frameworks_{idx}"] = msg

        if not isinstance(self.default_framework, str) or not self.default_framework.strip():
            issues["default_framework"] = "default_framework must be a non-empty string"
        elif self.default_framework not in self.scales:
            issues["default_framework"] = f"no level scale for default framework '{self.default_framework}'"

        for label, value in (("top_n", self.top_n), ("radar_limit", self.radar_limit)):
            if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                issues[label] = f"{label} must be a positive int"

        if not isinstance(self.include_general, bool):
            issues["include_general"] = "include_general must be a bool"

        if strict and issues:
            details = "\n- ".join(f"{k}: {v}" for k, v in issues.items())
            raise ValueError("Config validation failed:\n- " + details)
        return issues

    @classmethod
    def _from_maps(cls, *, top: Mapping[str, Any], frameworks: Mapping[str, Any]) -> "EngineConfig":
        include_general = top.get("include_general")
        return cls(
            frameworks=dict(frameworks),
            default_framework=str(top.get("default_framework", DEFAULT_FRAMEWORK)),
            top_n=top.get("top_n", DEFAULT_TOP_N),
            radar_limit=top.get("radar_limit", RADAR_LIMIT),
            include_general=True if include_general is None else include_general,
        )


def load_engine_config(*, project_root: Optional[Path] = None, override_path: Optional[Path] = None) -> EngineConfig:
    root = Path(project_root) if project_root else Path.cwd()

    base_top, base_levels = _split_settings(_pyproject_settings(root), "[tool.skillrecon]")
    over_top, over_levels = _split_settings(
        _override_settings(Path(override_path)) if override_path else {}, "config override"
    )

    # top-level keys replace; framework levels merge name by name
    top = {**base_top, **over_top}
    frameworks = {**base_levels, **over_levels}

    return EngineConfig._from_maps(top=top, frameworks=frameworks)
