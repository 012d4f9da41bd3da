from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from wordhunt.core.intro import IntroGeometry, IntroTimings
from wordhunt.core.languages import Language

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "data" / "config.yaml"

ENV_HOME = "WORDHUNT_HOME"
ENV_DEV = "WORDHUNT_DEV"
ENV_STARTUP_QUERY = "WORDHUNT_STARTUP_QUERY"


@dataclass(frozen=True)
class AppConfig:
    intro_timings: IntroTimings
    intro_geometry: IntroGeometry
    storage_dir: Path
    default_language: Language
    dev_build: bool = False
    startup_query: str = ""


def _section(raw: Mapping[str, Any], key: str, source: str) -> Mapping[str, Any]:
    value = raw.get(key, {})
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"{source}: '{key}' must be a mapping")
    return value


def _build(cls, raw: Mapping[str, Any], prefix: str, cast):
    known = {f.name for f in fields(cls)}
    unknown = set(raw) - known
    if unknown:
        raise ValueError(f"{prefix}: unknown keys {sorted(unknown)}")
    kwargs = {}
    for key, value in raw.items():
        try:
            kwargs[key] = cast(value)
        except (TypeError, ValueError):
            raise ValueError(f"{prefix}.{key}: expected a number, got {value!r}") from None
    return cls(**kwargs)


def load_config(path: Optional[Path] = None, environ: Optional[Mapping[str, str]] = None) -> AppConfig:
    """Read the YAML config, then apply ``WORDHUNT_*`` environment overrides."""
    config_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    env = os.environ if environ is None else environ
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    raw = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"{config_path.name}: expected a mapping at the top level")

    intro = _section(raw, "intro", config_path.name)
    timings = _build(IntroTimings, _section(intro, "timings", "intro"), "intro.timings", int)
    geometry = _build(IntroGeometry, _section(intro, "geometry", "intro"), "intro.geometry", float)

    storage = _section(raw, "storage", config_path.name)
    storage_dir = env.get(ENV_HOME) or storage.get("directory") or "~/.wordhunt"

    language_value = raw.get("default_language", Language.EN.value)
    language = Language.parse(language_value)
    if language is None:
        raise ValueError(f"{config_path.name}: unsupported default_language {language_value!r}")

    return AppConfig(
        intro_timings=timings,
        intro_geometry=geometry,
        storage_dir=Path(str(storage_dir)).expanduser(),
        default_language=language,
        dev_build=env.get(ENV_DEV) == "1",
        startup_query=env.get(ENV_STARTUP_QUERY, ""),
    )
