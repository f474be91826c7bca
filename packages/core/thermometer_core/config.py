"""Persistent app settings schema and load/save helpers."""

from __future__ import annotations

import json
import os
import platform
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from thermometer_renderer.pipeline import DEFAULT_SCALE, DEFAULT_WIDTH, MAX_SCALE, MIN_SCALE
from thermometer_renderer.themes import DEFAULT_THEME, list_themes


CONFIG_VERSION = 1
STORAGE_BACKENDS = ("file", "memory")


@dataclass
class RenderSettings:
    width: int = DEFAULT_WIDTH
    default_scale: float = DEFAULT_SCALE
    min_scale: float = MIN_SCALE
    max_scale: float = MAX_SCALE
    theme: str = DEFAULT_THEME.value


@dataclass
class StorageSettings:
    backend: str = "file"
    path: str | None = None


@dataclass
class LoggingSettings:
    keep_log_files: int = 7
    level: str = "INFO"


@dataclass
class AppSettings:
    config_version: int = CONFIG_VERSION
    render: RenderSettings = field(default_factory=RenderSettings)
    storage: StorageSettings = field(default_factory=StorageSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)


def config_dir() -> Path:
    override = os.environ.get("THERMOMETER_HOME")
    if override:
        return Path(override).expanduser()
    system = platform.system()
    if system == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "DonationThermometer"
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support" / "DonationThermometer"
    return Path.home() / ".config" / "donation-thermometer"


def settings_path() -> Path:
    return config_dir() / "settings.json"


def donations_path(settings: AppSettings) -> Path:
    if settings.storage.path:
        return Path(settings.storage.path).expanduser()
    return config_dir() / "donations.json"


def _merge(dataclass_type, raw: dict[str, Any]):
    defaults = dataclass_type()  # type: ignore[misc]
    for k, v in raw.items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _normalize_render(cfg: AppSettings) -> None:
    render = cfg.render
    render.width = max(1, int(render.width))
    render.min_scale = float(render.min_scale) if float(render.min_scale) > 0 else MIN_SCALE
    render.max_scale = float(max(render.min_scale, float(render.max_scale)))
    render.default_scale = float(max(render.min_scale, min(render.max_scale, float(render.default_scale))))
    if render.theme not in list_themes():
        render.theme = DEFAULT_THEME.value


def _normalize_storage(cfg: AppSettings) -> None:
    if cfg.storage.backend not in STORAGE_BACKENDS:
        cfg.storage.backend = "file"


def _normalize_logging(cfg: AppSettings) -> None:
    cfg.logging.keep_log_files = max(2, int(cfg.logging.keep_log_files))
    cfg.logging.level = str(cfg.logging.level).upper()


def load_settings(path: Path | None = None) -> AppSettings:
    path = path or settings_path()
    if not path.exists():
        return AppSettings()

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return AppSettings()

    cfg = AppSettings(
        config_version=int(raw.get("config_version", CONFIG_VERSION)),
        render=_merge(RenderSettings, raw.get("render", {}) or {}),
        storage=_merge(StorageSettings, raw.get("storage", {}) or {}),
        logging=_merge(LoggingSettings, raw.get("logging", {}) or {}),
    )

    _normalize_render(cfg)
    _normalize_storage(cfg)
    _normalize_logging(cfg)
    return cfg


def save_settings(cfg: AppSettings, path: Path | None = None) -> Path:
    cfg.config_version = CONFIG_VERSION
    path = path or settings_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(cfg), indent=2, sort_keys=True), encoding="utf-8")
    return path
