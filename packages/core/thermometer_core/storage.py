"""Donation configuration stores: durable JSON file and in-memory fallback."""

from __future__ import annotations

import json
import threading
from pathlib import Path

from thermometer_renderer.models import DonationConfig

from .config import AppSettings, donations_path
from .logging_setup import get_logger


class StorageError(Exception):
    pass


class ConfigStore:
    """Load/save contract shared by every backend."""

    def load_config(self) -> DonationConfig:
        raise NotImplementedError

    def save_config(self, config: DonationConfig) -> None:
        raise NotImplementedError


class InMemoryStore(ConfigStore):
    def __init__(self, initial: DonationConfig | None = None) -> None:
        get_logger().info("using in-memory storage (data will not persist)", extra={"event": "storage_memory"})
        self._lock = threading.Lock()
        self._config = initial or DonationConfig.default()

    def load_config(self) -> DonationConfig:
        with self._lock:
            return self._config

    def save_config(self, config: DonationConfig) -> None:
        with self._lock:
            self._config = config


class JsonFileStore(ConfigStore):
    def __init__(self, path: Path) -> None:
        self.path = path
        self._lock = threading.Lock()

    def load_config(self) -> DonationConfig:
        with self._lock:
            if not self.path.exists():
                get_logger().debug("no config at %s, saving default", self.path)
                config = DonationConfig.default()
                self._write(config)
                return config
            try:
                raw = json.loads(self.path.read_text(encoding="utf-8"))
                return DonationConfig.from_dict(raw)
            except OSError as exc:
                raise StorageError(f"Failed to read {self.path}: {exc}") from exc
            except (ValueError, TypeError, AttributeError) as exc:
                raise StorageError(f"Failed to decode {self.path}: {exc}") from exc

    def save_config(self, config: DonationConfig) -> None:
        with self._lock:
            self._write(config)

    def _write(self, config: DonationConfig) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self.path.with_suffix(self.path.suffix + ".tmp")
            tmp.write_text(json.dumps(config.to_dict(), indent=2, sort_keys=True), encoding="utf-8")
            tmp.replace(self.path)
        except OSError as exc:
            raise StorageError(f"Failed to write {self.path}: {exc}") from exc
        get_logger().debug("config saved to %s", self.path)


def create_store(settings: AppSettings) -> ConfigStore:
    """Pick the configured backend, falling back to memory if the file backend is unusable."""
    logger = get_logger()
    if settings.storage.backend != "file":
        logger.info("storage backend %r selected", settings.storage.backend)
        return InMemoryStore()

    path = donations_path(settings)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.warning(
            "cannot use %s (%s), falling back to in-memory storage",
            path,
            exc,
            extra={"event": "storage_fallback"},
        )
        return InMemoryStore()

    logger.info("using file storage at %s", path, extra={"event": "storage_file"})
    return JsonFileStore(path)
