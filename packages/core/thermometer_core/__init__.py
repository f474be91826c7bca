"""Core app services for settings, logging, donation storage, and CSV import."""

from .config import AppSettings, load_settings, save_settings, settings_path
from .storage import ConfigStore, InMemoryStore, JsonFileStore, StorageError, create_store
from .teams_csv import SAMPLE_CSV, TeamsCsvError, apply_teams, parse_teams_csv

__all__ = [
    "AppSettings",
    "ConfigStore",
    "InMemoryStore",
    "JsonFileStore",
    "SAMPLE_CSV",
    "StorageError",
    "TeamsCsvError",
    "apply_teams",
    "create_store",
    "load_settings",
    "parse_teams_csv",
    "save_settings",
    "settings_path",
]
