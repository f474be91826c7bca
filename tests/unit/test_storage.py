import json
import sys
import tempfile
import unittest
from dataclasses import replace
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))
sys.path.insert(0, str(ROOT / "packages" / "core"))

from thermometer_core.config import AppSettings
from thermometer_core.storage import InMemoryStore, JsonFileStore, StorageError, create_store
from thermometer_renderer.models import DonationConfig, Team


class JsonFileStoreTests(unittest.TestCase):
    def test_missing_document_saves_default(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "nested" / "donations.json"
            config = JsonFileStore(path).load_config()
            self.assertEqual(config.goal, 10000.0)
            self.assertEqual(config.teams, ())
            self.assertTrue(path.exists())
            self.assertEqual(json.loads(path.read_text(encoding="utf-8"))["title"], "Animal Shelter Donation Drive")

    def test_save_and_reload(self):
        with tempfile.TemporaryDirectory() as tmp:
            store = JsonFileStore(Path(tmp) / "donations.json")
            config = replace(
                DonationConfig.default(),
                goal=25000.0,
                teams=(Team("Test Team", None, 5000.0), Team("Pics", "https://example.com/p.png", 12.5)),
            )
            store.save_config(config)
            reloaded = JsonFileStore(store.path).load_config()
            self.assertEqual(reloaded, config)

    def test_corrupt_document(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "donations.json"
            path.write_text("[1, 2", encoding="utf-8")
            with self.assertRaises(StorageError):
                JsonFileStore(path).load_config()

    def test_partial_document_is_defaulted(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "donations.json"
            path.write_text(json.dumps({"goal": 500, "teams": [{"name": "A", "total_raised": 20}]}), encoding="utf-8")
            config = JsonFileStore(path).load_config()
            self.assertEqual(config.goal, 500.0)
            self.assertEqual(config.teams, (Team("A", None, 20.0),))
            self.assertEqual(config.organization_name, "Community Animal Rescue Effort")


class InMemoryStoreTests(unittest.TestCase):
    def test_round_trip(self):
        store = InMemoryStore()
        self.assertEqual(store.load_config().goal, 10000.0)
        updated = replace(store.load_config(), goal=1.0)
        store.save_config(updated)
        self.assertEqual(store.load_config(), updated)


class CreateStoreTests(unittest.TestCase):
    def test_file_backend(self):
        with tempfile.TemporaryDirectory() as tmp:
            settings = AppSettings()
            settings.storage.path = str(Path(tmp) / "donations.json")
            self.assertIsInstance(create_store(settings), JsonFileStore)

    def test_memory_backend(self):
        settings = AppSettings()
        settings.storage.backend = "memory"
        self.assertIsInstance(create_store(settings), InMemoryStore)

    def test_falls_back_to_memory_when_directory_unusable(self):
        with tempfile.TemporaryDirectory() as tmp:
            blocker = Path(tmp) / "not-a-dir"
            blocker.write_text("x", encoding="utf-8")
            settings = AppSettings()
            settings.storage.path = str(blocker / "donations.json")
            with self.assertLogs("thermometer", level="WARNING"):
                store = create_store(settings)
            self.assertIsInstance(store, InMemoryStore)


if __name__ == "__main__":
    unittest.main()
