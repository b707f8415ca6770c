# data/repository.py
import json
from pathlib import Path

DEFAULT_SETTINGS = {
    "locale": "en_GB",
    "log_level": "INFO",
}


class DataRepository:
    def __init__(self, storage_dir="data/storage"):
        # base folder where the settings file lives
        self.storage_dir = Path(storage_dir)
        self.storage_dir.mkdir(parents=True, exist_ok=True)

    def _file_path(self, filename: str) -> Path:
        return self.storage_dir / filename

    def _read_json(self, filename: str):
        # Load JSON from disk. Missing, empty or unparsable files give {}.
        path = self._file_path(filename)
        if not path.exists():
            return {}
        try:
            with open(path, "r", encoding="utf-8") as f:
                text = f.read().strip()
                if text == "":
                    return {}
                return json.loads(text)
        except (OSError, ValueError):
            # corrupted or unreadable -> fall back to defaults
            return {}

    def _write_json(self, filename: str, data) -> None:
        path = self._file_path(filename)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

    def get_settings(self) -> dict:
        # Returns the defaults overlaid with whatever settings.json holds.
        data = self._read_json("settings.json")
        if not isinstance(data, dict):
            data = {}
        return {key: data.get(key, default) for key, default in DEFAULT_SETTINGS.items()}

    def save_settings(self, settings: dict) -> None:
        self._write_json("settings.json", settings)
