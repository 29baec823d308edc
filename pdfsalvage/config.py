import json
from pathlib import Path
from typing import Any

from pdfsalvage.extract import DEFAULT_MIN_LENGTH
from pdfsalvage.files import DEFAULT_MAX_SIZE

CONFIG_DIR = Path('~/.pdfsalvage/').expanduser()
CONFIG_PATH = CONFIG_DIR / 'config.json'
DEFAULT_CONFIG: dict[str, Any] = {'min_length': DEFAULT_MIN_LENGTH, 'max_size': DEFAULT_MAX_SIZE, 'inflate_streams': False}

class BaseConfig:
    _path: Path
    _default: dict[str, Any]
    _data: dict[str, Any] | None = None

    def __init__(self, path: Path, default: dict[str, Any]) -> None:
        self._path = path
        self._default = default

    @property
    def data(self) -> dict[str, Any]:
        if self._data is None:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._data = self._default | (json.loads(self._path.read_text() or '{}') if self._path.is_file() else {})
        return self._data

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def __getitem__(self, key: str) -> Any:
        return self.data[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self.data[key] = value
        with open(self._path, 'w') as f:
            json.dump(self.data, f, indent=2)

Config = BaseConfig(CONFIG_PATH, DEFAULT_CONFIG)
