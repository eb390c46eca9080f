"""JSON-file key/value store with browser ``localStorage`` semantics."""

import json
import os
from pathlib import Path
from typing import Dict, Optional

from ..core.logging import get_logger

logger = get_logger("client.storage")


class LocalStorage:
    """String keys mapped to string values, kept in one JSON file.

    An unreadable file behaves like empty storage; it is overwritten on the
    next write.
    """

    def __init__(self, path: Path):
        self.path = Path(path).expanduser()

    def _read(self) -> Dict[str, str]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except (UnicodeDecodeError, OSError) as e:
            logger.warning(
                "Storage file is unreadable, starting empty",
                extra={"path": str(self.path), "error": str(e)},
            )
            return {}
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Storage file is not valid JSON, starting empty", extra={"path": str(self.path)})
            return {}
        if not isinstance(data, dict):
            return {}
        return {str(key): value for key, value in data.items() if isinstance(value, str)}

    def _write(self, data: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        tmp_path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        os.replace(tmp_path, self.path)

    def get_item(self, key: str) -> Optional[str]:
        return self._read().get(key)

    def set_item(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def remove_item(self, key: str) -> None:
        data = self._read()
        if data.pop(key, None) is not None:
            self._write(data)
