import json
from pathlib import Path
from typing import Any

from license_checker.constants import CONFIG_SCHEMA_FILENAME

_SCHEMA_CACHE: dict[str, dict[str, Any]] = {}

SCHEMAS_DIR = Path(__file__).resolve().parent / "schemas"


def format_schema_error(error: Any) -> str:
    path = ".".join([str(part) for part in error.path])
    return f"{error.message} at {path}" if path else str(error.message)


class ConfigSchemaRepository:
    def __init__(self, local_schema_path: Path | None = None) -> None:
        self.local_schema_path = local_schema_path or (SCHEMAS_DIR / CONFIG_SCHEMA_FILENAME)

    def load_schema(self) -> dict[str, Any]:
        key = str(self.local_schema_path.resolve())
        cached = _SCHEMA_CACHE.get(key)
        if cached is not None:
            return cached
        schema = json.loads(self.local_schema_path.read_text(encoding="utf-8"))
        _SCHEMA_CACHE[key] = schema
        return schema
