import json
import logging
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator

from license_checker.constants import CONFIG_KEY_LICENSES, CONFIG_KEY_PATHS
from license_checker.errors import (
    ConfigLoadError,
    InvalidConfigSchemaError,
    InvalidJsonFormatError,
    MissingConfigFileError,
)
from license_checker.models import ConfigRecord, WalkOptions
from license_checker.rules.parser import parse_rules
from license_checker.schema import ConfigSchemaRepository, format_schema_error
from license_checker.utils import lower_keys

logger = logging.getLogger(__name__)


class ConfigRepository:
    """Loads the project's ``license-checker.cfg``.

    The file holds either one configuration object or an array of them.
    """

    def __init__(
        self,
        root: Path,
        options: WalkOptions | None = None,
        schema_repository: ConfigSchemaRepository | None = None,
    ) -> None:
        self._root = root
        self._options = options or WalkOptions()
        self._schema_repository = schema_repository or ConfigSchemaRepository()

    @property
    def root(self) -> Path:
        return self._root

    @property
    def config_path(self) -> Path:
        return self.root / self._options.config_filename

    def load_text(self) -> str:
        if not self.config_path.is_file():
            raise MissingConfigFileError(self.config_path)
        try:
            return self.config_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigLoadError(self.config_path, str(exc)) from exc

    def load_payloads(self) -> tuple[list[Any], bool]:
        """Return the raw configuration objects and whether the file is multi-config."""
        text = self.load_text()
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as exc:
            raise InvalidJsonFormatError(self.config_path, str(exc)) from exc

        if text.lstrip().startswith("{"):
            return [payload], False
        if not isinstance(payload, list):
            raise InvalidConfigSchemaError(
                self.config_path, "must be a JSON object or an array of objects"
            )
        if not payload:
            raise InvalidConfigSchemaError(self.config_path, "no configurations declared")
        return payload, True

    def load_records(self) -> list[ConfigRecord]:
        payloads, multi = self.load_payloads()
        validator = Draft202012Validator(self._schema_repository.load_schema())

        records: list[ConfigRecord] = []
        for index, raw in enumerate(payloads):
            location = f"config[{index}]" if multi else "config"
            payload = lower_keys(raw, depth=2)
            error = next(iter(validator.iter_errors(payload)), None)
            if error is not None:
                raise InvalidConfigSchemaError(
                    self.config_path, f"{location}: {format_schema_error(error)}"
                )
            records.append(self._decode_record(payload, location))

        logger.debug("Loaded %d config record(s) from %s", len(records), self.config_path)
        return records

    def _decode_record(self, payload: dict[str, Any], location: str) -> ConfigRecord:
        rules = parse_rules(
            payload.get(CONFIG_KEY_PATHS, []), location=f"{location}.paths"
        )
        licenses = frozenset(payload.get(CONFIG_KEY_LICENSES, []))
        return ConfigRecord(rules=rules, licenses=licenses)
