from typing import Final


CONFIG_FILENAME: Final[str] = "license-checker.cfg"
GIT_DIRNAME: Final[str] = ".git"

CONFIG_SCHEMA_FILENAME: Final[str] = "license-checker.schema.json"

PATH_SEPARATOR: Final[str] = "/"

CONFIG_KEY_PATHS: Final[str] = "paths"
CONFIG_KEY_LICENSES: Final[str] = "licenses"
RULE_KEY_INCLUDE: Final[str] = "include"
RULE_KEY_EXCLUDE: Final[str] = "exclude"
