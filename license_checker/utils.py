from pathlib import Path, PurePath
from typing import Any

from license_checker.constants import PATH_SEPARATOR


def lower_keys(payload: Any, depth: int = 1) -> Any:
    """Lowercase object keys down to ``depth`` levels of nested objects/arrays."""
    if isinstance(payload, dict):
        return {
            (key.lower() if isinstance(key, str) else key): (
                lower_keys(value, depth - 1) if depth > 0 else value
            )
            for key, value in payload.items()
        }
    if isinstance(payload, list) and depth > 0:
        return [lower_keys(item, depth) for item in payload]
    return payload


def to_posix(path: str | PurePath) -> str:
    text = PurePath(path).as_posix()
    return "" if text == "." else text


def join_relative(parent: str, name: str) -> str:
    return f"{parent}{PATH_SEPARATOR}{name}" if parent else name


def compact_home_path(path: str | Path) -> str:
    text = str(path)
    home = str(Path.home())
    if text == home:
        return "~"
    home_prefix = f"{home}/"
    if text.startswith(home_prefix):
        return f"~/{text[len(home_prefix):]}"
    return text
