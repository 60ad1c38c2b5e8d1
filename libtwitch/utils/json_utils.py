"""JSON file utilities."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any, TypeVar, cast


if TYPE_CHECKING:
    from libtwitch.config import JsonType


_JSON_T = TypeVar("_JSON_T", bound=Mapping[Any, Any])


def json_load(path: Path, defaults: _JSON_T) -> _JSON_T:
    """
    Load a JSON object from a file, filling in missing keys from defaults.

    Args:
        path: Path to JSON file
        defaults: Default values used for keys the file doesn't define

    Returns:
        The loaded JSON object, or a copy of defaults if the file doesn't exist

    Raises:
        ValueError: If the file doesn't hold a JSON object
    """
    combined: JsonType = dict(defaults)
    if path.exists():
        with open(path, encoding="utf8") as file:
            loaded = json.load(file)
        if not isinstance(loaded, dict):
            raise ValueError(f"{path} doesn't contain a JSON object")
        combined.update(loaded)
    return cast(_JSON_T, combined)


def json_save(path: Path, contents: Mapping[Any, Any], *, sort: bool = False) -> None:
    """
    Save data to a JSON file.

    Args:
        path: Path to save JSON file
        contents: Data to serialize
        sort: If True, sort keys alphabetically
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding="utf8") as file:
        json.dump(contents, file, sort_keys=sort, indent=4)
