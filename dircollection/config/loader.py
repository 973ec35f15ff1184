from __future__ import annotations

import json

from result import Err, Ok, Result

from dircollection.config.defaults import default_config
from dircollection.config.schema import AppConfig, from_dict
from dircollection.services.fs import DEFAULT_FS, FileSystem

CONFIG_PATH = "~/.config/dircollection/config.json"


def load_config(path: str | None = None, fs: FileSystem = DEFAULT_FS) -> Result[AppConfig, str]:
    """Load the JSON config file.

    Without *path* the per-user file is used and its absence means defaults.
    A *path* the caller names explicitly must exist.
    """
    if path is None:
        resolved = fs.expanduser(CONFIG_PATH)
        if not fs.exists(resolved):
            return Ok(default_config())
    else:
        resolved = fs.expanduser(path)
        if not fs.exists(resolved):
            return Err(f"Config file {resolved} does not exist.")

    try:
        payload = json.loads(fs.read_text(resolved))
    except OSError as exc:
        return Err(f"Cannot read config file {resolved}: {exc}.")
    except ValueError as exc:
        return Err(f"Config file {resolved} is not valid JSON: {exc}.")
    if not isinstance(payload, dict):
        return Err(f"Config file {resolved} must contain a JSON object, got {type(payload).__name__}.")

    try:
        return Ok(from_dict(payload, default_config()))
    except (TypeError, ValueError) as exc:
        return Err(f"Config file {resolved} has a bad value: {exc}.")


def sample_config_json() -> str:
    return json.dumps(default_config().to_dict(), indent=2)
