"""Persisted fallbacks for the ``--ext``, ``--size`` and ``--log`` flags.

``walktriage --save-defaults`` writes the resolved values of those flags to
``config.json`` in the per-user config dir; later runs use them for any flag
left unset on the command line. Keys are ``extension``, ``min_size`` and
``log_path``. A missing or malformed file means "no defaults", and a
failed write never stops a walk.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "walktriage"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH


def load_config() -> dict[str, object]:
    """Return the saved defaults object, or ``{}`` when there is none usable."""
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Write ``data`` as indented JSON, creating the config dir if needed."""
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def load_default_extension() -> str:
    value = load_config().get("extension")
    return value.strip() if isinstance(value, str) else ""


def load_default_min_size() -> int:
    """Return persisted minimum size; booleans, negatives and non-ints load as ``0``."""
    value = load_config().get("min_size")
    if isinstance(value, bool) or not isinstance(value, int):
        return 0
    return max(0, value)


def load_default_log_path() -> Path | None:
    value = load_config().get("log_path")
    if not isinstance(value, str) or not value.strip():
        return None
    return Path(value.strip())


def save_defaults(extension: str, min_size: int, log_path: Path | None) -> None:
    """Persist flag defaults, dropping ``log_path`` when it is unset."""
    config = load_config()
    config["extension"] = str(extension)
    config["min_size"] = max(0, int(min_size))
    if log_path is None:
        config.pop("log_path", None)
    else:
        config["log_path"] = str(log_path)
    save_config(config)
