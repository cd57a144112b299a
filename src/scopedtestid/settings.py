from __future__ import annotations

import json
import logging
import os
from pathlib import Path
import tempfile
from typing import Any, Mapping

CONFIG_DIR = Path.home() / ".scopedtestid"
CONFIG_PATH = CONFIG_DIR / "config.json"

SERIALIZABLE_FIELDS = ("enabled", "attribute_name", "separator", "space_replacement", "case_transform")

logger = logging.getLogger("scopedtestid.settings")


def load_configuration_override(config_path: Path | None = None) -> dict[str, Any] | None:
    path = config_path or CONFIG_PATH
    if not path.exists() or not path.is_file():
        return None

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError, TypeError) as exc:
        logger.warning("Ignoring unreadable settings file %s: %s", path, exc)
        return None

    if not isinstance(payload, dict):
        logger.warning("Ignoring settings file %s: expected a JSON object.", path)
        return None

    override: dict[str, Any] = {}
    if "enabled" in payload:
        override["enabled"] = bool(payload["enabled"])
    for key in ("attribute_name", "separator"):
        if key in payload and payload[key] is not None:
            override[key] = str(payload[key])
    for key in ("space_replacement", "case_transform"):
        if key in payload:
            value = payload[key]
            override[key] = None if value is None else str(value)

    ignored = sorted(set(payload) - set(SERIALIZABLE_FIELDS))
    if ignored:
        logger.info("Settings file %s has unsupported keys: %s", path, ", ".join(ignored))
    return override


def save_configuration_override(
    override: Mapping[str, Any],
    config_path: Path | None = None,
) -> tuple[bool, str | None]:
    path = config_path or CONFIG_PATH
    data = {key: override[key] for key in SERIALIZABLE_FIELDS if key in override}

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        _write_atomically(path, json.dumps(data, ensure_ascii=True, indent=2, sort_keys=True))
    except OSError as exc:
        logger.warning("Could not write settings file %s: %s", path, exc)
        return False, f"Could not write settings: {exc}"

    logger.debug("Saved %d settings field(s) to %s", len(data), path)
    return True, None


def _write_atomically(path: Path, payload: str) -> None:
    # Readers see either the previous file or the complete new one.
    fd, temp_name = tempfile.mkstemp(dir=str(path.parent), prefix=f".{path.name}.", suffix=".tmp")
    temp_path = Path(temp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(payload)
        temp_path.replace(path)
    except OSError:
        temp_path.unlink(missing_ok=True)
        raise
