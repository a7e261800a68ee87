from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from gtinfix.codes import SUPPORTED_LENGTHS

logger = logging.getLogger(__name__)

DEFAULT_CFG: dict[str, Any] = {
    "default_length": 13,
    "auto_fix": True,
}


def _checked(cfg: dict[str, Any], defaults: dict[str, Any]) -> dict[str, Any]:
    """Reset values the app cannot use back to their defaults."""
    if "default_length" in cfg and cfg["default_length"] not in SUPPORTED_LENGTHS:
        logger.warning("Unsupported default_length %r in settings; using %r",
                       cfg["default_length"], defaults["default_length"])
        cfg["default_length"] = defaults["default_length"]
    if "auto_fix" in cfg and not isinstance(cfg["auto_fix"], bool):
        logger.warning("auto_fix must be true/false, got %r", cfg["auto_fix"])
        cfg["auto_fix"] = defaults["auto_fix"]
    return cfg


def load_cfg(path: Path, defaults: dict[str, Any]) -> dict[str, Any]:
    """Settings from a JSON file laid over `defaults`; unknown keys are dropped."""
    if not path.exists():
        return defaults.copy()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        known = {k: v for k, v in data.items() if k in defaults}
    except (OSError, ValueError, AttributeError) as e:
        logger.warning("Ignoring unreadable settings file %s: %s", path, e)
        return defaults.copy()
    return _checked({**defaults, **known}, defaults)


def save_cfg(path: Path, cfg: dict[str, Any]) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(cfg, indent=2, sort_keys=True), encoding="utf-8")
    except OSError as e:
        # best-effort; don't crash the UI on FS errors
        logger.warning("Could not save settings to %s: %s", path, e)
