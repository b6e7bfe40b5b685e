"""
config_manager.py
-----------------
JSON configuration loader for game settings.

Features:
- Looks up bare filenames in the bundled config directory
- Recursively merges file values over defaults
- Ignores '_notes' keys for human-readable configs
"""

import os
import json
from src.core.debug.debug_logger import DebugLogger


# ===========================================================
# Configuration
# ===========================================================

DATA_ROOT = os.path.normpath(os.path.join(os.path.dirname(__file__), "..", "..", "config"))

SEARCH_DIRS = [
    ".",
    DATA_ROOT,
]


# ===========================================================
# Public API
# ===========================================================

def load_config(filename, default_dict=None, strict=False):
    """
    Load a JSON configuration file.

    Args:
        filename: Filename or full path
        default_dict: Default fallback config
        strict: If True, raise exception on missing or invalid file

    Returns:
        dict: Merged configuration
    """
    if default_dict is None:
        default_dict = {}

    path = resolve_path(filename)

    try:
        data = _load_json(path)
        if not isinstance(data, dict):
            raise ValueError(f"top-level value must be an object, got {type(data).__name__}")
        return _merge_dicts(default_dict, data)

    except (json.JSONDecodeError, ValueError, OSError) as e:
        if strict:
            raise FileNotFoundError(f"Config not usable: {filename}") from e
        DebugLogger.warn(f"Failed to load {path}: {e} - using defaults", category="loading")
        return _merge_dicts(default_dict, {})


def resolve_path(filename):
    """Return the first existing match for filename in SEARCH_DIRS, or filename itself."""
    if os.path.isabs(filename):
        return filename

    for directory in SEARCH_DIRS:
        candidate = os.path.join(directory, filename)
        if os.path.isfile(candidate):
            return candidate

        if not filename.endswith(".json"):
            candidate = os.path.join(directory, filename + ".json")
            if os.path.isfile(candidate):
                return candidate

    return filename


# ===========================================================
# File Loaders
# ===========================================================

def _load_json(path):
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    DebugLogger.system(f"Loaded {os.path.basename(path)}", category="loading")
    return data


# ===========================================================
# Merge Utilities
# ===========================================================

def _merge_dicts(default, override):
    """Recursively merge two dicts. Ignores '_notes' keys."""
    merged = {k: (_merge_dicts(v, {}) if isinstance(v, dict) else v)
              for k, v in default.items()}
    for key, value in override.items():
        if key == "_notes":
            continue
        if isinstance(value, dict):
            base = merged.get(key)
            merged[key] = _merge_dicts(base if isinstance(base, dict) else {}, value)
        else:
            merged[key] = value
    return merged
