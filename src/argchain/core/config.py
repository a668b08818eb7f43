# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

import os
import sys
from pathlib import Path
from typing import Any

import yaml  # pip install pyyaml

from .paths import config_root as _config_root

# ---------- Global config file ----------


def global_config_search_paths() -> list[Path]:
    """Return the ordered list of paths that will be checked for global config.

    Behavior matches global_config_path():
    - If ARGCHAIN_CONFIG_FILE is set, only that single path is considered.
    - Otherwise, check in order:
        1) ${XDG_CONFIG_HOME:-~/.config}/argchain/config.yml
        2) ARGCHAIN_CONFIG_DIR/config.yml (when the variable is set)
        3) sys.prefix/etc/argchain/config.yml
        4) /etc/argchain/config.yml
    """
    env_file = os.environ.get("ARGCHAIN_CONFIG_FILE")
    if env_file:
        return [Path(env_file).expanduser().resolve()]

    xdg_home = os.environ.get("XDG_CONFIG_HOME")
    user_cfg = (Path(xdg_home) if xdg_home else Path.home() / ".config") / "argchain" / "config.yml"
    paths = [user_cfg]
    if os.environ.get("ARGCHAIN_CONFIG_DIR"):
        paths.append(_config_root() / "config.yml")
    paths.append(Path(sys.prefix) / "etc" / "argchain" / "config.yml")
    paths.append(Path("/etc/argchain/config.yml"))
    return paths


def global_config_path() -> Path:
    """Global config file path (resolved based on search paths).

    Resolution order (first existing wins, except explicit override is returned even
    if missing to make intent visible to the user). If none exist, return the last
    path (/etc/argchain/config.yml).
    """
    candidates = global_config_search_paths()
    # ARGCHAIN_CONFIG_FILE yields a single candidate, returned even if missing.
    if len(candidates) == 1:
        return candidates[0]

    for c in candidates:
        if c.is_file():
            return c.resolve()
    return candidates[-1]


def load_global_config() -> dict[str, Any]:
    cfg_path = global_config_path()
    if not cfg_path.is_file():
        return {}
    try:
        data = yaml.safe_load(cfg_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise SystemExit(f"Invalid config file {cfg_path}: {e}")
    if not isinstance(data, dict):
        return {}
    return data


def get_global_section(key: str) -> dict[str, Any]:
    """Return a top-level section from the global config, defaulting to ``{}``.

    If the value under *key* is not a dict (e.g. the user wrote ``dispatch: "oops"``),
    returns ``{}`` to avoid ``AttributeError`` in callers that expect ``.get()``.
    """
    cfg = load_global_config()
    value = cfg.get(key, {})
    if not isinstance(value, dict):
        return {}
    return value or {}


# ---------- Dispatch settings ----------


def get_halt_on_unrecognized() -> bool:
    return bool(get_global_section("dispatch").get("halt_on_unrecognized", False))


def get_normalize_lookup() -> bool:
    return bool(get_global_section("dispatch").get("normalize_lookup", False))


def get_plugin_modules() -> list[str]:
    """Return plugin module names from config followed by ``ARGCHAIN_PLUGINS``.

    Duplicates are dropped, first occurrence wins.
    """
    modules = get_global_section("plugins").get("modules") or []
    if isinstance(modules, str):
        modules = [modules]
    env = os.environ.get("ARGCHAIN_PLUGINS", "")
    names = [str(m).strip() for m in modules] + [m.strip() for m in env.split(":")]
    seen: list[str] = []
    for name in names:
        if name and name not in seen:
            seen.append(name)
    return seen
