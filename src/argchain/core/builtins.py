# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""The ``version`` and ``help`` commands available in every registry."""

from __future__ import annotations

from .._util.ansi import supports_color as _supports_color, violet as _violet
from .params import NO_PARAMS, Params
from .registry import Registry, default_registry


def init(app_name: str, version: str, registry: Registry | None = None) -> None:
    """Set the application name and version printed by ``version`` and ``help``."""
    reg = registry if registry is not None else default_registry()
    reg.info.app_name = app_name
    reg.info.version = version


def version_line(registry: Registry) -> str:
    return f"{registry.info.app_name} {registry.info.version}"


def help_lines(registry: Registry, color_enabled: bool = False) -> list[str]:
    """Return one row per command: padded name column followed by the doc."""
    width = registry.longest_name
    rows = []
    for d in registry.descriptors():
        padding = " " * max(width - len(d.name), 0)
        rows.append(f"{_violet(d.name, color_enabled)}{padding}{d.doc}")
    return rows


def install_builtins(registry: Registry) -> Registry:
    """Register ``version`` and ``help`` bound to *registry*."""

    def _version(params: Params) -> bool:
        print(version_line(registry))
        return True

    def _help(params: Params) -> bool:
        _version(NO_PARAMS)
        color_enabled = _supports_color()
        for row in help_lines(registry, color_enabled):
            print(row)
        return True

    registry.register("version", _version, 0, "Print version.")
    registry.register("help", _help, 0, "Print help.")
    return registry
