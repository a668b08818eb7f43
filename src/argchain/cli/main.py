#!/usr/bin/env python3

import importlib
import sys
from collections.abc import Sequence

from .. import __version__
from .._util.logging_utils import _log_debug
from ..core.builtins import init
from ..core.config import (
    get_halt_on_unrecognized as _get_halt_on_unrecognized,
    get_normalize_lookup as _get_normalize_lookup,
    get_plugin_modules as _get_plugin_modules,
)
from ..core.dispatch import process
from ..core.registry import Registry, default_registry, register_all

APP_NAME = "argchain"

# Optional plugin hook: ``install(registry)`` registers into an explicit registry
INSTALL_HOOK = "install"


def load_plugins(modules: Sequence[str], registry: Registry | None = None) -> list[str]:
    """Import each plugin module and install its commands into *registry*.

    ``@command`` definitions register into the default registry when the
    module is imported. A module may also define ``install(registry)``; those
    hooks run in module order against *registry* (the default registry when
    omitted), which is how plugins reach a registry passed to :func:`main`.

    Returns the names of the imported modules. A module that cannot be
    imported aborts the run.
    """
    reg = registry if registry is not None else default_registry()
    loaded = []
    installers = []
    for name in modules:
        _log_debug(f"load_plugins: importing {name}")
        try:
            module = importlib.import_module(name)
        except ImportError as e:
            raise SystemExit(f"Cannot load command module '{name}': {e}")
        hook = getattr(module, INSTALL_HOOK, None)
        if callable(hook):
            installers.append(hook)
        loaded.append(name)
    register_all(reg, installers)
    return loaded


def main(argv: Sequence[str] | None = None, registry: Registry | None = None) -> None:
    reg = registry if registry is not None else default_registry()
    load_plugins(_get_plugin_modules(), reg)

    # Config can enable normalized lookup but never turns it off
    reg.normalize_lookup = reg.normalize_lookup or _get_normalize_lookup()
    if not reg.info.app_name:
        init(APP_NAME, __version__, registry=reg)

    args = list(sys.argv if argv is None else argv) or [APP_NAME]
    # Bare invocation shows the command list rather than doing nothing
    if len(args) < 2:
        args.append("help")

    rc = process(args, reg, halt_on_unrecognized=_get_halt_on_unrecognized())
    sys.exit(rc)


if __name__ == "__main__":
    main()
