"""argchain package.

Modules:
- argchain.core: Registry, dispatcher, parameters, built-in commands, config
- argchain.cli: CLI entry point package (argchain)
- argchain._util: Internal helpers (ANSI colors, logging)

Typical use::

    import argchain

    @argchain.command(params=1, doc="Greet someone.")
    def greet(params):
        print(f"hello {params[0]}")
        return True

    if __name__ == "__main__":
        raise SystemExit(argchain.run(app_name="greeter", version="1.0"))
"""

from .core.builtins import init, install_builtins
from .core.dispatch import EXIT_FAILURE, EXIT_SUCCESS, process, run
from .core.params import EMPTY_PARAM, Param, Params, Parsed, parse_bool, parse_int, parse_real
from .core.registry import (
    AppInfo,
    CommandDescriptor,
    Registry,
    command,
    default_registry,
    normalize_name,
    register,
    register_all,
)

__all__ = [
    "AppInfo",
    "CommandDescriptor",
    "EMPTY_PARAM",
    "EXIT_FAILURE",
    "EXIT_SUCCESS",
    "Param",
    "Params",
    "Parsed",
    "Registry",
    "command",
    "default_registry",
    "init",
    "install_builtins",
    "normalize_name",
    "parse_bool",
    "parse_int",
    "parse_real",
    "process",
    "register",
    "register_all",
    "run",
]

# Version information - single source of truth using importlib.metadata
try:
    from importlib.metadata import version

    __version__ = version("argchain")
except Exception:
    # Fallback for development mode when package is not installed
    try:
        import tomllib
        from pathlib import Path

        pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
        if pyproject_path.exists():
            with open(pyproject_path, "rb") as f:
                pyproject_data = tomllib.load(f)
                __version__ = pyproject_data["tool"]["poetry"]["version"]
        else:
            __version__ = "unknown"
    except Exception:
        __version__ = "unknown"

install_builtins(default_registry())
