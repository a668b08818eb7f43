# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Command registry.

Commands register themselves when the module defining them is imported::

    from argchain import command

    @command(params=2, doc="Add two integers.")
    def add(params):
        a, b = params[0].int(), params[1].int()
        if not (a.ok and b.ok):
            return False
        print(a.value + b.value)
        return True

Names are normalized on registration: every character that is not an ASCII
letter or digit becomes ``-``. Lookup is verbatim by default, so a command
declared as ``do_thing`` is invoked as ``do-thing`` on the command line.
Registering a name twice replaces the earlier command.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from .._util.logging_utils import _log_debug
from .params import Params

Handler = Callable[[Params], bool]

SEPARATOR = "-"

# Gap between the longest command name and the doc column in ``help``
HELP_COLUMN_GAP = 3


def _is_alnum_ascii(ch: str) -> bool:
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z") or ("0" <= ch <= "9")


def normalize_name(name: str) -> str:
    """Replace every non-ASCII-alphanumeric character of *name* with ``-``."""
    return "".join(ch if _is_alnum_ascii(ch) else SEPARATOR for ch in name)


@dataclass(frozen=True)
class CommandDescriptor:
    name: str
    handler: Handler
    param_count: int = 0
    doc: str = ""
    halt_on_fail: bool = False


@dataclass
class AppInfo:
    """Display strings printed by the ``version`` and ``help`` commands."""

    app_name: str = ""
    version: str = ""


@dataclass(eq=False)
class Registry:
    """Mapping of normalized command names to :class:`CommandDescriptor`.

    Lookups use the raw token unless *normalize_lookup* is set, in which case
    tokens are normalized the same way names are on registration.
    """

    normalize_lookup: bool = False
    info: AppInfo = field(default_factory=AppInfo)
    _commands: dict[str, CommandDescriptor] = field(default_factory=dict, init=False, repr=False)
    _longest_name: int = field(default=0, init=False, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, init=False, repr=False, compare=False)

    def register(
        self,
        name: str,
        handler: Handler,
        param_count: int = 0,
        doc: str = "",
        halt_on_fail: bool = False,
    ) -> bool:
        """Register *handler* under the normalized *name*. Always returns True."""
        if not callable(handler):
            raise TypeError(f"handler for command {name!r} is not callable")
        if param_count < 0:
            raise ValueError(f"command {name!r} declares a negative parameter count")
        key = normalize_name(name)
        descriptor = CommandDescriptor(key, handler, int(param_count), doc, bool(halt_on_fail))
        with self._lock:
            replaced = key in self._commands
            self._commands[key] = descriptor
            self._longest_name = max(self._longest_name, len(key) + HELP_COLUMN_GAP)
        _log_debug(
            f"register: name={key} params={param_count} halt_on_fail={halt_on_fail}"
            + (" (replaced)" if replaced else "")
        )
        return True

    def lookup(self, raw_name: str) -> CommandDescriptor | None:
        key = normalize_name(raw_name) if self.normalize_lookup else raw_name
        with self._lock:
            return self._commands.get(key)

    @property
    def longest_name(self) -> int:
        """Width of the name column used by ``help``."""
        return self._longest_name

    def names(self) -> list[str]:
        with self._lock:
            return sorted(self._commands)

    def descriptors(self) -> list[CommandDescriptor]:
        with self._lock:
            return [self._commands[k] for k in sorted(self._commands)]

    def __contains__(self, raw_name: object) -> bool:
        return isinstance(raw_name, str) and self.lookup(raw_name) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._commands)


_DEFAULT_REGISTRY = Registry()


def default_registry() -> Registry:
    """Return the process-wide registry used by :func:`command`."""
    return _DEFAULT_REGISTRY


def register(
    name: str,
    handler: Handler,
    param_count: int = 0,
    doc: str = "",
    halt_on_fail: bool = False,
) -> bool:
    """Register a command in the process-wide registry."""
    return _DEFAULT_REGISTRY.register(name, handler, param_count, doc, halt_on_fail)


def _first_doc_line(fn: Callable) -> str:
    doc = (fn.__doc__ or "").strip()
    return doc.splitlines()[0].strip() if doc else ""


def command(
    name: str | None = None,
    *,
    params: int = 0,
    doc: str | None = None,
    halt_on_fail: bool = False,
    registry: Registry | None = None,
) -> Callable[[Handler], Handler]:
    """Decorator registering a function as a command at import time.

    The command name defaults to the function name and the doc string to the
    first line of the function docstring. The function is returned unchanged.
    """

    def deco(fn: Handler) -> Handler:
        target = registry if registry is not None else _DEFAULT_REGISTRY
        target.register(
            name if name is not None else fn.__name__,
            fn,
            params,
            doc if doc is not None else _first_doc_line(fn),
            halt_on_fail,
        )
        return fn

    return deco


def register_all(registry: Registry, installers: Iterable[Callable[[Registry], object]]) -> Registry:
    """Run each installer against *registry* in order and return the registry."""
    for installer in installers:
        installer(registry)
    return registry
