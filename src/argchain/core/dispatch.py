# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Argument vector dispatch.

The argument vector is a flat sequence of commands, each followed by exactly
as many parameters as it declares::

    prog cmdA arg1 cmdB cmdC arg1 arg2

Three kinds of problems are distinguished and none of them raise:

* unrecognized command: reported, skipped, unless the run halts on it,
* too few parameters: reported, command skipped, never a failure,
* handler failure: the run exits with 1; halts at once if the command was
  registered with ``halt_on_fail``.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from .._util.logging_utils import _log_debug
from .builtins import init
from .config import get_halt_on_unrecognized
from .params import Params
from .registry import Registry, default_registry

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def process(
    argv: Sequence[str],
    registry: Registry | None = None,
    *,
    halt_on_unrecognized: bool = False,
) -> int:
    """Run every command found in *argv* and return the process exit code.

    ``argv[0]`` is the program name and is never treated as a command.
    Returns 0 when no invoked handler failed, 1 otherwise or when an
    unrecognized command is hit with *halt_on_unrecognized* set. Diagnostics
    and command output both go to ``sys.stdout``.
    """
    reg = registry if registry is not None else default_registry()
    args = tuple(argv)
    success = True

    i = 1
    while i < len(args):
        token = args[i]
        descriptor = reg.lookup(token)
        if descriptor is None:
            print(f"unrecognized command: {token}")
            _log_debug(f"process: unrecognized token={token!r} index={i}")
            if halt_on_unrecognized:
                _log_debug("process: halting on unrecognized command")
                return EXIT_FAILURE
            i += 1
            continue

        need = descriptor.param_count
        if i + need >= len(args):
            print(f"too few parameters: {token}")
            _log_debug(f"process: too few parameters for {descriptor.name} (needs {need})")
            i += 1
            continue

        _log_debug(f"process: invoking {descriptor.name} index={i} params={need}")
        if not descriptor.handler(Params(args, i + 1, need)):
            success = False
            _log_debug(f"process: {descriptor.name} failed")
            if descriptor.halt_on_fail:
                _log_debug(f"process: halting after {descriptor.name}")
                return EXIT_FAILURE
        i += need + 1

    return EXIT_SUCCESS if success else EXIT_FAILURE


def run(
    argv: Sequence[str] | None = None,
    registry: Registry | None = None,
    *,
    app_name: str | None = None,
    version: str | None = None,
    halt_on_unrecognized: bool | None = None,
) -> int:
    """Convenience entry point for applications built on argchain.

    Sets the display strings when *app_name* or *version* is given, falls back
    to ``dispatch.halt_on_unrecognized`` from the global config and processes
    ``sys.argv`` unless *argv* is passed.
    """
    reg = registry if registry is not None else default_registry()
    if app_name is not None or version is not None:
        init(app_name or reg.info.app_name, version or reg.info.version, registry=reg)
    if halt_on_unrecognized is None:
        halt_on_unrecognized = get_halt_on_unrecognized()
    return process(
        sys.argv if argv is None else argv,
        reg,
        halt_on_unrecognized=halt_on_unrecognized,
    )
