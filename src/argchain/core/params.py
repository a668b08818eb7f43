# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Command parameters and best-effort value parsing.

A command handler receives a :class:`Params` view over the slice of the
argument vector that belongs to it. Each entry is a :class:`Param` which can
be read as plain text or interpreted as an integer, real or boolean.

Parsing follows the rules of a C-locale formatted stream extraction:

* leading whitespace is skipped,
* the longest valid numeric prefix is used and trailing content is ignored
  (``"42abc"`` reads as ``42``),
* values outside the representable range fail.

Every parser returns a :class:`Parsed` pair. A failed parse is never an
error by itself; handlers decide what to do with ``ok=False``.
"""

from __future__ import annotations

import math
import re
from collections.abc import Iterator, Sequence
from typing import Any, Generic, NamedTuple, TypeVar

T = TypeVar("T")

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# C locale isspace(), not str.isspace() which also matches unicode spaces
_WS = " \t\n\v\f\r"

# Significant digits of INT64_MIN / INT64_MAX
_INT64_DIGITS = 19

_INT_RE = re.compile(r"([+-]?)([0-9]+)")
_REAL_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


class Parsed(NamedTuple, Generic[T]):
    """Result of interpreting a parameter. ``value`` is unspecified unless ``ok``."""

    value: T | None
    ok: bool


def parse_int(text: str | None) -> Parsed[int]:
    """Parse a signed 64-bit base-10 integer prefix of *text*."""
    if text is None:
        return Parsed(None, False)
    m = _INT_RE.match(text.lstrip(_WS))
    if m is None:
        return Parsed(None, False)
    sign, digits = m.group(1), m.group(2).lstrip("0") or "0"
    if len(digits) > _INT64_DIGITS:
        return Parsed(INT64_MIN if sign == "-" else INT64_MAX, False)
    value = int(sign + digits)
    if value > INT64_MAX:
        return Parsed(INT64_MAX, False)
    if value < INT64_MIN:
        return Parsed(INT64_MIN, False)
    return Parsed(value, True)


def parse_real(text: str | None) -> Parsed[float]:
    """Parse a decimal floating point prefix of *text*.

    ``inf``/``nan`` spellings are not accepted, and an exponent without
    digits (``"1e"``) is left unconsumed.
    """
    if text is None:
        return Parsed(None, False)
    m = _REAL_RE.match(text.lstrip(_WS))
    if m is None:
        return Parsed(None, False)
    value = float(m.group(0))
    if math.isinf(value):
        return Parsed(math.copysign(1.7976931348623157e308, value), False)
    return Parsed(value, True)


def parse_bool(text: str | None) -> Parsed[bool]:
    """Parse ``true``/``false`` (case-sensitive) or the integers ``0``/``1``."""
    if text is None:
        return Parsed(None, False)
    stripped = text.lstrip(_WS)
    if stripped.startswith("true"):
        return Parsed(True, True)
    if stripped.startswith("false"):
        return Parsed(False, True)
    number = parse_int(stripped)
    if not number.ok or number.value not in (0, 1):
        return Parsed(None, False)
    return Parsed(bool(number.value), True)


class Param:
    """A single command parameter.

    Wraps the raw argument text, or ``None`` for the empty parameter handed
    out when a :class:`Params` view is indexed out of range.
    """

    __slots__ = ("_text",)

    def __init__(self, text: str | None) -> None:
        self._text = text

    @property
    def text(self) -> str | None:
        return self._text

    @property
    def is_empty(self) -> bool:
        return self._text is None

    def int(self) -> Parsed[int]:
        return parse_int(self._text)

    def real(self) -> Parsed[float]:
        return parse_real(self._text)

    def bool(self) -> Parsed[bool]:
        return parse_bool(self._text)

    def __str__(self) -> str:
        return self._text if self._text is not None else ""

    def __bool__(self) -> bool:
        return self._text is not None

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Param):
            return self._text == other._text
        if isinstance(other, str) or other is None:
            return self._text == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._text)

    def __repr__(self) -> str:
        return f"Param({self._text!r})"


EMPTY_PARAM = Param(None)


class Params:
    """Read-only, bounds-checked window over a slice of the argument vector.

    ``params[i]`` for any index outside ``[0, len(params))`` returns
    :data:`EMPTY_PARAM` instead of raising, so handlers may probe
    parameters freely.
    """

    __slots__ = ("_args", "_start", "_count")

    def __init__(self, args: Sequence[str], start: int = 0, count: int | None = None) -> None:
        if count is None:
            count = len(args) - start
        if start < 0 or count < 0 or start + count > len(args):
            raise ValueError(
                f"parameter window [{start}, {start + count}) outside of {len(args)} arguments"
            )
        self._args = args
        self._start = start
        self._count = count

    def __len__(self) -> int:
        return self._count

    def __getitem__(self, i: int) -> Param:
        if not isinstance(i, int):
            raise TypeError(f"parameter index must be an integer, not {type(i).__name__}")
        if 0 <= i < self._count:
            return Param(self._args[self._start + i])
        return EMPTY_PARAM

    def __iter__(self) -> Iterator[Param]:
        for i in range(self._count):
            yield Param(self._args[self._start + i])

    def texts(self) -> list[str]:
        """Return the raw parameter strings as a new list."""
        return list(self._args[self._start : self._start + self._count])

    def __repr__(self) -> str:
        return f"Params({self.texts()!r})"


NO_PARAMS = Params((), 0, 0)
