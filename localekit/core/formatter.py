"""Template formatting mini-language.

A template mixes literal text with ``{...}`` spans::

    "Hello {0}"              positional argument
    "Hello {name}"           property of the first argument
    "{0?no items|one item|many items}"
                             selector: picks an alternative by index, clamped
    "{0:#,##0}"              numeric pattern (not applied yet, value passes through)
    "literal {{braces}}"     doubled braces render as single ones
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, List, Optional, Sequence

ESCAPE_OPEN = "{{"
ESCAPE_CLOSE = "}}"

_INDEX_RE = re.compile(r"\s*\+?(\d+)", re.ASCII)


class TemplateFormatter:
    """Single pass parser for the template language described above."""

    def format(self, template: str, args: Sequence[Any] = ()) -> str:
        return "{".join(
            "}".join(self.interpolate(fragment, args) for fragment in self.split_closing(piece))
            for piece in template.split(ESCAPE_OPEN)
        )

    @staticmethod
    def split_closing(text: str) -> List[str]:
        """Split ``text`` on ``}}`` pairs that close an escaped region.

        A ``}}`` closes only when followed by the end of the text, or by any
        number of further ``}}`` pairs and then a character other than ``}``.
        With an odd run of braces the last two close, so ``{0}}}`` keeps the
        span ``{0}`` intact.
        """
        parts: List[str] = []
        start = i = 0
        n = len(text)
        while i < n - 1:
            if text[i] == "}" and text[i + 1] == "}" and _closes_at(text, i + 2):
                parts.append(text[start:i])
                i += 2
                start = i
            else:
                i += 1
        parts.append(text[start:])
        return parts

    def interpolate(self, fragment: str, args: Sequence[Any]) -> str:
        out: List[str] = []
        i = 0
        n = len(fragment)
        while i < n:
            open_at = fragment.find("{", i)
            if open_at < 0:
                out.append(fragment[i:])
                break
            close_at = fragment.find("}", open_at + 1)
            if close_at < 0:
                out.append(fragment[i:])
                break
            if close_at == open_at + 1:
                # "{}" is literal text
                out.append(fragment[i:open_at + 1])
                i = open_at + 1
                continue
            out.append(fragment[i:open_at])
            out.append(self.expand(fragment[open_at + 1:close_at], args))
            i = close_at + 1
        return "".join(out)

    def expand(self, pattern: str, args: Sequence[Any]) -> str:
        sep = _operator_index(pattern)
        ref = pattern if sep < 0 else pattern[:sep]
        value = self.resolve(ref, args)
        op = pattern[sep] if sep >= 0 else None
        if op == "?":
            return self.select(value, pattern[sep + 1:].split("|"))
        # TODO: apply the numeric pattern for ":" (grouping, decimals)
        return _to_text(value)

    @staticmethod
    def resolve(ref: str, args: Sequence[Any]) -> Any:
        m = _INDEX_RE.match(ref)
        if m:
            index = int(m.group(1))
            return args[index] if index < len(args) else None
        if not args or args[0] is None:
            return None
        first = args[0]
        if isinstance(first, Mapping):
            return first.get(ref)
        return getattr(first, ref, None)

    @staticmethod
    def select(value: Any, choices: List[str]) -> str:
        try:
            index = int(value)
        except (TypeError, ValueError):
            return ""
        if index < 0:
            return ""
        return choices[min(index, len(choices) - 1)]


def _closes_at(text: str, j: int) -> bool:
    n = len(text)
    if j == n:
        return True
    while text.startswith(ESCAPE_CLOSE, j):
        j += 2
    return j < n and text[j] != "}"


def _operator_index(pattern: str) -> int:
    for i, ch in enumerate(pattern):
        if ch in ":?":
            return i
    return -1


def _to_text(value: Optional[Any]) -> str:
    return "" if value is None else str(value)


formatter = TemplateFormatter()


def format_template(template: str, *args: Any) -> str:
    return formatter.format(template, args)
