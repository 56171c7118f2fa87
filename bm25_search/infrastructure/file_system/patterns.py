"""Glob pattern matching on root-relative POSIX paths.

Supports ``*``, ``?``, ``[...]``, ``**`` and ``{a,b}`` alternatives. ``*`` never
crosses a ``/``; ``**`` as a whole segment matches any number of directories.
Leading dots are not special.
"""

import re
from functools import lru_cache

DEFAULT_INCLUDE = "**/*"


def _split_top_level(body: str) -> list[str]:
    """Split a brace body on commas that are not nested in other braces."""
    parts = []
    depth = 0
    current = ""
    for ch in body:
        if ch == "," and depth == 0:
            parts.append(current)
            current = ""
            continue
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
        current += ch
    parts.append(current)
    return parts


def _expand(pattern: str) -> list[str]:
    depth = 0
    start = 0
    for i, ch in enumerate(pattern):
        if ch == "{":
            if depth == 0:
                start = i
            depth += 1
        elif ch == "}" and depth:
            depth -= 1
            if depth:
                continue

            options = _split_top_level(pattern[start + 1 : i])
            prefix, suffix = pattern[:start], pattern[i + 1 :]
            if len(options) < 2:
                # "{x}" has no alternatives and stays literal
                return [pattern[: i + 1] + rest for rest in _expand(suffix)]

            expanded = []
            for option in options:
                expanded.extend(_expand(prefix + option + suffix))
            return expanded
    return [pattern]


def expand_braces(pattern: str) -> list[str]:
    """Expand ``{a,b}`` alternatives, keeping order and dropping duplicates.

    Args:
        pattern: Glob pattern.

    Returns:
        Brace-free patterns.
    """
    return list(dict.fromkeys(_expand(pattern)))


def _translate_segment(segment: str) -> str:
    out = []
    i = 0
    n = len(segment)
    while i < n:
        ch = segment[i]
        i += 1
        if ch == "*":
            while i < n and segment[i] == "*":
                i += 1
            out.append("[^/]*")
        elif ch == "?":
            out.append("[^/]")
        elif ch == "[":
            j = i
            if j < n and segment[j] in "!^":
                j += 1
            if j < n and segment[j] == "]":
                j += 1
            while j < n and segment[j] != "]":
                j += 1
            if j >= n:
                out.append("\\[")
                continue
            body = segment[i:j].replace("\\", "\\\\")
            i = j + 1
            if body[0] in "!^":
                body = "^" + body[1:]
            out.append(f"[{body}]")
        else:
            out.append(re.escape(ch))
    return "".join(out)


def translate(pattern: str) -> str:
    """Translate one brace-free glob pattern to a regular expression.

    Args:
        pattern: Glob pattern relative to a search root.

    Returns:
        Regex source that must match the whole relative path.
    """
    while pattern.startswith("./"):
        pattern = pattern[2:]

    segments = pattern.split("/")
    parts = []
    last = len(segments) - 1
    for index, segment in enumerate(segments):
        if segment == "**":
            parts.append(".*" if index == last else "(?:.*/)?")
            continue
        parts.append(_translate_segment(segment))
        if index != last:
            parts.append("/")
    return "(?s:" + "".join(parts) + ")"


@lru_cache(maxsize=256)
def _compile(pattern: str) -> tuple[re.Pattern, ...]:
    return tuple(re.compile(translate(p)) for p in expand_braces(pattern))


class GlobMatcher:
    """Matches root-relative POSIX paths against one glob pattern."""

    def __init__(self, pattern: str):
        self.pattern = pattern
        self._regexes = _compile(pattern)

    def matches(self, relative_path: str) -> bool:
        return any(r.fullmatch(relative_path) for r in self._regexes)

    def __repr__(self) -> str:
        return f"GlobMatcher({self.pattern!r})"
