"""Text helpers shared by chunking and ranking."""
import re

_NON_WORD_RE = re.compile(r"\W+")
_LINE_BREAK_RE = re.compile(r"\r\n?")


def tokenize(text: str) -> list[str]:
    """Lowercase and split on runs of non-word characters.

    Args:
        text: Query or chunk text.

    Returns:
        Non-empty tokens, in order.
    """
    return [t for t in _NON_WORD_RE.split(text.lower()) if t]


def split_lines(text: str) -> list[str]:
    """Split text into lines after normalizing CRLF and CR to LF.

    A single trailing line break does not start an extra line, so empty text
    has no lines at all.
    """
    if not text:
        return []
    lines = _LINE_BREAK_RE.sub("\n", text).split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines
