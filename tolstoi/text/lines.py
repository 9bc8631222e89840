"""Line splitting on ``\\n`` only.

``str.splitlines()`` also breaks on form feeds, ``\\x1c``-``\\x1e``, ``\\x85``
and the Unicode line/paragraph separators, which Gutenberg texts can contain
inside a line. Only ``\\n`` ends a line here; a ``\\r`` right before it is
dropped, and a trailing newline does not produce an extra empty line.
"""

from __future__ import annotations


def split_lines(text: str) -> list[str]:
    """Split text into lines on ``\\n`` (optionally preceded by ``\\r``).

    Examples:
        >>> split_lines("a\\r\\nb\\x0cc\\n")
        ['a', 'b\\x0cc']
    """
    if not text:
        return []

    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]
