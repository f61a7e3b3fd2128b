"""Output buffer for renderers.

Collects fragments in a list and joins them once, so rendering stays linear
in the size of the output.

Thread Safety:
One StringBuilder per render() call; never shared.

"""

from __future__ import annotations


class StringBuilder:
    """Fragment accumulator with block helpers.

    Usage:
            >>> sb = StringBuilder()
            >>> sb.append("= ").append("Title").end_block()
            >>> sb.append("body").end_block()
            >>> sb.build()
            '= Title\\n\\nbody\\n'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Add a fragment; empty fragments are dropped. Returns self."""
        if s:
            self._parts.append(s)
        return self

    def end_block(self) -> StringBuilder:
        """Terminate the current block with a blank line."""
        self._parts.append("\n\n")
        return self

    def build(self) -> str:
        """Joined output, with trailing blank lines collapsed to one newline."""
        if not self._parts:
            return ""
        return "".join(self._parts).rstrip("\n") + "\n"

    def __len__(self) -> int:
        """Number of fragments (not characters)."""
        return len(self._parts)
