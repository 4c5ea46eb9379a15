"""Elastic tabstop layout used to align failure tables.

Text is written in tab-terminated cell form: every ``\\t`` closes a cell and
every ``\\n`` closes a line. Text after the last tab of a line is trailing
text and does not take part in column sizing. A column block is a run of
consecutive lines that all have a cell in that column; every cell of a block
is padded to the widest cell of the block plus ``padding``.
"""

from __future__ import annotations

from typing import Any


class Table:
    def __init__(self, padding: int = 5, min_width: int = 0) -> None:
        if padding < 0:
            raise ValueError(f"padding must be >= 0, got {padding}")
        if min_width < 0:
            raise ValueError(f"min_width must be >= 0, got {min_width}")
        self.padding = padding
        self.min_width = min_width
        self._chunks: list[str] = []

    def write_row(self, *cols: Any) -> None:
        """Start a new line holding one tab-terminated cell per column."""
        self._chunks.append("\n" + "".join(f"{col}\t" for col in cols))

    def writef(self, fmt: str, *args: Any) -> None:
        """Append ``fmt % args`` verbatim (``fmt`` alone when no args are given)."""
        self._chunks.append(fmt % args if args else fmt)

    def render(self) -> str:
        lines = [line.split("\t") for line in "".join(self._chunks).split("\n")]
        out: list[str] = []
        self._format(lines, 0, len(lines), [], out)
        return "\n".join(out)

    def __str__(self) -> str:
        return self.render()

    def _format(
        self,
        lines: list[list[str]],
        line0: int,
        line1: int,
        widths: list[int],
        out: list[str],
    ) -> None:
        column = len(widths)
        this = line0
        while this < line1:
            # The last cell of a line is trailing text, not a column cell.
            if column >= len(lines[this]) - 1:
                this += 1
                continue

            self._write_lines(lines, line0, this, widths, out)
            line0 = this

            width = self.min_width
            while this < line1 and column < len(lines[this]) - 1:
                width = max(width, len(lines[this][column]) + self.padding)
                this += 1

            widths.append(width)
            self._format(lines, line0, this, widths, out)
            widths.pop()
            line0 = this

        self._write_lines(lines, line0, line1, widths, out)

    @staticmethod
    def _write_lines(
        lines: list[list[str]],
        line0: int,
        line1: int,
        widths: list[int],
        out: list[str],
    ) -> None:
        for cells in lines[line0:line1]:
            parts: list[str] = []
            for j, cell in enumerate(cells):
                parts.append(cell)
                if j < len(widths):
                    parts.append(" " * (widths[j] - len(cell)))
            out.append("".join(parts))
