##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
Elastic tabstop writer for the text reports.

`TabWriter` buffers tab-separated text and, on `flush`, pads cells so that
columns line up. A column is formed by a run of consecutive lines that all
have a tab-terminated cell at that position, so indented detail lines
(starting with a tab) get their own alignment independent of the lines
around them. The last cell of a line is never padded.

Padding is done with tab characters: a column is as wide as its widest cell
plus `padding`, rounded up to a multiple of `tabwidth`. The output therefore
still splits cleanly on tabs while rendering aligned in a terminal.
"""

import logging
from typing import List, TextIO

from buildfleet.exceptions import SinkWriteError


LOG = logging.getLogger("buildfleet")


class TabWriter:
    """
    Buffer text in memory and write it column-aligned to a sink on `flush`.

    Attributes:
        sink: The text stream receiving the aligned output.
        minwidth: Minimal width of a column, padding included.
        tabwidth: Width of one tab character.
        padding: Extra width added to the widest cell of a column.

    Methods:
        write: Queue text. Nothing reaches the sink until `flush`.
        flush: Align all queued lines and write them to the sink.
    """

    def __init__(self, sink: TextIO, minwidth: int = 1, tabwidth: int = 8, padding: int = 1):
        self.sink = sink
        self.minwidth = minwidth
        self.tabwidth = tabwidth
        self.padding = padding
        self._buffer: List[str] = []

    def write(self, text: str):
        """
        Queue text for alignment.

        Args:
            text: Text containing tab-separated cells and newlines.
        """
        self._buffer.append(text)

    def flush(self):
        """
        Align every queued line and write the result to the sink.

        The buffer is emptied even when the sink rejects the write.

        Raises:
            SinkWriteError: If writing to the sink fails.
        """
        text = "".join(self._buffer)
        self._buffer = []
        if not text:
            return

        rows = text.split("\n")
        # the final element holds whatever followed the last newline
        tail = rows.pop()
        lines = [row.split("\t") for row in rows]
        if tail:
            lines.append(tail.split("\t"))

        out: List[str] = []
        self._format(lines, out, [], 0, len(lines), terminated=len(rows))
        LOG.debug(f"Flushing {len(lines)} aligned line(s).")
        try:
            self.sink.write("".join(out))
            if hasattr(self.sink, "flush"):
                self.sink.flush()
        except (OSError, ValueError) as exc:
            raise SinkWriteError(f"Failed to write report output: {exc}") from exc

    def _format(
        self, lines: List[List[str]], out: List[str], widths: List[int], line0: int, line1: int, terminated: int
    ):
        column = len(widths)
        this = line0
        while this < line1:
            if column >= len(lines[this]) - 1:
                this += 1
                continue

            # lines before this one are not part of the column block
            self._write_lines(lines, out, widths, line0, this, terminated)
            line0 = this

            width = self.minwidth
            while this < line1 and column < len(lines[this]) - 1:
                width = max(width, len(lines[this][column]) + self.padding)
                this += 1

            self._format(lines, out, widths + [width], line0, this, terminated)
            line0 = this

        self._write_lines(lines, out, widths, line0, line1, terminated)

    def _write_lines(
        self, lines: List[List[str]], out: List[str], widths: List[int], line0: int, line1: int, terminated: int
    ):
        for i in range(line0, line1):
            for j, cell in enumerate(lines[i]):
                out.append(cell)
                if j < len(widths):
                    out.append(self._padding(len(cell), widths[j]))
            if i < terminated:
                out.append("\n")

    def _padding(self, text_width: int, cell_width: int) -> str:
        if self.tabwidth == 0:
            return ""
        cell_width = -(-cell_width // self.tabwidth) * self.tabwidth
        return "\t" * -(-(cell_width - text_width) // self.tabwidth)
