"""Table renderers used to draw menus.

Any object with a matching ``render`` method can be passed to
``Router.set_renderer``; no base class is required.
"""

from __future__ import annotations

from typing import Any, List, Optional, Protocol, Sequence, runtime_checkable

from rich import box as rich_box
from rich.cells import cell_len
from rich.console import Console
from rich.table import Table


@runtime_checkable
class TableRenderer(Protocol):
    """Protocol for menu table renderers."""

    def render(self, out: Any, headers: Sequence[str], rows: Sequence[Sequence[object]]) -> None: ...


class AsciiTableRenderer:
    """Draw tables with plain ASCII box borders.

    ::

        +---+--------------+
        | # | Menu         |
        +---+--------------+
        | 1 | Login        |
        | 2 | View Profile |
        | 0 | Exit         |
        +---+--------------+
    """

    padding = 1

    def render(self, out: Any, headers: Sequence[str], rows: Sequence[Sequence[object]]) -> None:
        if not headers:
            return

        widths = self.column_widths(headers, rows)
        border = self._border(widths)
        lines = [border, self._row(widths, headers), border]
        lines.extend(self._row(widths, row) for row in rows)
        lines.append(border)
        out.write("\n".join(lines) + "\n")

    @staticmethod
    def column_widths(headers: Sequence[str], rows: Sequence[Sequence[object]]) -> List[int]:
        """Return the widest cell per column, in terminal cells."""

        widths = [cell_len(str(header)) for header in headers]
        for row in rows:
            for index, cell in enumerate(row[: len(widths)]):
                widths[index] = max(widths[index], cell_len(str(cell)))
        return widths

    def _border(self, widths: Sequence[int]) -> str:
        pad = 2 * self.padding
        return "+" + "+".join("-" * (width + pad) for width in widths) + "+"

    def _row(self, widths: Sequence[int], row: Sequence[object]) -> str:
        margin = " " * self.padding
        cells = [str(cell) for cell in row[: len(widths)]]
        cells.extend("" for _ in range(len(widths) - len(cells)))
        padded = [cell + " " * (width - cell_len(cell)) for cell, width in zip(cells, widths)]
        return "|" + "|".join(f"{margin}{cell}{margin}" for cell in padded) + "|"


class RichTableRenderer:
    """Render menus through :class:`rich.table.Table`."""

    def __init__(
        self,
        *,
        box: rich_box.Box = rich_box.ROUNDED,
        header_style: str = "bold cyan",
        width: Optional[int] = None,
    ) -> None:
        self.box = box
        self.header_style = header_style
        self.width = width

    def render(self, out: Any, headers: Sequence[str], rows: Sequence[Sequence[object]]) -> None:
        if not headers:
            return

        table = Table(box=self.box, header_style=self.header_style)
        table.add_column(str(headers[0]), justify="right", style="cyan", no_wrap=True)
        for header in headers[1:]:
            table.add_column(str(header), style="magenta")
        for row in rows:
            table.add_row(*(str(cell) for cell in row))

        console = Console(file=out, width=self.width, highlight=False)
        console.print(table)


DefaultRenderer = AsciiTableRenderer

__all__ = ["AsciiTableRenderer", "DefaultRenderer", "RichTableRenderer", "TableRenderer"]
