"""Pages and the drawing instructions that act on the current page."""

from __future__ import annotations

from .component import UINT16_MAX, UINT32_MAX, TouchComponent, _unsigned


def _coords(*values: tuple[str, int]) -> list[int]:
    return [_unsigned(value, UINT16_MAX, what) for what, value in values]


class Page(TouchComponent):
    """A page, which holds the other components."""

    def show(self) -> None:
        """Switch the display to this page."""
        self.link.send_command(f"page {self.page_id}")
        self.link.receive_command_finished()

    def _draw(self, verb: str, numbers: list[int], color: int) -> None:
        colour = _unsigned(color, UINT32_MAX, "color")
        args = ",".join(str(n) for n in [*numbers, colour])
        self.link.send_command(f"{verb} {args}")

    def draw_line(self, x1: int, y1: int, x2: int, y2: int, color: int) -> None:
        """Draw a line from (x1, y1) to (x2, y2)."""
        self._draw("line", _coords(("x1", x1), ("y1", y1), ("x2", x2), ("y2", y2)), color)

    def draw_rectangle(self, x1: int, y1: int, x2: int, y2: int, color: int) -> None:
        """Draw the outline of a rectangle with corners (x1, y1) and (x2, y2)."""
        self._draw("draw", _coords(("x1", x1), ("y1", y1), ("x2", x2), ("y2", y2)), color)

    def fill_rectangle(self, x1: int, y1: int, x2: int, y2: int, color: int) -> None:
        """Fill a rectangle; the arguments are passed to the display as given."""
        self._draw("fill", _coords(("x1", x1), ("y1", y1), ("x2", x2), ("y2", y2)), color)

    def fill_circle(self, x: int, y: int, radius: int, color: int) -> None:
        """Draw a filled circle centred on (x, y)."""
        self._draw("cirs", _coords(("x", x), ("y", y), ("radius", radius)), color)