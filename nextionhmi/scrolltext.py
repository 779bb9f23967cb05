"""Scrolling text component."""

from __future__ import annotations

from .component import UINT32_MAX, TouchComponent, _unsigned

MIN_SCROLL_DISTANCE = 2
MIN_CYCLE_TIME = 8


class ScrollText(TouchComponent):
    """A text component that scrolls its content."""

    def get_text(self, max_length: int) -> str:
        """Return the component's text, at most ``max_length`` characters."""
        self.link.send_command(f"get {self.name}.txt")
        return self.link.receive_string(max_length)

    def set_text(self, text: str) -> None:
        """Set the component's text."""
        self.link.send_command(f'{self.name}.txt="{text}"')
        self.link.receive_command_finished()

    def get_background_color(self) -> int:
        """Return the background colour (``bco``)."""
        return self._get_attribute("bco")

    def set_background_color(self, value: int) -> None:
        """Set the background colour (``bco``) and redraw."""
        self._set_attribute("bco", value, refresh=True)

    def get_font_color(self) -> int:
        """Return the font colour (``pco``)."""
        return self._get_attribute("pco")

    def set_font_color(self, value: int) -> None:
        """Set the font colour (``pco``) and redraw."""
        self._set_attribute("pco", value, refresh=True)

    def get_x_align(self) -> int:
        """Return the horizontal alignment (``xcen``)."""
        return self._get_attribute("xcen")

    def set_x_align(self, value: int) -> None:
        """Set the horizontal alignment (``xcen``) and redraw."""
        self._set_attribute("xcen", value, refresh=True)

    def get_y_align(self) -> int:
        """Return the vertical alignment (``ycen``)."""
        return self._get_attribute("ycen")

    def set_y_align(self, value: int) -> None:
        """Set the vertical alignment (``ycen``) and redraw."""
        self._set_attribute("ycen", value, refresh=True)

    def get_font(self) -> int:
        """Return the font number (``font``)."""
        return self._get_attribute("font")

    def set_font(self, value: int) -> None:
        """Set the font number (``font``) and redraw."""
        self._set_attribute("font", value, refresh=True)

    def get_crop_picture(self) -> int:
        """Return the crop background picture (``picc``)."""
        return self._get_attribute("picc")

    def set_crop_picture(self, value: int) -> None:
        """Set the crop background picture (``picc``) and redraw."""
        self._set_attribute("picc", value, refresh=True)

    def get_background_picture(self) -> int:
        """Return the background picture (``pic``)."""
        return self._get_attribute("pic")

    def set_background_picture(self, value: int) -> None:
        """Set the background picture (``pic``) and redraw."""
        self._set_attribute("pic", value, refresh=True)

    def get_scroll_direction(self) -> int:
        """Return the scroll direction (``dir``)."""
        return self._get_attribute("dir")

    def set_scroll_direction(self, value: int) -> None:
        """Set the scroll direction (``dir``) and redraw."""
        self._set_attribute("dir", value, refresh=True)

    def get_scroll_distance(self) -> int:
        """Return the scroll step (``dis``)."""
        return self._get_attribute("dis")

    def set_scroll_distance(self, value: int) -> None:
        """Set the scroll step (``dis``), at least 2, and redraw."""
        number = max(_unsigned(value, UINT32_MAX, "dis"), MIN_SCROLL_DISTANCE)
        self._set_attribute("dis", number, refresh=True)

    def get_cycle_time(self) -> int:
        """Return the scroll period (``tim``)."""
        return self._get_attribute("tim")

    def set_cycle_time(self, value: int) -> None:
        """Set the scroll period (``tim``), at least 8, and redraw."""
        number = max(_unsigned(value, UINT32_MAX, "tim"), MIN_CYCLE_TIME)
        self._set_attribute("tim", number, refresh=True)

    def enable(self) -> None:
        """Start scrolling."""
        self._set_attribute("en", 1)

    def disable(self) -> None:
        """Stop scrolling."""
        self._set_attribute("en", 0)