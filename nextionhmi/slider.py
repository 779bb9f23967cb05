"""Slider component."""

from __future__ import annotations

from .component import TouchComponent


class Slider(TouchComponent):
    """A slider whose position is a number between its minimum and maximum."""

    def get_value(self) -> int:
        """Return the slider position (``val``)."""
        return self._get_attribute("val")

    def set_value(self, value: int) -> None:
        """Set the slider position (``val``)."""
        self._set_attribute("val", value)

    def get_background_color(self) -> int:
        """Return the background colour (``bco``)."""
        return self._get_attribute("bco")

    def set_background_color(self, value: int) -> None:
        """Set the background colour (``bco``) and redraw."""
        self._set_attribute("bco", value, refresh=True)

    def get_font_color(self) -> int:
        """Return the foreground colour (``pco``)."""
        return self._get_attribute("pco")

    def set_font_color(self, value: int) -> None:
        """Set the foreground colour (``pco``) and redraw."""
        self._set_attribute("pco", value, refresh=True)

    def get_pointer_thickness(self) -> int:
        """Return the cursor width (``wid``)."""
        return self._get_attribute("wid")

    def set_pointer_thickness(self, value: int) -> None:
        """Set the cursor width (``wid``) and redraw."""
        self._set_attribute("wid", value, refresh=True)

    def get_cursor_height(self) -> int:
        """Return the cursor height (``hig``)."""
        return self._get_attribute("hig")

    def set_cursor_height(self, value: int) -> None:
        """Set the cursor height (``hig``) and redraw."""
        self._set_attribute("hig", value, refresh=True)

    def get_max_value(self) -> int:
        """Return the maximum value (``maxval``)."""
        return self._get_attribute("maxval")

    def set_max_value(self, value: int) -> None:
        """Set the maximum value (``maxval``) and redraw."""
        self._set_attribute("maxval", value, refresh=True)

    def get_min_value(self) -> int:
        """Return the minimum value (``minval``)."""
        return self._get_attribute("minval")

    def set_min_value(self, value: int) -> None:
        """Set the minimum value (``minval``) and redraw."""
        self._set_attribute("minval", value, refresh=True)