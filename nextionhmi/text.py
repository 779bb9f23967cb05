"""Text component."""

from __future__ import annotations

from .component import TouchComponent

# Set-text commands are built in a 256-byte buffer with room for 254 characters.
MAX_SET_TEXT_COMMAND = 254


class Text(TouchComponent):
    """A component that displays a line of text."""

    def get_text(self, max_length: int) -> str:
        """Return the component's text, at most ``max_length`` characters."""
        self.link.send_command(f"get {self.name}.txt")
        return self.link.receive_string(max_length)

    def set_text(self, text: str) -> None:
        """Set the component's text; the whole command is cut to 254 characters."""
        command = f'{self.name}.txt="{text}"'
        self.link.send_command(command[:MAX_SET_TEXT_COMMAND])
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
        """Set the background picture (``pic``)."""
        self._set_attribute("pic", value)