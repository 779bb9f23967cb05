"""Base components shared by every widget on a Nextion display."""

from __future__ import annotations

import enum
import logging
from typing import Any, Callable, Iterable, Optional, Protocol

logger = logging.getLogger(__name__)

UINT8_MAX = 0xFF
UINT16_MAX = 0xFFFF
UINT32_MAX = 0xFFFF_FFFF

TouchCallback = Callable[[Any], None]


class NextionError(Exception):
    """Raised when the display rejects a command or its reply is unusable."""


class Link(Protocol):
    """The serial connection to a Nextion display.

    Implementations raise :class:`NextionError` when the display does not
    answer as expected.
    """

    def send_command(self, command: str) -> None:
        """Send one instruction to the display."""

    def receive_number(self) -> int:
        """Wait for a numeric reply and return it."""

    def receive_command_finished(self) -> None:
        """Wait for the display to confirm that the last command succeeded."""

    def receive_string(self, max_length: int) -> str:
        """Wait for a text reply of at most ``max_length`` characters."""


def _unsigned(value: int, maximum: int, what: str) -> int:
    """Return ``value`` if it is an integer in ``0..maximum``, else raise ValueError."""
    if not isinstance(value, int):
        raise TypeError(f"{what} must be an integer, not {type(value).__name__}")
    if not 0 <= value <= maximum:
        raise ValueError(f"{what} must be between 0 and {maximum}, got {value}")
    return int(value)


class TouchEvent(enum.IntEnum):
    """Touch events reported by the panel."""

    POP = 0x00
    PUSH = 0x01


class Component:
    """A component on a page, identified by page id, component id and name."""

    def __init__(self, link: Link, page_id: int, component_id: int, name: Optional[str]) -> None:
        self.link = link
        self._page_id = _unsigned(page_id, UINT8_MAX, "page id")
        self._component_id = _unsigned(component_id, UINT8_MAX, "component id")
        self._name = name

    @property
    def page_id(self) -> int:
        return self._page_id

    @property
    def component_id(self) -> int:
        return self._component_id

    @property
    def name(self) -> Optional[str]:
        return self._name

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(page_id={self._page_id}, "
            f"component_id={self._component_id}, name={self._name!r})"
        )

    def set_visible(self, visible: bool) -> None:
        """Show or hide the component."""
        flag = "1" if visible else "0"
        self.link.send_command(f"vis {self._component_id},{flag}")
        self.link.receive_command_finished()

    def print_info(self) -> str:
        """Log the component's identity at debug level and return the logged text."""
        name = self._name if self._name else "(null)"
        info = f"[{id(self):#x}:{self._page_id},{self._component_id},{name}]"
        logger.debug("%s", info)
        return info

    def _get_attribute(self, attribute: str) -> int:
        self.link.send_command(f"get {self._name}.{attribute}")
        return self.link.receive_number()

    def _set_attribute(self, attribute: str, value: int, *, refresh: bool = False) -> None:
        number = _unsigned(value, UINT32_MAX, attribute)
        self.link.send_command(f"{self._name}.{attribute}={number}")
        if refresh:
            self.link.send_command(f"ref {self._name}")
        self.link.receive_command_finished()


class TouchComponent(Component):
    """A component that can run callbacks on push and pop touch events."""

    def __init__(self, link: Link, page_id: int, component_id: int, name: Optional[str]) -> None:
        super().__init__(link, page_id, component_id, name)
        self._push_callback: Optional[TouchCallback] = None
        self._push_arg: Any = None
        self._pop_callback: Optional[TouchCallback] = None
        self._pop_arg: Any = None

    def attach_push(self, callback: TouchCallback, arg: Any = None) -> None:
        """Run ``callback(arg)`` on push events; replaces any earlier callback."""
        self._push_callback = callback
        self._push_arg = arg

    def detach_push(self) -> None:
        self._push_callback = None
        self._push_arg = None

    def attach_pop(self, callback: TouchCallback, arg: Any = None) -> None:
        """Run ``callback(arg)`` on pop events; replaces any earlier callback."""
        self._pop_callback = callback
        self._pop_arg = arg

    def detach_pop(self) -> None:
        self._pop_callback = None
        self._pop_arg = None

    def push(self) -> None:
        """Fire the push callback, if one is attached."""
        if self._push_callback is not None:
            self._push_callback(self._push_arg)

    def pop(self) -> None:
        """Fire the pop callback, if one is attached."""
        if self._pop_callback is not None:
            self._pop_callback(self._pop_arg)


def dispatch_touch(
    components: Optional[Iterable[TouchComponent]],
    page_id: int,
    component_id: int,
    event: int,
) -> Optional[TouchComponent]:
    """Deliver a touch event to the first component with matching ids.

    Returns the matched component, or None when nothing matched.
    """
    if components is None:
        return None
    for component in components:
        if component.page_id == page_id and component.component_id == component_id:
            component.print_info()
            if event == TouchEvent.PUSH:
                component.push()
            elif event == TouchEvent.POP:
                component.pop()
            return component
    return None