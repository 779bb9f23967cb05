from unittest.mock import Mock

import pytest

from nextionhmi.component import Link, NextionError
from nextionhmi.page import Page


def make(page_id=0):
    link = Mock(spec=Link)
    return link, Page(link, page_id, 0, f"page{page_id}")


def test_show_sends_page_id():
    link, page = make(2)
    page.show()
    link.send_command.assert_called_once_with("page 2")
    assert link.receive_command_finished.call_count == 1


def test_show_failure_raises():
    link, page = make(2)
    link.receive_command_finished.side_effect = NextionError("rejected")
    with pytest.raises(NextionError):
        page.show()


@pytest.mark.parametrize(
    "method, args, command",
    [
        ("draw_line", (20, 30, 170, 200, 31), "line 20,30,170,200,31"),
        ("draw_rectangle", (20, 30, 170, 200, 31), "draw 20,30,170,200,31"),
        ("fill_rectangle", (20, 30, 170, 200, 31), "fill 20,30,170,200,31"),
        ("fill_circle", (50, 60, 10, 63488), "cirs 50,60,10,63488"),
    ],
)
def test_drawing_commands(method, args, command):
    link, page = make()
    getattr(page, method)(*args)
    link.send_command.assert_called_once_with(command)
    assert link.receive_command_finished.call_count == 0


@pytest.mark.parametrize(
    "method, args",
    [("draw_line", (70000, 0, 1, 1, 0)), ("fill_circle", (1, 1, 1, -1))],
)
def test_out_of_range_arguments(method, args):
    link, page = make()
    with pytest.raises(ValueError):
        getattr(page, method)(*args)
    assert link.send_command.call_count == 0