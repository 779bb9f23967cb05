from collections import deque

import pytest

from nextionhmi.component import NextionError
from nextionhmi.scrolltext import ScrollText


class FakeLink:
    def __init__(self, numbers=(), strings=(), fail=False):
        self.sent = []
        self.numbers = deque(numbers)
        self.strings = deque(strings)
        self.finished = 0
        self.lengths = []
        self.fail = fail

    def send_command(self, command):
        self.sent.append(command)

    def receive_number(self):
        if self.fail:
            raise NextionError("no reply")
        return self.numbers.popleft()

    def receive_command_finished(self):
        if self.fail:
            raise NextionError("rejected")
        self.finished += 1

    def receive_string(self, max_length):
        self.lengths.append(max_length)
        return self.strings.popleft()[:max_length]


def make(link):
    return ScrollText(link, 1, 4, "g0")


def test_get_text_returns_reply():
    link = FakeLink(strings=["scrolling"])
    assert make(link).get_text(32) == "scrolling"
    assert link.sent == ["get g0.txt"]
    assert link.lengths == [32]


def test_set_text_is_not_truncated():
    link = FakeLink()
    make(link).set_text("b" * 300)
    (command,) = link.sent
    assert command == 'g0.txt="' + "b" * 300 + '"'
    assert link.finished == 1


@pytest.mark.parametrize(
    "getter, attribute",
    [
        ("get_background_color", "bco"),
        ("get_font_color", "pco"),
        ("get_x_align", "xcen"),
        ("get_y_align", "ycen"),
        ("get_font", "font"),
        ("get_crop_picture", "picc"),
        ("get_background_picture", "pic"),
        ("get_scroll_direction", "dir"),
        ("get_scroll_distance", "dis"),
        ("get_cycle_time", "tim"),
    ],
)
def test_getters_query_attribute(getter, attribute):
    link = FakeLink(numbers=[9])
    assert getattr(make(link), getter)() == 9
    assert link.sent == [f"get g0.{attribute}"]


@pytest.mark.parametrize(
    "setter, attribute",
    [
        ("set_background_color", "bco"),
        ("set_font_color", "pco"),
        ("set_x_align", "xcen"),
        ("set_y_align", "ycen"),
        ("set_font", "font"),
        ("set_crop_picture", "picc"),
        ("set_background_picture", "pic"),
        ("set_scroll_direction", "dir"),
        ("set_scroll_distance", "dis"),
        ("set_cycle_time", "tim"),
    ],
)
def test_setters_assign_and_refresh(setter, attribute):
    link = FakeLink()
    getattr(make(link), setter)(20)
    assert link.sent == [f"g0.{attribute}=20", "ref g0"]
    assert link.finished == 1


@pytest.mark.parametrize("value", [0, 1])
def test_scroll_distance_has_minimum(value):
    link = FakeLink()
    make(link).set_scroll_distance(value)
    assert link.sent[0] == "g0.dis=2"


@pytest.mark.parametrize("value", [0, 7])
def test_cycle_time_has_minimum(value):
    link = FakeLink()
    make(link).set_cycle_time(value)
    assert link.sent[0] == "g0.tim=8"


def test_enable_and_disable():
    link = FakeLink()
    text = make(link)
    text.enable()
    text.disable()
    assert link.sent == ["g0.en=1", "g0.en=0"]
    assert link.finished == 2


def test_negative_distance_rejected():
    link = FakeLink()
    with pytest.raises(ValueError):
        make(link).set_scroll_distance(-5)
    assert link.sent == []


def test_display_error_propagates():
    link = FakeLink(fail=True)
    with pytest.raises(NextionError):
        make(link).enable()
    with pytest.raises(NextionError):
        make(link).get_scroll_direction()