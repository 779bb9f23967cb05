from collections import deque

import pytest

from nextionhmi.component import NextionError
from nextionhmi.text import Text


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
    return Text(link, 0, 2, "t0")


def test_get_text_sends_query_and_returns_reply():
    link = FakeLink(strings=["hello"])
    assert make(link).get_text(10) == "hello"
    assert link.sent == ["get t0.txt"]
    assert link.lengths == [10]


def test_set_text_sends_quoted_text():
    link = FakeLink()
    make(link).set_text("hello")
    assert link.sent == ['t0.txt="hello"']
    assert link.finished == 1


def test_set_text_truncates_long_command():
    link = FakeLink()
    make(link).set_text("a" * 300)
    (command,) = link.sent
    assert len(command) == 254
    assert command.startswith('t0.txt="aaa')


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
    ],
)
def test_getters_query_attribute(getter, attribute):
    link = FakeLink(numbers=[42])
    assert getattr(make(link), getter)() == 42
    assert link.sent == [f"get t0.{attribute}"]


@pytest.mark.parametrize(
    "setter, attribute",
    [
        ("set_background_color", "bco"),
        ("set_font_color", "pco"),
        ("set_x_align", "xcen"),
        ("set_y_align", "ycen"),
        ("set_font", "font"),
        ("set_crop_picture", "picc"),
    ],
)
def test_setters_assign_and_refresh(setter, attribute):
    link = FakeLink()
    getattr(make(link), setter)(7)
    assert link.sent == [f"t0.{attribute}=7", "ref t0"]
    assert link.finished == 1


def test_set_background_picture_does_not_refresh():
    link = FakeLink()
    make(link).set_background_picture(3)
    assert link.sent == ["t0.pic=3"]
    assert link.finished == 1


def test_background_color_pinned():
    link = FakeLink()
    make(link).set_background_color(63488)
    assert link.sent[0] == "t0.bco=63488"


def test_negative_value_rejected():
    link = FakeLink()
    with pytest.raises(ValueError):
        make(link).set_font(-1)
    assert link.sent == []


def test_value_too_large_rejected():
    with pytest.raises(ValueError):
        make(FakeLink()).set_font_color(2**32)


def test_display_error_propagates():
    link = FakeLink(fail=True)
    with pytest.raises(NextionError):
        make(link).set_text("x")
    with pytest.raises(NextionError):
        make(link).get_font()