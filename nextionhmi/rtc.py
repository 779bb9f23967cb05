"""Access to the display's real-time clock."""

from __future__ import annotations

import enum
from typing import Iterable, Sequence, Union

from .component import UINT32_MAX, Link, _unsigned

FIELD_COUNT = 7
WRITABLE_FIELD_COUNT = 6
MIN_TIME_TEXT = 19
# The formatted time lives in a 22-byte buffer: 21 characters and a terminator.
TIME_BUFFER_SIZE = 22


class TimeField(enum.Enum):
    """The clock registers, in register order (``rtc0`` to ``rtc6``)."""

    YEAR = "year"
    MONTH = "mon"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "min"
    SECOND = "sec"
    WEEKDAY = "week"

    @property
    def register(self) -> int:
        """The register number of this field."""
        return list(TimeField).index(self)


FieldSpec = Union[TimeField, str]


def _resolve(field: FieldSpec) -> TimeField:
    """Return the field named by ``field``.

    A string selects the first field whose key (``year``, ``mon``, ``day``,
    ``hour``, ``min``, ``sec``, ``week``) occurs in it, so ``"month"`` and
    ``"minute"`` work as well.
    """
    if isinstance(field, TimeField):
        return field
    if isinstance(field, str):
        for candidate in TimeField:
            if candidate.value in field:
                return candidate
        raise ValueError(f"unknown time field: {field!r}")
    raise TypeError(f"time field must be a TimeField or str, not {type(field).__name__}")


def _char(number: int) -> str:
    """Render a digit the way the display's firmware buffer does."""
    return chr((number + ord("0")) & 0xFF)


class Rtc:
    """The real-time clock of a Nextion display."""

    def __init__(self, link: Link) -> None:
        self.link = link

    def _write_register(self, register: int, text: str) -> None:
        self.link.send_command(f"rtc{register}={text}")
        self.link.receive_command_finished()

    def _read_register(self, register: int) -> int:
        self.link.send_command(f"get rtc{register}")
        return self.link.receive_number()

    def write_time(self, text: str) -> None:
        """Set the clock from text shaped like ``YYYY-MM-DD HH:MM:SS``.

        The digits are taken from fixed positions; the separators may be any
        character. Raises ValueError when the text is shorter than 19 characters.
        """
        if len(text) < MIN_TIME_TEXT:
            raise ValueError(
                f"time text must have at least {MIN_TIME_TEXT} characters, got {len(text)}"
            )
        parts = (
            text[0:4],
            text[5:7],
            text[8:10],
            text[11:13],
            text[14:16],
            text[17:19],
        )
        for register, part in enumerate(parts):
            self._write_register(register, part)

    def write_time_fields(self, fields: Sequence[int]) -> None:
        """Set the clock from year, month, day, hour, minute and second."""
        values = list(fields)
        if len(values) < WRITABLE_FIELD_COUNT:
            raise ValueError(
                f"expected {WRITABLE_FIELD_COUNT} time fields, got {len(values)}"
            )
        numbers = [
            _unsigned(value, UINT32_MAX, field.value)
            for field, value in zip(TimeField, values[:WRITABLE_FIELD_COUNT])
        ]
        for register, number in enumerate(numbers):
            self._write_register(register, str(number))

    def write_field(self, field: FieldSpec, value: int) -> None:
        """Set one clock field; the weekday cannot be written."""
        resolved = _resolve(field)
        if resolved is TimeField.WEEKDAY:
            raise ValueError("the weekday field cannot be written")
        number = _unsigned(value, UINT32_MAX, resolved.value)
        self._write_register(resolved.register, str(number))

    def read_time_fields(self, count: int = FIELD_COUNT) -> list[int]:
        """Read all seven registers and return the first ``count`` of them."""
        if not isinstance(count, int) or not 0 <= count <= FIELD_COUNT:
            raise ValueError(f"count must be between 0 and {FIELD_COUNT}, got {count!r}")
        values = [self._read_register(field.register) for field in TimeField]
        return values[:count]

    def read_time_string(self, max_length: int = TIME_BUFFER_SIZE) -> str:
        """Read the clock as ``YYYY/MM/DD HH:MM:SS W``, cut to ``max_length``."""
        if not isinstance(max_length, int) or max_length < 0:
            raise ValueError(f"max_length must be a non-negative integer, got {max_length!r}")
        year, month, day, hour, minute, second, week = self.read_time_fields()
        text = "".join(
            [
                _char(year // 1000),
                _char((year // 100) % 10),
                _char((year // 10) % 10),
                _char(year % 10),
                "/",
                _char(month // 10),
                _char(month % 10),
                "/",
                _char(day // 10),
                _char(day % 10),
                " ",
                _char(hour // 10),
                _char(hour % 10),
                ":",
                _char(minute // 10),
                _char(minute % 10),
                ":",
                _char(second // 10),
                _char(second % 10),
                " ",
                _char(week),
            ]
        )
        return text[:max_length]

    def read_field(self, field: FieldSpec) -> int:
        """Read one clock field."""
        resolved = _resolve(field)
        return self._read_register(resolved.register)

    def read_fields(self, fields: Iterable[FieldSpec]) -> list[int]:
        """Read several clock fields, one request each, in the order given."""
        return [self.read_field(field) for field in fields]