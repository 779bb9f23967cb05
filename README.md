# nextionhmi

Python objects for the widgets of a Nextion HMI touch display. Each object
turns method calls into the display's text commands, such as `get t0.txt`,
`t0.bco=63488` or `page 1`. It sends them over a link that you supply and
reads back the display's replies.

## Installation

```
pip install nextionhmi
```

To run the tests as well:

```
pip install "nextionhmi[test]"
pytest
```

## The link

Every component talks to the display through an object that follows the
`Link` protocol in `nextionhmi.component`. Your implementation does the
framing and the serial I/O:

- `send_command(command)`: write one command to the display.
- `receive_number()`: read a numeric reply and return it.
- `receive_command_finished()`: wait for the acknowledgement of a command.
- `receive_string(max_length)`: read a text reply of at most `max_length`
  characters.

`NextionError` is the exception a link is expected to raise when the
display rejects a command or sends an unusable reply. The components let it
pass through to the caller. The components raise `ValueError` or `TypeError`
themselves when an id, coordinate or attribute value is not an unsigned
integer in range: ids 0–255, coordinates and radius 0–65535, colours and
other attribute values 0–4294967295.

## Components

| Module | Class | Purpose |
|---|---|---|
| `nextionhmi.component` | `Component`, `TouchComponent`, `TouchEvent`, `dispatch_touch` | base objects, visibility, touch callbacks |
| `nextionhmi.page` | `Page` | show a page; draw lines, rectangles and filled circles |
| `nextionhmi.slider` | `Slider` | value, min/max, colours, pointer thickness, cursor height |
| `nextionhmi.text` | `Text` | text, colours, alignment, font, pictures |
| `nextionhmi.scrolltext` | `ScrollText` | text plus scroll direction, distance, cycle time, enable/disable |
| `nextionhmi.rtc` | `Rtc`, `TimeField` | read and write the display's real-time clock |

Components are built as `Class(link, page_id, component_id, name)`.
Getters send `get <name>.<attribute>` and return the number the link reads.
Setters send `<name>.<attribute>=<value>` and wait for the acknowledgement.
Most setters also send `ref <name>` so that the display redraws the
component. The exceptions are `Slider.set_value`, `Text.set_background_picture`
and the enable/disable calls.

Some details:

- `Component.set_visible(flag)` sends `vis <component_id>,1` or `,0`.
- `Component.print_info()` logs `[address:page,component,name]` at debug
  level and returns that text.
- `Page.show()` sends `page <page_id>`. The drawing calls `draw_line`,
  `draw_rectangle`, `fill_rectangle` and `fill_circle` send `line`, `draw`,
  `fill` and `cirs` and do not wait for a reply.
- `Text.set_text` cuts the whole command to 254 characters.
- `ScrollText.set_scroll_distance` raises values below 2 to 2, and
  `ScrollText.set_cycle_time` raises values below 8 to 8.

## Real-time clock

`Rtc(link)` works with the registers `rtc0` to `rtc6`: year, month, day,
hour, minute, second and weekday.

- `write_time("2024-01-02 03:04:05")` takes the digits from fixed positions,
  so any separator works. It raises `ValueError` for text shorter than 19
  characters.
- `write_time_fields([2024, 1, 2, 3, 4, 5])` writes year to second.
- `write_field(field, value)` writes one field. The weekday cannot be
  written.
- `read_time_fields(count=7)` returns the first `count` register values.
- `read_time_string(max_length=22)` returns `YYYY/MM/DD HH:MM:SS W`, cut to
  `max_length`.
- `read_field(field)` reads one field, and `read_fields(fields)` reads
  several of them.

A field is a `TimeField` member or a string. A string selects the first
field whose key (`year`, `mon`, `day`, `hour`, `min`, `sec`, `week`) it
contains.

## Example

```python
from nextionhmi.component import TouchEvent, dispatch_touch
from nextionhmi.page import Page
from nextionhmi.text import Text
from nextionhmi.rtc import Rtc, TimeField

link = MySerialLink("/dev/ttyUSB0")  # your Link implementation

home = Page(link, 0, 0, "page0")
title = Text(link, 0, 1, "t0")

home.show()
title.set_text("Hello")
title.set_font_color(63488)
home.draw_line(20, 30, 170, 200, 31)

title.attach_pop(lambda arg: print("released", arg), "t0")

rtc = Rtc(link)
rtc.write_time("2024-01-02 03:04:05")
print(rtc.read_time_string())          # e.g. "2024/01/02 03:04:05 2"
print(rtc.read_field(TimeField.YEAR))

# Pass touch events that the display reports to the matching component.
dispatch_touch([home, title], 0, 1, TouchEvent.POP)
```

## Touch callbacks

`TouchComponent.attach_push(callback, arg)` and `attach_pop(callback, arg)`
register a callback that is called with `arg`. Only the last callback
attached is kept, and `detach_push()` / `detach_pop()` remove it.
`dispatch_touch(components, page_id, component_id, event)` finds the first
component with the given ids and fires its push or pop callback. It returns
that component, or `None` if no component matches.

## What the package does not do

- It has no serial port code. You supply the `Link`, and with it the reading
  of touch events from the display.
- Only the widgets listed above have classes. Other widget types on the
  display can be driven by sending their commands through the link directly.