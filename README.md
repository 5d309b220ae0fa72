# galtonboard

A small Galton board simulation. Balls fall through a board of pegs and land
in one of several bins. By default there are 9 balls and 5 bins. The package
can draw the final histogram and a start screen into the frame buffer of a
virtual 128x64 SSD1306 monochrome display. It can also print that frame buffer
as text.

## Installation

```
pip install .
```

## Command line

```
galtonboard [--balls N] [--columns N] [--seed N] [--joystick READING]
```

The command runs one round of the simulation and prints two things:

1. The count for each bin, on one line, separated by spaces.
2. The histogram screen as 64 lines of 128 characters. `#` is a lit pixel and
   `.` is an unlit one.

Options:

- `--balls`: the number of balls to drop. The default is 9.
- `--columns`: the number of bins, which is also the number of peg rows. The
  default is 5.
- `--seed`: the seed for the random number generator, so that runs can be
  repeated.
- `--joystick`: a fixed 12-bit joystick reading. The default is 2100, which
  counts as centred.

A ball count or column count below 1 is rejected with a usage error.

## Library use

```python
from galtonboard.ssd1306 import SSD1306, RecordingBus
from galtonboard.board import GaltonBoard, histogram_height

bus = RecordingBus()
display = SSD1306(bus, 128, 64, 0x3C, False)
display.draw_string("GALTON", 10, 10)
print(display.to_text())

board = GaltonBoard(9, 5, None, None)
counts = board.run()
board.draw_histogram(display, counts, True)
```

### `galtonboard.ssd1306`

`SSD1306(bus, width=128, height=64, address=0x3C, external_vcc=False)` holds a
page-organised frame buffer. The height must be a positive multiple of 8,
otherwise a `ValueError` is raised.

Drawing methods:

- `pixel` and `get_pixel`. Coordinates outside the display are ignored when
  setting a pixel and read as unlit when reading one.
- `fill`, `rect`, `line`, `hline` and `vline`.
- `draw_char` and `draw_string`. `draw_string` wraps to the next 8-pixel row
  near the right edge and stops near the bottom.
- `to_text` renders the buffer as `#`/`.` rows.

Bus methods:

- `configure` sends the power-up command sequence.
- `command` writes one command byte.
- `send_data` sets the column and page range, then writes the whole buffer.

All bus writes go to the object you pass as `bus`. That object needs a
`write(address, data)` method. `RecordingBus` keeps every write in its
`writes` list as `(address, data)` pairs.

`Command` lists the SSD1306 command opcodes.

### `galtonboard.font`

`glyph(char)` returns the 8 column bytes of the 8x8 bitmap for `A`-`Z` and
`0`-`9`. In each byte, bit 0 is the top row. Any other single character gives
a blank glyph. Anything that is not a single character raises `ValueError`.

### `galtonboard.board`

`GaltonBoard(balls=9, columns=5, rng=None, joystick=None)` runs the
simulation. Pass a `random.Random` as `rng` to get repeatable results.

- `drop_ball` lets one ball fall and adds it to its bin's count. It returns a
  `BallPath`: `cells` holds one `(row, column)` pair per row, and `bin` is the
  bin the ball landed in.
- `run` resets the counts, drops every ball and returns the list of counts.
- `draw_idle(display, color)` draws the start screen.
- `draw_histogram(display, counts, color)` clears the display. It then draws
  one bar per bin, 20 pixels apart, with the count printed under each bar.

The optional `joystick` is a callable that returns a 12-bit reading:

- A reading strictly between 2000 and 2200 counts as centred. The ball then
  goes right or left at random at each peg.
- A reading of 2200 or more sends it right at every peg.
- Anything lower keeps it to the left.

`histogram_height(count, balls)` returns a bar's height in pixels out of 50,
rounded down. It raises `ValueError` if `balls` is not positive.

## What it does not do

There is no real display or I2C hardware here. The display exists only as a
frame buffer, and its bus writes are only recorded. There is no live input
either: no button starts a round and no joystick is read while a ball falls.
The joystick is a fixed value or a callable you supply. The command runs a
single round and shows only the final histogram. It does not animate each
ball or show a running count.

## Tests

```
pip install .[test]
pytest
```