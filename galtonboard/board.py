"""Galton board simulation with a joystick tilt and an OLED histogram."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from .ssd1306 import SSD1306, RecordingBus

DEFAULT_BALLS = 9
DEFAULT_COLUMNS = 5

# Joystick ADC readings strictly between these two bounds count as centred.
JOYSTICK_CENTER_LOW = 2000
JOYSTICK_CENTER_HIGH = 2200
JOYSTICK_CENTERED = (JOYSTICK_CENTER_LOW + JOYSTICK_CENTER_HIGH) // 2

HISTOGRAM_MAX_HEIGHT = 50
HISTOGRAM_BASELINE = 55
HISTOGRAM_BAR_WIDTH = 10
HISTOGRAM_SPACING = 20
HISTOGRAM_LABEL_Y = 57


@dataclass
class BallPath:
    """The cells a ball passed through, one ``(row, column)`` per row, and its bin."""

    cells: list[tuple[int, int]] = field(default_factory=list)

    @property
    def bin(self) -> int:
        return self.cells[-1][1]


def histogram_height(count: int, balls: int) -> int:
    """Height in pixels of the histogram bar for ``count`` out of ``balls``."""
    if balls <= 0:
        raise ValueError(f"number of balls must be positive, got {balls}")
    return count * HISTOGRAM_MAX_HEIGHT // balls


class GaltonBoard:
    """A board of pegs on which balls fall left or right at each row."""

    def __init__(
        self,
        balls: int = DEFAULT_BALLS,
        columns: int = DEFAULT_COLUMNS,
        rng: random.Random | None = None,
        joystick: Callable[[], int] | None = None,
    ) -> None:
        if balls < 1:
            raise ValueError(f"number of balls must be positive, got {balls}")
        if columns < 1:
            raise ValueError(f"number of columns must be positive, got {columns}")
        self.balls = balls
        self.columns = columns
        self.rng = rng if rng is not None else random.Random()
        self.joystick = joystick if joystick is not None else (lambda: JOYSTICK_CENTERED)
        self.counts = [0] * columns

    def _moves_right(self) -> bool:
        chance = self.rng.random()
        reading = self.joystick()
        if JOYSTICK_CENTER_LOW < reading < JOYSTICK_CENTER_HIGH:
            return chance > 0.5
        return reading >= JOYSTICK_CENTER_HIGH

    def drop_ball(self) -> BallPath:
        """Let one ball fall through every row and add it to its bin's count."""
        path = BallPath()
        column = 0
        for row in range(self.columns):
            path.cells.append((row, column))
            if self._moves_right():
                column += 1
        self.counts[path.bin] += 1
        return path

    def run(self) -> list[int]:
        """Reset the counts, drop every ball and return the count of each bin."""
        self.counts = [0] * self.columns
        for _ in range(self.balls):
            self.drop_ball()
        return list(self.counts)

    def draw_idle(self, display: SSD1306, color: bool) -> None:
        """Draw the start screen that asks for the button to be pressed."""
        display.fill(not color)
        display.rect(3, 3, 122, 58, color, not color)
        display.draw_string(" EMBARCATECH ", 15, 0)
        display.draw_string("APERTE A PARA", 17, 20)
        display.draw_string("  INICIAR", 17, 35)
        display.send_data()

    def draw_histogram(
        self, display: SSD1306, counts: Sequence[int], color: bool
    ) -> None:
        """Clear the display and draw one bar and label per bin."""
        display.fill(False)
        lefts = [HISTOGRAM_SPACING * (n + 1) for n in range(len(counts))]
        for count, left in zip(counts, lefts):
            height = histogram_height(count, self.balls)
            display.rect(
                HISTOGRAM_BASELINE - height, left, HISTOGRAM_BAR_WIDTH, height,
                color, not color,
            )
        for count, left in zip(counts, lefts):
            display.draw_string(str(count), left + 1, HISTOGRAM_LABEL_Y)
        display.send_data()


def main(argv: Sequence[str] | None = None) -> int:
    """Run one round of the board and print the counts and the histogram screen."""
    parser = argparse.ArgumentParser(
        prog="galtonboard", description="Simulate a Galton board."
    )
    parser.add_argument("--balls", type=int, default=DEFAULT_BALLS)
    parser.add_argument("--columns", type=int, default=DEFAULT_COLUMNS)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--joystick", type=int, default=JOYSTICK_CENTERED,
        help="fixed joystick ADC reading (0-4095)",
    )
    args = parser.parse_args(argv)

    try:
        board = GaltonBoard(
            balls=args.balls,
            columns=args.columns,
            rng=random.Random(args.seed),
            joystick=lambda: args.joystick,
        )
    except ValueError as error:
        parser.error(str(error))

    counts = board.run()
    display = SSD1306(RecordingBus())
    board.draw_histogram(display, counts, True)
    print(" ".join(str(count) for count in counts))
    print(display.to_text())
    return 0


if __name__ == "__main__":
    sys.exit(main())