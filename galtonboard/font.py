"""8x8 bitmap font for the digits 0-9 and the capital letters A-Z."""

from __future__ import annotations

GLYPH_SIZE = 8

_BLANK = bytes(GLYPH_SIZE)

_DIGITS = (
    bytes((0x3E, 0x41, 0x41, 0x49, 0x41, 0x41, 0x3E, 0x00)),  # 0
    bytes((0x00, 0x00, 0x42, 0x7F, 0x40, 0x00, 0x00, 0x00)),  # 1
    bytes((0x30, 0x49, 0x49, 0x49, 0x49, 0x46, 0x00, 0x00)),  # 2
    bytes((0x49, 0x49, 0x49, 0x49, 0x49, 0x49, 0x36, 0x00)),  # 3
    bytes((0x3F, 0x20, 0x20, 0x78, 0x20, 0x20, 0x00, 0x00)),  # 4
    bytes((0x4F, 0x49, 0x49, 0x49, 0x49, 0x30, 0x00, 0x00)),  # 5
    bytes((0x3F, 0x48, 0x48, 0x48, 0x48, 0x48, 0x30, 0x00)),  # 6
    bytes((0x01, 0x01, 0x01, 0x61, 0x31, 0x0D, 0x03, 0x00)),  # 7
    bytes((0x36, 0x49, 0x49, 0x49, 0x49, 0x49, 0x36, 0x00)),  # 8
    bytes((0x06, 0x09, 0x09, 0x09, 0x09, 0x09, 0x7F, 0x00)),  # 9
)

_LETTERS = (
    bytes((0x78, 0x14, 0x12, 0x11, 0x12, 0x14, 0x78, 0x00)),  # A
    bytes((0x7F, 0x49, 0x49, 0x49, 0x49, 0x49, 0x7F, 0x00)),  # B
    bytes((0x7E, 0x41, 0x41, 0x41, 0x41, 0x41, 0x41, 0x00)),  # C
    bytes((0x7F, 0x41, 0x41, 0x41, 0x41, 0x41, 0x7E, 0x00)),  # D
    bytes((0x7F, 0x49, 0x49, 0x49, 0x49, 0x49, 0x49, 0x00)),  # E
    bytes((0x7F, 0x09, 0x09, 0x09, 0x09, 0x01, 0x01, 0x00)),  # F
    bytes((0x7F, 0x41, 0x41, 0x41, 0x51, 0x51, 0x73, 0x00)),  # G
    bytes((0x7F, 0x08, 0x08, 0x08, 0x08, 0x08, 0x7F, 0x00)),  # H
    bytes((0x00, 0x00, 0x00, 0x7F, 0x00, 0x00, 0x00, 0x00)),  # I
    bytes((0x21, 0x41, 0x41, 0x3F, 0x01, 0x01, 0x01, 0x00)),  # J
    bytes((0x00, 0x7F, 0x08, 0x08, 0x14, 0x22, 0x41, 0x00)),  # K
    bytes((0x7F, 0x40, 0x40, 0x40, 0x40, 0x40, 0x40, 0x00)),  # L
    bytes((0x7F, 0x02, 0x04, 0x08, 0x04, 0x02, 0x7F, 0x00)),  # M
    bytes((0x7F, 0x02, 0x04, 0x08, 0x10, 0x20, 0x7F, 0x00)),  # N
    bytes((0x3E, 0x41, 0x41, 0x41, 0x41, 0x41, 0x3E, 0x00)),  # O
    bytes((0x7F, 0x11, 0x11, 0x11, 0x11, 0x11, 0x0E, 0x00)),  # P
    bytes((0x3E, 0x41, 0x41, 0x49, 0x51, 0x61, 0x7E, 0x00)),  # Q
    bytes((0x7F, 0x11, 0x11, 0x11, 0x31, 0x51, 0x0E, 0x00)),  # R
    bytes((0x46, 0x49, 0x49, 0x49, 0x49, 0x30, 0x00, 0x00)),  # S
    bytes((0x01, 0x01, 0x01, 0x7F, 0x01, 0x01, 0x01, 0x00)),  # T
    bytes((0x3F, 0x40, 0x40, 0x40, 0x40, 0x40, 0x3F, 0x00)),  # U
    bytes((0x0F, 0x10, 0x20, 0x40, 0x20, 0x10, 0x0F, 0x00)),  # V
    bytes((0x7F, 0x20, 0x10, 0x08, 0x10, 0x20, 0x7F, 0x00)),  # W
    bytes((0x00, 0x41, 0x22, 0x14, 0x14, 0x22, 0x41, 0x00)),  # X
    bytes((0x01, 0x02, 0x04, 0x78, 0x04, 0x02, 0x01, 0x00)),  # Y
    bytes((0x41, 0x61, 0x59, 0x45, 0x43, 0x41, 0x00, 0x00)),  # Z
)

_GLYPHS: dict[str, bytes] = {
    **{str(digit): pattern for digit, pattern in enumerate(_DIGITS)},
    **{chr(ord("A") + n): pattern for n, pattern in enumerate(_LETTERS)},
}


def glyph(char: str) -> bytes:
    """Return the 8 column bytes for ``char``; bit 0 of each byte is the top row.

    Characters outside 0-9 and A-Z render as a blank cell.
    """
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return _GLYPHS.get(char, _BLANK)