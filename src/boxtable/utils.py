"""Terminal text utilities: escape-aware width measurement and segmentation.

Cells may carry SGR escape sequences (``ESC [ ... m``). These occupy no
screen columns, and must travel with the character that follows them when a
rendered line is rewritten character by character.
"""

from __future__ import annotations

import wcwidth as _wcwidth

from boxtable.cells import LEGACY_TOKENS, Cell, Marker

ESC = "\x1b"
ESCAPE_TERMINATOR = "m"

# ---------------------------------------------------------------------------
# Wide glyphs
# ---------------------------------------------------------------------------

# Pictographic blocks whose emoji-presentation members are drawn two
# columns wide. Everything outside these blocks is measured as one column.
_WIDE_BLOCKS: tuple[tuple[int, int], ...] = (
    (0x1F300, 0x1F64F),  # Misc symbols and pictographs, emoticons
    (0x1F680, 0x1F6FF),  # Transport and map symbols
    (0x1F900, 0x1F9FF),  # Supplemental symbols and pictographs
    (0x1FA70, 0x1FAFF),  # Symbols and pictographs extended-A
)
_WIDE_START = _WIDE_BLOCKS[0][0]


def is_wide(ch: str) -> bool:
    """Return ``True`` if the single character *ch* occupies two columns."""
    cp = ord(ch)
    if cp < _WIDE_START:
        return False
    for lo, hi in _WIDE_BLOCKS:
        if lo <= cp <= hi:
            return _wcwidth.wcwidth(ch) == 2
    return False


# ---------------------------------------------------------------------------
# visible_width
# ---------------------------------------------------------------------------


def visible_width(text: Cell) -> int:
    """Calculate the number of screen columns *text* occupies.

    * Structural markers and their legacy spellings have width 0.
    * ``ESC`` through the next ``m`` has width 0. If no ``m`` follows, the
      rest of the string has width 0 too.
    * Glyphs accepted by :func:`is_wide` count 2, all other characters 1.
    """
    if isinstance(text, Marker) or text in LEGACY_TOKENS:
        return 0
    return text_width(text)


def text_width(text: str) -> int:
    """Like :func:`visible_width`, but every string is literal text."""
    if not text:
        return 0

    # Fast ASCII path: printable characters only, no escapes
    if text.isascii() and text.isprintable():
        return len(text)

    n = 0
    escaped = False
    for ch in text:
        if escaped:
            if ch == ESCAPE_TERMINATOR:
                escaped = False
        elif ch == ESC:
            escaped = True
        elif is_wide(ch):
            n += 2
        else:
            n += 1
    return n


# ---------------------------------------------------------------------------
# segment_escapes
# ---------------------------------------------------------------------------


def segment_escapes(line: str) -> list[str]:
    """Split *line* into super-characters.

    Each entry is one visible character preceded by any escape-sequence
    bytes that came before it, so ``"a\\x1b[1mb"`` becomes
    ``["a", "\\x1b[1mb"]``. Escape bytes after the last visible character
    form a final entry of their own.
    """
    result: list[str] = []
    package: list[str] = []
    escaped = False
    for ch in line:
        package.append(ch)
        if escaped:
            if ch == ESCAPE_TERMINATOR:
                escaped = False
        elif ch == ESC:
            escaped = True
        else:
            result.append("".join(package))
            package.clear()
    if package:
        result.append("".join(package))
    return result


def glyph_of(super_char: str) -> str:
    """Return the visible character of a super-character ("" for fillers)."""
    return super_char[-1:]


def cell_width(cell: Cell) -> int:
    """Width of a normalized cell: markers are 0, strings are literal."""
    if isinstance(cell, Marker):
        return 0
    return text_width(cell)

