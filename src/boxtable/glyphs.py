"""Box-drawing glyphs in plain and bold weight, and junction selection."""

from __future__ import annotations

from typing import Literal

Weight = Literal["plain", "bold"]

# name -> (plain, bold)
_GLYPHS: dict[str, tuple[str, str]] = {
    "dash": ("─", "━"),
    "bar": ("│", "┃"),
    "top_left": ("┌", "┏"),
    "top_right": ("┐", "┓"),
    "bottom_left": ("└", "┗"),
    "bottom_right": ("┘", "┛"),
    "tee": ("┬", "┳"),
    "up_tee": ("┴", "┻"),
    "cross": ("┼", "╋"),
    "left_tee": ("├", "┣"),
    "right_tee": ("┤", "┫"),
}

# (horizontal, vertical) -> cross
_CROSSES: dict[tuple[Weight, Weight], str] = {
    ("plain", "plain"): "┼",
    ("bold", "bold"): "╋",
    ("plain", "bold"): "╂",
    ("bold", "plain"): "┿",
}

# (vertical, horizontal) -> tee; a bold arm against a plain wall has no
# dedicated glyph here and falls back to the all-bold one.
_LEFT_TEES: dict[tuple[Weight, Weight], str] = {
    ("plain", "plain"): "├",
    ("bold", "bold"): "┣",
    ("bold", "plain"): "┠",
    ("plain", "bold"): "┣",
}

_RIGHT_TEES: dict[tuple[Weight, Weight], str] = {
    ("plain", "plain"): "┤",
    ("bold", "bold"): "┫",
    ("bold", "plain"): "┨",
    ("plain", "bold"): "┫",
}

DASHES = frozenset(_GLYPHS["dash"])
BARS = frozenset(_GLYPHS["bar"])
TEES = frozenset(_GLYPHS["tee"])

_BOLD = frozenset(
    [bold for _, bold in _GLYPHS.values()]
    + [_CROSSES[("bold", "bold")], _LEFT_TEES[("bold", "bold")], _RIGHT_TEES[("bold", "bold")]]
)


def glyph(name: str, weight: Weight) -> str:
    """Return the glyph called *name* in the given *weight*."""
    plain, bold = _GLYPHS[name]
    return bold if weight == "bold" else plain


def weight_of(ch: str) -> Weight:
    """Return the weight of a plain or bold dash, bar, or tee glyph."""
    return "bold" if ch in _BOLD else "plain"


def heavier(a: Weight, b: Weight) -> Weight:
    return "bold" if "bold" in (a, b) else "plain"


def cross(horizontal: Weight, vertical: Weight) -> str:
    return _CROSSES[(horizontal, vertical)]


def left_tee(vertical: Weight, horizontal: Weight) -> str:
    return _LEFT_TEES[(vertical, horizontal)]


def right_tee(vertical: Weight, horizontal: Weight) -> str:
    return _RIGHT_TEES[(vertical, horizontal)]
