"""ANSI colour values and their human-readable descriptions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

_BASIC_NAMES = (
    "Black",
    "Red",
    "Green",
    "Yellow",
    "Blue",
    "Magenta",
    "Cyan",
    "White",
    "Dark Gray",
    "Light Red",
    "Light Green",
    "Light Yellow",
    "Light Blue",
    "Light Magenta",
    "Light Cyan",
    "Gray",
)


def _check_byte(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= 255:
        raise ValueError(f"{name} must be an integer in 0..255, got {value!r}")


@dataclass(frozen=True)
class Color16:
    """One of the basic ANSI colours, addressed by index."""

    c16: int

    def __post_init__(self) -> None:
        _check_byte("c16", self.c16)


@dataclass(frozen=True)
class Color256:
    """A colour from the extended 256-colour palette."""

    c256: int

    def __post_init__(self) -> None:
        _check_byte("c256", self.c256)


@dataclass(frozen=True)
class Rgb:
    """A true-colour value."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            _check_byte(name, getattr(self, name))


AnsiColor = Union[Color16, Color256, Rgb]


def color_name(index: int) -> str:
    """Return the display name of a basic colour index, or "ANSI <n>" beyond 15."""
    if 0 <= index < len(_BASIC_NAMES):
        return _BASIC_NAMES[index]
    return f"ANSI {index}"


def describe_color(color: Optional[AnsiColor], default: str = "Default") -> str:
    """Describe a colour for the settings panel; ``default`` is used for no colour."""
    if color is None:
        return default
    if isinstance(color, Color16):
        return color_name(color.c16)
    if isinstance(color, Color256):
        return f"256:{color.c256}"
    if isinstance(color, Rgb):
        return f"RGB({color.r},{color.g},{color.b})"
    raise TypeError(f"not a colour: {color!r}")