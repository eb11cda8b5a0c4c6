# termhost/styles.py
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class RGBA:
    """An 8-bit-per-channel color."""
    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self):
        for channel in (self.r, self.g, self.b, self.a):
            if not isinstance(channel, int) or not 0 <= channel <= 255:
                raise ValueError(f"RGBA channels must be integers in 0..255, got {self!r}")

    @classmethod
    def from_ints(cls, r: int, g: int, b: int, a: int = 255) -> "RGBA":
        return cls(r, g, b, a)

    @classmethod
    def from_hex(cls, value: str) -> "RGBA":
        """Parses ``#rgb``, ``#rrggbb`` or ``#rrggbbaa``."""
        digits = value.lstrip("#")
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        if len(digits) not in (6, 8):
            raise ValueError(f"Invalid hex color: {value!r}")
        try:
            channels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
        except ValueError:
            raise ValueError(f"Invalid hex color: {value!r}") from None
        return cls(*channels)

    def to_hex(self) -> str:
        text = f"#{self.r:02x}{self.g:02x}{self.b:02x}"
        return text if self.a == 255 else f"{text}{self.a:02x}"

    def __str__(self) -> str:
        return self.to_hex()


class Colors:
    """Named colors accepted wherever a color attribute is expected."""
    black = RGBA(0, 0, 0)
    white = RGBA(255, 255, 255)
    red = RGBA(255, 0, 0)
    green = RGBA(0, 255, 0)
    blue = RGBA(0, 0, 255)
    yellow = RGBA(255, 255, 0)
    cyan = RGBA(0, 255, 255)
    magenta = RGBA(255, 0, 255)
    gray = RGBA(128, 128, 128)
    hotpink = RGBA(255, 105, 180)
    transparent = RGBA(0, 0, 0, 0)

    @classmethod
    def lookup(cls, name: str):
        color = getattr(cls, name.lower(), None)
        return color if isinstance(color, RGBA) else None


ColorInput = Union[RGBA, str]


def parse_color(value: ColorInput) -> RGBA:
    """Normalizes a color attribute (RGBA, hex string or color name) to RGBA."""
    if isinstance(value, RGBA):
        return value
    if isinstance(value, str):
        if value.startswith("#"):
            return RGBA.from_hex(value)
        named = Colors.lookup(value)
        if named is not None:
            return named
    raise ValueError(f"Unsupported color value: {value!r}")
