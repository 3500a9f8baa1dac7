"""RGB color value used as a skin segment."""

from __future__ import annotations

import re
from dataclasses import dataclass

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


@dataclass(frozen=True)
class Color:
    """Three 8-bit channels. Renders as uppercase ``RRGGBB`` (no ``#``, no alpha)."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel, value in (("r", self.r), ("g", self.g), ("b", self.b)):
            if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= 255:
                raise ValueError(f"Color channel {channel} must be an int in 0..255, got {value!r}")

    def to_hex(self) -> str:
        return f"{self.r:02X}{self.g:02X}{self.b:02X}"

    def __str__(self) -> str:
        return self.to_hex()

    @classmethod
    def from_hex(cls, text: str) -> Color:
        """Parse ``RGB``, ``RRGGBB`` or ``RRGGBBAA``, with or without ``#``.

        Alpha is accepted and discarded.
        """
        match = _HEX_RE.match(text.strip())
        if not match:
            raise ValueError(f"Not a hex color: {text!r}")
        digits = match.group(1)
        if len(digits) == 3:
            digits = "".join(c * 2 for c in digits)
        return cls(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    @classmethod
    def from_floats(cls, r: float, g: float, b: float) -> Color:
        """Build from unit-interval channels, clamped to [0, 1] and rounded to 0..255."""

        def _to_byte(x: float) -> int:
            return int(round(min(max(float(x), 0.0), 1.0) * 255))

        return cls(_to_byte(r), _to_byte(g), _to_byte(b))
