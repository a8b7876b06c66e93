"""HSL → hex RGB conversion for complex domain coloring."""

from __future__ import annotations

import math


def _clamp_percent(x: float) -> float:
    return min(max(x, 0.0), 100.0)


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def _channel_hex(x: float) -> str:
    # Half-up rounding, not Python's round-half-even.
    return f"{math.floor(x * 255 + 0.5):02x}"


def hsl_to_hex(h: float, s: float, l: float) -> str:
    """Convert HSL to a ``#rrggbb`` string.

    Args:
        h: hue in degrees, [0, 360)
        s: saturation in percent, clamped to [0, 100]
        l: lightness in percent, clamped to [0, 100]
    """
    h = h / 360
    s = _clamp_percent(s) / 100
    l = _clamp_percent(l) / 100

    if s == 0:
        r = g = b = l  # achromatic
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_rgb(p, q, h + 1 / 3)
        g = _hue_to_rgb(p, q, h)
        b = _hue_to_rgb(p, q, h - 1 / 3)

    return f"#{_channel_hex(r)}{_channel_hex(g)}{_channel_hex(b)}"
