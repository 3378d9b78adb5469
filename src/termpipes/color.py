"""Hue cycling for the pipe color.

Each frame the color is taken RGB -> HSV, rotated by HUE_STEP degrees and
taken back to RGB, keeping saturation and value. The math runs in float32
and bytes are truncated, not rounded, so a fully saturated color walks the
color wheel with a slight downward drift in hue.
"""

import numpy as np

HUE_STEP = 15.0

# For each 60-degree sector, which of (c, x, 0) lands in r, g, b.
SECTORS = [
    (0, 1, 2),  # red -> yellow
    (1, 0, 2),  # yellow -> green
    (2, 0, 1),  # green -> cyan
    (2, 1, 0),  # cyan -> blue
    (1, 2, 0),  # blue -> magenta
    (0, 2, 1),  # magenta -> red
]


def random_color(rng):
    """Uniformly random (r, g, b) byte triple."""
    r, g, b = rng.integers(0, 256, size=3)
    return int(r), int(g), int(b)


def rgb_to_hsv(color):
    """(r, g, b) bytes -> (hue in degrees, saturation, value) as float32."""
    rgb = np.asarray(color, dtype=np.float32) / np.float32(255.0)
    r, g, b = rgb
    hi = rgb.max()
    lo = rgb.min()
    delta = hi - lo

    if delta == 0:
        hue = np.float32(0.0)
    elif hi == r:
        hue = np.float32(60.0) * (((g - b) / delta) % np.float32(6.0))
    elif hi == g:
        hue = np.float32(60.0) * ((b - r) / delta + np.float32(2.0))
    else:
        hue = np.float32(60.0) * ((r - g) / delta + np.float32(4.0))

    saturation = np.float32(0.0) if hi == 0 else delta / hi
    return hue, saturation, hi


def hsv_to_rgb(hue, saturation, value):
    """HSV -> float32 array of r, g, b in [0, 1]. Hue is in degrees."""
    hue = np.float32(hue) % np.float32(360.0)
    c = np.float32(value) * np.float32(saturation)
    x = c * (np.float32(1.0) - abs((hue / np.float32(60.0)) % np.float32(2.0) - 1))
    m = np.float32(value) - c

    sector = min(int(hue // 60), 5)
    parts = np.array([c, x, 0.0], dtype=np.float32)
    return parts[list(SECTORS[sector])] + m


def to_bytes(rgb):
    """Float r, g, b in [0, 1] -> byte triple, truncating."""
    scaled = np.clip(np.asarray(rgb, dtype=np.float32) * np.float32(255.0), 0, 255)
    r, g, b = scaled.astype(np.uint8)
    return int(r), int(g), int(b)


def advance(color, step=HUE_STEP):
    """Rotate the hue of an (r, g, b) color by `step` degrees."""
    hue, saturation, value = rgb_to_hsv(color)
    hue = (hue + np.float32(step)) % np.float32(360.0)
    return to_bytes(hsv_to_rgb(hue, saturation, value))
