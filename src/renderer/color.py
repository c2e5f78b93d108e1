# renderer/color.py
from typing import TextIO, Tuple

import numpy as np

from core.vector import Color
from core.utils import clamp

def to_rgb8(color: Color, samples: int = 1) -> Tuple[int, int, int]:
    """
    Converts a linear color (or a sum of `samples` colors) to 8-bit channels.
    No gamma correction is applied.
    """
    scale = 1.0 / samples
    r = int(255.999 * clamp(color.x * scale, 0.0, 1.0))
    g = int(255.999 * clamp(color.y * scale, 0.0, 1.0))
    b = int(255.999 * clamp(color.z * scale, 0.0, 1.0))
    return r, g, b

def write_color(out: TextIO, color: Color, samples: int = 1):
    """
    Writes one "R G B" line for the pixel color.
    """
    r, g, b = to_rgb8(color, samples)
    out.write(f"{r} {g} {b}\n")

def image_to_uint8(image: np.ndarray) -> np.ndarray:
    """
    Array version of to_rgb8 for an averaged linear image of any shape.
    """
    return (255.999 * np.clip(image, 0.0, 1.0)).astype(np.uint8)
