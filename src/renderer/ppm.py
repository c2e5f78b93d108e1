# renderer/ppm.py
import logging
from typing import TextIO

import numpy as np

from renderer.color import image_to_uint8

logger = logging.getLogger(__name__)

def write_ppm(out: TextIO, image: np.ndarray):
    """
    Writes a plain-text (P3) PPM image.

    Args:
        out: Text stream to write to.
        image: Linear color buffer of shape (width, height, 3), indexed
            [x, y] with y = 0 at the top.
    """
    width, height = image.shape[0], image.shape[1]
    pixels = image_to_uint8(image)

    out.write("P3\n")
    out.write(f"{width} {height}\n")
    out.write("255\n")
    for y in range(height):
        for x in range(width):
            r, g, b = pixels[x, y]
            out.write(f"{r} {g} {b}\n")

def save_ppm(filepath: str, image: np.ndarray):
    """
    Writes the image to a PPM file. I/O errors propagate to the caller.
    """
    with open(filepath, "w", encoding="ascii") as f:
        write_ppm(f, image)
    logger.info(f"Saved PPM to {filepath}")
