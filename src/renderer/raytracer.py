# renderer/raytracer.py
import logging
import random
import time
from typing import Callable, Optional

import numpy as np

from core.vector import Color
from core.utils import make_rng
from camera.camera import Camera
from geometry.hittable import Hittable
from renderer.settings import RenderSettings
from renderer.shading import ray_color

logger = logging.getLogger(__name__)

# Receives (rows_done, total_rows) after every scanline
ProgressCallback = Callable[[int, int], None]

class Renderer:
    """
    Single-threaded sampling loop.

    Pixels are visited row by row from the top scanline down, left to right
    within a row. Each pixel averages samples_per_pixel jittered rays, so the
    random stream is consumed in a fixed order for a given image size.

    Pixel (x, row) covers [x / width, (x + 1) / width) horizontally and
    [row / height, (row + 1) / height) vertically in viewport coordinates,
    so every sample stays inside [0, 1). Without jitter the sample sits on
    the lower left corner of the pixel.
    """
    def __init__(self, settings: RenderSettings):
        self.settings = settings
        self.width = settings.width
        self.height = settings.height
        self.samples = settings.samples_per_pixel

    def sample_pixel(self, camera: Camera, world: Hittable, x: int, y: int,
                     rng: random.Random) -> Color:
        """
        Returns the mean linear color of all samples for pixel (x, y), with
        y = 0 at the top of the image.
        """
        row = self.height - 1 - y
        total = Color(0.0, 0.0, 0.0)
        for _ in range(self.samples):
            if self.settings.jitter:
                u = (x + rng.random()) / self.width
                v = (row + rng.random()) / self.height
            else:
                u = x / self.width
                v = row / self.height
            ray = camera.get_ray(u, v)
            total = total + ray_color(ray, world, self.settings.t_min, self.settings.t_max)
        return total / self.samples

    def render(self, camera: Camera, world: Hittable,
               rng: Optional[random.Random] = None,
               callback: Optional[ProgressCallback] = None) -> np.ndarray:
        """
        Renders the whole image.

        Args:
            camera: Ray generator for normalized viewport coordinates.
            world: Scene to trace against; not modified.
            rng: Random stream for jitter. Defaults to a new stream seeded
                with settings.seed.
            callback: Optional progress callback, called after each row.

        Returns:
            float64 array of shape (width, height, 3) with averaged linear
            colors, indexed [x, y] with y = 0 at the top.
        """
        if rng is None:
            rng = make_rng(self.settings.seed)

        image = np.zeros((self.width, self.height, 3), dtype=np.float64)
        logger.info(f"Rendering {self.width}x{self.height} at {self.samples} spp")
        start = time.perf_counter()

        for y in range(self.height):
            logger.debug(f"Scanlines remaining: {self.height - y}")
            for x in range(self.width):
                color = self.sample_pixel(camera, world, x, y, rng)
                image[x, y] = (color.x, color.y, color.z)
            if callback is not None:
                callback(y + 1, self.height)

        logger.info(f"Render finished in {time.perf_counter() - start:.2f}s")
        return image

    def __repr__(self) -> str:
        return f"Renderer({self.settings!r})"
