# renderer/settings.py
import math
from typing import Optional

# Named presets, selected with RenderSettings.from_quality()
QUALITY_LEVELS = {
    "preview": {"width": 200, "samples": 1},
    "balanced": {"width": 400, "samples": 10},
    "high_quality": {"width": 800, "samples": 100},
}

DEFAULT_QUALITY = "balanced"

class RenderSettings:
    """
    Image size and sampling parameters for a render.

    height is derived from width and aspect_ratio and is at least one pixel.
    Invalid values raise ValueError at construction time.
    """
    def __init__(self, width: int = 400, aspect_ratio: float = 16.0 / 9.0,
                 samples_per_pixel: int = 10, t_min: float = 0.0,
                 t_max: float = math.inf, jitter: bool = True,
                 seed: Optional[int] = None):
        if width < 1:
            raise ValueError(f"width must be at least 1, got {width}")
        if not aspect_ratio > 0:
            raise ValueError(f"aspect_ratio must be positive, got {aspect_ratio}")
        if samples_per_pixel < 1:
            raise ValueError(f"samples_per_pixel must be at least 1, got {samples_per_pixel}")
        if not t_min <= t_max:
            raise ValueError(f"empty ray interval [{t_min}, {t_max}]")

        self.width = int(width)
        self.aspect_ratio = aspect_ratio
        self.height = max(1, int(self.width / aspect_ratio))
        self.samples_per_pixel = int(samples_per_pixel)
        self.t_min = t_min
        self.t_max = t_max
        self.jitter = jitter
        self.seed = seed

    @classmethod
    def from_quality(cls, name: str, **overrides) -> "RenderSettings":
        """
        Builds settings from a named preset. Keyword arguments override the
        preset (e.g. samples_per_pixel=4, seed=1).
        """
        if name not in QUALITY_LEVELS:
            raise ValueError(
                f"unknown quality '{name}', expected one of {sorted(QUALITY_LEVELS)}")
        preset = QUALITY_LEVELS[name]
        kwargs = {"width": preset["width"], "samples_per_pixel": preset["samples"]}
        kwargs.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**kwargs)

    def __repr__(self) -> str:
        return (f"RenderSettings(width={self.width}, height={self.height}, "
                f"samples_per_pixel={self.samples_per_pixel}, jitter={self.jitter}, "
                f"seed={self.seed})")
