# renderer/shading.py
import math
from core.vector import Color
from core.ray import Ray
from geometry.hittable import Hittable

WHITE = Color(1.0, 1.0, 1.0)
SKY_BLUE = Color(0.5, 0.7, 1.0)

def background_color(ray: Ray) -> Color:
    """
    Vertical gradient from white at the bottom to sky blue at the top.
    """
    unit_direction = ray.direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return (1.0 - t) * WHITE + t * SKY_BLUE

def ray_color(ray: Ray, world: Hittable, t_min: float = 0.0,
              t_max: float = math.inf) -> Color:
    """
    Returns the color seen along the ray: the surface normal mapped into
    [0, 1] on a hit, the background gradient otherwise. Single bounce only.
    """
    rec = world.hit(ray, t_min, t_max)
    if rec is not None:
        return 0.5 * (rec.normal + WHITE)
    return background_color(ray)
