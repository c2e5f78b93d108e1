# camera/camera.py
import math
from typing import Optional
from core.vector import Point3, Vector3
from core.ray import Ray

class Camera:
    def __init__(self, position: Optional[Point3] = None, yaw: float = 0.0, pitch: float = 0.0,
                 fov: float = math.radians(90), aspect_ratio: float = 16.0 / 9.0,
                 focal_length: float = 1.0):
        self.position = position if position is not None else Vector3(0, 0, 0)
        self.yaw = yaw
        self.pitch = pitch
        self.fov = fov  # Vertical field of view in radians
        self.aspect_ratio = aspect_ratio
        self.focal_length = focal_length
        self.update_camera()

    def update_camera(self):
        """Updates the camera's basis vectors and viewport."""
        global_up = Vector3(0, 1, 0)

        # yaw = pitch = 0 looks down -z
        self.forward = Vector3(
            math.sin(self.yaw) * math.cos(self.pitch),
            math.sin(self.pitch),
            -math.cos(self.yaw) * math.cos(self.pitch)
        ).normalize()

        self.right = self.forward.cross(global_up).normalize()
        self.up = self.right.cross(self.forward).normalize()

        viewport_height = 2.0 * math.tan(self.fov / 2) * self.focal_length
        viewport_width = self.aspect_ratio * viewport_height

        self.horizontal = self.right * viewport_width
        self.vertical = self.up * viewport_height

        self.lower_left_corner = (self.position +
                                  self.forward * self.focal_length -
                                  self.horizontal * 0.5 -
                                  self.vertical * 0.5)

    def get_ray(self, u: float, v: float) -> Ray:
        """
        Generates a ray through the viewport coordinates (u, v), where (0, 0)
        is the lower left corner and (1, 1) the upper right.
        """
        direction = (self.lower_left_corner +
                     self.horizontal * u +
                     self.vertical * v -
                     self.position)
        return Ray(self.position, direction)

    def __repr__(self) -> str:
        return (f"Camera(position={self.position!r}, yaw={self.yaw}, pitch={self.pitch}, "
                f"fov={self.fov}, aspect_ratio={self.aspect_ratio})")
