# main.py
"""Render the fixed demo scene to a PPM image.

Example:
    python src/main.py --quality preview --output image.ppm
    python src/main.py --samples 50 --seed 7 --png image.png --preview
"""
import argparse
import logging
import sys
from typing import List, Optional

from core.vector import Point3
from core.utils import make_rng
from core.logging_config import setup_logging
from camera.camera import Camera
from geometry.world import HittableList
from geometry.sphere import Sphere
from renderer.settings import QUALITY_LEVELS, DEFAULT_QUALITY, RenderSettings
from renderer.raytracer import Renderer
from renderer.ppm import save_ppm, write_ppm

logger = logging.getLogger(__name__)

def create_world() -> HittableList:
    world = HittableList()
    world.add(Sphere(Point3(0, 0, -1), 0.5))
    # Ground
    world.add(Sphere(Point3(0, -100.5, -1), 100))
    return world

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Single-bounce sphere ray tracer with normal shading.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--quality",
        choices=sorted(QUALITY_LEVELS),
        default=DEFAULT_QUALITY,
        help=f"Size and sample preset (default: {DEFAULT_QUALITY})",
    )
    parser.add_argument("--width", type=int, help="Image width in pixels (overrides preset)")
    parser.add_argument("--samples", type=int, help="Samples per pixel (overrides preset)")
    parser.add_argument("--seed", type=int, help="Seed for the jitter random stream")
    parser.add_argument(
        "--no-jitter",
        action="store_true",
        help="Sample pixel corners instead of random positions inside the pixel",
    )
    parser.add_argument(
        "--output",
        default="-",
        help="PPM output path, '-' for stdout (default: -)",
    )
    parser.add_argument("--png", help="Also save the image through pygame")
    parser.add_argument("--preview", action="store_true", help="Show the image in a window")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    parser.add_argument("--log-file", help="Optional log file")
    return parser.parse_args(argv)

def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(level=getattr(logging, args.log_level), log_file=args.log_file)

    try:
        settings = RenderSettings.from_quality(
            args.quality,
            width=args.width,
            samples_per_pixel=args.samples,
            seed=args.seed,
            jitter=not args.no_jitter,
        )
    except ValueError as e:
        logger.error(f"Invalid settings: {e}")
        return 2

    camera = Camera(aspect_ratio=settings.aspect_ratio)
    world = create_world()
    logger.info(f"Scene: {len(world)} objects, {settings!r}")

    renderer = Renderer(settings)
    image = renderer.render(camera, world, make_rng(settings.seed))

    try:
        if args.output == "-":
            write_ppm(sys.stdout, image)
            sys.stdout.flush()
        else:
            save_ppm(args.output, image)
        if args.png:
            from renderer.preview import save_png
            save_png(args.png, image)
    except OSError as e:
        logger.error(f"Failed to write output: {e}")
        return 1

    if args.preview:
        from renderer.preview import show_image
        show_image(image)

    return 0

if __name__ == "__main__":
    sys.exit(main())
