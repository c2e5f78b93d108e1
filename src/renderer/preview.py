# renderer/preview.py
import logging

import numpy as np
import pygame

from renderer.color import image_to_uint8

logger = logging.getLogger(__name__)

def make_surface(image: np.ndarray) -> pygame.Surface:
    """
    Converts a linear (width, height, 3) buffer to a pygame surface.
    """
    return pygame.surfarray.make_surface(image_to_uint8(image))

def save_png(filepath: str, image: np.ndarray):
    """
    Saves the image through pygame. The format follows the file extension.
    """
    pygame.image.save(make_surface(image), filepath)
    logger.info(f"Saved image to {filepath}")

def show_image(image: np.ndarray, scale: int = 2, caption: str = "Ray Tracer"):
    """
    Opens a window with the rendered image and blocks until it is closed
    or Escape is pressed.
    """
    pygame.init()
    try:
        width, height = image.shape[0] * scale, image.shape[1] * scale
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(caption)

        surf = make_surface(image)
        if scale != 1:
            surf = pygame.transform.scale(surf, (width, height))
        screen.blit(surf, (0, 0))
        pygame.display.flip()

        clock = pygame.time.Clock()
        running = True
        while running:
            clock.tick(30)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
    finally:
        pygame.quit()
