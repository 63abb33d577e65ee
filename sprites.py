import logging

import pygame

logger = logging.getLogger(__name__)


class Sprite:
    """An image, or a solid placeholder colour until one is available."""

    def __init__(self, image=None, color=(255, 0, 255)):
        self.image = image
        self.color = color
        self._scaled = {}

    @property
    def ready(self):
        return self.image is not None

    def _scaled_image(self, size):
        surf = self._scaled.get(size)
        if surf is None:
            # sizes change on resize; drop stale scales
            if len(self._scaled) > 16:
                self._scaled.clear()
            if self.image.get_bitsize() >= 24:
                surf = pygame.transform.smoothscale(self.image, size)
            else:
                surf = pygame.transform.scale(self.image, size)
            self._scaled[size] = surf
        return surf

    def draw(self, surf, x, y, w, h):
        size = (max(1, int(w)), max(1, int(h)))
        pos = (int(x), int(y))
        if self.ready:
            surf.blit(self._scaled_image(size), pos)
        elif len(self.color) == 4:
            patch = pygame.Surface(size, pygame.SRCALPHA)
            patch.fill(self.color)
            surf.blit(patch, pos)
        else:
            pygame.draw.rect(surf, self.color, pygame.Rect(pos, size))


def load_sprite(path, color):
    try:
        image = pygame.image.load(path)
    except (pygame.error, OSError) as e:
        logger.warning("Failed to load %s: %s", path, e)
        return Sprite(None, color)

    if pygame.display.get_surface() is not None:
        image = image.convert_alpha()
    return Sprite(image, color)
