import logging

import pygame

logger = logging.getLogger(__name__)


class Music:
    """Looping background track. Every failure is logged and ignored."""

    def __init__(self, path=None):
        self.loaded = False
        if path is not None:
            self.load(path)

    def load(self, path):
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
            pygame.mixer.music.load(path)
        except (pygame.error, OSError) as e:
            logger.warning("Music unavailable (%s): %s", path, e)
            self.loaded = False
            return False
        self.loaded = True
        return True

    def play(self):
        if not self.loaded:
            return False
        try:
            # keep the track going across refills
            if pygame.mixer.music.get_busy():
                return True
            pygame.mixer.music.play(-1)
        except pygame.error as e:
            logger.error("Music playback failed: %s", e)
            return False
        return True
