import pygame

from config import (
    BG, ROAD, MARKING, BLACK, FUEL_BG, FUEL_FILL, FUEL_MAX, FUEL_BAR, SCORE_POS, SCORE_FONT,
    CAR_FALLBACK, ITEM_FALLBACK, CLOUD_FALLBACK, GATE_FALLBACK,
)
from sprites import Sprite


class Renderer:
    """Paints one frame, back to front."""

    def __init__(self, car=None, item=None, cloud=None, refill=None):
        self.car = car or Sprite(None, CAR_FALLBACK)
        self.item = item or Sprite(None, ITEM_FALLBACK)
        self.cloud = cloud or Sprite(None, CLOUD_FALLBACK)
        self.refill = refill or Sprite(None, GATE_FALLBACK)
        if not pygame.font.get_init():
            pygame.font.init()
        self.font = pygame.font.SysFont(*SCORE_FONT)

    def draw_road(self, surface, geometry):
        surface.fill(BG)
        pygame.draw.polygon(surface, ROAD, geometry.road_polygon())

    def draw_markings(self, surface, sim):
        height = sim.geometry.height
        for marking in sim.markings:
            if not marking.visible(height):
                continue
            pygame.draw.polygon(surface, MARKING, marking.quad(sim.geometry))

    def draw_hud(self, surface, sim):
        x, y, w, h = FUEL_BAR
        pygame.draw.rect(surface, FUEL_BG, (x, y, w, h))
        fill = int(w * sim.fuel / FUEL_MAX)
        if fill > 0:
            pygame.draw.rect(surface, FUEL_FILL, (x, y, fill, h))
        pygame.draw.rect(surface, BLACK, (x, y, w, h), 1)

        txt = self.font.render(f"Score: {sim.score}", True, BLACK)
        surface.blit(txt, SCORE_POS)

    def draw(self, surface, sim, gate=None):
        self.draw_road(surface, sim.geometry)
        self.draw_markings(surface, sim)

        for cloud in sim.clouds:
            self.cloud.draw(surface, *cloud.rect())

        sim.car.draw(surface, self.car)

        for item in sim.items:
            self.item.draw(surface, *item.rect())

        self.draw_hud(surface, sim)

        if gate is not None:
            gate.draw(surface, self.refill)
