import logging

import pygame

from config import (
    WIDTH, HEIGHT, FPS, CAPTION, LOG_LEVEL, ASSET_DIR, CACHE_DIR, CONTROL_MODE,
    ITEM_SPAWN_INTERVAL_MS, MARKING_SPAWN_INTERVAL_MS,
    CAR_IMAGE, ITEM_IMAGE, CLOUD_IMAGE, REFILL_IMAGE, MUSIC_TRACK,
    CAR_FALLBACK, ITEM_FALLBACK, CLOUD_FALLBACK, GATE_FALLBACK,
)
from asset_cache import AssetCache
from audio import Music
from controls import TouchInput, make_control
from gate import RefillGate
from render import Renderer
from simulation import Simulation
from sprites import load_sprite

logger = logging.getLogger(__name__)

SPAWN_ITEM_EVENT = pygame.USEREVENT + 1
SPAWN_MARKINGS_EVENT = pygame.USEREVENT + 2


class Game:
    def __init__(self, screen, renderer=None, music=None, control_mode=CONTROL_MODE, rng=None):
        self.screen = screen
        width, height = screen.get_size()
        self.sim = Simulation(width, height, on_fuel_empty=self.show_gate, rng=rng)
        self.gate = RefillGate(width, height, visible=True)
        self.renderer = renderer or Renderer()
        self.music = music or Music()
        self.input = TouchInput(make_control(control_mode))
        self.running = True

    # -----------------------------
    # Refill gate
    # -----------------------------
    def show_gate(self):
        # touches behind the gate never reach the input adapter
        self.input.reset()
        self.gate.show()

    def refill(self):
        self.sim.refill()
        self.gate.hide()
        self.input.reset()
        self.music.play()

    def _gate_pos(self, event):
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1 and not getattr(event, "touch", False):
            return event.pos
        if event.type == pygame.FINGERDOWN:
            w, h = self.screen.get_size()
            return event.x * w, event.y * h
        return None

    # -----------------------------
    # Events
    # -----------------------------
    def resize(self, width, height):
        self.screen = pygame.display.get_surface() or self.screen
        geo = self.sim.geometry
        if (max(1, int(width)), max(1, int(height))) == (geo.width, geo.height):
            return
        self.sim.resize(width, height)
        self.gate.layout(self.sim.geometry.width, self.sim.geometry.height)

    def handle_event(self, event):
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.running = False
        elif event.type == pygame.VIDEORESIZE:
            self.resize(event.w, event.h)
        elif event.type == pygame.WINDOWSIZECHANGED:
            self.resize(event.x, event.y)
        elif event.type == SPAWN_ITEM_EVENT:
            self.sim.spawn_item()
        elif event.type == SPAWN_MARKINGS_EVENT:
            self.sim.spawn_markings()
        elif self.gate.visible:
            pos = self._gate_pos(event)
            if pos is not None and self.gate.hit(pos):
                self.refill()
        else:
            self.input.handle_event(event, self.sim, self.screen.get_size())

    # -----------------------------
    # Frame
    # -----------------------------
    def step(self):
        self.sim.update()
        self.renderer.draw(self.screen, self.sim, self.gate)

    def run(self):
        clock = pygame.time.Clock()
        pygame.time.set_timer(SPAWN_ITEM_EVENT, ITEM_SPAWN_INTERVAL_MS)
        pygame.time.set_timer(SPAWN_MARKINGS_EVENT, MARKING_SPAWN_INTERVAL_MS)

        while self.running:
            clock.tick(FPS)

            for ev in pygame.event.get():
                self.handle_event(ev)

            self.step()
            pygame.display.flip()


def load_assets(cache):
    renderer = Renderer(
        car=load_sprite(cache.resolve(CAR_IMAGE), CAR_FALLBACK),
        item=load_sprite(cache.resolve(ITEM_IMAGE), ITEM_FALLBACK),
        cloud=load_sprite(cache.resolve(CLOUD_IMAGE), CLOUD_FALLBACK),
        refill=load_sprite(cache.resolve(REFILL_IMAGE), GATE_FALLBACK),
    )
    music = Music(cache.resolve(MUSIC_TRACK))
    return renderer, music


def main():
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT), pygame.RESIZABLE)
    pygame.display.set_caption(CAPTION)

    cache = AssetCache(ASSET_DIR, CACHE_DIR)
    cache.install()
    renderer, music = load_assets(cache)

    game = Game(screen, renderer=renderer, music=music)
    logger.info("Starting (%s controls, %dx%d)", CONTROL_MODE, *screen.get_size())
    game.run()

    pygame.quit()


if __name__ == "__main__":
    main()
