import logging
import random

from config import FUEL_MAX, FUEL_DECAY, FUEL_REWARD, LANE_COUNT
from geometry import LaneGeometry
from car import Car
from entities import Item, Marking, place_clouds
from utils import rects_overlap

logger = logging.getLogger(__name__)


class Simulation:
    """Session state for one play session plus the per-frame update."""

    def __init__(self, width, height, lane_count=LANE_COUNT, on_fuel_empty=None, rng=None):
        self.rng = rng or random.Random()
        self.geometry = LaneGeometry(width, height, lane_count)
        self.car = Car(self.geometry)
        self.items = []
        self.markings = []
        self.clouds = place_clouds(self.geometry.width, self.geometry.height, self.rng)

        self.score = 0
        self.fuel = 0.0
        self.running = False
        self.depletions = 0
        self.on_fuel_empty = on_fuel_empty

    # -----------------------------
    # LIFECYCLE
    # -----------------------------
    def refill(self):
        self.fuel = FUEL_MAX
        self.running = True
        logger.info("Tank refilled (score %d)", self.score)

    def _run_dry(self):
        self.fuel = 0.0
        self.running = False
        self.depletions += 1
        logger.info("Out of fuel. Score: %d", self.score)
        if self.on_fuel_empty is not None:
            self.on_fuel_empty()

    def resize(self, width, height):
        self.geometry.resize(width, height)
        self.car.fit(self.geometry)
        self.clouds = place_clouds(self.geometry.width, self.geometry.height, self.rng)

    # -----------------------------
    # SPAWNERS
    # -----------------------------
    def spawn_item(self):
        if not self.running:
            return None
        lane = self.rng.randrange(self.geometry.lane_count)
        item = Item(lane, self.geometry)
        self.items.append(item)
        return item

    def spawn_markings(self):
        if not self.running:
            return []
        spawned = [Marking(border, self.geometry) for border in range(1, self.geometry.lane_count)]
        self.markings.extend(spawned)
        return spawned

    # -----------------------------
    # HELPERS
    # -----------------------------
    def collect(self):
        self.score += 1
        self.fuel = min(FUEL_MAX, self.fuel + FUEL_REWARD)

    def _update_items(self):
        height = self.geometry.height
        car_rect = self.car.rect()
        for i in range(len(self.items) - 1, -1, -1):
            item = self.items[i]
            item.update(self.geometry)

            if item.y > height:
                del self.items[i]
                continue

            if rects_overlap(*item.rect(), *car_rect):
                del self.items[i]
                self.collect()

    def _update_markings(self):
        height = self.geometry.height
        moving = self.fuel > 0
        for i in range(len(self.markings) - 1, -1, -1):
            marking = self.markings[i]
            marking.update(moving)
            if marking.y > height:
                del self.markings[i]

    # -----------------------------
    # MAIN UPDATE LOOP
    # -----------------------------
    def update(self):
        if not self.running:
            return

        self.fuel -= FUEL_DECAY
        if self.fuel <= 0:
            self._run_dry()
            return

        self.car.update(self.geometry)
        self._update_items()
        self._update_markings()
