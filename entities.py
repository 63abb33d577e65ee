import random

from config import (
    ITEM_SPEED, ITEM_WIDTH_RATIO, ITEM_HEIGHT_RATIO,
    MARKING_LENGTH, MARKING_SPEED, MARKING_HALF_RATIO,
    CLOUD_ASPECT, CLOUD_MIN_SCALE, CLOUD_SCALE_JITTER, CLOUD_GAP, CLOUD_BAND,
)


class Item:
    """Fuel pickup falling down one lane."""

    def __init__(self, lane, geometry):
        self.lane = lane
        self.width = geometry.lane_width * ITEM_WIDTH_RATIO
        self.height = geometry.lane_width * ITEM_HEIGHT_RATIO
        self.y = 0.0
        self.x = geometry.lane_x(lane, self.y) - self.width / 2

    def update(self, geometry):
        self.y += ITEM_SPEED
        # x follows the lane's taper, never cached
        self.x = geometry.lane_x(self.lane, self.y) - self.width / 2

    def rect(self):
        return self.x, self.y, self.width, self.height


class Marking:
    """Lane divider dash sliding down an internal border."""

    def __init__(self, border, geometry, length=MARKING_LENGTH):
        self.border = border
        self.length = length
        self.speed = MARKING_SPEED
        self.half_width = geometry.lane_width * MARKING_HALF_RATIO
        # bottom edge starts at the top of the window
        self.y = -length

    @property
    def bottom(self):
        return self.y + self.length

    def update(self, moving):
        if moving:
            self.y += self.speed

    def visible(self, height):
        return not (self.y > height or self.bottom < 0)

    def quad(self, geometry):
        y_top = self.y
        y_bot = self.bottom
        x_top = geometry.border_x(self.border, y_top)
        x_bot = geometry.border_x(self.border, y_bot)
        return [
            (x_top - self.half_width, y_top),
            (x_top + self.half_width, y_top),
            (x_bot + self.half_width, y_bot),
            (x_bot - self.half_width, y_bot),
        ]


class Cloud:
    def __init__(self, x, y, width, height):
        self.x = x
        self.y = y
        self.width = width
        self.height = height

    def rect(self):
        return self.x, self.y, self.width, self.height


def _clouds_in_region(width, height, x_start, x_end, count, rng):
    clouds = []
    current_x = x_start
    for _ in range(count):
        w = width * (CLOUD_MIN_SCALE + rng.random() * CLOUD_SCALE_JITTER)
        h = w * CLOUD_ASPECT
        y = rng.random() * (CLOUD_BAND * height)
        clouds.append(Cloud(current_x, y, w, h))
        current_x += w + CLOUD_GAP * width
        if current_x + w > x_end:
            break
    return clouds


def place_clouds(width, height, rng=random):
    # 3 clouds top-left, up to 4 top-right; the road's vanishing point stays clear
    return (_clouds_in_region(width, height, 0, width * 0.33, 3, rng) +
            _clouds_in_region(width, height, width * 0.66, width, 4, rng))
