from config import (
    LANE_COUNT, ROAD_BOTTOM_LEFT, ROAD_BOTTOM_SPAN, ROAD_TOP_LEFT, ROAD_TOP_SPAN,
)
from utils import lerp, clamp


# ------------------------------------------------------------
# Pseudo-3D road: a wide trapezoid edge at the bottom of the
# window and a narrow one at the top, both split into equal lanes.
# ------------------------------------------------------------
def split_span(width, left, span, lane_count):
    return [width * (left + i * (span / lane_count)) for i in range(lane_count + 1)]


def midpoints(borders):
    return [(borders[i] + borders[i + 1]) / 2 for i in range(len(borders) - 1)]


class LaneGeometry:
    def __init__(self, width, height, lane_count=LANE_COUNT):
        self.lane_count = lane_count
        self.resize(width, height)

    def resize(self, width, height):
        self.width = max(1, int(width))
        self.height = max(1, int(height))

        self.lane_width = (self.width * ROAD_BOTTOM_SPAN) / self.lane_count
        self.bottom_borders = split_span(self.width, ROAD_BOTTOM_LEFT, ROAD_BOTTOM_SPAN, self.lane_count)
        self.top_borders = split_span(self.width, ROAD_TOP_LEFT, ROAD_TOP_SPAN, self.lane_count)
        self.bottom_centers = midpoints(self.bottom_borders)
        self.top_centers = midpoints(self.top_borders)

    def lane_x(self, lane, y):
        """Center x of ``lane`` at height ``y``, interpolated top -> bottom."""
        t = y / self.height
        return self.top_centers[lane] * (1 - t) + self.bottom_centers[lane] * t

    def border_x(self, border, y):
        return lerp(self.top_borders[border], self.bottom_borders[border], y / self.height)

    def nearest_lane(self, x):
        best = 0
        best_dist = float("inf")
        for i, cx in enumerate(self.bottom_centers):
            dist = abs(x - cx)
            if dist < best_dist:
                best_dist = dist
                best = i
        return best

    def clamp_lane(self, lane):
        return clamp(lane, 0, self.lane_count - 1)

    def road_polygon(self):
        return [
            (self.bottom_borders[0], self.height),
            (self.bottom_borders[-1], self.height),
            (self.top_borders[-1], 0),
            (self.top_borders[0], 0),
        ]
