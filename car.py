from config import CAR_SCALE, CAR_ASPECT, CAR_BOTTOM_MARGIN, CAR_EASE, CAR_SNAP_EPSILON


class Car:
    def __init__(self, geometry, lane=None):
        if lane is None:
            lane = geometry.lane_count // 2
        self.current_lane = lane
        self.target_lane = lane
        self.x = 0.0
        self.y = 0.0
        self.width = 0.0
        self.height = 0.0
        self.fit(geometry)

    # ------------------------------------------------------------
    # Size / placement
    # ------------------------------------------------------------
    def fit(self, geometry):
        """Rescale to the lane width and park on the current lane."""
        self.width = geometry.lane_width * CAR_SCALE
        self.height = self.width * CAR_ASPECT
        self.y = geometry.height - self.height - CAR_BOTTOM_MARGIN
        self.x = geometry.lane_x(self.current_lane, self.y) - self.width / 2

    def target_x(self, geometry):
        return geometry.lane_x(self.target_lane, self.y) - self.width / 2

    # ------------------------------------------------------------
    # Update
    # ------------------------------------------------------------
    def update(self, geometry):
        target = self.target_x(geometry)
        delta = target - self.x
        if abs(delta) > CAR_SNAP_EPSILON:
            self.x += delta * CAR_EASE
        else:
            # close enough: snap and commit the lane change
            self.x = target
            self.current_lane = self.target_lane

    def steer_to(self, lane, geometry):
        self.target_lane = geometry.clamp_lane(lane)

    def rect(self):
        return self.x, self.y, self.width, self.height

    # ------------------------------------------------------------
    # Draw
    # ------------------------------------------------------------
    def draw(self, surf, sprite):
        sprite.draw(surf, *self.rect())
