import pygame

from config import CONTROL_MODE, SWIPE_THRESHOLD


# ------------------------------------------------------------
# Gesture classifiers. Both only move the car's target lane;
# the car commits the lane once its easing settles.
# ------------------------------------------------------------
class TapControl:
    """Touch anywhere: steer to the lane whose bottom center is closest."""

    def press(self, sim, x, y):
        if not sim.running:
            return
        sim.car.steer_to(sim.geometry.nearest_lane(x), sim.geometry)

    def release(self, sim, x, y):
        pass

    def cancel(self):
        pass


class SwipeControl:
    """Horizontal swipe: one lane left or right."""

    def __init__(self, threshold=SWIPE_THRESHOLD):
        self.threshold = threshold
        self.start = None

    def press(self, sim, x, y):
        if not sim.running:
            return
        self.start = (x, y)

    def release(self, sim, x, y):
        start, self.start = self.start, None
        if not sim.running or start is None:
            return

        dist_x = x - start[0]
        dist_y = y - start[1]
        if abs(dist_x) > abs(dist_y) and abs(dist_x) > self.threshold:
            step = -1 if dist_x < 0 else 1
            shift_lane(sim, step)

    def cancel(self):
        self.start = None


def shift_lane(sim, step):
    sim.car.steer_to(sim.car.target_lane + step, sim.geometry)


def make_control(mode=CONTROL_MODE):
    if mode == "tap":
        return TapControl()
    if mode == "swipe":
        return SwipeControl()
    raise ValueError(f"unknown control mode: {mode!r}")


# ------------------------------------------------------------
# pygame event adapter
# ------------------------------------------------------------
class TouchInput:
    """Feeds touch, mouse and arrow-key events to a classifier.

    A second finger cancels the gesture in progress; nothing is
    classified again until every finger has been lifted.
    """

    def __init__(self, control):
        self.control = control
        self.fingers = set()
        self.cancelled = False

    def reset(self):
        """Forget fingers and any gesture in progress."""
        self.fingers.clear()
        self.cancelled = False
        self.control.cancel()

    def _finger_pos(self, event, size):
        x = getattr(event, "x", None)
        y = getattr(event, "y", None)
        if x is None or y is None:
            return None
        # finger coordinates are normalized 0-1
        return x * size[0], y * size[1]

    def handle_event(self, event, sim, size):
        """Return True when the event was consumed as game input."""
        if event.type == pygame.MULTIGESTURE:
            return True

        if event.type == pygame.FINGERDOWN:
            self.fingers.add(getattr(event, "finger_id", None))
            if len(self.fingers) > 1:
                self.cancelled = True
                self.control.cancel()
                return True
            pos = self._finger_pos(event, size)
            if pos is not None and not self.cancelled:
                self.control.press(sim, *pos)
            return True

        if event.type == pygame.FINGERUP:
            self.fingers.discard(getattr(event, "finger_id", None))
            if self.cancelled:
                if not self.fingers:
                    self.cancelled = False
                return True
            pos = self._finger_pos(event, size)
            if pos is not None:
                self.control.release(sim, *pos)
            return True

        # touches also arrive as synthesized mouse events; skip those
        if event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
            if getattr(event, "touch", False) or event.button != 1:
                return False
            if event.type == pygame.MOUSEBUTTONDOWN:
                self.control.press(sim, *event.pos)
            else:
                self.control.release(sim, *event.pos)
            return True

        if event.type == pygame.KEYDOWN and event.key in (pygame.K_LEFT, pygame.K_RIGHT):
            if sim.running:
                shift_lane(sim, -1 if event.key == pygame.K_LEFT else 1)
            return True

        return False
