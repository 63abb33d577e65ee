import os
import logging

# ============================================
# Settings
# ============================================
WIDTH, HEIGHT = 480, 800
FPS = 60
CAPTION = "Lane Runner"

LANE_COUNT = 4

# road trapezoid, as fractions of the window width
ROAD_BOTTOM_LEFT = 0.1
ROAD_BOTTOM_SPAN = 0.8
ROAD_TOP_LEFT = 0.4
ROAD_TOP_SPAN = 0.2

# Car (sprite is 300 x 274)
CAR_SCALE = 0.6
CAR_ASPECT = 274 / 300
CAR_BOTTOM_MARGIN = 20
CAR_EASE = 0.2
CAR_SNAP_EPSILON = 0.5

# Fuel
FUEL_MAX = 100.0
FUEL_DECAY = 0.1
FUEL_REWARD = 5

# Items
ITEM_SPEED = 5
ITEM_WIDTH_RATIO = 0.15
ITEM_HEIGHT_RATIO = 0.2
ITEM_SPAWN_INTERVAL_MS = 1000

# Road markings
MARKING_LENGTH = 80
MARKING_SPEED = 5
MARKING_HALF_RATIO = 0.02
MARKING_SPAWN_INTERVAL_MS = 800

# Clouds (sprite is 200 x 137)
CLOUD_ASPECT = 0.685
CLOUD_MIN_SCALE = 0.1
CLOUD_SCALE_JITTER = 0.05
CLOUD_GAP = 0.02
CLOUD_BAND = 0.1

# Controls: "swipe" or "tap"
CONTROL_MODE = os.environ.get("LANE_RUNNER_CONTROL_MODE", "swipe")
SWIPE_THRESHOLD = 50

# Refill gate
GATE_SIZE = 150
GATE_BORDER = 5
GATE_RADIUS = 20

# HUD
FUEL_BAR = (20, 20, 120, 20)
SCORE_POS = (20, 60)
SCORE_FONT = ("arial", 24)

# Colors
BG = (250, 243, 209)
ROAD = (167, 199, 231)
MARKING = (255, 255, 255)
CAR_FALLBACK = (255, 0, 0)
ITEM_FALLBACK = (255, 215, 0)
CLOUD_FALLBACK = (255, 255, 255, 128)
GATE_FALLBACK = (230, 90, 40)
FUEL_BG = (128, 128, 128)
FUEL_FILL = (0, 128, 0)
BLACK = (0, 0, 0)

# ============================================
# Assets
# ============================================
ASSET_DIR = os.environ.get(
    "LANE_RUNNER_ASSET_DIR",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "assets"),
)
CACHE_DIR = os.environ.get(
    "LANE_RUNNER_CACHE_DIR",
    os.path.join(os.path.expanduser("~"), ".cache", "lane_runner"),
)
CACHE_NAME = "lane-runner-v1"

CAR_IMAGE = "car.png"
ITEM_IMAGE = "fuelboost.png"
REFILL_IMAGE = "gas station.png"
CLOUD_IMAGE = "cloud.png"
MUSIC_TRACK = "autolied.mp3"

ASSET_MANIFEST = [MUSIC_TRACK, CAR_IMAGE, CLOUD_IMAGE, ITEM_IMAGE, REFILL_IMAGE]

LOG_LEVEL = getattr(logging, os.environ.get("LANE_RUNNER_LOG_LEVEL", "INFO").upper(), logging.INFO)
