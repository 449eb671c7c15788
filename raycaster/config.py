import math

# Map (top-down view) settings, in map units == pixels
MAP_WIDTH = 300
MAP_HEIGHT = 300

# Screen (3D view) settings
SCREEN_WIDTH = 300
SCREEN_HEIGHT = 200
# Delay between frames in milliseconds (~33 frames per second)
FRAME_INTERVAL_MS = 30
WINDOW_TITLE = "Segment Raycaster"

# Player settings
# Distance travelled per forward/backward command (map units)
MOVE_SPEED = 2.0
# Angle turned per rotate command (radians)
ROT_SPEED = 0.02 * math.pi

# Raycasting settings
# How far each ray reaches (map units)
SIGHT_DISTANCE = 250.0
# Field of view angle (in radians)
FOV = 0.27 * math.pi
# Number of rays cast per frame, one screen strip each
RAY_COUNT = 100
# Scale of the inverse-distance projection: a wall this far away fills the screen
ZOOM = 25.0
# Hit distances are floored at this value before projecting
MIN_DISTANCE = 1e-6
# Intersection backend: "numpy" (vectorised) or "python" (scalar loops)
RAYCAST_BACKEND = "numpy"

# Colors
WALL_COLOR = (0, 0, 0)
RAY_COLOR = (128, 128, 128)
HIT_COLOR = (255, 0, 0)
PLAYER_COLOR = (0, 0, 0)
MAP_BACKGROUND_COLOR = (255, 255, 255)
# Background gradient of the 3D view: edge color at top/bottom, middle at horizon
SKY_EDGE_COLOR = (200, 200, 200)
SKY_MIDDLE_COLOR = (0, 0, 0)
# Radii of the map view markers (pixels)
PLAYER_RADIUS = 5
HIT_RADIUS = 2

# World file: JSON definition of map size, walls and player start
WORLD_FILE = "worlds/default.json"

# Logging level name passed to logging.basicConfig
LOG_LEVEL = "INFO"
