# --- Display ---
WIDTH = 1000                # logical playfield width (units)
HEIGHT = 400                # logical playfield height (units)
FPS = 60
FRAME_MS = 1000.0 / FPS     # fixed frame length used by headless drivers

# --- Player ---
PLAYER_X = 80               # player's fixed x (world scrolls left)
PLAYER_W = 80
PLAYER_H = 80
GROUND_Y = 300              # player's top y when standing
FLOOR_Y = GROUND_Y + PLAYER_H

# --- Physics (per frame) ---
GRAVITY = 0.8               # units/frame^2
JUMP_FORCE = 15.0           # initial upward speed (units/frame)
JUMP_COOLDOWN_MS = 100.0    # minimum interval between two accepted jumps

# --- Obstacles ---
OBSTACLE_W = 50
OBSTACLE_H = 50
AIR_CLEARANCE = 90          # air obstacles hang this far above GROUND_Y
MAX_OBSTACLES = 3           # spawn refused while more than this many are active
MIN_SPAWN_DISTANCE = 200    # newest obstacle must be this far from the right edge
P_GROUND = 0.4              # chance that a spawned obstacle is a ground one
SPAWN_INTERVAL_MS = 1500.0
HITBOX_PADDING = 10         # inset applied to both boxes before the overlap test

# --- Difficulty ---
BASE_SPEED = 6.0            # scroll speed at session start (units/frame)
SPEED_STEP_SCORE = 5        # bump speed every N points
SPEED_INCREMENT = 0.5
SPEED_NORM_MAX = 20.0       # upper bound used to normalise speed in observations

# --- Seeds ---
SEED_DEFAULT = 12345

# --- Colors (RGB) ---
COLOR_SKY_TOP = (224, 247, 250)
COLOR_SKY_BOTTOM = (255, 255, 255)
COLOR_FLOOR = (223, 230, 233)
COLOR_GROUND_LINE = (83, 83, 83)
COLOR_SHADOW = (0, 0, 0, 50)
COLOR_PLAYER = (108, 99, 255)
COLOR_OBS_GROUND = (255, 101, 132)
COLOR_OBS_AIR = (108, 99, 255)
COLOR_FG = (45, 52, 54)
COLOR_PANEL = (40, 60, 90)
COLOR_PANEL_EDGE = (90, 130, 180)
COLOR_PANEL_TEXT = (220, 235, 255)

# --- Assets (looked up under --assets, all optional) ---
ASSET_DIR_DEFAULT = "assets"
SPRITE_PLAYER = "dino.png"
SPRITE_OBS_GROUND = "obstacle_ground.png"
SPRITE_OBS_AIR = "obstacle_air.png"
SOUND_GROUND = "ground.ogg"
SOUND_AIR = "air.ogg"
SOUND_COLLISION = "collision.ogg"
