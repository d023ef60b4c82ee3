"""Game configuration constants."""

CANVAS_WIDTH = 960
CANVAS_HEIGHT = 540

COLOR_BACKGROUND = "#0b0e14"
COLOR_PATH = "#2b3447"
COLOR_PATH_INNER = "#3a4660"
COLOR_UI_TEXT = "#ffffff"
COLOR_PROJECTILE = "#e0f2ff"
COLOR_SELECTION = "#8bd9a3"
COLOR_INVALID = "#ef4444"

INITIAL_LIVES = 20
INITIAL_MONEY = 120

# Placement rules
PLACEMENT_MARGIN = 20
MIN_PATH_CLEARANCE = 28
MIN_TOWER_SPACING = 30
TOWER_PICK_RADIUS = 18

# Frame clock
FPS = 60
MAX_FRAME_DT = 0.05
TURBO_MULTIPLIER = 2.0

# Combat
IMPACT_RADIUS = 10
PROJECTILE_BOUNDS_MARGIN = 20
BEAM_HALF_WIDTH = 10
BEAM_RANGE_FACTOR = 2.0

KILL_REWARD_MIN = 5
KILL_REWARD_FRACTION = 0.05

ENEMY_GRACE_SECONDS = 0.25

# Wave lifecycle
WAVE_CLEAR_REWARD = 50
WAVE_INTEREST_RATE = 0.05
AUTO_WAVE_DELAY = 5.0
WAVE_OVERLAY_SECONDS = 2.5

TOWERS = {
    "basic": {
        "name": "Basic",
        "cost": 50,
        "color": "#3a86ff",
        "range": 140,
        "damage": 12,
        "fire_rate": 1.6,
        "projectile_speed": 500,
        "splash_radius": 0,
        "splash_factor": 0.0,
        "per_level": {"range": 12, "damage": 6, "fire_rate": 0.18, "splash_radius": 0},
        "max_level": 6,
        "upgrade_base": 60,
        "upgrade_growth": 1.6,
        "overlevel_cost": 450,
        "overlevel_damage_mult": 1.25,
    },
    "splash": {
        "name": "Bomber",
        "cost": 90,
        "color": "#f4a261",
        "range": 120,
        "damage": 10,
        "fire_rate": 0.8,
        "projectile_speed": 360,
        "splash_radius": 48,
        "splash_factor": 0.6,
        "per_level": {"range": 8, "damage": 5, "fire_rate": 0.08, "splash_radius": 4},
        "max_level": 5,
        "upgrade_base": 80,
        "upgrade_growth": 1.7,
        "overlevel_cost": 500,
        "overlevel_damage_mult": 1.25,
    },
    "beam": {
        "name": "Laser",
        "cost": 140,
        "color": "#8b5cf6",
        "range": 130,
        # Damage per second, applied continuously.
        "damage": 18,
        "fire_rate": 0.0,
        "projectile_speed": 0,
        "splash_radius": 0,
        "splash_factor": 0.0,
        "per_level": {"range": 10, "damage": 8, "fire_rate": 0.0, "splash_radius": 0},
        "max_level": 5,
        "upgrade_base": 110,
        "upgrade_growth": 1.75,
        "overlevel_cost": 700,
        "overlevel_damage_mult": 1.3,
    },
}

ENEMY_VARIANTS = {
    "normal": {
        "hp_mult": 1.0,
        "speed_mult": 1.0,
        "radius": 14,
        "resist": {},
        "reward": None,
        "color": "#8bd9a3",
    },
    "armored": {
        "hp_mult": 2.2,
        "speed_mult": 0.85,
        "radius": 16,
        "resist": {"basic": 0.4},
        "reward": None,
        "color": "#94a3b8",
    },
    "boss": {
        "hp_mult": 12.0,
        "speed_mult": 0.6,
        "radius": 22,
        "resist": {},
        "reward": 250,
        "color": "#8b5cf6",
    },
}

# Wave scaling
WAVE_BASE = {"count": 12, "hp": 24, "speed": 70, "gap": 0.7}
WAVE_HP_GROWTH = 1.22
WAVE_COUNT_STEP = 2.5
WAVE_COUNT_MAX_EXTRA = 40
WAVE_SPEED_STEP = 2.0
WAVE_SPEED_MAX = 140
WAVE_GAP_STEP = 0.02
WAVE_GAP_MIN = 0.33

ARMORED_FROM_WAVE = 4
ARMORED_FRACTION = 0.2
BOSS_FROM_WAVE = 9

SOUND_VOLUME = 0.7
ENABLE_SOUND = True
