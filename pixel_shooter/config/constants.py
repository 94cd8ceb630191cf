"""
Game constants
"""

# Playfield (logical pixels)
WIDTH = 320
HEIGHT = 480

# Player
PLAYER_WIDTH = 20
PLAYER_HEIGHT = 20
PLAYER_SPEED = 4
PLAYER_BOTTOM_MARGIN = 40
SHOOT_COOLDOWN_FRAMES = 15

# Bullet
BULLET_WIDTH = 10
BULLET_HEIGHT = 12
BULLET_SPEED = 6
BULLET_MUZZLE_OFFSET = 2

# Enemy
ENEMY_WIDTH = 24
ENEMY_HEIGHT = 20

# Scoring
SCORE_PER_KILL = 10

# Difficulty presets: name -> (spawn interval in frames, min speed, max speed)
DIFFICULTY_TABLE = {
    'easy': (90, 1.0, 2.0),
    'medium': (60, 1.5, 3.0),
    'hard': (30, 2.5, 5.0),
}
DEFAULT_DIFFICULTY = 'medium'

# Starfield
STAR_COUNT = 20
STAR_SIZE = 2
STAR_ROW_SPACING = 30
STAR_DRIFT = 0.01

# Colours
THEME_COLORS = {
    'background': (0, 0, 0),
    'star': (255, 255, 255),
    'player': (0, 255, 0),
    'bullet': (255, 255, 0),
    'enemy': (255, 0, 68),
    'enemy_eye': (0, 0, 0),
    'text_primary': (255, 255, 255),
    'text_secondary': (170, 170, 170),
    'text_warning': (255, 0, 68),
    'button': (40, 40, 40),
    'button_border': (0, 255, 0),
}

# Pixel-art sprites as (dx, dy, w, h) rectangles relative to the entity origin
PLAYER_SPRITE = [
    (8, 0, 4, 4),
    (4, 4, 12, 4),
    (0, 8, 20, 8),
    (4, 16, 4, 4),
    (12, 16, 4, 4),
]
ENEMY_SPRITE = [
    (4, 0, 16, 4),
    (0, 4, 24, 8),
    (4, 12, 4, 4),
    (16, 12, 4, 4),
    (0, 16, 4, 4),
    (20, 16, 4, 4),
]
ENEMY_EYES = [
    (6, 6, 4, 4),
    (14, 6, 4, 4),
]

# Fonts
FONT_FAMILY_PRIMARY = 'couriernew'
FONT_SIZE_SMALL = 12
FONT_SIZE_MEDIUM = 16
FONT_SIZE_LARGE = 28

# Overlay layout (logical pixels)
SCORE_POS = (8, 8)
BUTTON_WIDTH = 140
BUTTON_HEIGHT = 28
BUTTON_SPACING = 38
PANEL_ALPHA = 180

# Sound synthesis
SAMPLE_RATE = 44100
EXPLOSION_DURATION = 0.3
EXPLOSION_CUTOFF_START = 800.0
EXPLOSION_CUTOFF_END = 10.0
EXPLOSION_GAIN_START = 0.5
EXPLOSION_GAIN_END = 0.01
