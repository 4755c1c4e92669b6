"""
Animation Configuration Settings

All configuration constants for the skeletal animation core.
Modify these values to change rig and animation behavior.
"""

# ============================================================================
# Extension Identity
# ============================================================================

EXTENSION_NAME = "Skeletal Animation"
EXTENSION_URL = "http://cwillisf.github.io/scratch-animation/"

# Status reported to the host (2 = ready)
EXTENSION_STATUS_READY = 2
EXTENSION_STATUS_MESSAGE = "Ready to animate"

# ============================================================================
# Skeleton Layout
# ============================================================================

# Bone names in canonical (menu) order
BONE_NAMES = (
    "body",
    "head",
    "left arm",
    "right arm",
    "left leg",
    "right leg",
)

# The only bone without a parent; every other bone hangs off it
ROOT_BONE = "body"

# Queryable world-space attributes
ATTRIBUTE_DIRECTION = "direction"
ATTRIBUTE_X_POSITION = "x position"
ATTRIBUTE_Y_POSITION = "y position"
ATTRIBUTE_NAMES = (
    ATTRIBUTE_DIRECTION,
    ATTRIBUTE_X_POSITION,
    ATTRIBUTE_Y_POSITION,
)

# ============================================================================
# Animation Playback
# ============================================================================

ANIMATION_IDLE = "idle"
ANIMATION_WAVE_HELLO = "wave hello"
ANIMATION_DANCE = "dance"

# Animation selected at startup and after the host stops the extension
DEFAULT_ANIMATION = ANIMATION_IDLE

# Tempo for beat-driven animations
DEFAULT_TEMPO_BPM = 120

# ============================================================================
# Wave Hello
# ============================================================================

WAVE_AMPLITUDE_DEGREES = 20.0    # Swing of the waving arm
WAVE_PERIOD_DIVISOR_MS = 300.0   # cos(elapsed / divisor), not tempo-driven
WAVE_REST_DEGREES = -75.0        # Centre of the waving arm's swing
WAVE_OTHER_ARM_DEGREES = -60.0   # Resting arm, held still

# ============================================================================
# Dance
# ============================================================================

DANCE_BODY_SWAY_DEGREES = -5.0
DANCE_HEAD_BOB_DEGREES = 15.0
DANCE_ARM_SWING_DEGREES = 20.0
DANCE_ARM_REST_DEGREES = 40.0
DANCE_LEG_SWING_DEGREES = 20.0
