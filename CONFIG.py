#  Bubble field
INITIAL_BUBBLE_COUNT = 10
SHAKE_BURST_COUNT = 5
SPAWN_OFFSET_PX = 50  # new bubbles start this far below the bottom edge
POP_STEP = 0.1  # pop progress added per frame, 10 frames to fully pop

#  Random bubble attributes: value = MIN + random() * RANGE
MIN_RADIUS = 20.0
RADIUS_RANGE = 30.0
MIN_SPEED = 1.0  # px per frame
SPEED_RANGE = 2.0
MIN_OPACITY = 0.7
OPACITY_RANGE = 0.3
FACE_CHANCE = 0.3

BUBBLE_COLORS = (
    "#FF6B6B", "#4ECDC4", "#FFD166", "#118AB2",
    "#06D6A0", "#EF476F", "#9B5DE5", "#00BBF9",
)

#  Drawing
BACKGROUND_COLOR = (224, 247, 255)
BACKGROUND_ALPHA = 0.2  # per-frame wash, leaves faint trails
HIGHLIGHT_ALPHA = 0.8
RING_COUNT = 3
PARTICLE_COUNT = 8
PARTICLE_RADIUS = 3.0
LINE_WIDTH = 2
FACE_COLOR = "#FFD166"
FACE_OUTLINE_COLOR = "#FF9E4A"
FACE_FEATURE_COLOR = "#333333"

#  Window
WINDOW_WIDTH = 480
WINDOW_HEIGHT = 720
FRAME_INTERVAL_MS = 16  # ~60 FPS

#  Shake detection
SHAKE_THRESHOLD = 15.0  # summed |delta| over the three axes, m/s^2
SHAKE_COOLDOWN_S = 1.0

#  Pop sound
SOUND_EFFECTS_DIR = "sound_effects"
POP_SOUND_FILE = "pop.wav"
POP_SOUND_FREQUENCY_HZ = 200.0
POP_SOUND_DURATION_S = 0.2
POP_SOUND_GAIN = 0.3
POP_SOUND_FLOOR = 0.001  # exponential ramps end here
POP_SOUND_SAMPLE_RATE = 44100
AUDIO_POOL_SIZE = 4  # players per sound, so rapid pops overlap
