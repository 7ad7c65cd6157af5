# =========================
# POSE CLASSIFIER
# =========================
HAND_LANDMARK_COUNT = 21
PINCH_DISTANCE = 0.05          # thumb tip ↔ index tip for the circle pose

LINE_CONFIDENCE = 0.85
CIRCLE_CONFIDENCE = 0.8
RECTANGLE_CONFIDENCE = 0.8
DRAW_CONFIDENCE = 0.8
ERASE_CONFIDENCE = 0.7
MENU_CONFIDENCE = 0.9

# =========================
# STABILIZER
# =========================
STABILIZER_WINDOW = 5
STABILIZER_CONSENSUS_RATIO = 0.6   # ceil(5 * 0.6) = 3 of 5

# =========================
# TRAJECTORY / SHAPE FIT
# =========================
TRACK_CAPACITY = 50
MIN_FIT_POINTS = 10

LINE_THRESHOLD = 0.7
CIRCLE_THRESHOLD = 0.6
RECTANGLE_THRESHOLD = 0.6

LINE_DEVIATION_GAIN = 10.0
LINE_MIN_LENGTH = 0.1
CIRCLE_DEVIATION_GAIN = 15.0
CIRCLE_MIN_RADIUS = 0.05
RECTANGLE_EDGE_TOLERANCE = 0.05
RECTANGLE_MIN_SIDE = 0.1

SEGMENT_EPSILON = 1e-12

# =========================
# HOST POLICY
# =========================
RECOGNITION_DELAY = 0.5        # 500ms after a free-hand stroke ends
AUTO_ACCEPT_CONFIDENCE = 0.7
ACTIVE_CONFIDENCE = 0.6        # draw / erase / vector drag
CURSOR_CONFIDENCE = 0.3        # cursor indicator visible

# =========================
# LOGGING
# =========================
LOGGER_NAME = "aircanvas"
LOG_FILENAME = "aircanvas.log"
LOG_MAX_BYTES = 1_000_000
LOG_BACKUP_COUNT = 3
