# constants.py: Static game data for the Settlers board

RESOURCES = ["wood", "brick", "wheat", "ore", "sheep"]
DESERT = "desert"
TERRAINS = RESOURCES + [DESERT]

# Shuffled onto hexes 1..19 in label order.
RESOURCE_COUNTS = {
    "wood": 4,
    "wheat": 4,
    "sheep": 4,
    "brick": 3,
    "ore": 3,
    DESERT: 1,
}

# Probability tokens A..R in rank order. Setup consumes them from the end.
NUMBER_TOKENS = [5, 2, 6, 3, 8, 10, 9, 12, 11, 4, 8, 10, 9, 4, 5, 6, 3, 11]

# Number a hex carries before the first setup.
PLACEHOLDER_NUMBER = 2

ROAD_COST       = {"wood": 1, "brick": 1}
SETTLEMENT_COST = {"wood": 1, "brick": 1, "wheat": 1, "sheep": 1}
CITY_COST       = {"wheat": 2, "ore": 3}

ROADS_PER_PLAYER = 15
SETTLEMENTS_PER_PLAYER = 5
CITIES_PER_PLAYER = 4

COLORS = ["red", "white", "orange", "black"]

VICTORY_POINTS_TO_WIN = 10
MIN_PLAYERS = 2
MAX_PLAYERS = 4
BOARD_RADIUS = 2
HEX_COUNT = 19
SIDES = 6

# Ring orderings, clockwise. Keep these in order: setup walks them as rings.
CENTER_RING = [10]
MIDDLE_RING = [5, 6, 11, 15, 14, 9]
OUTER_RING = [1, 2, 3, 7, 12, 16, 19, 18, 17, 13, 8, 4]

# Outer hex the token walk continues on, keyed by the middle hex it ended on.
CLOCKWISE_OUTER_START = {5: 4, 6: 2, 11: 7, 15: 16, 14: 18, 9: 13}
COUNTER_CLOCKWISE_OUTER_START = {5: 2, 6: 7, 11: 16, 15: 18, 14: 13, 9: 4}

# Rows of the rendered board: (labels, indent, first dump line, last dump line)
RENDER_ROWS = [
    ([1, 2, 3], 12, 0, 4),
    ([4, 5, 6, 7], 6, 1, 4),
    ([8, 9, 10, 11, 12], 0, 1, 4),
    ([13, 14, 15, 16], 6, 1, 4),
    ([17, 18, 19], 12, 1, 6),
]
HEX_COLUMN_WIDTH = 12
