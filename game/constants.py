"""Game constants shared across modules.

This module contains the board layout, path definitions and rule values
used by both the stateful game (MarbleGame) and the pure rule functions
(marble_logic).
"""

# Board dimensions
GRID_SIZE = 5

# Cell classification values stored in the board grid
CELL_NORMAL = 0
CELL_SAFE = 1
CELL_CENTER = 2

# Board layout, indexed [y][x]
#   . . S . .
#   . . . . .
#   S . C . S
#   . . . . .
#   . . S . .
BOARD_LAYOUT = (
    (0, 0, 1, 0, 0),
    (0, 0, 0, 0, 0),
    (1, 0, 2, 0, 1),
    (0, 0, 0, 0, 0),
    (0, 0, 1, 0, 0),
)

# Outer loop, anticlockwise, as (x, y) pairs
OUTER_PATH = (
    (0, 1), (0, 2), (0, 3), (0, 4),
    (1, 4), (2, 4), (3, 4), (4, 4),
    (4, 3), (4, 2), (4, 1), (4, 0),
    (3, 0), (2, 0), (1, 0), (0, 0),
)

# Inner loop, clockwise around the center. Stepping past the last cell finishes the token.
INNER_PATH = ((2, 3), (3, 2), (2, 1), (1, 2))

# Column holding the inner-loop junctions (the safe cells above and below the center)
JUNCTION_COLUMN = 2

# Player constants
NUM_PLAYERS = 4
TOKENS_PER_PLAYER = 4
PLAYER_START_CELLS = ((2, 4), (4, 2), (2, 0), (0, 2))

# Marble draw
MARBLES_PER_DRAW = 4
WHITE_PROBABILITY = 0.5

# Steps granted for each count of white marbles
STEPS_BY_WHITE_COUNT = {0: 4, 1: 1, 2: 2, 3: 2, 4: 8}

# An all-white draw is worth one extra step for a token already on the inner loop
ALL_WHITE_INNER_STEPS = 9

# At most this many bonus turns in a row
MAX_CONSECUTIVE_EXTRA_TURNS = 2
