GRID_ROWS = 5
GRID_COLS = 5
PENALTY_COUNT = 6
LEADERBOARD_SIZE = 5

HIGH_SCORE_KEY = "@minestake_high_score"
LEADERBOARD_KEY = "@minestake_leaderboard"

WINDOW_WIDTH = 480
WINDOW_HEIGHT = 720
WINDOW_TITLE = "MineStake"

# Vertical space reserved above the board for score and high score text.
HEADER_HEIGHT = 150
# Vertical space reserved below the board for the key hints.
FOOTER_HEIGHT = 60
# Gap between adjacent cells, in pixels.
CELL_GAP = 4
# Board may use up to this share of the window width.
BOARD_MAX_WIDTH_PCT = 0.9
MIN_CELL_SIZE = 20
