"""Game configuration constants."""

# Grid dimensions (square board)
BOARD_SIZE = 10

# Fleet roster as (name, size), placed in this order on each board
FLEET = (
    ("Aircraft Carrier", 5),
    ("Battleship", 4),
    ("Cruiser", 3),
    ("Submarine", 3),
    ("Destroyer", 2),
)
FLEET_SIZES = tuple(size for _, size in FLEET)

# Random placement trials before falling back to an exhaustive scan
MAX_PLACEMENT_ATTEMPTS = 1000

# Side identifiers
PLAYER = "player"
OPPONENT = "opponent"

# Testing
RNG_SEED_DEFAULT = 42  # Fixed seed for tests; the CLI draws a fresh one
