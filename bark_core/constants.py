# Player constants
HAND_SIZE = 6
TURN_ONE = 1
TURN_TWO = 2
STARTING_CARDS = 2 * HAND_SIZE - 1

# Board dimensions
MIN_DIMENSION = 3
MAX_DIMENSION = 100

# Card symbols
EMPTY_SYMBOL = '*'
EMPTY_CODE = EMPTY_SYMBOL * 2
EMPTY_DISPLAY = '..'

SAVE_PREFIX = 'SAVE'

# Exit status codes
EXIT_OK = 0
EXIT_BAD_ARGS = 1
EXIT_PLAYER_INVALID = 2
EXIT_DECK_READ = 3
EXIT_SAVE_READ = 4
EXIT_SHORT_DECK = 5
EXIT_END_HUMAN_INPUT = 7
