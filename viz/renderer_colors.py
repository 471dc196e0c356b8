# viz/renderer_colors.py  (ANSI SGR sequences)
RESET = "\033[0m"
BOLD = "\033[1m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
MAGENTA = "\033[35m"
CYAN = "\033[36m"
WHITE = "\033[37m"

BORDER = CYAN
TITLE = YELLOW
HEAD = GREEN + BOLD
BODY = GREEN
FOOD = RED
HUD_SCORE = GREEN
HUD_SPEED = MAGENTA
NOTE = YELLOW
CONTROLS = WHITE

HEAD_CHAR = "◆"
BODY_CHAR = "■"
FOOD_CHAR = "●"

# tier message -> colour, highest first
TIER_COLORS = [
    (50, GREEN + BOLD),
    (30, CYAN + BOLD),
    (15, BLUE + BOLD),
    (0, WHITE),
]
