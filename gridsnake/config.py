"""
config.py — Shared constants for the entire application.
No logic, no imports from internal modules.
"""

# ── Window & Grid ─────────────────────────────────────────────────
WIDTH, HEIGHT   = 640, 480
GRID_SIZE       = 20
COLS            = WIDTH // GRID_SIZE
ROWS            = HEIGHT // GRID_SIZE
FPS             = 60
TITLE           = "Snake"

# ── Colors ────────────────────────────────────────────────────────
BG          = (0,   0,   0)
SNAKE_COL   = (0,   255, 0)
APPLE_COL   = (255, 255, 255)
TEXT_COL    = (255, 255, 255)
FONT_NAME   = "courier"
FONT_SIZE   = 14

# ── Gameplay ──────────────────────────────────────────────────────
TICKS_PER_SECOND = 60    # clock the movement gate is expressed against
START_SPEED      = 15    # moves per second
START_LENGTH     = 3
START_POS        = (COLS // 2, ROWS // 2)
APPLE_START      = (3, 3)

# ── Key bindings ──────────────────────────────────────────────────
# Names of pygame key constants, resolved by the controller.
KEYS_DOWN  = ("K_s", "K_DOWN")
KEYS_UP    = ("K_w", "K_UP")
KEYS_RIGHT = ("K_d", "K_RIGHT")
KEYS_LEFT  = ("K_a", "K_LEFT")
KEYS_QUIT  = ("K_q", "K_ESCAPE")

# ── HUD text ──────────────────────────────────────────────────────
IDLE_PROMPT = "Press WASD to start"
STATUS_FMT  = "FPS: {fps:0.2f} Score: {score} Best Score: {best}"

# ── Game States ───────────────────────────────────────────────────
STATE_IDLE    = "idle"
STATE_RUNNING = "running"
