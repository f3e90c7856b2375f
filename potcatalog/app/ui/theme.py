"""
Pot Catalog Theme - Centralized color palette and sizing tokens.

Color Philosophy:
- Light, neutral background with white cards
- A single blue accent for the primary action
- Red reserved for destructive actions (remove)
"""

# =============================================================================
# PRIMARY ACCENT COLORS
# =============================================================================
BLUE_PRIMARY = "#007bff"       # Primary action (Add Pot)
RED_PRIMARY = "#ff4d4d"        # Destructive actions (Remove)
GREEN_PRIMARY = "#2e9e5b"      # Success log entries
AMBER_PRIMARY = "#d9822b"      # Warnings

# =============================================================================
# TEXT COLORS
# =============================================================================
TEXT_DARK = "#333333"          # Screen title
TEXT_STRONG = "#444444"        # Pot names
TEXT_BODY = "#555555"          # Labels, flower list
TEXT_SOFT = "#777777"          # Pot location
TEXT_FAINT = "#888888"         # Empty state
TEXT_HINT = "#999999"          # Placeholders
TEXT_ON_PRIMARY = "#ffffff"    # Text on blue buttons

# =============================================================================
# BACKGROUND & BORDER COLORS
# =============================================================================
BG_SCREEN = "#f0f4f7"
BG_CARD = "#ffffff"
BG_INPUT = "#f9f9f9"
BORDER_INPUT = "#dddddd"
BORDER_CARD = "#eeeeee"
SHADOW = "rgba(0,0,0,0.1)"

# =============================================================================
# SIZES
# =============================================================================
TITLE_SIZE = 28
LABEL_SIZE = 16
INPUT_SIZE = 16
BUTTON_TEXT_SIZE = 18
POT_NAME_SIZE = 18
POT_DETAIL_SIZE = 14
EMPTY_TEXT_SIZE = 16

CARD_RADIUS = 10
INPUT_RADIUS = 8
SCREEN_PADDING = 20
CARD_PADDING = 15

# =============================================================================
# SEMANTIC UI TOKENS
# =============================================================================
TEXT_TITLE = TEXT_DARK
TEXT_LABEL = TEXT_BODY
TEXT_PLACEHOLDER = TEXT_HINT
TEXT_POT_NAME = TEXT_STRONG
TEXT_POT_LOCATION = TEXT_SOFT
TEXT_POT_FLOWERS = TEXT_BODY
TEXT_EMPTY = TEXT_FAINT
TEXT_STATUS = TEXT_SOFT

BUTTON_PRIMARY_BG = BLUE_PRIMARY
BUTTON_PRIMARY_TEXT = TEXT_ON_PRIMARY
BUTTON_DESTRUCTIVE = RED_PRIMARY

# =============================================================================
# LOG LEVEL COLORS (status line)
# =============================================================================
LOG_INFO = BLUE_PRIMARY
LOG_SUCCESS = GREEN_PRIMARY
LOG_WARNING = AMBER_PRIMARY
LOG_ERROR = RED_PRIMARY


def get_log_color(level: str) -> str:
    """Get the color for a log level."""
    colors = {
        "INFO": LOG_INFO,
        "SUCCESS": LOG_SUCCESS,
        "WARNING": LOG_WARNING,
        "ERROR": LOG_ERROR,
    }
    return colors.get(level.upper(), TEXT_FAINT)
