"""
Shopfront Theme - Centralized color palette with semantic tokens.

Color Philosophy:
- Cyan (#48b0f7) for navigation and primary actions
- Teal (#4ECDC4) for prices, totals and "in cart" states
- Red (#FF6B6B) for removal and errors
"""

# =============================================================================
# PRIMARY ACCENT COLORS
# =============================================================================
CYAN_PRIMARY = "#48b0f7"       # Main accent, icons, highlights
TEAL_PRIMARY = "#4ECDC4"       # Prices, success
GOLD_PRIMARY = "#E0B450"       # Deals, warnings
RED_PRIMARY = "#FF6B6B"        # Remove, errors

# =============================================================================
# TEXT COLORS
# =============================================================================
TEXT_BRIGHT = "#DCE6EE"
TEXT_MEDIUM = "#8FA6B8"
TEXT_MUTED = "#6E7F8C"

# =============================================================================
# BACKGROUNDS & BORDERS
# =============================================================================
BG_PAGE = "#0b0f1a"
BG_NAV = "#0a0d1f"
BG_CARD = "rgba(255,255,255,0.04)"
BG_CARD_SELECTED = "rgba(78,205,196,0.10)"
BG_PANEL = "rgba(20,20,20,0.98)"
BORDER_LIGHT = "rgba(255,255,255,0.08)"
BORDER_DIVIDER = "rgba(255,255,255,0.12)"

# =============================================================================
# LOG LEVEL COLORS
# =============================================================================
LOG_INFO = CYAN_PRIMARY
LOG_SUCCESS = TEAL_PRIMARY
LOG_WARNING = GOLD_PRIMARY
LOG_ERROR = RED_PRIMARY
LOG_DEBUG = TEXT_MUTED

# =============================================================================
# SEMANTIC UI TOKENS
# =============================================================================
TEXT_TITLE = TEXT_BRIGHT              # Page titles ("Shop", "Your Cart")
TEXT_PRODUCT = TEXT_BRIGHT            # Product titles
TEXT_PRICE = TEAL_PRIMARY             # Prices and totals
TEXT_PLACEHOLDER = TEXT_MUTED         # Empty states
TEXT_STATUS = TEXT_MEDIUM             # Status line

BUTTON_ADD = CYAN_PRIMARY
BUTTON_REMOVE = RED_PRIMARY
DEAL_BADGE = GOLD_PRIMARY

LOG_PANEL_TITLE = CYAN_PRIMARY


def get_log_color(level: str) -> str:
    """Get the color for a log level."""
    colors = {
        "INFO": LOG_INFO,
        "SUCCESS": LOG_SUCCESS,
        "WARNING": LOG_WARNING,
        "ERROR": LOG_ERROR,
        "DEBUG": LOG_DEBUG,
    }
    return colors.get(level.upper(), TEXT_MUTED)
