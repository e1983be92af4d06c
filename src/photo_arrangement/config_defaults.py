"""Shared default values for user-facing configuration settings."""
from photo_arrangement.type_defs import FillMode, LayoutSetting, Orientation

# Page
DEFAULT_ORIENTATION: Orientation = "portrait"

# Layout
DEFAULT_LAYOUT_MODE: LayoutSetting = "auto"
# Counts offered by the layout selector; any positive count is accepted.
FIXED_LAYOUT_CHOICES: tuple[int, ...] = (2, 3, 4, 6, 8, 9)

# Style
DEFAULT_GAP_MM = 5.0
DEFAULT_SCALE_PERCENT = 100.0
DEFAULT_FILL_MODE: FillMode = "contain"

# Output
DEFAULT_OUTPUT_DIR = "out"
