"""
Constants used internally by the photo arrangement package.

These are implementation-level values that should not be overridden
via config files or CLI arguments.
"""

# Nominal sheet, portrait orientation, millimetres
A4_WIDTH_MM = 210
A4_HEIGHT_MM = 297

# Fixed inner padding of every sheet
SHEET_PADDING_MM = 10

# Unit conversion
MM_PER_INCH = 25.4
CSS_PX_PER_INCH = 96

# Rasterization resolutions
PREVIEW_DPI = CSS_PX_PER_INCH
EXPORT_RENDER_SCALE = 2
EXPORT_DPI = CSS_PX_PER_INCH * EXPORT_RENDER_SCALE

# Export document
EXPORT_FILENAME = "photo-arrangement.pdf"
EXPORT_JPEG_QUALITY = 98

# Preview files written for on-screen display
PREVIEW_NAME_TEMPLATE = "sheet_{index:03d}.png"
PLACEHOLDER_PREVIEW_NAME = "placeholder.png"

# Empty state
EMPTY_STATE_TEXT = "No images uploaded"
PLACEHOLDER_TEXT_MM = 6

# Intake
IMAGE_MEDIA_PREFIX = "image/"
INTAKE_MAX_WORKERS = 4

# Internal color constants
COLOR_MODE_RGB = "RGB"
COLOR_WHITE = (255, 255, 255)
COLOR_GREY = (136, 136, 136)
