#!/usr/bin/env python3
"""
Constants for the pixel engine
Centralizes all magic numbers and configuration values
"""

# ============================================================================
# COLOR CONSTANTS
# ============================================================================

CHANNEL_MIN = 0
CHANNEL_MAX = 255
CHANNELS = 4  # RGBA, 8 bits each

ALPHA_TRANSPARENT = 0
ALPHA_OPAQUE = 255

# Hex string lengths accepted by the color parser (without '#')
HEX_SHORT_LENGTH = 3  # RGB
HEX_RGB_LENGTH = 6  # RRGGBB
HEX_RGBA_LENGTH = 8  # RRGGBBAA

# ============================================================================
# MASKING CONSTANTS
# ============================================================================

DEFAULT_TOLERANCE = 15  # Per-channel RGB distance for the magic wand
TOLERANCE_MIN = 0
TOLERANCE_MAX = 255

# ============================================================================
# SPRITE SHEET CONSTANTS
# ============================================================================

DEFAULT_SHEET_COLUMNS = 4
DEFAULT_SHEET_SPACING = 0
DEFAULT_SHEET_H_ALIGN = "center"
DEFAULT_SHEET_V_ALIGN = "bottom"

# ============================================================================
# VIEW CONSTANTS
# ============================================================================

ZOOM_MIN = 1
ZOOM_MAX = 20
ZOOM_DEFAULT = 1

# ============================================================================
# FILE CONSTANTS
# ============================================================================

PNG_FORMAT = "PNG"
PNG_DATA_URL_PREFIX = "data:image/png;base64,"
SETTINGS_DIR_NAME = ".pixel_engine"
SETTINGS_FILE_NAME = "settings.json"
SETTINGS_ENV_VAR = "PIXEL_ENGINE_SETTINGS"
