#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huepass/core/config.py

# ==========================================
# Color Science Constants & Coefficients
# ==========================================

# Relative Luminance Coefficients (Source: ITU-R BT.709 / Rec. 709)
LUMA_R = 0.2126                    # Red component contribution to relative luminance
LUMA_G = 0.7152                    # Green component contribution to relative luminance
LUMA_B = 0.0722                    # Blue component contribution to relative luminance

# WCAG Contrast Thresholds (Source: https://www.w3.org/TR/WCAG21/#contrast-minimum)
WCAG_AA_NORMAL = 4.5               # Minimum contrast for normal text (Level AA)
WCAG_AAA_NORMAL = 7.0              # Enhanced contrast for normal text (Level AAA)
WCAG_AA_LARGE = 3.0                # Minimum contrast for large text (Level AA)
WCAG_AAA_LARGE = 4.5               # Enhanced contrast for large text (Level AAA)
WCAG_UI_COMPONENTS = 3.0           # Non-text contrast for UI components (SC 1.4.11)
WCAG_MIN_RATIO = 1.0               # Lower bound for WCAG calculation
WCAG_MAX_RATIO = 21.0              # Upper bound for WCAG calculation (Black on White)
WCAG_LUMINANCE_OFFSET = 0.05       # Standard offset constant in the (L + 0.05) contrast formula

# WCAG 2.1 relative luminance uses the older sRGB draft breakpoint
WCAG_LINEAR_TH = 0.03928           # Threshold for the luminance transfer in the WCAG formula

# Standard Scaling & Mathematical Constants
UNIT = 1.0                         # Normalized maximum
DIV_2 = 2.0                        # Standard divisor for averages
RGB_MAX = 255.0                    # 8-bit color depth limit
HUE_MAX = 360.0                    # Full circle degrees
HUE_SECTOR = 60.0                  # Degrees per HSL sector
HSL_HUE_MOD = 6.0                  # Hue sector divisor for HSL
PERCENT = 100.0                    # Saturation and lightness are stored as percentages
EXP_2 = 2                          # Decimal places for displayed ratios

# sRGB Transfer Function Constants (Source: IEC 61966-2-1:1999)
SRGB_SLOPE = 12.92                 # Slope of the linear portion of the sRGB curve
SRGB_OFFSET = 0.055                # Constant offset used in the non-linear sRGB segment
SRGB_DIVISOR = 1.055               # Divisor for normalizing the sRGB component
SRGB_GAMMA = 2.4                   # Effective gamma exponent for sRGB transfer
SRGB_TO_LINEAR_TH = 0.04045        # Threshold for switching from linear to non-linear sRGB
LINEAR_TO_SRGB_TH = 0.0031308      # Threshold for switching from linear to sRGB space

# Color Blindness Simulation Matrices (Source: Brettel, Viénot & Mollon, 1997 / Machado et al., 2009)
CB_MATRICES = {
    "protanopia": (
        (0.567, 0.433, 0.000),      # Transformation for Red-blindness (L-cone deficiency)
        (0.558, 0.442, 0.000),      # Mapping spectral sensitivity to remaining cones
        (0.000, 0.242, 0.758),      # Blue channel is nearly untouched
    ),
    "deuteranopia": (
        (0.625, 0.375, 0.000),      # Transformation for Green-blindness (M-cone deficiency)
        (0.700, 0.300, 0.000),
        (0.000, 0.300, 0.700),
    ),
    "tritanopia": (
        (0.950, 0.050, 0.000),      # Transformation for Blue-blindness (S-cone deficiency)
        (0.000, 0.433, 0.567),
        (0.000, 0.475, 0.525),
    ),
}

# Achromatopsia collapses every channel onto the luminance weights
GRAYSCALE_WEIGHTS = (LUMA_R, LUMA_G, LUMA_B)

# ==========================================
# Application Logic & Constraints
# ==========================================

MAX_COUNT = 100                    # Maximum number of colors allowed in batch processing
LIGHTNESS_STEP = 1                 # Lightness increment (percent) for the alternative search
LIGHTNESS_SEARCH_SPAN = 100        # Number of steps scanned in each direction
DARK_REFERENCE_LUM = 0.5           # References below this luminance push the adjusted color lighter

# Curated swatches for random accessible pairs
PAIR_BACKGROUNDS = (
    "#0A0A0B", "#111113", "#18181B", "#1F1F23",   # Dark backgrounds
    "#FAFAFA", "#F4F4F5", "#E4E4E7", "#FFFFFF",   # Light backgrounds
)
PAIR_SATURATION_MIN = 50           # Lowest foreground saturation (percent)
PAIR_SATURATION_SPAN = 40          # Saturation is drawn from [MIN, MIN + SPAN)
PAIR_LIGHT_FG_MIN = 70             # Foreground lightness band on dark backgrounds
PAIR_LIGHT_FG_SPAN = 25
PAIR_DARK_FG_MIN = 15              # Foreground lightness band on light backgrounds
PAIR_DARK_FG_SPAN = 30

# Palette ids: millisecond timestamp + random base-36 suffix
ID_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
ID_SUFFIX_LEN = 7

# Export keys
KEY_SEP_DASH = "-"                 # CSS, SCSS, Tailwind and design-token keys
KEY_SEP_UNDERSCORE = "_"           # JSON and Android XML keys
EMPTY_KEY = "unnamed"              # Fallback when a name has no alphanumeric characters
SWIFT_CHANNEL_DECIMALS = 3         # Decimal places for 0-1 UIColor channels

# Persisted state keys
PALETTE_STORAGE_KEY = "huepass-palette"
CVD_STORAGE_KEY = "huepass-cvd-mode"

# ==========================================
# CLI UI & Data Structures
# ==========================================

SIMULATE_KEYS = [
    "protanopia",
    "deuteranopia",
    "tritanopia",
    "achromatopsia",
]

EXPORT_FORMATS = [
    "css",
    "scss",
    "json",
    "tailwind",
    "tokens",
    "swift",
    "xml",
]

# ANSI Terminal Styling
MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
    "dim": "\033[1;2;37m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
}

RESET = "\033[0m"
BOLD_WHITE = "\033[1;37m"
