"""
File-format constants and physical constants used when reading DTA files.

All masses are monoisotopic unless otherwise noted.
"""

# =============================================================================
# Physical constants
# =============================================================================

PROTON = 1.007276
"""Proton mass in Da."""

# =============================================================================
# DTA format
# =============================================================================

DTA_EXTENSION = ".dta"
"""Filename suffix of a DTA spectrum file. Matched case-sensitively."""

DTA_MS_LEVEL = 2
"""DTA files only hold fragment-ion (MS2) spectra."""

COMMENT_PREFIX = "#"
"""Lines starting with this prefix are comments preceding the peak list."""

# =============================================================================
# Reading
# =============================================================================

DEFAULT_ENCODING = "utf-8"
"""Encoding used to turn located byte ranges into text."""
