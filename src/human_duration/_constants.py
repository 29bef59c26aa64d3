"""Unit sizes and resource limits for duration handling."""

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 86400

MAX_SECONDS = 2**64 - 1
"""Largest representable duration in seconds (unsigned 64-bit range)."""

MAX_NUMBER_DIGITS = len(str(MAX_SECONDS))
"""Numeric literals longer than this cannot fit and are rejected unparsed."""

DEFAULT_MAX_INPUT_LENGTH = 1024
"""Maximum accepted length of duration text."""
