"""
Constants shared by the pattern decoder and loader.
"""

# ============================================================================
# Pattern Encoding
# ============================================================================

# Only ASCII digits carry weights. str.isdigit() would also accept
# superscripts and other scripts' numerals.
DIGITS = frozenset("0123456789")

# Weight of a character that has no digit after it
DEFAULT_WEIGHT = 0


# ============================================================================
# TeX Pattern Sources
# ============================================================================

COMMENT_CHAR = "%"
CONTROL_CHAR = "\\"
BLOCK_OPEN = "{"
BLOCK_CLOSE = "}"

PATTERNS_BLOCK = "patterns"
EXCEPTIONS_BLOCK = "hyphenation"

KNOWN_BLOCKS = (PATTERNS_BLOCK, EXCEPTIONS_BLOCK)
