"""Common literal values used across termdocs.

These constants keep the syntax-snapshot marker grammar and layout limits
centralized so the token parser, the snapshot generator, and tests can import
the same values without drifting. Intended for internal use within the
termdocs package.

Examples
--------
>>> from termdocs import _constants
>>> _constants.COLOR_MARKER_TEMPLATE.format(color="#b392f0")
'‹color:#b392f0›'
>>> _constants.TABLE_COLUMN_MAX
32
"""

COLOR_MARKER_OPEN = "‹color:"
COLOR_MARKER_CLOSE = "›"
COLOR_MARKER_TEMPLATE = COLOR_MARKER_OPEN + "{color}" + COLOR_MARKER_CLOSE
END_MARKER = "‹/›"
# Stands in for the marker opening glyph when source text contains it.
MARKER_GLYPH_SUBSTITUTE = "˂"

ELLIPSIS = "…"
BULLET = "•"
DIVIDER_GLYPH = "─"
TABLE_COLUMN_MAX = 32
TABLE_COLUMN_GAP = "  "
QA_ANSWER_INDENT = 2

DEFAULT_MIN_WIDTH = 1
REMEDIATION_HINT = "regenerate syntax snapshots (termdocs snapshot <file>)"
